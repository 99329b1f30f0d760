"""Schema validation for manifests and merged configuration.

Schemas are JSON Schema documents stored as YAML under
``layerdeps.data/schemas/`` and validated with ``jsonschema``.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator
from jsonschema.exceptions import best_match

from layerdeps.core.utils.io import read_yaml
from layerdeps.data import get_data_path


class SchemaValidationError(ValueError):
    """Raised when schema validation fails."""


@lru_cache(maxsize=8)
def load_schema(schema_name: str) -> Dict[str, Any]:
    """Load a bundled schema, appending ``.yaml`` if no extension is present.

    Raises:
        FileNotFoundError: If schema file doesn't exist.
        ValueError: If schema is not a YAML mapping.
    """
    lowered = schema_name.lower()
    if not (lowered.endswith(".yaml") or lowered.endswith(".yml")):
        schema_name = f"{schema_name}.yaml"

    schema_path = get_data_path("schemas", schema_name)
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema not found: {schema_name}")

    schema = read_yaml(schema_path, default=None, raise_on_error=True)
    if not isinstance(schema, dict):
        raise ValueError(f"Schema must be a YAML mapping, got {type(schema).__name__}")
    return schema


def _describe(error: jsonschema.ValidationError) -> str:
    location = "/".join(str(p) for p in error.absolute_path)
    return f"{location or '<root>'}: {error.message}"


def validate_payload(payload: Any, schema_name: str) -> None:
    """Validate ``payload`` against a bundled schema.

    Raises:
        SchemaValidationError: With the most relevant error in the message.
    """
    schema = load_schema(schema_name)
    validator = Draft202012Validator(schema)
    error = best_match(validator.iter_errors(payload))
    if error is not None:
        raise SchemaValidationError(
            f"Validation failed against schema '{schema_name}': {_describe(error)}"
        )


__all__ = ["SchemaValidationError", "load_schema", "validate_payload"]
