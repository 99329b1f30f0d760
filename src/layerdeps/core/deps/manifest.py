"""Manifest reader: ``<dir>/package.json`` → declared ``dependencies``."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict

from layerdeps.core.exceptions import ManifestParseError, ManifestReadError
from layerdeps.core.schemas import SchemaValidationError, validate_payload
from layerdeps.core.utils.io import read_json

logger = logging.getLogger(__name__)

DEFAULT_MANIFEST = "package.json"
MANIFEST_SCHEMA = "manifest.schema"


def manifest_path(directory: Path, filename: str = DEFAULT_MANIFEST) -> Path:
    return Path(directory) / filename


def read_manifest(directory: Path, *, filename: str = DEFAULT_MANIFEST) -> Dict[str, str]:
    """Return the ``dependencies`` mapping declared in ``directory``'s manifest.

    Raises:
        ManifestReadError: The file is missing or unreadable.
        ManifestParseError: The content is not JSON or lacks a string→string
            ``dependencies`` object.
    """
    path = manifest_path(directory, filename)
    ctx = {"path": str(path)}

    if not path.is_file():
        raise ManifestReadError(f"Manifest not found: {path}", context=ctx)

    try:
        document = read_json(path)
    except json.JSONDecodeError as exc:
        raise ManifestParseError(f"Manifest is not valid JSON: {path}: {exc}", context=ctx) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestReadError(f"Cannot read manifest {path}: {exc}", context=ctx) from exc

    try:
        validate_payload(document, MANIFEST_SCHEMA)
    except SchemaValidationError as exc:
        raise ManifestParseError(f"Invalid manifest {path}: {exc}", context=ctx) from exc

    dependencies = dict(document["dependencies"])
    logger.debug("read %d dependencies from %s", len(dependencies), path)
    return dependencies


__all__ = ["DEFAULT_MANIFEST", "manifest_path", "read_manifest"]
