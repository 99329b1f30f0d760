from __future__ import annotations

import pytest

from layerdeps.core.schemas import SchemaValidationError, load_schema, validate_payload


def test_load_schema_appends_extension():
    assert load_schema("manifest.schema") is load_schema("manifest.schema")
    assert "dependencies" in load_schema("manifest.schema.yaml")["required"]


def test_missing_schema():
    with pytest.raises(FileNotFoundError):
        load_schema("nope.schema")


def test_validate_reports_location():
    with pytest.raises(SchemaValidationError, match="dependencies/lodash"):
        validate_payload({"dependencies": {"lodash": 4}}, "manifest.schema")


def test_valid_payload():
    validate_payload({"dependencies": {"lodash": "^4.17.0"}}, "manifest.schema")
