"""Tests for reading declared dependencies from a manifest."""
from __future__ import annotations

import pytest

from helpers.project import write_manifest
from layerdeps.core.deps.manifest import read_manifest
from layerdeps.core.exceptions import LayerDepsError, ManifestParseError, ManifestReadError


def test_returns_dependencies_mapping(tmp_path):
    write_manifest(tmp_path, {"lodash": "^4.17.0", "zod": "3.22.0"})

    assert read_manifest(tmp_path) == {"lodash": "^4.17.0", "zod": "3.22.0"}


def test_ignores_other_sections(tmp_path):
    write_manifest(tmp_path, {"vue": "^3.4.0"}, extra={"devDependencies": {"vitest": "^1.0.0"}})

    assert read_manifest(tmp_path) == {"vue": "^3.4.0"}


def test_preserves_declaration_order(tmp_path):
    write_manifest(tmp_path, {"b": "1.0.0", "a": "1.0.0", "c": "1.0.0"})

    assert list(read_manifest(tmp_path)) == ["b", "a", "c"]


def test_custom_filename(tmp_path):
    write_manifest(tmp_path, {"x": "1.0.0"}, filename="layer.json")

    assert read_manifest(tmp_path, filename="layer.json") == {"x": "1.0.0"}


def test_missing_manifest_is_read_error(tmp_path):
    with pytest.raises(ManifestReadError) as exc_info:
        read_manifest(tmp_path)

    assert "Manifest not found" in str(exc_info.value)
    assert exc_info.value.context["path"] == str(tmp_path / "package.json")
    assert isinstance(exc_info.value, OSError)


def test_invalid_json_is_parse_error(tmp_path):
    (tmp_path / "package.json").write_text("{not json", encoding="utf-8")

    with pytest.raises(ManifestParseError, match="not valid JSON"):
        read_manifest(tmp_path)


def test_missing_dependencies_key_is_parse_error(tmp_path):
    write_manifest(tmp_path, None)

    with pytest.raises(ManifestParseError, match="dependencies"):
        read_manifest(tmp_path)


@pytest.mark.parametrize(
    "content",
    [
        '{"dependencies": ["lodash"]}',
        '{"dependencies": {"lodash": 4}}',
        '{"dependencies": {"": "1.0.0"}}',
        '["dependencies"]',
    ],
)
def test_wrong_shape_is_parse_error(tmp_path, content):
    (tmp_path / "package.json").write_text(content, encoding="utf-8")

    with pytest.raises(ManifestParseError) as exc_info:
        read_manifest(tmp_path)

    assert isinstance(exc_info.value, LayerDepsError)
    assert exc_info.value.to_json_error()["code"] == "ManifestParseError"


def test_empty_dependencies_is_valid(tmp_path):
    write_manifest(tmp_path, {})

    assert read_manifest(tmp_path) == {}
