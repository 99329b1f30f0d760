"""Tests for root and layer dependency collection."""
from __future__ import annotations

import logging

import pytest

from helpers.project import write_manifest
from layerdeps.core.deps import Scope, collect_layers, collect_root
from layerdeps.core.exceptions import ManifestParseError, ManifestReadError


def test_collect_root_wraps_manifest(tmp_path):
    path = write_manifest(tmp_path, {"vue": "^3.4.0"})

    root = collect_root(tmp_path)

    assert "vue" in root
    assert root.get("vue") == "^3.4.0"
    assert root.manifest_path == path
    assert [p.scope for p in root.packages()] == [Scope.PROJECT]


def test_collect_root_is_read_only(tmp_path):
    write_manifest(tmp_path, {"vue": "^3.4.0"})

    root = collect_root(tmp_path)

    with pytest.raises(TypeError):
        root.dependencies["vue"] = "1.0.0"  # type: ignore[index]


def test_layers_merge_in_enumeration_order(tmp_path):
    a = write_manifest(tmp_path / "a", {"zod": "^3.22.0", "axios": "^1.0.0"}).parent
    b = write_manifest(tmp_path / "b", {"ofetch": "^1.3.0"}).parent

    merged = collect_layers([a, b])

    assert merged.names() == ["zod", "axios", "ofetch"]
    assert all(p.scope is Scope.LAYER for p in merged)
    assert merged.get("ofetch").source == b


def test_first_layer_wins_for_duplicates(tmp_path, caplog):
    a = write_manifest(tmp_path / "a", {"axios": "^1.0.0"}).parent
    b = write_manifest(tmp_path / "b", {"axios": "^1.5.0", "zod": "^3.0.0"}).parent

    with caplog.at_level(logging.DEBUG, logger="layerdeps.core.deps.collector"):
        merged = collect_layers([a, b])

    assert len(merged) == 2
    assert merged.get("axios").version == "^1.0.0"
    assert merged.get("axios").source == a
    assert "ignoring axios@^1.5.0" in caplog.text


def test_no_layers_yields_empty_set(tmp_path):
    assert len(collect_layers([])) == 0


def test_layer_read_failure_is_fatal(tmp_path):
    good = write_manifest(tmp_path / "good", {"zod": "^3.0.0"}).parent
    missing = tmp_path / "missing"
    missing.mkdir()

    with pytest.raises(ManifestReadError):
        collect_layers([good, missing])


def test_layer_parse_failure_is_fatal(tmp_path):
    bad = tmp_path / "bad"
    bad.mkdir()
    (bad / "package.json").write_text("[]", encoding="utf-8")

    with pytest.raises(ManifestParseError):
        collect_layers([bad])
