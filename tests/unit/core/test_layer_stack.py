"""Tests for layer enumeration and layer-root resolution."""
from __future__ import annotations

import logging

from helpers.project import make_layer
from layerdeps.core.config.domains import LayersConfig
from layerdeps.core.layers import (
    discover_cached_layers,
    enumerate_layers,
    is_managed,
    manifest_layer_dirs,
    resolve_layer_roots,
)


def test_managed_by_parent_marker(tmp_path):
    assert is_managed(tmp_path / "node_modules" / ".c12" / "base")
    assert not is_managed(tmp_path / "layers" / "base")
    assert not is_managed(tmp_path / ".c12")


def test_custom_marker(tmp_path):
    assert is_managed(tmp_path / ".cache" / "base", marker=".cache")
    assert not is_managed(tmp_path / ".c12" / "base", marker=".cache")


def test_enumerate_preserves_order_and_dedupes(tmp_path):
    a = make_layer(tmp_path, "a")
    b = make_layer(tmp_path, "b", managed=False)

    layers = enumerate_layers([a, b, a / ".." / "a"])

    assert [layer.name for layer in layers] == ["a", "b"]
    assert [layer.managed for layer in layers] == [True, False]


def test_manifest_layer_dirs_skips_unmanaged(tmp_path, caplog):
    a = make_layer(tmp_path, "a")
    b = make_layer(tmp_path, "b", managed=False)

    with caplog.at_level(logging.DEBUG, logger="layerdeps.core.layers.stack"):
        selected = manifest_layer_dirs(enumerate_layers([b, a]))

    assert selected == [a.resolve()]
    assert "skipping unmanaged layer" in caplog.text


def test_discover_cached_layers_sorted(tmp_path):
    make_layer(tmp_path, "zeta")
    make_layer(tmp_path, "alpha")
    (tmp_path / "node_modules" / ".c12" / ".tmp").mkdir()

    found = discover_cached_layers(tmp_path, cache_dir="node_modules", marker=".c12")

    assert [p.name for p in found] == ["alpha", "zeta"]


def test_discover_without_cache_dir(tmp_path):
    assert discover_cached_layers(tmp_path, cache_dir="node_modules", marker=".c12") == []


def test_resolve_explicit_only(tmp_path):
    assert resolve_layer_roots(tmp_path, explicit=[tmp_path / "x"]) == [(tmp_path / "x").resolve()]


def test_resolve_order_explicit_config_discovered(tmp_path, monkeypatch):
    monkeypatch.setenv("SHARED_LAYERS", str(tmp_path / "shared"))
    cached = make_layer(tmp_path, "cached")
    cfg = LayersConfig(
        config={"layers": {"roots": ["vendor/ui", "$SHARED_LAYERS/core", "+"], "discover": True}}
    )

    roots = resolve_layer_roots(tmp_path, explicit=["explicit"], cfg=cfg)

    assert roots == [
        (tmp_path / "explicit").resolve(),
        (tmp_path / "vendor" / "ui").resolve(),
        (tmp_path / "shared" / "core").resolve(),
        cached.resolve(),
    ]


def test_discovery_disabled_by_default(tmp_path):
    make_layer(tmp_path, "cached")

    assert resolve_layer_roots(tmp_path, cfg=LayersConfig(config={})) == []


def test_symlinked_cached_layer_stays_managed(tmp_path):
    target = make_layer(tmp_path, "ui-src", managed=False)
    link = tmp_path / "node_modules" / ".c12" / "ui"
    link.parent.mkdir(parents=True)
    link.symlink_to(target, target_is_directory=True)

    layers = enumerate_layers([link])

    assert [(layer.path, layer.managed) for layer in layers] == [(link, True)]
    assert manifest_layer_dirs(layers) == [link]


def test_symlink_and_target_dedupe_to_first(tmp_path):
    target = make_layer(tmp_path, "ui-src", managed=False)
    link = tmp_path / "node_modules" / ".c12" / "ui"
    link.parent.mkdir(parents=True)
    link.symlink_to(target, target_is_directory=True)

    layers = enumerate_layers([link, target])

    assert [(layer.name, layer.managed) for layer in layers] == [("ui", True)]


def test_resolve_keeps_symlinked_layer_path(tmp_path):
    target = make_layer(tmp_path, "ui-src", managed=False)
    link = tmp_path / "node_modules" / ".c12" / "ui"
    link.parent.mkdir(parents=True)
    link.symlink_to(target, target_is_directory=True)
    cfg = LayersConfig(config={"layers": {"roots": ["node_modules/.c12/ui"]}})

    roots = resolve_layer_roots(tmp_path, cfg=cfg)

    assert roots == [tmp_path.resolve() / "node_modules" / ".c12" / "ui"]
    assert enumerate_layers(roots)[0].managed
