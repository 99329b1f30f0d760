"""Tests for typed domain config accessors."""
from __future__ import annotations

from pathlib import Path

import pytest

from helpers.project import write_config
from layerdeps.core.config.domains import (
    InstallerConfig,
    LayersConfig,
    LoggingConfig,
    ManifestConfig,
    ReconcileConfig,
)


def test_defaults_from_empty_mapping():
    assert ManifestConfig(config={}).filename == "package.json"
    assert LayersConfig(config={}).marker == ".c12"
    assert LayersConfig(config={}).roots == []
    assert LayersConfig(config={}).discover is False
    assert LayersConfig(config={}).cache_dir == "node_modules"
    assert InstallerConfig(config={}).command == "bun"
    assert InstallerConfig(config={}).extra_args == ("--ignore-scripts",)
    assert ReconcileConfig(config={}).comparison == "per-field"
    assert LoggingConfig(config={}).level == "WARNING"
    assert LoggingConfig(config={}).file is None


def test_extra_args_holds_only_configured_flags():
    assert InstallerConfig(config={"installer": {"extra_args": []}}).extra_args == ()
    assert InstallerConfig(config={"installer": {"extra_args": ["--frozen-lockfile"]}}).extra_args == (
        "--frozen-lockfile",
    )


def test_comparison_is_normalised():
    assert ReconcileConfig(config={"reconcile": {"comparison": " Precedence "}}).comparison == "precedence"


def test_unknown_comparison():
    with pytest.raises(ValueError, match="reconcile.comparison"):
        ReconcileConfig(config={"reconcile": {"comparison": "loose"}}).comparison


def test_logging_values():
    cfg = LoggingConfig(config={"logging": {"level": "debug", "file": "~/logs/layerdeps.log"}})

    assert cfg.level == "DEBUG"
    assert cfg.file == Path("~/logs/layerdeps.log").expanduser()


def test_loads_from_repo_when_no_mapping_given(isolated_project_env):
    write_config(isolated_project_env / ".layerdeps" / "config", {"manifest": {"filename": "layer.json"}})

    assert ManifestConfig(repo_root=isolated_project_env).filename == "layer.json"
