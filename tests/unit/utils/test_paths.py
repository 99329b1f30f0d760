from __future__ import annotations

import pytest

from layerdeps.core.exceptions import ConfigError, LayerDepsError
from layerdeps.core.utils.paths import PROJECT_ROOT_ENV, resolve_project_root


def test_env_root_wins(tmp_path, monkeypatch):
    monkeypatch.setenv(PROJECT_ROOT_ENV, str(tmp_path))

    assert resolve_project_root(tmp_path / "elsewhere") == tmp_path.resolve()


def test_env_root_missing(tmp_path, monkeypatch):
    missing = tmp_path / "gone"
    monkeypatch.setenv(PROJECT_ROOT_ENV, str(missing))

    with pytest.raises(ConfigError, match="points at missing path") as exc_info:
        resolve_project_root()

    assert isinstance(exc_info.value, LayerDepsError)
    assert exc_info.value.context == {"path": str(missing.resolve())}


def test_nearest_manifest_ancestor(tmp_path):
    (tmp_path / "package.json").write_text("{}", encoding="utf-8")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)

    assert resolve_project_root(nested) == tmp_path.resolve()
