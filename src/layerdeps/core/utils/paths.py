"""Configuration directory and project root resolution.

Precedence for the directory names (highest to lowest):
1. Environment variables: LAYERDEPS_paths__project_config_dir / LAYERDEPS_paths__user_config_dir
2. Bundled defaults: layerdeps.data/config/paths.yaml
3. Hardcoded fallback: ".layerdeps"

The user directory is resolved relative to the home directory unless absolute.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from layerdeps.core.exceptions import ConfigError
from layerdeps.data import read_yaml as read_data_yaml

DEFAULT_CONFIG_DIR_NAME = ".layerdeps"
PROJECT_ROOT_ENV = "LAYERDEPS_PROJECT_ROOT"


def _bundled_path_setting(key: str) -> Optional[str]:
    data = read_data_yaml("config", "paths.yaml") or {}
    if not isinstance(data, dict):
        return None
    section = data.get("paths")
    if isinstance(section, dict):
        value = section.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
    return None


def _resolve_dir_name(key: str) -> str:
    env_override = os.environ.get(f"LAYERDEPS_paths__{key}")
    if isinstance(env_override, str) and env_override.strip():
        return env_override.strip()
    return _bundled_path_setting(key) or DEFAULT_CONFIG_DIR_NAME


def get_project_config_dir(repo_root: Path) -> Path:
    """Return ``<repo_root>/<project_config_dir>`` (not created)."""
    return Path(repo_root) / _resolve_dir_name("project_config_dir")


def get_user_config_dir() -> Path:
    """Return the per-user config directory (not created)."""
    raw = Path(os.path.expandvars(_resolve_dir_name("user_config_dir"))).expanduser()
    if raw.is_absolute():
        return raw
    return Path.home() / raw


def resolve_project_root(start: Optional[Path] = None, *, manifest: str = "package.json") -> Path:
    """Resolve the host project root.

    Resolution priority:
    1. LAYERDEPS_PROJECT_ROOT environment variable
    2. Nearest ancestor of ``start`` (default: CWD) containing ``manifest``
    3. ``start`` itself

    Raises:
        ConfigError: If the environment override points at a missing path
    """
    env_root = os.environ.get(PROJECT_ROOT_ENV)
    if env_root:
        env_path = Path(env_root).expanduser().resolve()
        if not env_path.exists():
            raise ConfigError(
                f"{PROJECT_ROOT_ENV} points at missing path: {env_path}",
                context={"path": str(env_path)},
            )
        return env_path

    origin = Path(start or Path.cwd()).resolve()
    for candidate in (origin, *origin.parents):
        if (candidate / manifest).is_file():
            return candidate
    return origin


__all__ = [
    "DEFAULT_CONFIG_DIR_NAME",
    "PROJECT_ROOT_ENV",
    "get_project_config_dir",
    "get_user_config_dir",
    "resolve_project_root",
]
