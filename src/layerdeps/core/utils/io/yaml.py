"""YAML I/O utilities."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml


def read_yaml(
    path: Path, default: Any = None, raise_on_error: bool = False
) -> Any:
    """Read YAML with error handling.

    Returns default if file is missing or invalid, unless raise_on_error is True.

    Args:
        path: YAML file path to read
        default: Value to return if file missing or invalid (default: None)
        raise_on_error: If True, propagate exceptions instead of returning default.

    Examples:
        >>> config = read_yaml(Path("config.yaml"), default={})
        >>> assert isinstance(config, dict)
    """
    path = Path(path)
    if not path.exists():
        if raise_on_error:
            raise FileNotFoundError(f"File not found: {path}")
        return default

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return data if data is not None else default
    except (OSError, yaml.YAMLError):
        if raise_on_error:
            raise
        return default


def dump_yaml_string(data: Any, sort_keys: bool = True) -> str:
    """Dump data to a block-style YAML string."""
    return yaml.safe_dump(
        data,
        default_flow_style=False,
        sort_keys=sort_keys,
        allow_unicode=True,
    )


def iter_yaml_files(dir_path: Path) -> list[Path]:
    """Return YAML files in ``dir_path`` in deterministic order.

    Includes both ``*.yml`` and ``*.yaml``. When both ``<name>.yaml`` and
    ``<name>.yml`` exist, only the ``.yaml`` path is returned.
    """
    d = Path(dir_path)
    if not d.exists():
        return []
    yml_files = {p.stem: p for p in d.glob("*.yml")}
    yaml_files = {p.stem: p for p in d.glob("*.yaml")}

    out: list[Path] = []
    for stem in sorted(set(yml_files.keys()) | set(yaml_files.keys())):
        preferred = yaml_files.get(stem) or yml_files.get(stem)
        if preferred is not None:
            out.append(preferred)
    return out


__all__ = ["read_yaml", "dump_yaml_string", "iter_yaml_files"]
