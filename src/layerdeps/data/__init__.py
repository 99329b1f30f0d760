"""
layerdeps data resource helpers.

Bundled defaults (``config/*.yaml``) and JSON Schemas expressed in YAML
(``schemas/``) are shipped inside the package and resolved through
importlib.resources.
"""

from __future__ import annotations

from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any

import yaml


def get_data_path(subpackage: str, filename: str = "") -> Path:
    """
    Get absolute path to a bundled data file or directory.

    Args:
        subpackage: Name of the data subdirectory (e.g., "config", "schemas")
        filename: Optional filename within the subdirectory

    Returns:
        Absolute path to the file or directory

    Example:
        >>> get_data_path("config", "defaults.yaml")
        PosixPath('/path/to/layerdeps/data/config/defaults.yaml')
    """
    pkg = resources.files("layerdeps.data")
    base = Path(str(pkg / subpackage))
    return base / filename if filename else base


@lru_cache(maxsize=16)
def read_yaml(subpackage: str, filename: str) -> dict[str, Any]:
    """Read and parse a bundled YAML data file (cached)."""
    path = get_data_path(subpackage, filename)
    return yaml.safe_load(path.read_text(encoding="utf-8"))


def clear_caches() -> None:
    """Clear all read caches."""
    read_yaml.cache_clear()


__all__ = [
    "get_data_path",
    "read_yaml",
    "clear_caches",
]
