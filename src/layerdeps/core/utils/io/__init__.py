"""I/O utilities for layerdeps.

- Core: directory management, text reads
- JSON: manifest reads
- YAML: config reads and deterministic YAML directory iteration
"""
from __future__ import annotations

from .core import (
    PathLike,
    ensure_directory,
    read_text,
)
from .json import read_json
from .yaml import (
    dump_yaml_string,
    iter_yaml_files,
    read_yaml,
)

__all__ = [
    # core
    "PathLike",
    "ensure_directory",
    "read_text",
    # json
    "read_json",
    # yaml
    "read_yaml",
    "dump_yaml_string",
    "iter_yaml_files",
]
