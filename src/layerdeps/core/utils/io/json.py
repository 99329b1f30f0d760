"""JSON read helpers."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .core import read_text

_MISSING = object()  # Sentinel for unset default


def read_json(file_path: Path | str, *, default: Any = _MISSING) -> Any:
    """Read and parse a JSON file.

    Args:
        file_path: Path to JSON file
        default: Value to return if file doesn't exist (optional).
                 If not provided, FileNotFoundError is raised.

    Returns:
        Parsed JSON data, or ``default`` if file doesn't exist

    Raises:
        FileNotFoundError: If the file does not exist and no default is provided
        json.JSONDecodeError: If the content is not valid JSON
    """
    path = Path(file_path)
    if not path.exists():
        if default is not _MISSING:
            return default
        raise FileNotFoundError(f"JSON file not found: {path}")

    return json.loads(read_text(path))


__all__ = ["read_json"]
