"""Core I/O primitives shared by json.py and yaml.py."""
from __future__ import annotations

from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


def ensure_directory(path: PathLike, create: bool = True) -> Path:
    """Ensure directory exists.

    Args:
        path: Directory path to check/create
        create: If True, create directory if missing; if False, raise if missing

    Returns:
        Path: The directory path

    Raises:
        FileNotFoundError: If create=False and directory doesn't exist
        NotADirectoryError: If path exists but is not a directory
    """
    path = Path(path)

    if path.exists():
        if not path.is_dir():
            raise NotADirectoryError(f"Path exists but is not a directory: {path}")
        return path

    if create:
        path.mkdir(parents=True, exist_ok=True)
        return path

    raise FileNotFoundError(f"Directory does not exist: {path}")


def read_text(path: PathLike, encoding: str = "utf-8") -> str:
    """Read a text file, raising FileNotFoundError/IsADirectoryError as-is."""
    return Path(path).read_text(encoding=encoding)


__all__ = ["PathLike", "ensure_directory", "read_text"]
