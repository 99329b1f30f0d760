from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

from layerdeps.core.utils.io import ensure_directory

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_CONFIGURED_TARGET: str | None = None
_LAYERDEPS_HANDLER: logging.Handler | None = None


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.INFO


def configure_stdlib_logging(*, level: str = "WARNING", log_path: Optional[Path] = None) -> None:
    """Install a single layerdeps handler on the root logger.

    Writes to ``log_path`` when given, otherwise to stderr (stdout is kept for
    command output). Idempotent per-process: reconfiguring with the same
    target only updates the level.
    """
    global _CONFIGURED_TARGET, _LAYERDEPS_HANDLER

    target = str(Path(log_path).resolve()) if log_path else "<stderr>"
    root = logging.getLogger()
    root.setLevel(_level_from_name(level))

    if _CONFIGURED_TARGET == target and _LAYERDEPS_HANDLER is not None:
        _LAYERDEPS_HANDLER.setLevel(_level_from_name(level))
        return

    if _LAYERDEPS_HANDLER is not None:
        root.removeHandler(_LAYERDEPS_HANDLER)
        _LAYERDEPS_HANDLER.close()
        _LAYERDEPS_HANDLER = None

    handler: logging.Handler
    if log_path:
        ensure_directory(Path(target).parent)
        handler = logging.FileHandler(target, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(_level_from_name(level))
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    _LAYERDEPS_HANDLER = handler
    _CONFIGURED_TARGET = target


def reset_stdlib_logging_for_tests() -> None:
    """Test-only: remove the layerdeps handler."""
    global _CONFIGURED_TARGET, _LAYERDEPS_HANDLER
    if _LAYERDEPS_HANDLER is not None:
        logging.getLogger().removeHandler(_LAYERDEPS_HANDLER)
        _LAYERDEPS_HANDLER.close()
    _CONFIGURED_TARGET = None
    _LAYERDEPS_HANDLER = None


__all__ = ["LOG_FORMAT", "configure_stdlib_logging", "reset_stdlib_logging_for_tests"]
