"""Subprocess helpers.

Commands are always executed as argv lists (never ``shell=True``) with the
caller's stdin/stdout/stderr inherited, so package-manager progress output
reaches the terminal unchanged.
"""
from __future__ import annotations

import logging
import shlex
import subprocess
from pathlib import Path
from time import perf_counter
from typing import Any, Callable, List, Optional, Sequence

logger = logging.getLogger(__name__)

# Signature shared by run_inherited and test doubles: (argv, cwd) -> exit code.
Runner = Callable[[Sequence[str], Optional[Path]], int]


def _flatten_cmd(cmd: Any) -> List[str]:
    if isinstance(cmd, (list, tuple)):
        return [str(p) for p in cmd]
    return shlex.split(str(cmd))


def format_argv(cmd: Any) -> str:
    """Render a command for logs and error messages."""
    return shlex.join(_flatten_cmd(cmd))


def run_inherited(cmd: Sequence[str], cwd: Optional[Path] = None) -> int:
    """Run ``cmd`` to completion with inherited stdio and return its exit code.

    Blocks until the child exits; there is no timeout.

    Raises:
        OSError: When the executable cannot be spawned (e.g. not on PATH).
    """
    argv = _flatten_cmd(cmd)
    start = perf_counter()
    logger.debug("spawn: %s (cwd=%s)", format_argv(argv), cwd)
    completed = subprocess.run(argv, cwd=str(cwd) if cwd else None, check=False, shell=False)
    logger.debug(
        "exit: %s -> %d in %.2fs",
        argv[0] if argv else "",
        completed.returncode,
        perf_counter() - start,
    )
    return completed.returncode


__all__ = ["Runner", "format_argv", "run_inherited"]
