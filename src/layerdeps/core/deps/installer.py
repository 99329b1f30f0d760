"""Installer invocation: one package-manager process for the whole plan."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Sequence

from layerdeps.core.exceptions import InstallProcessError
from layerdeps.core.utils.subprocess import Runner, format_argv, run_inherited

from .models import InstallPlan

logger = logging.getLogger(__name__)

DEFAULT_COMMAND = "bun"
DEFAULT_SUBCOMMAND = "add"
IGNORE_SCRIPTS = "--ignore-scripts"
DEFAULT_EXTRA_ARGS = (IGNORE_SCRIPTS,)


def build_argv(
    plan: InstallPlan,
    *,
    command: str = DEFAULT_COMMAND,
    subcommand: str = DEFAULT_SUBCOMMAND,
    extra_args: Sequence[str] = DEFAULT_EXTRA_ARGS,
) -> List[str]:
    """``<command> <subcommand> <name@version>... --ignore-scripts <extra_args...>``.

    ``--ignore-scripts`` is always present, whatever ``extra_args`` holds.
    """
    extras = [a for a in extra_args if a != IGNORE_SCRIPTS]
    return [command, subcommand, *plan.args, IGNORE_SCRIPTS, *extras]


def install(
    plan: InstallPlan,
    *,
    command: str = DEFAULT_COMMAND,
    subcommand: str = DEFAULT_SUBCOMMAND,
    extra_args: Sequence[str] = DEFAULT_EXTRA_ARGS,
    cwd: Optional[Path] = None,
    runner: Runner = run_inherited,
) -> None:
    """Add every package in ``plan`` with a single installer call.

    Lifecycle scripts are always disabled (``--ignore-scripts``); ``extra_args``
    only adds flags after it. stdio is inherited and nothing goes
    through a shell.

    Raises:
        ValueError: ``plan`` is a no-op; callers must skip the installer.
        InstallProcessError: The process could not be spawned or exited non-zero.
    """
    if plan.is_noop:
        raise ValueError("Refusing to invoke the installer with an empty plan")

    argv = build_argv(plan, command=command, subcommand=subcommand, extra_args=extra_args)
    ctx = {"argv": argv, "cwd": str(cwd) if cwd else None}
    logger.info("running installer: %s", format_argv(argv))

    try:
        code = runner(argv, cwd)
    except OSError as exc:
        logger.error("installer could not be started: %s", exc)
        raise InstallProcessError(f"Failed to start '{command}': {exc}", context=ctx) from exc

    if code != 0:
        logger.error("installer exited with code %s", code)
        raise InstallProcessError(
            f"Command failed with exit code {code}: {format_argv(argv)}",
            exit_code=code,
            context=ctx,
        )


__all__ = ["DEFAULT_COMMAND", "DEFAULT_EXTRA_ARGS", "DEFAULT_SUBCOMMAND", "IGNORE_SCRIPTS", "build_argv", "install"]
