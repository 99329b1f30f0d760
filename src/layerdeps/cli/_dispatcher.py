"""
Auto-discovery CLI dispatcher for layerdeps.

Scans subfolders for commands and automatically registers them.
Adding new commands = just add a .py file to the appropriate subfolder:

- ``cli/commands/<name>.py``   => ``layerdeps <name>``
- ``cli/<domain>/<name>.py``   => ``layerdeps <domain> <name>``

Each command module exposes ``SUMMARY``, ``register_args(parser)`` and
``main(args) -> int``.
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from pathlib import Path
from typing import Any

from layerdeps import __version__
from layerdeps.core.config.domains import LoggingConfig
from layerdeps.core.exceptions import LayerDepsError
from layerdeps.core.stdlib_logging import configure_stdlib_logging

from ._output import print_error

logger = logging.getLogger(__name__)

_PACKAGE = "layerdeps.cli"


@lru_cache(maxsize=1)
def discover_domains() -> dict[str, Path]:
    """
    Discover all CLI domain subfolders (layers, config, ...).

    Returns:
        Dict mapping domain name to directory path
    """
    cli_dir = Path(__file__).parent
    domains = {}
    for item in cli_dir.iterdir():
        if item.name == "commands":
            continue
        if item.is_dir() and not item.name.startswith("_"):
            # Must have at least one non-init .py file
            has_commands = any(
                f.suffix == ".py" and not f.name.startswith("_")
                for f in item.iterdir()
            )
            if has_commands:
                domains[item.name] = item
    return domains


def _load_command(module_name: str, default_summary: str) -> dict[str, Any]:
    module = importlib.import_module(module_name)
    return {
        "module": module,
        "summary": getattr(module, "SUMMARY", default_summary),
        "register_args": getattr(module, "register_args", None),
        "main": getattr(module, "main", None),
    }


@lru_cache(maxsize=1)
def discover_root_commands() -> dict[str, dict[str, Any]]:
    """Discover top-level commands under cli/commands (no domain prefix)."""
    commands_dir = Path(__file__).parent / "commands"
    commands: dict[str, dict[str, Any]] = {}

    if not commands_dir.exists():
        return commands

    for item in sorted(commands_dir.glob("*.py")):
        if item.name.startswith("_"):
            continue
        cmd_name = item.stem
        commands[cmd_name] = _load_command(f"{_PACKAGE}.commands.{cmd_name}", cmd_name)
    return commands


@lru_cache(maxsize=32)
def discover_commands(domain: str) -> dict[str, dict[str, Any]]:
    """
    Discover all commands in a domain subfolder.

    Args:
        domain: Name of the domain (e.g., "layers", "config")

    Returns:
        Dict mapping command name to command info dict
    """
    domain_dir = Path(__file__).parent / domain
    commands: dict[str, dict[str, Any]] = {}

    for item in sorted(domain_dir.glob("*.py")):
        if item.name.startswith("_"):
            continue
        cmd_name = item.stem
        commands[cmd_name] = _load_command(f"{_PACKAGE}.{domain}.{cmd_name}", f"{domain} {cmd_name}")
    return commands


def _add_command_parser(subparsers: Any, cmd_name: str, cmd_info: dict[str, Any]) -> None:
    primary_name = cmd_name.replace("_", "-")
    aliases = [cmd_name] if primary_name != cmd_name else []
    cmd_parser = subparsers.add_parser(
        primary_name,
        aliases=aliases,
        help=cmd_info["summary"],
    )
    # Let module register its own arguments
    if cmd_info["register_args"]:
        cmd_info["register_args"](cmd_parser)
    if cmd_info["main"]:
        cmd_parser.set_defaults(_func=cmd_info["main"])


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argument parser with auto-discovered domains and commands.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="layerdeps",
        description="Install the dependencies declared by composed project layers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        metavar="LEVEL",
        help="Logging level (default: logging.level from config, WARNING)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        metavar="PATH",
        help="Write logs to PATH instead of stderr",
    )

    subparsers = parser.add_subparsers(
        dest="domain",
        title="commands",
        description="Available commands",
        metavar="<command>",
    )

    # Register top-level commands (no domain prefix)
    for cmd_name, cmd_info in sorted(discover_root_commands().items()):
        _add_command_parser(subparsers, cmd_name, cmd_info)

    # Auto-register domains
    for domain_name in sorted(discover_domains().keys()):
        domain_commands = discover_commands(domain_name)
        if not domain_commands:
            continue

        domain_parser = subparsers.add_parser(
            domain_name,
            help=f"{domain_name.title()} commands",
        )
        cmd_subparsers = domain_parser.add_subparsers(
            dest="command",
            title="commands",
            description=f"Available {domain_name} commands",
            metavar="<command>",
        )
        for cmd_name, cmd_info in sorted(domain_commands.items()):
            _add_command_parser(cmd_subparsers, cmd_name, cmd_info)

    return parser


def _configure_logging(args: argparse.Namespace) -> None:
    """Apply --log-level/--log-file, falling back to the ``logging`` config section."""
    level = args.log_level
    log_file = args.log_file
    if level is None or log_file is None:
        from layerdeps.cli._utils import get_repo_root, load_config

        cfg = LoggingConfig(config=load_config(get_repo_root(args)))
        level = level or cfg.level
        log_file = log_file or cfg.file
    configure_stdlib_logging(level=level, log_path=Path(log_file) if log_file else None)


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the layerdeps CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)

    # If no command specified, show help
    if not args.domain:
        parser.print_help()
        return 0

    func: Callable[[argparse.Namespace], int] | None = getattr(args, "_func", None)
    if func is None:
        # Domain given without a command: show the domain help
        domain_parser = parser._subparsers._group_actions[0].choices.get(args.domain)
        if domain_parser:
            domain_parser.print_help()
        return 0

    try:
        _configure_logging(args)
        return func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130
    except LayerDepsError as e:
        logger.debug("command failed", exc_info=True)
        print_error(str(e))
        return 1


if __name__ == "__main__":
    sys.exit(main())
