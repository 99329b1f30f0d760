"""
layerdeps config show command.

SUMMARY: Show current configuration

Displays the merged configuration from bundled defaults, user and project
overrides, and LAYERDEPS_* environment variables.
"""

from __future__ import annotations

import argparse
from typing import Any

from layerdeps.cli import OutputFormatter, add_json_flag, add_repo_root_flag, get_repo_root, load_config
from layerdeps.core.exceptions import LayerDepsError
from layerdeps.core.utils.io import dump_yaml_string

SUMMARY = "Show current configuration"

_MISSING = object()


def _nest_key(key: str, value: Any) -> Any:
    """Nest a dot-notation key into a YAML/JSON-friendly mapping."""
    out = value
    for part in reversed([p for p in key.split(".") if p]):
        out = {part: out}
    return out


def _lookup(cfg: Any, key: str) -> Any:
    cur = cfg
    for part in (p for p in key.split(".") if p):
        if not isinstance(cur, dict) or part not in cur:
            return _MISSING
        cur = cur[part]
    return cur


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "--key",
        help="Specific configuration key to show (e.g., 'installer.command')",
    )
    add_json_flag(parser)
    add_repo_root_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=args.json)

    try:
        cfg = load_config(get_repo_root(args))
    except LayerDepsError as e:
        formatter.error(e, error_code="config_error")
        return 1

    data: Any = cfg
    if args.key:
        value = _lookup(cfg, args.key)
        if value is _MISSING:
            formatter.error(KeyError(args.key), f"Key not found: {args.key}", error_code="config_error")
            return 1
        data = _nest_key(args.key, value)

    if formatter.json_mode:
        formatter.json_output(data)
    else:
        formatter.text(dump_yaml_string(data).rstrip())
    return 0
