"""
layerdeps check command.

SUMMARY: Show which layer dependencies would be installed

Runs enumeration, collection, reconciliation and planning but never starts
the installer. With ``--exit-code`` a non-empty plan exits with status 1,
which makes the command usable as a CI guard.
"""

from __future__ import annotations

import argparse

from layerdeps.cli import (
    OutputFormatter,
    add_comparison_arg,
    add_json_flag,
    add_standard_flags,
    get_layer_roots,
    get_repo_root,
    load_config,
)
from layerdeps.core.deps import RunSettings, build_plan, report
from layerdeps.core.deps.pipeline import plan_to_dict
from layerdeps.core.exceptions import LayerDepsError

SUMMARY = "Show which layer dependencies would be installed"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_standard_flags(parser)
    add_comparison_arg(parser)
    add_json_flag(parser)
    parser.add_argument(
        "--exit-code",
        action="store_true",
        help="Exit with status 1 when packages would be installed",
    )


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=args.json)

    try:
        repo_root = get_repo_root(args)
        cfg = load_config(repo_root)
        settings = RunSettings.from_config(cfg, comparison=args.comparison)
        result = build_plan(repo_root, get_layer_roots(args, repo_root, cfg), settings=settings)
    except LayerDepsError as e:
        formatter.error(e, error_code="check_error")
        return 1

    if result.plan.is_noop:
        message = report.render_noop()
    else:
        message = report.render_summary(result.decisions)
    formatter.success(plan_to_dict(result), message, status="noop" if result.plan.is_noop else "pending")

    if args.exit_code and not result.plan.is_noop:
        return 1
    return 0
