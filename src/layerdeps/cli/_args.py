"""Common CLI argument registration utilities."""
from __future__ import annotations

import argparse

from layerdeps.core.config.domains import COMPARISONS


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    """Add --json flag for JSON output mode."""
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def add_repo_root_flag(parser: argparse.ArgumentParser) -> None:
    """Add --repo-root flag for host project root override."""
    parser.add_argument(
        "--repo-root",
        type=str,
        help="Override host project root (default: nearest directory with a manifest)",
    )


def add_layer_arg(parser: argparse.ArgumentParser) -> None:
    """Add repeatable --layer PATH (enumeration order = flag order)."""
    parser.add_argument(
        "--layer",
        "-l",
        dest="layers",
        action="append",
        default=[],
        metavar="PATH",
        help="Layer root directory (repeatable; scanned before configured layers)",
    )


def add_comparison_arg(parser: argparse.ArgumentParser) -> None:
    """Add --comparison to override reconcile.comparison."""
    parser.add_argument(
        "--comparison",
        choices=list(COMPARISONS),
        default=None,
        help="Version comparison policy (default: from config, per-field)",
    )


def add_dry_run_flag(parser: argparse.ArgumentParser) -> None:
    """Add --dry-run flag."""
    parser.add_argument(
        "--dry-run",
        "-n",
        action="store_true",
        help="Show what would be installed without running the installer",
    )


def add_standard_flags(parser: argparse.ArgumentParser) -> None:
    """Add --repo-root and --layer, which every reconciliation command takes."""
    add_repo_root_flag(parser)
    add_layer_arg(parser)


__all__ = [
    "add_json_flag",
    "add_repo_root_flag",
    "add_layer_arg",
    "add_comparison_arg",
    "add_dry_run_flag",
    "add_standard_flags",
]
