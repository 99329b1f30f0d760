"""
layerdeps install command.

SUMMARY: Install dependencies declared by managed layers

Reads the root manifest and every managed layer's manifest, decides which
layer dependencies are missing or newer than the root's, and adds them to the
root project with a single installer invocation.
"""

from __future__ import annotations

import argparse

from layerdeps.cli import (
    OutputFormatter,
    add_comparison_arg,
    add_dry_run_flag,
    add_standard_flags,
    get_layer_roots,
    get_repo_root,
    load_config,
)
from layerdeps.core.deps import RunSettings, run
from layerdeps.core.exceptions import LayerDepsError

SUMMARY = "Install dependencies declared by managed layers"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_standard_flags(parser)
    add_dry_run_flag(parser)
    add_comparison_arg(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=False)

    try:
        repo_root = get_repo_root(args)
        cfg = load_config(repo_root)
        settings = RunSettings.from_config(cfg, comparison=args.comparison)
        run(
            repo_root,
            get_layer_roots(args, repo_root, cfg),
            settings=settings,
            dry_run=args.dry_run,
            emit=formatter.text,
        )
        return 0
    except LayerDepsError as e:
        formatter.error(e)
        return 1
