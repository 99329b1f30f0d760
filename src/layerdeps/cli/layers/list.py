"""
layerdeps layers list command.

SUMMARY: List layer roots in enumeration order
"""

from __future__ import annotations

import argparse

from layerdeps.cli import (
    OutputFormatter,
    add_json_flag,
    add_standard_flags,
    get_layer_roots,
    get_repo_root,
    load_config,
)
from layerdeps.core.config.domains import LayersConfig
from layerdeps.core.exceptions import LayerDepsError
from layerdeps.core.layers import enumerate_layers

SUMMARY = "List layer roots in enumeration order"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_standard_flags(parser)
    add_json_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=args.json)

    try:
        repo_root = get_repo_root(args)
        cfg = load_config(repo_root)
        layers = enumerate_layers(
            get_layer_roots(args, repo_root, cfg),
            marker=LayersConfig(config=cfg).marker,
        )
    except LayerDepsError as e:
        formatter.error(e, error_code="layers_error")
        return 1

    if formatter.json_mode:
        formatter.json_output(
            {
                "root": str(repo_root),
                "layers": [
                    {"name": layer.name, "path": str(layer.path), "managed": layer.managed}
                    for layer in layers
                ],
            }
        )
        return 0

    if not layers:
        formatter.text("No layers found")
        return 0

    for layer in layers:
        tag = "managed" if layer.managed else "skipped"
        formatter.text(f"{layer.name:<24} {tag:<8} {layer.path}")
    return 0
