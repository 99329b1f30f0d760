"""
layerdeps CLI package.

Commands are auto-discovered: top-level commands live in ``cli/commands/``,
grouped commands in ``cli/<domain>/`` (``layerdeps layers list``).

Framework utilities for building CLI commands:
- _output: Output formatting (JSON/text modes)
- _args: Common argument registration helpers
- _utils: Shared CLI utilities
"""
from ._args import (
    add_comparison_arg,
    add_dry_run_flag,
    add_json_flag,
    add_layer_arg,
    add_repo_root_flag,
    add_standard_flags,
)
from ._output import OutputFormatter, print_error
from ._utils import get_layer_roots, get_repo_root, load_config

__all__ = [
    # Output formatting
    "OutputFormatter",
    "print_error",
    # Argument helpers
    "add_json_flag",
    "add_repo_root_flag",
    "add_layer_arg",
    "add_comparison_arg",
    "add_dry_run_flag",
    "add_standard_flags",
    # Utilities
    "get_repo_root",
    "get_layer_roots",
    "load_config",
]
