"""Unified CLI output formatting (JSON and text modes)."""
from __future__ import annotations

import json
import sys
from typing import Any, Dict, Optional

from layerdeps.core.exceptions import LayerDepsError


class OutputFormatter:
    """Unified output formatter for CLI commands."""

    def __init__(self, json_mode: bool = False, indent: int = 2):
        self.json_mode = json_mode
        self.indent = indent

    def success(
        self,
        data: Dict[str, Any],
        message: str,
        *,
        status: str = "success",
    ) -> None:
        """Output a result: ``data`` in JSON mode, ``message`` otherwise."""
        if self.json_mode:
            output = {"status": status, **data}
            print(json.dumps(output, indent=self.indent, default=str))
        else:
            print(message)

    def error(
        self,
        error: Exception,
        message: Optional[str] = None,
        *,
        error_code: str = "error",
    ) -> None:
        """Output an error to stderr.

        In JSON mode a LayerDepsError contributes its code and context.
        """
        msg = message or str(error)
        if self.json_mode:
            if isinstance(error, LayerDepsError):
                output = {"error": error_code, **error.to_json_error()}
                output["message"] = msg
            else:
                output = {"error": error_code, "message": msg}
            print(json.dumps(output, indent=self.indent, default=str), file=sys.stderr)
        else:
            print(f"Error: {msg}", file=sys.stderr)

    def json_output(self, data: Any) -> None:
        print(json.dumps(data, indent=self.indent, default=str))

    def text(self, message: str) -> None:
        """Output plain text (suppressed in JSON mode)."""
        if not self.json_mode:
            print(message)


def print_error(message: str) -> None:
    """Print error message to stderr."""
    print(f"Error: {message}", file=sys.stderr)
