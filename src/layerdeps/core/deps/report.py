"""Human-readable summaries printed around the install step."""
from __future__ import annotations

from typing import Iterable, List

from .models import InstallDecision

HEADER = "These packages will be installed:"
NOOP_MESSAGE = "There are no layer packages to be installed"
INSTALLING_MESSAGE = "Installing dependencies..."
SUCCESS_MESSAGE = "All dependencies are installed"

OK_GLYPH = "✅"
WARN_GLYPH = "⚠️"


def boxed(text: str) -> str:
    """Frame ``text`` in a light box-drawing border."""
    lines = text.splitlines() or [""]
    width = max(len(line) for line in lines)
    top = "┌" + "─" * (width + 2) + "┐"
    bottom = "└" + "─" * (width + 2) + "┘"
    body = ["│ " + line.ljust(width) + " │" for line in lines]
    return "\n".join([top, *body, bottom])


def decision_line(decision: InstallDecision) -> str:
    glyph = OK_GLYPH if decision.can_install else WARN_GLYPH
    pkg = decision.package
    return f"{pkg.scope.value} {glyph} {pkg.name}@{pkg.version}"


def render_summary(decisions: Iterable[InstallDecision]) -> str:
    lines: List[str] = [HEADER, ""]
    lines.extend(decision_line(d) for d in decisions)
    return boxed("\n".join(lines))


def render_noop() -> str:
    return boxed(NOOP_MESSAGE)


__all__ = [
    "HEADER",
    "INSTALLING_MESSAGE",
    "NOOP_MESSAGE",
    "SUCCESS_MESSAGE",
    "boxed",
    "decision_line",
    "render_noop",
    "render_summary",
]
