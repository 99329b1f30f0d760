"""Install planning: decisions → ordered ``name@version`` arguments."""
from __future__ import annotations

from typing import Iterable

from .models import InstallDecision, InstallPlan


def install_spec(decision: InstallDecision) -> str:
    """``name@version`` with one leading caret removed (``^1.2.3`` → ``1.2.3``)."""
    version = decision.package.version
    if version.startswith("^"):
        version = version[1:]
    return f"{decision.package.name}@{version}"


def plan(decisions: Iterable[InstallDecision]) -> InstallPlan:
    """Keep installable decisions in order and render their arguments.

    No deduplication happens here; the layer set already guarantees one
    decision per package name.
    """
    selected = tuple(d for d in decisions if d.can_install)
    return InstallPlan(specs=tuple(install_spec(d) for d in selected), decisions=selected)


__all__ = ["install_spec", "plan"]
