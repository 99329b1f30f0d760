"""Domain-specific configuration for version reconciliation."""
from __future__ import annotations

from functools import cached_property

from ..base import BaseDomainConfig

COMPARISONS = ("per-field", "precedence")


class ReconcileConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "reconcile"

    @cached_property
    def comparison(self) -> str:
        value = str(self.section.get("comparison") or "per-field").strip().lower()
        if value not in COMPARISONS:
            raise ValueError(
                f"reconcile.comparison must be one of {', '.join(COMPARISONS)}; got '{value}'"
            )
        return value
