"""Domain-specific configuration for layer enumeration.

Controls which layer roots are considered and which of them carry a manifest
worth scanning:
- ``marker``: parent directory name that tags a managed layer (c12 cache dir)
- ``roots``: extra layer roots (repo-relative, ``~`` and ``$VARS`` expanded)
- ``discover``: scan ``<repo>/<cache_dir>/<marker>/*`` for cached layers
"""
from __future__ import annotations

from functools import cached_property
from typing import List

from ..base import BaseDomainConfig

DEFAULT_MARKER = ".c12"


class LayersConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "layers"

    @cached_property
    def marker(self) -> str:
        return str(self.section.get("marker") or DEFAULT_MARKER)

    @cached_property
    def roots(self) -> List[str]:
        raw = self.section.get("roots") or []
        if not isinstance(raw, list):
            return []
        # Skip merge marker strings ("+", "=") left over from list merging.
        return [str(r) for r in raw if isinstance(r, str) and r.strip() and r not in {"+", "="}]

    @cached_property
    def discover(self) -> bool:
        return bool(self.section.get("discover", False))

    @cached_property
    def cache_dir(self) -> str:
        return str(self.section.get("cache_dir") or "node_modules")
