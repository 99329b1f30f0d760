"""Domain-specific configuration for manifest files."""
from __future__ import annotations

from functools import cached_property

from ..base import BaseDomainConfig


class ManifestConfig(BaseDomainConfig):
    def _config_section(self) -> str:
        return "manifest"

    @cached_property
    def filename(self) -> str:
        """Manifest file name looked up in the root and in every layer."""
        return str(self.section.get("filename") or "package.json")
