"""Domain-specific configuration for the package-manager invocation."""
from __future__ import annotations

from functools import cached_property
from typing import Tuple

from ..base import BaseDomainConfig


class InstallerConfig(BaseDomainConfig):
    """Accessor for ``installer.*``.

    The resulting command line is
    ``<command> <subcommand> <name@version>... --ignore-scripts <extra_args...>``.
    ``--ignore-scripts`` is added by the installer even when ``extra_args``
    omits it.
    """

    def _config_section(self) -> str:
        return "installer"

    @cached_property
    def command(self) -> str:
        return str(self.section.get("command") or "bun")

    @cached_property
    def subcommand(self) -> str:
        return str(self.section.get("subcommand") or "add")

    @cached_property
    def extra_args(self) -> Tuple[str, ...]:
        raw = self.section.get("extra_args")
        if raw is None:
            return ("--ignore-scripts",)
        return tuple(str(a) for a in raw if a not in {"+", "="})
