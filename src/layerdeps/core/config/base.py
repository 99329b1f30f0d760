"""Base class for domain-specific configuration accessors."""
from __future__ import annotations

from abc import ABC, abstractmethod
from functools import cached_property
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .cache import get_cached_config


class BaseDomainConfig(ABC):
    """Typed, cached access to one top-level section of the merged config.

    Usage:
        class InstallerConfig(BaseDomainConfig):
            def _config_section(self) -> str:
                return "installer"

            @cached_property
            def command(self) -> str:
                return str(self.section.get("command", "bun"))

        cfg = InstallerConfig(repo_root=Path("/path/to/project"))
        print(cfg.command)

    An already-merged ``config`` mapping may be passed instead of loading one;
    the pipeline and tests use this to avoid touching the filesystem.
    """

    def __init__(
        self,
        repo_root: Optional[Path] = None,
        *,
        config: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self._repo_root = repo_root
        if config is not None:
            self._config: Mapping[str, Any] = config
        else:
            self._config = get_cached_config(repo_root=repo_root)

    @abstractmethod
    def _config_section(self) -> str:
        """Return the top-level config key for this domain."""
        ...

    @cached_property
    def section(self) -> Dict[str, Any]:
        """This domain's configuration section (empty dict if absent)."""
        return dict(self._config.get(self._config_section(), {}) or {})


__all__ = ["BaseDomainConfig"]
