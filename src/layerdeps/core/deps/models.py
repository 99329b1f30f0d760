"""Data model for dependency reconciliation.

Records are immutable once built; each pipeline stage receives the previous
stage's output explicitly.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Tuple


class Scope(str, Enum):
    """Provenance of a declared dependency."""

    PROJECT = "Project"
    LAYER = "Layer"


class VersionStatus(str, Enum):
    """Most significant version component that rose for a "newer" decision."""

    MAJOR = "MAJOR"
    MINOR = "MINOR"
    PATCH = "PATCH"


@dataclass(frozen=True)
class Package:
    scope: Scope
    name: str
    version: str
    source: Optional[Path] = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Package name must be non-empty")

    @property
    def spec(self) -> str:
        return f"{self.name}@{self.version}"


@dataclass(frozen=True)
class ProjectDependencySet:
    """Root project's declared name → range mapping (read-only)."""

    manifest_path: Optional[Path]
    dependencies: Mapping[str, str]

    @classmethod
    def from_mapping(
        cls, dependencies: Mapping[str, str], manifest_path: Optional[Path] = None
    ) -> "ProjectDependencySet":
        return cls(manifest_path=manifest_path, dependencies=MappingProxyType(dict(dependencies)))

    def __contains__(self, name: object) -> bool:
        return name in self.dependencies

    def __len__(self) -> int:
        return len(self.dependencies)

    def __iter__(self) -> Iterator[str]:
        return iter(self.dependencies)

    def get(self, name: str) -> Optional[str]:
        return self.dependencies.get(name)

    def packages(self) -> List[Package]:
        source = self.manifest_path.parent if self.manifest_path else None
        return [
            Package(scope=Scope.PROJECT, name=name, version=version, source=source)
            for name, version in self.dependencies.items()
        ]


class LayerDependencySet:
    """Layer dependencies merged across layers, first writer wins.

    Insertion order is preserved: layer enumeration order, then declaration
    order within each layer's manifest.
    """

    def __init__(self) -> None:
        self._packages: Dict[str, Package] = {}

    def add(self, package: Package) -> bool:
        """Insert ``package`` unless its name is already present.

        Returns:
            True if inserted, False if an earlier layer already owns the name.
        """
        if package.name in self._packages:
            return False
        self._packages[package.name] = package
        return True

    def get(self, name: str) -> Optional[Package]:
        return self._packages.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._packages

    def __len__(self) -> int:
        return len(self._packages)

    def __iter__(self) -> Iterator[Package]:
        return iter(list(self._packages.values()))

    def names(self) -> List[str]:
        return list(self._packages)

    def __repr__(self) -> str:
        return f"LayerDependencySet({', '.join(p.spec for p in self._packages.values())})"


@dataclass(frozen=True)
class InstallDecision:
    can_install: bool
    package: Package
    status: Optional[VersionStatus] = None
    root_version: Optional[str] = None

    @property
    def is_new(self) -> bool:
        """True when the root project does not declare the package at all."""
        return self.root_version is None


@dataclass(frozen=True)
class InstallPlan:
    """Ordered ``name@version`` installer arguments plus the decisions behind them."""

    specs: Tuple[str, ...] = ()
    decisions: Tuple[InstallDecision, ...] = field(default=(), compare=False)

    @property
    def is_noop(self) -> bool:
        return not self.specs

    @property
    def args(self) -> List[str]:
        return list(self.specs)

    def __len__(self) -> int:
        return len(self.specs)

    def __iter__(self) -> Iterator[str]:
        return iter(self.specs)


__all__ = [
    "InstallDecision",
    "InstallPlan",
    "LayerDependencySet",
    "Package",
    "ProjectDependencySet",
    "Scope",
    "VersionStatus",
]
