"""Version reconciliation between layer requirements and the root manifest.

Each layer dependency is classified as:
  - new:       absent from the root manifest → install
  - newer:     the layer's floor version beats the root's floor → install
  - satisfied: nothing to do (no decision is emitted)

Two comparison policies are available:

``per-field`` (default)
    Install when the layer floor's major, minor or patch is greater than the
    same field of the root floor, each field compared on its own. Under this
    policy ``1.9.0`` against a root of ``2.0.0`` triggers an install.

``precedence``
    Install only when the layer floor has strictly higher semver precedence
    than the root floor (major, then minor, then patch).
"""
from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

from layerdeps.core.exceptions import VersionRangeError
from layerdeps.core.semver import Version, compare_per_field, compare_precedence, min_version

from .models import InstallDecision, LayerDependencySet, Package, ProjectDependencySet, VersionStatus

logger = logging.getLogger(__name__)

PER_FIELD = "per-field"
PRECEDENCE = "precedence"

_COMPARATORS: Dict[str, Callable[[Version, Version], bool]] = {
    PER_FIELD: compare_per_field,
    PRECEDENCE: compare_precedence,
}


def bump_status(layer: Version, root: Version) -> Optional[VersionStatus]:
    """Most significant component where ``layer`` is greater than ``root``."""
    if layer.major > root.major:
        return VersionStatus.MAJOR
    if layer.minor > root.minor:
        return VersionStatus.MINOR
    if layer.patch > root.patch:
        return VersionStatus.PATCH
    return None


def _floor(package: Package, range_text: str) -> Version:
    try:
        return min_version(range_text)
    except VersionRangeError as exc:
        raise VersionRangeError(
            f"Cannot determine minimum version of {package.name}@{range_text}: {exc}",
            context={
                **exc.context,
                "package": package.name,
                "source": str(package.source) if package.source else None,
            },
        ) from exc


def reconcile(
    root: ProjectDependencySet,
    layers: LayerDependencySet,
    *,
    comparison: str = PER_FIELD,
) -> List[InstallDecision]:
    """Decide which layer dependencies the root project must add.

    Decisions are returned in layer-set insertion order. Satisfied
    dependencies produce no decision.

    Raises:
        ValueError: Unknown ``comparison`` policy.
        VersionRangeError: A range that must be compared has no floor version.
    """
    try:
        is_newer = _COMPARATORS[comparison]
    except KeyError:
        raise ValueError(
            f"Unknown comparison policy '{comparison}' (expected one of: {', '.join(_COMPARATORS)})"
        ) from None

    decisions: List[InstallDecision] = []
    for dependency in layers:
        root_range = root.get(dependency.name)
        if root_range is None:
            logger.debug("%s: new dependency", dependency.spec)
            decisions.append(InstallDecision(can_install=True, package=dependency))
            continue

        root_floor = _floor(dependency, root_range)
        layer_floor = _floor(dependency, dependency.version)
        if is_newer(layer_floor, root_floor):
            status = bump_status(layer_floor, root_floor)
            logger.debug(
                "%s: layer floor %s > root floor %s (%s)",
                dependency.name,
                layer_floor,
                root_floor,
                status.value if status else "prerelease",
            )
            decisions.append(
                InstallDecision(
                    can_install=True,
                    package=dependency,
                    status=status,
                    root_version=root_range,
                )
            )
        else:
            logger.debug(
                "%s: satisfied (layer floor %s, root floor %s)", dependency.name, layer_floor, root_floor
            )
    return decisions


__all__ = ["PER_FIELD", "PRECEDENCE", "bump_status", "reconcile"]
