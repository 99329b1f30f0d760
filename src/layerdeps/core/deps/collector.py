"""Dependency collection for the root project and its layers."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from .manifest import DEFAULT_MANIFEST, manifest_path, read_manifest
from .models import LayerDependencySet, Package, ProjectDependencySet, Scope

logger = logging.getLogger(__name__)


def collect_root(root_dir: Path, *, filename: str = DEFAULT_MANIFEST) -> ProjectDependencySet:
    """Load the root project's declared dependencies.

    Any read or parse failure propagates and aborts the run.
    """
    dependencies = read_manifest(root_dir, filename=filename)
    logger.info("root project declares %d dependencies", len(dependencies))
    return ProjectDependencySet.from_mapping(
        dependencies, manifest_path=manifest_path(root_dir, filename)
    )


def collect_layers(layer_dirs: Iterable[Path], *, filename: str = DEFAULT_MANIFEST) -> LayerDependencySet:
    """Merge the dependencies of ``layer_dirs`` in the order given.

    The first layer to declare a name owns it; later declarations of the same
    name are ignored, whatever their range. A manifest failure in any layer
    propagates and aborts the run.
    """
    collected = LayerDependencySet()
    for layer_dir in layer_dirs:
        layer_dir = Path(layer_dir)
        declared = read_manifest(layer_dir, filename=filename)
        for name, version in declared.items():
            package = Package(scope=Scope.LAYER, name=name, version=version, source=layer_dir)
            if not collected.add(package):
                owner = collected.get(name)
                logger.debug(
                    "ignoring %s from %s: already declared by %s",
                    package.spec,
                    layer_dir,
                    owner.source if owner else "?",
                )
    logger.info("layers declare %d distinct dependencies", len(collected))
    return collected


__all__ = ["collect_layers", "collect_root"]
