from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Tuple

from layerdeps.core.config.domains import LayersConfig
from layerdeps.core.config.domains.layers import DEFAULT_MARKER

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LayerDir:
    """A contributing layer root.

    ``managed`` is True when the layer lives directly under a directory named
    after the marker (e.g. ``node_modules/.c12/<layer>``); only managed layers
    carry a manifest worth scanning.
    """

    path: Path
    managed: bool

    @property
    def name(self) -> str:
        return self.path.name


def is_managed(path: Path, marker: str = DEFAULT_MARKER) -> bool:
    return Path(path).parent.name == marker


def enumerate_layers(paths: Iterable[Path], *, marker: str = DEFAULT_MARKER) -> Tuple[LayerDir, ...]:
    """Tag ``paths`` as managed/unmanaged, preserving order.

    The marker check runs on the path as given, so a symlinked
    ``node_modules/.c12/<layer>`` stays managed. Duplicates are detected on
    the resolved path and keep their first position.
    """
    seen: set[Path] = set()
    layers: List[LayerDir] = []
    for raw in paths:
        path = Path(os.path.normpath(Path(raw).expanduser().absolute()))
        key = path.resolve()
        if key in seen:
            continue
        seen.add(key)
        layers.append(LayerDir(path=path, managed=is_managed(path, marker)))
    return tuple(layers)


def manifest_layer_dirs(layers: Iterable[LayerDir]) -> List[Path]:
    """Paths of managed layers; unmanaged layers are skipped without reading."""
    selected: List[Path] = []
    for layer in layers:
        if layer.managed:
            selected.append(layer.path)
        else:
            logger.debug("skipping unmanaged layer %s", layer.path)
    return selected


def _expand_layer_path(raw: str, *, repo_root: Path) -> Path:
    s = os.path.expandvars(str(raw)).strip()
    p = Path(s).expanduser()
    if not p.is_absolute():
        # Relative paths are treated as repo-relative for portability.
        p = repo_root / p
    return Path(os.path.normpath(p))


def discover_cached_layers(repo_root: Path, *, cache_dir: str, marker: str) -> List[Path]:
    """Child directories of ``<repo_root>/<cache_dir>/<marker>``, sorted by name."""
    base = Path(repo_root) / cache_dir / marker
    if not base.is_dir():
        return []
    return sorted(p for p in base.iterdir() if p.is_dir() and not p.name.startswith("."))


def resolve_layer_roots(
    repo_root: Path,
    *,
    explicit: Sequence[Path] = (),
    cfg: Optional[LayersConfig] = None,
) -> List[Path]:
    """Candidate layer roots in enumeration order.

    Order: explicit paths, then configured ``layers.roots``, then (when
    ``layers.discover`` is set) cached layers under the marker directory.
    """
    repo_root = Path(repo_root).resolve()
    roots: List[Path] = [_expand_layer_path(str(p), repo_root=repo_root) for p in explicit]
    if cfg is not None:
        roots.extend(_expand_layer_path(r, repo_root=repo_root) for r in cfg.roots)
        if cfg.discover:
            found = discover_cached_layers(repo_root, cache_dir=cfg.cache_dir, marker=cfg.marker)
            logger.debug("discovered %d cached layers", len(found))
            roots.extend(found)
    return roots


__all__ = [
    "LayerDir",
    "discover_cached_layers",
    "enumerate_layers",
    "is_managed",
    "manifest_layer_dirs",
    "resolve_layer_roots",
]
