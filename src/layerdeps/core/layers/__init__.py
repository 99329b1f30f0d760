"""Layer enumeration for layerdeps.

A composed project is built from an ordered list of layer roots. Layers that
c12 fetched into its cache directory (``.../.c12/<layer>``) are "managed" and
declare their own dependencies; all other layers are ignored.

Layer roots come from (in order):
  explicit paths → ``layers.roots`` config → discovered ``<cache_dir>/<marker>/*``
"""

from .stack import (
    LayerDir,
    discover_cached_layers,
    enumerate_layers,
    is_managed,
    manifest_layer_dirs,
    resolve_layer_roots,
)

__all__ = [
    "LayerDir",
    "discover_cached_layers",
    "enumerate_layers",
    "is_managed",
    "manifest_layer_dirs",
    "resolve_layer_roots",
]
