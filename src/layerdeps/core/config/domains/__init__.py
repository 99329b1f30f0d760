"""Domain-specific configuration accessors."""
from .installer import InstallerConfig
from .layers import LayersConfig
from .logging import LoggingConfig
from .manifest import ManifestConfig
from .reconcile import COMPARISONS, ReconcileConfig

__all__ = [
    "COMPARISONS",
    "InstallerConfig",
    "LayersConfig",
    "LoggingConfig",
    "ManifestConfig",
    "ReconcileConfig",
]
