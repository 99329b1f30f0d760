"""layerdeps configuration package.

Layered YAML configuration (bundled → user → project → project-local → env)
with typed per-section accessors.
"""
from .base import BaseDomainConfig
from .cache import clear_all_caches, get_cached_config
from .manager import ConfigManager

__all__ = [
    "BaseDomainConfig",
    "ConfigManager",
    "clear_all_caches",
    "get_cached_config",
]
