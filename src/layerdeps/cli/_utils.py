"""Shared CLI utility functions."""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Dict, List

from layerdeps.core.config import get_cached_config
from layerdeps.core.config.domains import LayersConfig
from layerdeps.core.layers import resolve_layer_roots
from layerdeps.core.utils.paths import resolve_project_root


def get_repo_root(args: argparse.Namespace) -> Path:
    """Repository root from ``--repo-root`` or auto-detection."""
    if getattr(args, "repo_root", None):
        return Path(args.repo_root).expanduser().resolve()
    return resolve_project_root()


def load_config(repo_root: Path) -> Dict[str, Any]:
    """Merged, schema-validated configuration for ``repo_root``."""
    return get_cached_config(repo_root=repo_root, validate=True)


def get_layer_roots(args: argparse.Namespace, repo_root: Path, cfg: Dict[str, Any]) -> List[Path]:
    """Layer roots from ``--layer`` flags followed by configured/discovered roots."""
    explicit = [Path(p) for p in (getattr(args, "layers", None) or [])]
    return resolve_layer_roots(repo_root, explicit=explicit, cfg=LayersConfig(config=cfg))


__all__ = ["get_layer_roots", "get_repo_root", "load_config"]
