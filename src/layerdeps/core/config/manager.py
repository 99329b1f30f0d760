"""
layerdeps configuration management (layered YAML + environment overrides).
"""
from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple, Union

import yaml

from layerdeps.core.exceptions import ConfigError
from layerdeps.core.utils.io import iter_yaml_files, read_yaml
from layerdeps.core.utils.merge import deep_merge
from layerdeps.core.utils.paths import get_project_config_dir, get_user_config_dir, resolve_project_root
from layerdeps.data import get_data_path

logger = logging.getLogger(__name__)

ENV_PREFIX = "LAYERDEPS_"


class ConfigManager:
    """Load, merge, and validate layerdeps configuration.

    Configuration sources (highest to lowest priority):
    1. Environment variables: LAYERDEPS_<section>__<key>
    2. Project-local config: <project-config-dir>/config.local/*.yaml (uncommitted)
    3. Project config: <project-config-dir>/config/*.yaml
    4. User config: <user-config-dir>/config/*.yaml
    5. Bundled defaults: layerdeps.data/config/*.yaml

    Files inside each directory are merged in alphabetical order.
    """

    ARRAY_APPEND_MARKER = object()

    def __init__(self, repo_root: Optional[Path] = None) -> None:
        self.repo_root = Path(repo_root or resolve_project_root()).resolve()

        project_root_dir = get_project_config_dir(self.repo_root)
        user_root_dir = get_user_config_dir()

        self.core_config_dir = get_data_path("config")
        self.user_config_dir = user_root_dir / "config"
        self.project_config_dir = project_root_dir / "config"
        self.project_local_config_dir = project_root_dir / "config.local"

    def config_dirs(self) -> List[Path]:
        """Return config directories in low→high precedence order (excluding env)."""
        return [
            Path(self.core_config_dir),
            self.user_config_dir,
            self.project_config_dir,
            self.project_local_config_dir,
        ]

    def _load_directory(self, directory: Path, cfg: Dict[str, Any]) -> Dict[str, Any]:
        for path in iter_yaml_files(directory):
            try:
                # Fail closed: configuration must never silently ignore invalid YAML.
                module_cfg = read_yaml(path, default={}, raise_on_error=True) or {}
            except (OSError, yaml.YAMLError) as exc:
                raise ConfigError(f"Invalid YAML in {path}: {exc}", context={"path": str(path)}) from exc
            if not isinstance(module_cfg, dict):
                raise ConfigError(
                    f"Config file must contain a mapping: {path}", context={"path": str(path)}
                )
            logger.debug("config: merging %s", path)
            cfg = deep_merge(cfg, module_cfg)
        return cfg

    # ---------- environment overrides ----------

    def _coerce_type(self, value: str) -> Any:
        s = value.strip()
        low = s.lower()
        if low in {"true", "false"}:
            return low == "true"
        if low in {"null", "none"}:
            return None
        if re.fullmatch(r"[-+]?\d+", s):
            return int(s)
        if re.fullmatch(r"[-+]?\d*\.\d+", s) or re.fullmatch(r"[-+]?\d+\.\d*", s):
            return float(s)
        if (s.startswith("{") and s.endswith("}")) or (s.startswith("[") and s.endswith("]")):
            try:
                return json.loads(s)
            except ValueError:
                return s
        return s

    def _parse_env_key(self, raw: str) -> List[Union[str, object]]:
        segs = raw.split("__")
        processed: List[Union[str, object]] = []
        for seg in segs:
            if seg == "":
                raise ConfigError(f"Malformed {ENV_PREFIX}* key: empty segment in '{raw}'.")
            if seg.upper() == "APPEND":
                processed.append(self.ARRAY_APPEND_MARKER)
            else:
                processed.append(seg.lower())
        return processed

    def _iter_env_overrides(self) -> Iterator[Tuple[List[Union[str, object]], Any]]:
        for key in sorted(os.environ.keys()):
            if not key.startswith(ENV_PREFIX):
                continue
            raw = key[len(ENV_PREFIX) :]
            # Single-segment variables (e.g. LAYERDEPS_PROJECT_ROOT) are not config keys.
            if "__" not in raw:
                continue
            yield self._parse_env_key(raw), self._coerce_type(os.environ[key])

    def _set_nested(self, root: Dict[str, Any], path: List[Union[str, object]], value: Any) -> None:
        *parents, leaf = path
        cur: Any = root
        for i, part in enumerate(parents):
            if part is self.ARRAY_APPEND_MARKER:
                raise ConfigError("APPEND may only appear as the last key segment")
            if not isinstance(cur, dict):
                raise ConfigError("Environment override traverses a non-mapping value")
            appending_here = i == len(parents) - 1 and leaf is self.ARRAY_APPEND_MARKER
            cur = cur.setdefault(part, [] if appending_here else {})

        if leaf is self.ARRAY_APPEND_MARKER:
            if not isinstance(cur, list):
                raise ConfigError("APPEND requires a list value")
            cur.append(value)
            return
        if not isinstance(cur, dict):
            raise ConfigError("Environment override targets a non-mapping value")
        cur[leaf] = value

    def apply_env_overrides(self, cfg: Dict[str, Any]) -> None:
        for path, value in self._iter_env_overrides():
            self._set_nested(cfg, path, value)

    # ---------- loading ----------

    def load_config(self, validate: bool = True) -> Dict[str, Any]:
        """Load and merge configuration (cached per repo root + env fingerprint)."""
        from .cache import get_cached_config

        return get_cached_config(repo_root=self.repo_root, validate=validate)

    def _load_config_uncached(self, validate: bool = True) -> Dict[str, Any]:
        cfg: Dict[str, Any] = {}
        for directory in self.config_dirs():
            cfg = self._load_directory(directory, cfg)

        self.apply_env_overrides(cfg)

        if validate:
            self.validate_schema(cfg)
        return cfg

    def validate_schema(self, cfg: Dict[str, Any]) -> None:
        from layerdeps.core.schemas import SchemaValidationError, validate_payload

        try:
            validate_payload(cfg, "config/config.schema")
        except SchemaValidationError as exc:
            raise ConfigError(str(exc)) from exc


__all__ = ["ConfigManager", "ENV_PREFIX"]
