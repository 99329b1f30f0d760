"""Test helper modules for the layerdeps test suite.

- cache_utils: cache and logging reset for test isolation
- project: writers for manifests, layer trees and config files
- runners: fake installer runners that record their calls
"""
from __future__ import annotations

from helpers.cache_utils import reset_layerdeps_caches
from helpers.project import make_layer, write_config, write_manifest
from helpers.runners import FailingRunner, RecordingRunner

__all__ = [
    "reset_layerdeps_caches",
    "make_layer",
    "write_config",
    "write_manifest",
    "FailingRunner",
    "RecordingRunner",
]
