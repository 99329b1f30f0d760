"""Shared utilities for layerdeps (I/O, merging, paths, subprocess)."""
