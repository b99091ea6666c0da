"""Shared utilities for YAML I/O and mapping merges."""
from __future__ import annotations

from .io import iter_yaml_files, read_yaml
from .merge import merge_into, normalize_keys

__all__ = [
    "read_yaml",
    "iter_yaml_files",
    "normalize_keys",
    "merge_into",
]
