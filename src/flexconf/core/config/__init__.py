"""flexconf configuration store.

Usage:
    from flexconf.core.config import ConfigBuilder, load_source

    builder = load_source(ConfigBuilder(), "settings")
    builder.environment("production")
    store = builder.build()

    view = store.acquire()      # one per request
    view["data.key"]            # -> value or None
    view["data.key"] = "other"  # only visible through this view
"""
from __future__ import annotations

from .builder import ConfigBuilder, Cursor
from .loaders import load_file, load_source, load_tree
from .settings import DEFAULT_ENVIRON_KEY, resolve_options
from .store import ConfigStore, ConfigView

__all__ = [
    "ConfigBuilder",
    "Cursor",
    "ConfigStore",
    "ConfigView",
    "load_file",
    "load_tree",
    "load_source",
    "resolve_options",
    "DEFAULT_ENVIRON_KEY",
]
