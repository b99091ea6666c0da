"""Populate a :class:`ConfigBuilder` from YAML.

Two layouts are supported.

A single file holding every environment::

    environment:
      section:
        key: value

A directory tree with one directory per environment and one YAML file per
section, each file holding only that section's key/value pairs::

    settings/<environment>/<section>.yaml
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping

from flexconf.core.exceptions import ConfigFileError
from flexconf.core.utils.io import PathLike, iter_yaml_files, read_yaml

from .builder import ConfigBuilder

logger = logging.getLogger(__name__)


def load_file(builder: ConfigBuilder, path: PathLike) -> ConfigBuilder:
    """Load every environment from the single YAML file at ``path``.

    Entries whose name is not a string or whose payload is not a mapping are
    skipped. The cursor ends on the first environment and its last section.
    """
    data = read_yaml(path, default={}, raise_on_error=True)
    if not isinstance(data, Mapping):
        raise ConfigFileError(
            f"Expected a mapping of environments in {path}",
            context={"path": str(path), "type": type(data).__name__},
        )

    first_env = None
    for env_name, sections in data.items():
        if not isinstance(env_name, str) or not env_name or not isinstance(sections, Mapping):
            logger.warning("Skipping entry %r in %s: not an environment mapping", env_name, path)
            continue
        valid = {k: v for k, v in sections.items() if k != "" and isinstance(v, Mapping)}
        for skipped in set(sections) - set(valid):
            logger.warning("Skipping %s.%r in %s: section is not a mapping", env_name, skipped, path)
        builder.merge_environment(env_name, valid, source=str(path))
        if first_env is None:
            first_env = env_name

    if first_env is not None:
        builder.cursor.environment = first_env
        names = list(builder.values[first_env])
        builder.cursor.section = names[-1] if names else None
    logger.debug("Loaded %d environment(s) from %s", len(builder.values), path)
    return builder


def load_tree(builder: ConfigBuilder, root: PathLike) -> ConfigBuilder:
    """Load ``root/<environment>/<section>.yaml`` through the builder DSL.

    Hidden entries (names starting with ``.``) are ignored at both levels.
    """
    root = Path(root)
    for env_dir in sorted(root.iterdir()):
        if env_dir.name.startswith(".") or not env_dir.is_dir():
            continue
        builder.environment(env_dir.name)
        for sec_file in iter_yaml_files(env_dir):
            if sec_file.name.startswith("."):
                continue
            builder.section(sec_file.stem, sec_file)
    logger.debug("Loaded directory tree %s", root)
    return builder


def load_source(builder: ConfigBuilder, path: PathLike | None) -> ConfigBuilder:
    """Load ``path`` as a directory tree or a single file, whichever it is.

    A missing path loads nothing; the builder is returned unchanged.
    """
    if path is None:
        return builder
    source = Path(path)
    if source.is_dir():
        return load_tree(builder, source)
    if source.exists():
        return load_file(builder, source)
    logger.debug("Config source %s does not exist; starting empty", source)
    return builder


__all__ = ["load_file", "load_tree", "load_source"]
