"""Declarative construction of a configuration store.

Options are stored as key/value pairs in *sections*, partitioned by
*environments*::

    + environment
      + section
        key -> value pairs

``ConfigBuilder`` provides the small DSL used to fill that tree::

    builder = ConfigBuilder()
    builder.environment("production")
    builder.section("data")
    builder.set({"key": "value"})

    builder.environment("development")
    builder.section("data", "cfg/development/data.yaml")
    builder.set({"key": "dev_value"})

    builder.environment("production")
    store = builder.build()
    store.get("data.key")  # -> "value"

Calls to :meth:`ConfigBuilder.set` made after loading a section or
environment from YAML override file values sharing the same key; other keys
are kept.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Type

from flexconf.core.exceptions import (
    ConfigFileError,
    FlexConfError,
    IllegalStateError,
    InvalidArgumentError,
)
from flexconf.core.utils.io import PathLike, is_path_like, read_yaml
from flexconf.core.utils.merge import merge_into, normalize_keys

from . import paths
from .store import ConfigStore

logger = logging.getLogger(__name__)


@dataclass
class Cursor:
    """Current environment/section targeted by DSL calls."""

    environment: Optional[str] = None
    section: Optional[str] = None


def _check_name(value: Any, arg: str) -> str:
    if not isinstance(value, str):
        raise InvalidArgumentError(
            f"`{arg}' must be a string",
            context={arg: repr(value)},
        )
    if not value:
        raise InvalidArgumentError(f"`{arg}' must not be empty")
    return value


def _read_mapping(path: PathLike) -> Dict[Any, Any]:
    # Fail closed: a named file must exist and hold a mapping.
    data = read_yaml(path, default={}, raise_on_error=True)
    if not isinstance(data, Mapping):
        raise ConfigFileError(
            f"Expected a mapping at the top of {path}",
            context={"path": str(path), "type": type(data).__name__},
        )
    return dict(data)


class ConfigBuilder:
    """Mutable environment/section tree plus the DSL cursor."""

    def __init__(self) -> None:
        self._values: Dict[str, Dict[str, Dict[str, Any]]] = {}
        self.cursor = Cursor()

    # ========== DSL ==========

    def environment(self, name: str, data: Any = None) -> None:
        """Select (creating if needed) the current environment.

        Args:
            name: Environment to use.
            data: Either the path of a YAML file holding ``section -> values``
                for this environment, or a mapping of the same shape. Sections
                given here replace sections of the same name. (Optional)
        """
        name = _check_name(name, "env")
        self.cursor.environment = name
        env = self._values.setdefault(name, {})

        if data is None:
            return
        if is_path_like(data):
            sections = _read_mapping(data)
            self._merge_sections(env, sections, source=str(data), error=ConfigFileError)
            if sections:
                self.cursor.section = str(list(sections)[-1])
            logger.debug("Loaded environment %s from %s", name, data)
        elif isinstance(data, Mapping):
            self._merge_sections(env, data, source="mapping")
        else:
            raise InvalidArgumentError(
                "`data' must be a file path or a mapping",
                context={"type": type(data).__name__},
            )

    def section(self, name: str, vals: Any = None) -> None:
        """Select (creating if needed) the current section.

        Args:
            name: Section to use.
            vals: Values to prepopulate this section with: a mapping, or the
                path of a YAML file holding a flat key/value mapping.
        """
        if self.cursor.environment is None:
            raise IllegalStateError("`section' called before `environment'")
        name = _check_name(name, "sec")

        self.cursor.section = name
        env = self._values[self.cursor.environment]
        sec = env.get(name)
        if not isinstance(sec, dict):
            sec = env[name] = {}

        if vals is None:
            return
        if is_path_like(vals):
            merge_into(sec, _read_mapping(vals))
            logger.debug("Loaded section %s.%s from %s", self.cursor.environment, name, vals)
        elif isinstance(vals, Mapping):
            merge_into(sec, vals)
        else:
            raise InvalidArgumentError(
                "`vals' must be a file path or a mapping",
                context={"type": type(vals).__name__},
            )

    def set(self, vals: Mapping[str, Any]) -> None:
        """Add/update values in the current section."""
        if self.cursor.environment is None or self.cursor.section is None:
            raise IllegalStateError("`set' called before `environment' and `section'")
        if not isinstance(vals, Mapping):
            raise InvalidArgumentError(
                "`vals' must be a mapping",
                context={"type": type(vals).__name__},
            )
        sec = self._values[self.cursor.environment].setdefault(self.cursor.section, {})
        merge_into(sec, vals)

    def configure(self, block: Optional[Callable[["ConfigBuilder"], Any]] = None) -> "ConfigBuilder":
        """Run ``block`` against this builder and return the builder."""
        if block is not None:
            block(self)
        return self

    def merge_environment(self, name: str, sections: Mapping[Any, Any], *, source: str = "mapping") -> None:
        """Merge ``sections`` into environment ``name`` without moving the cursor."""
        env = self._values.setdefault(_check_name(name, "env"), {})
        self._merge_sections(env, sections, source=source)

    # ========== Accessors ==========

    def get(self, path: str) -> Any:
        """Value at ``path`` in the current environment, or ``None``."""
        return paths.lookup(self._current(), path)

    def replace(self, path: str, value: Any) -> Any:
        """Replace the value at ``path`` if, and only if, it already exists.

        Passing ``None`` only looks the path up and returns its current value.
        """
        return paths.replace(self._current(), path, normalize_keys(value))

    def __getitem__(self, path: str) -> Any:
        return self.get(path)

    def __setitem__(self, path: str, value: Any) -> None:
        self.replace(path, value)

    @property
    def values(self) -> Dict[str, Dict[str, Dict[str, Any]]]:
        """The underlying tree (live, not a copy)."""
        return self._values

    def build(self) -> ConfigStore:
        """Freeze the tree into an immutable :class:`ConfigStore`."""
        return ConfigStore(self._values, self.cursor.environment)

    # ========== Internals ==========

    def _current(self) -> Optional[Dict[str, Dict[str, Any]]]:
        if self.cursor.environment is None:
            return None
        return self._values.get(self.cursor.environment)

    def _merge_sections(
        self,
        env: Dict[str, Dict[str, Any]],
        sections: Mapping[Any, Any],
        *,
        source: str,
        error: Type[FlexConfError] = InvalidArgumentError,
    ) -> None:
        for sec_name, payload in sections.items():
            if not isinstance(payload, Mapping):
                raise error(
                    f"Section '{sec_name}' must be a mapping",
                    context={"source": source, "type": type(payload).__name__},
                )
            env[str(sec_name)] = merge_into({}, payload)



__all__ = ["Cursor", "ConfigBuilder"]
