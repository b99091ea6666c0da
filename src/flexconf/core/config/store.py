"""Canonical configuration store and per-request views.

``ConfigStore`` is the frozen result of :meth:`ConfigBuilder.build`. It is
shared by every request and never mutated. Each request works on a
``ConfigView`` obtained from :meth:`ConfigStore.acquire`; replacing a value in
a view copies the mappings along the dotted path, so other views and the
canonical store keep seeing the original data.
"""
from __future__ import annotations

import copy
import logging
from typing import Any, Dict, List, Mapping, Optional

from flexconf.core.exceptions import InvalidArgumentError
from flexconf.core.utils.merge import normalize_keys

from . import paths

logger = logging.getLogger(__name__)


def _detached(value: Any) -> Any:
    # Containers handed to callers must not alias shared state.
    if isinstance(value, (dict, list)):
        return copy.deepcopy(value)
    return value


class ConfigStore:
    """Immutable environment -> section -> key tree with a selected environment."""

    def __init__(
        self,
        values: Mapping[str, Mapping[str, Mapping[str, Any]]],
        environment: Optional[str] = None,
    ) -> None:
        tree = normalize_keys(values)
        if environment is not None and environment not in tree:
            raise InvalidArgumentError(
                f"Unknown environment: {environment}",
                context={"environment": environment, "known": sorted(tree)},
            )
        self._values: Dict[str, paths.Environment] = tree
        self._environment = environment

    @classmethod
    def _share(cls, values: Dict[str, paths.Environment], environment: Optional[str]) -> "ConfigStore":
        store = cls.__new__(cls)
        store._values = values
        store._environment = environment
        return store

    @property
    def environment(self) -> Optional[str]:
        """Name of the selected environment (``None`` when nothing was selected)."""
        return self._environment

    def environments(self) -> List[str]:
        return list(self._values)

    def sections(self) -> List[str]:
        """Section names of the selected environment."""
        return list(self._current() or {})

    def get(self, path: str) -> Any:
        """Value at ``path`` in the selected environment, or ``None``."""
        return _detached(paths.lookup(self._current(), path))

    def __getitem__(self, path: str) -> Any:
        return self.get(path)

    def to_dict(self) -> Dict[str, Any]:
        """Deep copy of the selected environment (empty when none)."""
        return copy.deepcopy(self._current() or {})

    def with_environment(self, name: str) -> "ConfigStore":
        """Return a store sharing this tree but pointing at environment ``name``."""
        if not isinstance(name, str) or name not in self._values:
            raise InvalidArgumentError(
                f"Unknown environment: {name!r}",
                context={"environment": repr(name), "known": sorted(self._values)},
            )
        return ConfigStore._share(self._values, name)

    def acquire(self) -> "ConfigView":
        """Return an independent working copy for a single request."""
        return ConfigView(self)

    def _current(self) -> Optional[paths.Environment]:
        if self._environment is None:
            return None
        return self._values.get(self._environment)

    def __repr__(self) -> str:
        return f"ConfigStore(environment={self._environment!r}, environments={self.environments()!r})"


class ConfigView:
    """Per-request accessor over a :class:`ConfigStore`.

    ``view["data.key"]`` reads, ``view["data.key"] = value`` replaces an
    existing value for the lifetime of this view only.
    """

    def __init__(self, store: ConfigStore) -> None:
        self._store = store
        self._env: Optional[paths.Environment] = store._current()

    @property
    def environment(self) -> Optional[str]:
        return self._store.environment

    @property
    def store(self) -> ConfigStore:
        """The canonical store this view was acquired from."""
        return self._store

    def get(self, path: str) -> Any:
        """Value at ``path``, or ``None`` when the path does not resolve."""
        return _detached(paths.lookup(self._env, path))

    def set(self, path: str, value: Any) -> Any:
        """Replace the value at ``path`` if, and only if, it already exists.

        Returns the new value, or ``None`` when nothing was replaced. Passing
        ``None`` replaces nothing and returns the current value at ``path``.
        """
        new_env, result = paths.replace_copy(self._env, path, normalize_keys(value))
        if new_env is not self._env:
            logger.debug("Replaced %s in request view (%s)", path, self.environment)
        self._env = new_env
        return _detached(result)

    def __getitem__(self, path: str) -> Any:
        return self.get(path)

    def __setitem__(self, path: str, value: Any) -> None:
        self.set(path, value)


__all__ = ["ConfigStore", "ConfigView"]
