"""Dotted-path access into an environment.

A path names a section first, then keys inside it: ``data``, ``data.key``,
``data.key.subkey``. Lookups and replacements never create nodes: a path that
does not resolve end-to-end yields ``None``.
"""
from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Tuple

from flexconf.core.exceptions import InvalidArgumentError

Environment = Dict[str, Dict[str, Any]]

_MISSING = object()


def split_path(path: Any) -> List[str]:
    """Split a dotted path into its non-empty segments.

    Raises:
        InvalidArgumentError: if ``path`` is not a string.
    """
    if not isinstance(path, str):
        raise InvalidArgumentError(
            "`path' must be a String",
            context={"path": repr(path)},
        )
    return [part for part in path.split(".") if part]


def _resolve(env: Mapping[str, Any], parts: List[str]) -> Any:
    node: Any = env
    for part in parts:
        if not isinstance(node, Mapping) or part not in node:
            return _MISSING
        node = node[part]
    return node


def lookup(env: Optional[Mapping[str, Any]], path: str) -> Any:
    """Return the value at ``path`` within ``env``, or ``None`` when absent.

    A path without dots returns the section mapping itself. Descending through
    a scalar (``data.key.sub`` where ``key`` holds a string) is not-found.
    """
    parts = split_path(path)
    if env is None or not parts:
        return None
    value = _resolve(env, parts)
    return None if value is _MISSING else value


def replace(env: Optional[Environment], path: str, value: Any) -> Any:
    """Replace the value at an existing ``path`` inside ``env`` in place.

    Returns ``value`` when the replacement happened, ``None`` otherwise.
    Section-only paths are never replaced. A ``None`` value replaces
    nothing and returns the current value at ``path``, as a lookup.
    """
    if value is None:
        return lookup(env, path)
    parts = split_path(path)
    if env is None or len(parts) < 2:
        return None
    parent = _resolve(env, parts[:-1])
    if not isinstance(parent, dict) or parts[-1] not in parent:
        return None
    parent[parts[-1]] = value
    return value


def replace_copy(env: Optional[Environment], path: str, value: Any) -> Tuple[Optional[Environment], Any]:
    """Path-copying variant of :func:`replace`.

    Returns ``(new_env, value)`` where ``new_env`` shares every untouched
    branch with ``env`` and holds fresh copies of the mappings along
    ``path``. ``env`` itself is left untouched. When the path does not
    resolve, returns ``(env, None)``.

    A ``None`` value returns ``(env, lookup(env, path))``.
    """
    if value is None:
        return env, lookup(env, path)
    parts = split_path(path)
    if env is None or len(parts) < 2:
        return env, None

    chain: List[Mapping[str, Any]] = []
    node: Any = env
    for part in parts[:-1]:
        if not isinstance(node, Mapping) or part not in node:
            return env, None
        chain.append(node)
        node = node[part]
    if not isinstance(node, Mapping) or parts[-1] not in node:
        return env, None
    chain.append(node)

    # Rebuild from the leaf's parent up to the environment root.
    rebuilt: Any = value
    for container, part in zip(reversed(chain), reversed(parts)):
        copied = dict(container)
        copied[part] = rebuilt
        rebuilt = copied
    return rebuilt, value


__all__ = ["Environment", "split_path", "lookup", "replace", "replace_copy"]
