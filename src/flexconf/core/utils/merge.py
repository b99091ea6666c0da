"""Key normalization and merge helpers for configuration mappings.

Every value entering the store passes through :func:`normalize_keys` so that
dotted-path lookups only ever deal with ``str`` keys, whether the data came
from a DSL call or from YAML (which may produce ``int``/``bool`` keys).

Merging is shallow by design of the configuration model: a later write
replaces the value of a colliding key, other keys are kept.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping


def normalize_keys(value: Any) -> Any:
    """Return ``value`` with every mapping key converted to ``str``.

    Recurses through nested mappings and lists. Scalars are returned as-is,
    mappings and lists are rebuilt so callers never share containers with
    their input.

    Example:
        >>> normalize_keys({1: {"a": [{True: "x"}]}})
        {'1': {'a': [{'True': 'x'}]}}
    """
    if isinstance(value, Mapping):
        return {str(k): normalize_keys(v) for k, v in value.items()}
    if isinstance(value, list):
        return [normalize_keys(v) for v in value]
    return value


def merge_into(target: Dict[str, Any], values: Mapping[Any, Any]) -> Dict[str, Any]:
    """Merge ``values`` into ``target`` in place, later keys winning.

    Keys are normalized before they are written. Returns ``target``.
    """
    for key, value in normalize_keys(values).items():
        target[key] = value
    return target


__all__ = ["normalize_keys", "merge_into"]
