"""YAML I/O utilities."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Union

import yaml

PathLike = Union[str, "os.PathLike[str]"]


def read_yaml(path: PathLike, default: Any = None, raise_on_error: bool = False) -> Any:
    """Read YAML with error handling.

    Returns default if file is missing or invalid, unless raise_on_error is True.

    Args:
        path: YAML file path to read
        default: Value to return if file missing, empty or invalid (default: None)
        raise_on_error: If True, propagate exceptions instead of returning default.

    Returns:
        Any: Parsed YAML data, or default if error

    Examples:
        >>> config = read_yaml(Path("settings.yaml"), default={})
        >>> assert isinstance(config, dict)
    """
    path = Path(path)
    if not path.exists():
        if raise_on_error:
            raise FileNotFoundError(f"File not found: {path}")
        return default

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return data if data is not None else default
    except (OSError, UnicodeDecodeError, yaml.YAMLError):
        if raise_on_error:
            raise
        return default


def iter_yaml_files(dir_path: PathLike) -> list[Path]:
    """Return YAML files in ``dir_path`` in deterministic order.

    Includes both ``*.yml`` and ``*.yaml``.

    When both ``<name>.yaml`` and ``<name>.yml`` exist, this prefers ``.yaml`` and
    returns only the ``.yaml`` path so a section is never loaded twice.
    """
    d = Path(dir_path)
    if not d.is_dir():
        return []
    yml_files = {p.stem: p for p in d.glob("*.yml") if p.is_file()}
    yaml_files = {p.stem: p for p in d.glob("*.yaml") if p.is_file()}

    out: list[Path] = []
    for stem in sorted(set(yml_files.keys()) | set(yaml_files.keys())):
        preferred = yaml_files.get(stem) or yml_files.get(stem)
        if preferred is not None:
            out.append(preferred)
    return out


def is_path_like(value: Any) -> bool:
    """True for values that name a file (``str`` or ``os.PathLike``)."""
    return isinstance(value, (str, os.PathLike))


__all__ = [
    "PathLike",
    "read_yaml",
    "iter_yaml_files",
    "is_path_like",
]
