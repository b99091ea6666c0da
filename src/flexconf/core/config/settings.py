"""Option resolution for the middleware and CLI.

Explicit options win; missing ones fall back to ``FLEXCONF_*`` environment
variables:

- ``FLEXCONF_FROM_FILE``: source file or directory tree
- ``FLEXCONF_ENVIRONMENT``: environment selected after loading
- ``FLEXCONF_ENVIRON_KEY``: WSGI environ key the per-request view is stored under
"""
from __future__ import annotations

import os
from typing import Any, Dict, Mapping, Optional

from flexconf.core.exceptions import InvalidArgumentError

ENV_PREFIX = "FLEXCONF_"
DEFAULT_ENVIRON_KEY = "flexconf.config"

OPTION_NAMES = ("from_file", "environment", "environ_key")

DEFAULTS: Dict[str, Any] = {
    "from_file": None,
    "environment": None,
    "environ_key": DEFAULT_ENVIRON_KEY,
}


def _env_overrides(environ: Mapping[str, str]) -> Dict[str, str]:
    out: Dict[str, str] = {}
    for name in OPTION_NAMES:
        raw = environ.get(f"{ENV_PREFIX}{name.upper()}")
        if raw is not None and raw.strip():
            out[name] = raw.strip()
    return out


def resolve_options(
    options: Optional[Mapping[str, Any]] = None,
    *,
    environ: Optional[Mapping[str, str]] = None,
) -> Dict[str, Any]:
    """Merge ``options`` over ``FLEXCONF_*`` variables over defaults.

    Raises:
        InvalidArgumentError: if ``options`` is not a mapping.
    """
    if options is None:
        options = {}
    if not isinstance(options, Mapping):
        raise InvalidArgumentError(
            "`options' must be a mapping",
            context={"type": type(options).__name__},
        )

    resolved = dict(DEFAULTS)
    resolved.update(_env_overrides(os.environ if environ is None else environ))
    for key, value in options.items():
        if value is not None:
            resolved[str(key)] = value
    return resolved


__all__ = ["ENV_PREFIX", "DEFAULT_ENVIRON_KEY", "resolve_options"]
