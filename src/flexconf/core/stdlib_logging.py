from __future__ import annotations

import logging
import sys
from typing import TextIO

_FLEXCONF_HANDLER: logging.Handler | None = None


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: str = "WARNING", *, stream: TextIO | None = None) -> None:
    """Install a single stderr handler on the ``flexconf`` logger.

    Idempotent per-process: a previously installed handler is replaced, other
    handlers are left alone.
    """
    global _FLEXCONF_HANDLER

    logger = logging.getLogger("flexconf")
    logger.setLevel(_level_from_name(level))

    if _FLEXCONF_HANDLER is not None:
        logger.removeHandler(_FLEXCONF_HANDLER)
        _FLEXCONF_HANDLER.close()
        _FLEXCONF_HANDLER = None

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(_level_from_name(level))
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    _FLEXCONF_HANDLER = handler


def reset_logging_for_tests() -> None:
    """Test-only: remove the installed handler."""
    global _FLEXCONF_HANDLER
    if _FLEXCONF_HANDLER is not None:
        logging.getLogger("flexconf").removeHandler(_FLEXCONF_HANDLER)
        _FLEXCONF_HANDLER.close()
    _FLEXCONF_HANDLER = None


__all__ = ["configure_logging", "reset_logging_for_tests"]
