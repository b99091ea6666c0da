from __future__ import annotations

from typing import Any, Dict, Mapping


class FlexConfError(Exception):
    """Base exception for flexconf."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Store a shallow copy to avoid accidental mutation.
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class InvalidArgumentError(FlexConfError, TypeError):
    """Raised when a DSL or accessor call receives an argument of the wrong type."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        FlexConfError.__init__(self, message, context=context)
        TypeError.__init__(self, message)


class IllegalStateError(FlexConfError, RuntimeError):
    """Raised when a DSL call is made before the selection it depends on."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        FlexConfError.__init__(self, message, context=context)
        RuntimeError.__init__(self, message)


class ConfigFileError(FlexConfError, ValueError):
    """Raised when a YAML document parses but is not laid out as expected."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        FlexConfError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


__all__ = [
    "FlexConfError",
    "InvalidArgumentError",
    "IllegalStateError",
    "ConfigFileError",
]
