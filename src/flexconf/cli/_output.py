"""Unified CLI output formatting utilities.

Supports text, JSON and YAML output for all flexconf CLI commands.
"""
from __future__ import annotations

import json
import sys
from typing import Any

import yaml

from flexconf.core.exceptions import FlexConfError


class OutputFormatter:
    """Unified output formatter for CLI commands."""

    def __init__(self, json_mode: bool = False, indent: int = 2):
        """Initialize formatter.

        Args:
            json_mode: If True, errors are emitted as JSON payloads
            indent: JSON indentation level
        """
        self.json_mode = json_mode
        self.indent = indent

    def error(
        self,
        error: Exception,
        message: str | None = None,
        *,
        error_code: str = "error",
    ) -> None:
        """Output error result to stderr.

        Args:
            error: The exception that occurred
            message: Optional human-readable message (defaults to str(error))
            error_code: Error code for JSON output
        """
        msg = message or str(error)
        if self.json_mode:
            output: dict[str, Any] = {"error": error_code, "message": msg}
            if isinstance(error, FlexConfError):
                output = {**error.to_json_error(), **output}
            print(json.dumps(output, indent=self.indent, default=str), file=sys.stderr)
        else:
            print(f"Error: {msg}", file=sys.stderr)

    def json_output(self, data: Any) -> None:
        """Output raw JSON data."""
        print(json.dumps(data, indent=self.indent, default=str))

    def yaml_output(self, data: Any) -> None:
        """Output data as a YAML document."""
        self.text(
            yaml.safe_dump(
                data,
                default_flow_style=False,
                sort_keys=True,
                allow_unicode=True,
            ).rstrip()
        )

    def text(self, message: str) -> None:
        """Output plain text message."""
        print(message)


def format_value(value: Any, indent: int = 0) -> str:
    """Format a value for text display."""
    prefix = "  " * indent
    if isinstance(value, dict):
        lines = []
        for k, v in value.items():
            formatted = format_value(v, indent + 1)
            if "\n" in formatted or (isinstance(v, dict) and v):
                lines.append(f"{prefix}{k}:")
                lines.append(formatted)
            else:
                lines.append(f"{prefix}{k}: {formatted}")
        return "\n".join(lines) if lines else "{}"
    if isinstance(value, list):
        if not value:
            return "[]"
        if all(isinstance(v, (str, int, float, bool)) for v in value):
            return f"[{', '.join(str(v) for v in value)}]"
        return "\n".join(f"{prefix}- {format_value(v, indent + 1)}" for v in value)
    return str(value)


__all__ = ["OutputFormatter", "format_value"]
