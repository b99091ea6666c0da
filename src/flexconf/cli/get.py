"""
flexconf get command.

SUMMARY: Show the value at a dotted path

Loads the configured source, selects the environment and prints the value
found at ``section.key[.subkey...]``.
"""

from __future__ import annotations

import argparse
import sys

import yaml

from flexconf.cli import OutputFormatter, add_format_flag, add_json_flag, add_source_flags, load_store
from flexconf.cli._args import output_format
from flexconf.cli._output import format_value
from flexconf.core.exceptions import FlexConfError

SUMMARY = "Show the value at a dotted path"


def _nest_key(key: str, value):
    """Nest a dot-notation key into a YAML/JSON-friendly mapping."""
    parts = [p for p in str(key).split(".") if p]
    out = value
    for part in reversed(parts):
        out = {part: out}
    return out


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "path",
        help="Dotted path to look up (e.g., 'data.key')",
    )
    add_format_flag(parser)
    add_json_flag(parser)
    add_source_flags(parser)


def main(args: argparse.Namespace) -> int:
    """Look up a single value."""
    fmt = output_format(args)
    formatter = OutputFormatter(json_mode=fmt == "json")

    try:
        store = load_store(args)
        value = store.get(args.path)
    except (FlexConfError, OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        formatter.error(e, error_code="config_get_error")
        return 1

    if value is None:
        formatter.error(KeyError(args.path), f"Key not found: {args.path}", error_code="not_found")
        return 1

    if fmt == "json":
        formatter.json_output({args.path: value})
    elif fmt == "yaml":
        formatter.yaml_output(_nest_key(args.path, value))
    else:
        formatter.text(format_value(value))
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    cli_args = parser.parse_args()
    sys.exit(main(cli_args))
