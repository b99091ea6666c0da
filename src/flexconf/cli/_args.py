"""Common CLI argument registration utilities."""
from __future__ import annotations

import argparse

from flexconf.core.config import ConfigBuilder, ConfigStore, load_source, resolve_options


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    """Add --json flag for JSON output mode."""
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON (same as --format json)",
    )


def add_format_flag(parser: argparse.ArgumentParser) -> None:
    """Add --format choice for text/json/yaml output."""
    parser.add_argument(
        "--format",
        choices=["text", "json", "yaml"],
        default="text",
        help="Output format (default: text)",
    )


def add_source_flags(parser: argparse.ArgumentParser) -> None:
    """Add --from-file and --env flags selecting what to load."""
    parser.add_argument(
        "--from-file",
        dest="from_file",
        help="YAML file or directory tree to load (default: $FLEXCONF_FROM_FILE)",
    )
    parser.add_argument(
        "--env",
        dest="environment",
        help="Environment to select after loading (default: $FLEXCONF_ENVIRONMENT)",
    )


def add_log_level_flag(parser: argparse.ArgumentParser) -> None:
    """Add --log-level flag."""
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level written to stderr (default: WARNING)",
    )


def output_format(args: argparse.Namespace) -> str:
    return "json" if getattr(args, "json", False) else getattr(args, "format", "text")


def load_store(args: argparse.Namespace) -> ConfigStore:
    """Build a store from the --from-file/--env flags (or their env fallbacks)."""
    options = resolve_options(
        {
            "from_file": getattr(args, "from_file", None),
            "environment": getattr(args, "environment", None),
        }
    )
    builder = load_source(ConfigBuilder(), options["from_file"])
    store = builder.build()
    if options["environment"] is not None:
        store = store.with_environment(options["environment"])
    return store


__all__ = [
    "add_json_flag",
    "add_format_flag",
    "add_source_flags",
    "add_log_level_flag",
    "output_format",
    "load_store",
]
