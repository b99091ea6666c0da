"""
flexconf show command.

SUMMARY: Show an environment or list environments

Prints every section of the selected environment, or with ``--list`` the
environment names found in the source.
"""

from __future__ import annotations

import argparse
import sys

import yaml

from flexconf.cli import OutputFormatter, add_format_flag, add_json_flag, add_source_flags, load_store
from flexconf.cli._args import output_format
from flexconf.cli._output import format_value
from flexconf.core.exceptions import FlexConfError

SUMMARY = "Show an environment or list environments"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "--list",
        action="store_true",
        help="List environment names instead of showing values",
    )
    add_format_flag(parser)
    add_json_flag(parser)
    add_source_flags(parser)


def main(args: argparse.Namespace) -> int:
    """Show configuration for one environment."""
    fmt = output_format(args)
    formatter = OutputFormatter(json_mode=fmt == "json")

    try:
        store = load_store(args)
    except (FlexConfError, OSError, UnicodeDecodeError, yaml.YAMLError) as e:
        formatter.error(e, error_code="config_show_error")
        return 1

    if args.list:
        names = store.environments()
        if fmt == "json":
            formatter.json_output({"environments": names})
        elif fmt == "yaml":
            formatter.yaml_output({"environments": names})
        else:
            for name in names:
                marker = "*" if name == store.environment else " "
                formatter.text(f"{marker} {name}")
        return 0

    if store.environment is None:
        formatter.error(
            ValueError("no environment selected"),
            "No environment selected (use --env or FLEXCONF_ENVIRONMENT)",
            error_code="no_environment",
        )
        return 1

    data = store.to_dict()
    if fmt == "json":
        formatter.json_output({store.environment: data})
    elif fmt == "yaml":
        formatter.yaml_output({store.environment: data})
    else:
        formatter.text(f"[{store.environment}]")
        for section in store.sections():
            formatter.text(f"{section}:")
            formatter.text(format_value(data[section], indent=1))
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    cli_args = parser.parse_args()
    sys.exit(main(cli_args))
