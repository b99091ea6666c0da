"""
flexconf CLI dispatcher.

Builds the argparse tree from the command modules listed in ``COMMANDS``.
"""
from __future__ import annotations

import argparse
import importlib
import logging
import sys
from typing import Callable

from flexconf import __version__
from flexconf.cli._args import add_log_level_flag
from flexconf.core.stdlib_logging import configure_logging

logger = logging.getLogger(__name__)

COMMANDS = ("get", "show")


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argument parser with every registered command.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="flexconf",
        description="flexconf - inspect environment/section configuration",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    add_log_level_flag(parser)

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        metavar="<command>",
    )
    for name in COMMANDS:
        module = importlib.import_module(f"flexconf.cli.{name}")
        cmd_parser = subparsers.add_parser(name, help=getattr(module, "SUMMARY", ""))
        module.register_args(cmd_parser)
        cmd_parser.set_defaults(_func=module.main)
    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the flexconf CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    configure_logging(args.log_level)
    func: Callable[[argparse.Namespace], int] = args._func
    logger.debug("Running command %s", args.command)
    return func(args)


if __name__ == "__main__":
    sys.exit(main())
