"""
flexconf CLI package.

Each command module exposes ``SUMMARY``, ``register_args(parser)`` and
``main(args) -> int``; :mod:`flexconf.cli._dispatcher` wires them into the
``flexconf`` console script.

Framework utilities for building CLI commands:
- _output: Output formatting (JSON/YAML/text modes)
- _args: Common argument registration helpers
"""
from ._args import add_format_flag, add_json_flag, add_log_level_flag, add_source_flags, load_store
from ._output import OutputFormatter

__all__ = [
    "OutputFormatter",
    "add_json_flag",
    "add_format_flag",
    "add_source_flags",
    "add_log_level_flag",
    "load_store",
]
