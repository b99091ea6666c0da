"""
flexconf - environment/section configuration store

Configuration values live in sections, partitioned by environments. Values
can be declared programmatically or loaded from a single YAML file or a
directory tree, then read and replaced through dotted paths such as
``data.key.subkey``.
"""

__version__ = "1.0.0"

from flexconf.core.config import ConfigBuilder, ConfigStore, ConfigView
from flexconf.core.exceptions import (
    ConfigFileError,
    FlexConfError,
    IllegalStateError,
    InvalidArgumentError,
)

__all__ = [
    "__version__",
    "ConfigBuilder",
    "ConfigStore",
    "ConfigView",
    "FlexConfError",
    "InvalidArgumentError",
    "IllegalStateError",
    "ConfigFileError",
]
