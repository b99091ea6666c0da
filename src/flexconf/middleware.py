"""WSGI middleware exposing a per-request configuration view.

Example::

    def configure(cfg):
        cfg.environment("production")
        cfg.section("data")
        cfg.set({"key": "value"})

    app = FlexibleConfig(app, {"from_file": "settings"}, configure)

Inside the wrapped application::

    config = environ["flexconf.config"]
    config["data.key"]              # -> "value"
    config["data.key"] = "other"    # visible for this request only
"""
from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Mapping, Optional

from flexconf.core.config import ConfigBuilder, ConfigStore, load_source, resolve_options

logger = logging.getLogger(__name__)

WSGIApp = Callable[[dict, Callable[..., Any]], Iterable[bytes]]
ConfigureBlock = Callable[[ConfigBuilder], Any]


class FlexibleConfig:
    """Load configuration once, then hand each request its own view.

    Args:
        app: Wrapped WSGI application.
        options: Mapping with optional ``from_file``, ``environment`` and
            ``environ_key`` entries. Missing entries fall back to
            ``FLEXCONF_*`` environment variables. The ``environment`` option
            is selected right after the file load, before ``configure`` runs.
        configure: Callable receiving the :class:`ConfigBuilder` after any
            file load; values it sets override file values, and an
            ``environment(...)`` call it makes wins over the option.
    """

    def __init__(
        self,
        app: WSGIApp,
        options: Optional[Mapping[str, Any]] = None,
        configure: Optional[ConfigureBlock] = None,
    ) -> None:
        self.app = app
        self.options = resolve_options(options)
        self.environ_key: str = self.options["environ_key"]

        self._builder = load_source(ConfigBuilder(), self.options["from_file"])
        if self.options["environment"] is not None:
            self._builder.environment(self.options["environment"])
        self._builder.configure(configure)
        self.store: ConfigStore = self._builder.build()
        logger.info(
            "Configuration ready: environment=%s environments=%s",
            self.store.environment,
            ",".join(self.store.environments()),
        )

    def configure(self, block: Optional[ConfigureBlock] = None) -> ConfigStore:
        """Apply further DSL calls and rebuild the canonical store."""
        self._builder.configure(block)
        self.store = self._builder.build()
        return self.store

    def __call__(self, environ: dict, start_response: Callable[..., Any]) -> Iterable[bytes]:
        environ[self.environ_key] = self.store.acquire()
        return self.app(environ, start_response)


__all__ = ["FlexibleConfig"]
