"""Application dependency container."""

from __future__ import annotations

from functools import cached_property

from handleradapter.application.interfaces import ErrorReporter, Renderer
from handleradapter.infrastructure.reporting import LoguruErrorReporter
from handleradapter.interfaces.http.adapter import (
    HandlerAdapter,
    new_default_handler_adapter,
)
from handleradapter.interfaces.http.renderers import JsonRenderer
from handleradapter.shared.config import AppConfig, load_config


class Container:
    """Wires settings, reporter and renderer; acts as the error-handling config."""

    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config or load_config()

    @property
    def config(self) -> AppConfig:
        return self._config

    def is_development(self) -> bool:
        return self._config.is_development()

    def error_reporter(self) -> ErrorReporter:
        return self._reporter

    def renderer(self) -> Renderer:
        return self._renderer

    @cached_property
    def _reporter(self) -> LoguruErrorReporter:
        return LoguruErrorReporter(debug_mode=self._config.debug_logging)

    @cached_property
    def _renderer(self) -> JsonRenderer:
        return JsonRenderer()

    @cached_property
    def handler_adapter(self) -> HandlerAdapter:
        return new_default_handler_adapter(self)
