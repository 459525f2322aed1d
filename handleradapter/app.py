# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask

from handleradapter.container import Container
from handleradapter.infrastructure.observability import METRICS_ENABLED_KEY
from handleradapter.interfaces.http.adapter import HandlerAdapter
from handleradapter.shared.config import AppConfig, load_config
from handleradapter.shared.logging import logger, setup_logging
from handleradapter.shared.middleware.error_handler import configure_error_handling
from handleradapter.shared.middleware.request_logger import configure_request_logging

EXTENSION_KEY = "handler_adapter"


def create_app(
    config: AppConfig | None = None,
    *,
    adapter: HandlerAdapter | None = None,
) -> Flask:
    config = config or load_config()
    setup_logging(config.log_level, config.log_file)

    container = Container(config)
    adapter = adapter or container.handler_adapter

    app = Flask(__name__)
    app.config[METRICS_ENABLED_KEY] = config.observability.metrics_enabled
    configure_error_handling(app, adapter)
    configure_request_logging(app, debug_mode=config.debug_logging)
    app.extensions[EXTENSION_KEY] = adapter

    logger.info(f"Flask app initialized (env={config.app_env})")
    return app


def get_adapter(app: Flask) -> HandlerAdapter:
    return app.extensions[EXTENSION_KEY]


__all__ = ["EXTENSION_KEY", "create_app", "get_adapter"]
