# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Error routing for fallible Flask views.

A fallible view raises instead of building its own error response.
``HandlerAdapter.handle`` wraps it into an ordinary view: an ``AppError``
is answered with its own status and message, anything else becomes an
opaque 500. Each category can be rendered by a pluggable strategy.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from functools import wraps
from http import HTTPStatus
from typing import Any

from flask import Request, make_response, request
from flask.typing import ResponseReturnValue
from werkzeug.exceptions import HTTPException

from handleradapter.application.interfaces import ErrorHandlingConfig
from handleradapter.infrastructure.observability import record_dispatch
from handleradapter.interfaces.http.renderers import plain_text_response
from handleradapter.shared.errors import AppError, ErrorInfo, build_error_info
from handleradapter.shared.logging import logger

AdapterFunc = Callable[[Request, Exception], ResponseReturnValue]
FallibleView = Callable[..., ResponseReturnValue]


def default_app_error(req: Request, error: Exception) -> ResponseReturnValue:
    if isinstance(error, AppError):
        return plain_text_response(str(error), error.status_code)
    return plain_text_response("Bad Request", HTTPStatus.BAD_REQUEST)


def default_internal_error(req: Request, error: Exception) -> ResponseReturnValue:
    return plain_text_response("Internal Server Error", HTTPStatus.INTERNAL_SERVER_ERROR)


@dataclass(frozen=True, slots=True)
class HandlerAdapter:
    internal_errs: AdapterFunc | None = None
    client_errs: AdapterFunc | None = None
    unauthorized_err: AdapterFunc | None = None

    def handle(self, view: FallibleView) -> Callable[..., ResponseReturnValue]:
        @wraps(view)
        def wrapper(*args: Any, **kwargs: Any) -> ResponseReturnValue:
            try:
                return view(*args, **kwargs)
            except HTTPException:
                raise
            except Exception as exc:
                return self.dispatch(request._get_current_object(), exc)

        return wrapper

    def dispatch(self, req: Request, error: Exception) -> ResponseReturnValue:
        if isinstance(error, AppError):
            if error.status_code == HTTPStatus.UNAUTHORIZED and self.unauthorized_err is not None:
                logger.warning(f"Unauthorized on {req.method} {req.path}: {error}")
                record_dispatch("unauthorized")
                return self.unauthorized_err(req, error)

            logger.warning(
                f"Client error {error.status_code} on {req.method} {req.path}: {error}"
            )
            record_dispatch("client")
            if self.client_errs is not None:
                return self.client_errs(req, error)
            return default_app_error(req, error)

        return self.dispatch_internal(req, error)

    def dispatch_internal(self, req: Request, error: Exception) -> ResponseReturnValue:
        logger.error(f"Internal error {type(error).__name__} on {req.method} {req.path}")
        record_dispatch("internal")
        if self.internal_errs is not None:
            return self.internal_errs(req, error)
        return default_internal_error(req, error)


def internal_errors_handler(config: ErrorHandlingConfig) -> AdapterFunc:
    def _handle(req: Request, error: Exception) -> ResponseReturnValue:
        info: ErrorInfo | None = None

        config.error_reporter().report_error(req, error)

        if config.is_development():
            info = build_error_info(error)

        response = make_response(config.renderer().render_500(req, info))
        response.status_code = HTTPStatus.INTERNAL_SERVER_ERROR
        return response

    return _handle


def app_errors_handler(config: ErrorHandlingConfig) -> AdapterFunc:
    def _handle(req: Request, error: Exception) -> ResponseReturnValue:
        if isinstance(error, AppError):
            return config.renderer().render_app_error(req, error)
        return default_app_error(req, error)

    return _handle


def new_default_handler_adapter(config: ErrorHandlingConfig) -> HandlerAdapter:
    return HandlerAdapter(
        internal_errs=internal_errors_handler(config),
        client_errs=default_app_error,
        unauthorized_err=None,
    )


__all__ = [
    "AdapterFunc",
    "FallibleView",
    "HandlerAdapter",
    "app_errors_handler",
    "default_app_error",
    "default_internal_error",
    "internal_errors_handler",
    "new_default_handler_adapter",
]
