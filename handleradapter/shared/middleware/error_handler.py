# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

from flask import Flask, request
from flask.typing import ResponseReturnValue
from werkzeug.exceptions import HTTPException

from handleradapter.interfaces.http.adapter import HandlerAdapter


def recovered_error(value: object) -> Exception:
    """Turn whatever a crashed view left behind into an unclassified error."""
    if isinstance(value, Exception):
        return value
    if isinstance(value, str):
        return RuntimeError(value)
    return RuntimeError("unknown panic")


def recover_middleware(
    adapter: HandlerAdapter, view: Callable[..., ResponseReturnValue]
) -> Callable[..., ResponseReturnValue]:
    @wraps(view)
    def wrapper(*args: Any, **kwargs: Any) -> ResponseReturnValue:
        try:
            return view(*args, **kwargs)
        except HTTPException:
            raise
        except Exception as exc:
            return adapter.dispatch_internal(
                request._get_current_object(), recovered_error(exc)
            )

    return wrapper


def configure_error_handling(app: Flask, adapter: HandlerAdapter) -> None:
    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        return exc

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        return adapter.dispatch_internal(request._get_current_object(), recovered_error(exc))


__all__ = ["configure_error_handling", "recover_middleware", "recovered_error"]
