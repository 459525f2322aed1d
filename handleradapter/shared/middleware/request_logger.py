# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import hashlib
import secrets
import time

from flask import Flask, Response, g, request

from handleradapter.shared.logging import (
    clear_correlation_id,
    get_correlation_id,
    logger,
    set_correlation_id,
)

REQUEST_ID_HEADER = "X-Request-ID"

_SENSITIVE_HEADERS = {
    "authorization", "cookie", "x-api-key", "x-auth-token", "x-csrf-token",
}


def _get_client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()

    return request.remote_addr or "unknown"


def _sanitize_headers(headers: dict[str, str]) -> dict[str, str]:
    sanitized = {}
    for key, value in headers.items():
        if key.lower() in _SENSITIVE_HEADERS:
            sanitized[key] = f"<hashed:{hashlib.sha256(value.encode()).hexdigest()[:8]}>"
        else:
            sanitized[key] = value

    return sanitized


def configure_request_logging(app: Flask, *, debug_mode: bool = False) -> None:
    @app.before_request
    def _before_request() -> None:
        incoming = (request.headers.get(REQUEST_ID_HEADER) or "").strip()
        set_correlation_id(incoming[:64] or secrets.token_urlsafe(8))
        g.request_start_time = time.perf_counter()

        if debug_mode:
            logger.info(
                f"Request started: {request.method} {request.path} "
                f"from {_get_client_ip()}, headers={_sanitize_headers(dict(request.headers))}"
            )
        else:
            logger.info(f"Request: {request.method} {request.path} from {_get_client_ip()}")

    @app.after_request
    def _after_request(response: Response) -> Response:
        duration = time.perf_counter() - getattr(g, "request_start_time", time.perf_counter())
        response.headers.setdefault(REQUEST_ID_HEADER, get_correlation_id())
        logger.info(
            f"Response: {request.method} {request.path} "
            f"status={response.status_code}, duration={duration:.3f}s"
        )
        return response

    @app.teardown_request
    def _teardown_request(exc: BaseException | None) -> None:
        clear_correlation_id()


__all__ = ["REQUEST_ID_HEADER", "configure_request_logging"]
