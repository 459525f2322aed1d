# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Request

from handleradapter.infrastructure.observability import record_report
from handleradapter.shared.logging import logger


def _client_ip(request: Request) -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.remote_addr or "unknown"


class LoguruErrorReporter:
    """Records internal errors in the application log, traceback included."""

    def __init__(self, *, debug_mode: bool = False) -> None:
        self._debug_mode = debug_mode

    def report_error(self, request: Request, error: BaseException) -> None:
        record_report(error)

        if self._debug_mode:
            logger.opt(exception=error).error(
                f"Internal error: {request.method} {request.path} "
                f"from {_client_ip(request)}, query={dict(request.args)}, "
                f"body_size={request.content_length or 0}"
            )
            return

        logger.opt(exception=error).error(
            f"Internal error: {type(error).__name__} on {request.method} {request.path}"
        )


__all__ = ["LoguruErrorReporter"]
