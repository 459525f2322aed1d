# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from flask import Request
from flask.typing import ResponseReturnValue

from handleradapter.shared.errors import AppError, ErrorInfo


class ErrorReporter(Protocol):
    def report_error(self, request: Request, error: BaseException) -> None: ...


class Renderer(Protocol):
    def render_500(
        self, request: Request, info: ErrorInfo | None
    ) -> ResponseReturnValue: ...

    def render_app_error(
        self, request: Request, error: AppError
    ) -> ResponseReturnValue: ...


class ErrorHandlingConfig(Protocol):
    def is_development(self) -> bool: ...

    def error_reporter(self) -> ErrorReporter: ...

    def renderer(self) -> Renderer: ...
