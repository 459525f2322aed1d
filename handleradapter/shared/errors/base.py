# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from typing import Any


@dataclass(slots=True, eq=False)
class AppError(Exception):
    """A classified, client-facing failure carrying the HTTP status to answer with."""

    message: str
    status_code: int = HTTPStatus.BAD_REQUEST

    def __post_init__(self) -> None:
        if not 100 <= int(self.status_code) <= 599:
            msg = f"invalid HTTP status code: {self.status_code}"
            raise ValueError(msg)
        self.status_code = int(self.status_code)
        Exception.__init__(self, self.message)

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.message, "status": self.status_code}


def _format(message_format: str, args: tuple[Any, ...]) -> str:
    if not args:
        return message_format
    try:
        return message_format % args
    except (TypeError, ValueError, KeyError):
        # arguments that do not fit the format are appended rather than lost
        return f"{message_format} (args: {', '.join(repr(arg) for arg in args)})"


def status_error(
    status_code: int,
    message_format: str,
    *args: Any,
    cause: BaseException | None = None,
) -> AppError:
    error = AppError(_format(message_format, args), status_code)
    if cause is not None:
        error.__cause__ = cause
    return error


def bad_request_error(message_format: str, *args: Any) -> AppError:
    return status_error(HTTPStatus.BAD_REQUEST, message_format, *args)


def unauthorized_error(message_format: str, *args: Any) -> AppError:
    return status_error(HTTPStatus.UNAUTHORIZED, message_format, *args)


__all__ = [
    "AppError",
    "bad_request_error",
    "status_error",
    "unauthorized_error",
]
