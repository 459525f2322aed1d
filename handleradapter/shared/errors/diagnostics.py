# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Diagnostic payload echoed to clients in development mode."""

from __future__ import annotations

import traceback
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel


class ErrorInfo(BaseModel):
    message: str | None = None
    cause: str | None = None
    stack: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


@runtime_checkable
class StackTracer(Protocol):
    def stack_trace(self) -> str: ...


def unwrap(error: BaseException) -> BaseException | None:
    """Return the explicitly chained cause (``raise ... from``), one level deep."""
    return error.__cause__


def stack_trace(error: BaseException) -> str | None:
    if isinstance(error, StackTracer):
        return error.stack_trace()
    if error.__traceback__ is None:
        return None
    return "".join(traceback.format_exception(type(error), error, error.__traceback__))


def build_error_info(error: BaseException) -> ErrorInfo:
    info = ErrorInfo(message=str(error))

    cause = unwrap(error)
    if cause is not None:
        info.cause = str(cause)

    info.stack = stack_trace(error)
    return info


__all__ = [
    "ErrorInfo",
    "StackTracer",
    "build_error_info",
    "stack_trace",
    "unwrap",
]
