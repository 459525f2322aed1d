# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus
from typing import NoReturn

from pydantic import ValidationError as PydanticValidationError

from .base import AppError, status_error


def invalid_fields(exc: PydanticValidationError) -> list[str]:
    fields_set = set()

    for error in exc.errors():
        loc = error.get("loc", ())
        field_path = ".".join(str(part) for part in loc if part is not None)
        fields_set.add(field_path or "unknown")

    return sorted(fields_set)


def validation_error(exc: PydanticValidationError) -> AppError:
    return status_error(
        HTTPStatus.UNPROCESSABLE_ENTITY,
        "invalid fields: %s",
        ", ".join(invalid_fields(exc)),
        cause=exc,
    )


def raise_validation_error(exc: PydanticValidationError) -> NoReturn:
    raise validation_error(exc) from exc


__all__ = [
    "invalid_fields",
    "raise_validation_error",
    "validation_error",
]
