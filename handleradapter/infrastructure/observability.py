# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import current_app, has_app_context
from prometheus_client import Counter

from handleradapter.shared.config import load_config

DISPATCHED_ERRORS = Counter(
    "handleradapter_dispatched_errors_total",
    "Errors routed by the handler adapter",
    labelnames=("category",),
)
REPORTED_ERRORS = Counter(
    "handleradapter_reported_errors_total",
    "Internal errors handed to the error reporter",
    labelnames=("error_type",),
)


METRICS_ENABLED_KEY = "METRICS_ENABLED"


def _metrics_enabled() -> bool:
    if has_app_context() and METRICS_ENABLED_KEY in current_app.config:
        return bool(current_app.config[METRICS_ENABLED_KEY])
    return load_config().observability.metrics_enabled


def record_dispatch(category: str) -> None:
    if _metrics_enabled():
        DISPATCHED_ERRORS.labels(category=category).inc()


def record_report(error: BaseException) -> None:
    if _metrics_enabled():
        REPORTED_ERRORS.labels(error_type=type(error).__name__).inc()


__all__ = [
    "DISPATCHED_ERRORS",
    "METRICS_ENABLED_KEY",
    "REPORTED_ERRORS",
    "record_dispatch",
    "record_report",
]
