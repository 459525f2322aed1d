from .base import AppError, bad_request_error, status_error, unauthorized_error
from .diagnostics import ErrorInfo, StackTracer, build_error_info, stack_trace, unwrap
from .validation import invalid_fields, raise_validation_error, validation_error

__all__ = [
    "AppError",
    "ErrorInfo",
    "StackTracer",
    "bad_request_error",
    "build_error_info",
    "invalid_fields",
    "raise_validation_error",
    "stack_trace",
    "status_error",
    "unauthorized_error",
    "unwrap",
    "validation_error",
]
