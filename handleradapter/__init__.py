"""Route exceptions raised by Flask views to pluggable error renderers."""

from handleradapter.interfaces.http.adapter import (
    AdapterFunc,
    HandlerAdapter,
    app_errors_handler,
    default_app_error,
    default_internal_error,
    internal_errors_handler,
    new_default_handler_adapter,
)
from handleradapter.shared.errors import (
    AppError,
    ErrorInfo,
    bad_request_error,
    status_error,
    unauthorized_error,
)
from handleradapter.shared.middleware.error_handler import (
    configure_error_handling,
    recover_middleware,
    recovered_error,
)

__all__ = [
    "AdapterFunc",
    "AppError",
    "ErrorInfo",
    "HandlerAdapter",
    "app_errors_handler",
    "bad_request_error",
    "configure_error_handling",
    "default_app_error",
    "default_internal_error",
    "internal_errors_handler",
    "new_default_handler_adapter",
    "recover_middleware",
    "recovered_error",
    "status_error",
    "unauthorized_error",
]
