from .interfaces import ErrorHandlingConfig, ErrorReporter, Renderer

__all__ = ["ErrorHandlingConfig", "ErrorReporter", "Renderer"]
