"""API middleware."""

from goldbook.api.middleware.error_handler import ErrorHandlerMiddleware
from goldbook.api.middleware.logging import LoggingMiddleware

__all__ = ["LoggingMiddleware", "ErrorHandlerMiddleware"]
