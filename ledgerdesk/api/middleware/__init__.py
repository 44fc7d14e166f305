"""API middleware."""

from ledgerdesk.api.middleware.error_handler import ErrorHandlerMiddleware
from ledgerdesk.api.middleware.logging import LoggingMiddleware

__all__ = ["LoggingMiddleware", "ErrorHandlerMiddleware"]
