"""
Observability module.

Provides logging configuration and request logging/correlation middleware.
"""

from backend.observability.logger import CorrelationIdFilter, configure_logging, get_logger
from backend.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

__all__ = [
    "CorrelationIdFilter",
    "configure_logging",
    "get_logger",
    "CorrelationMiddleware",
    "RequestLoggingMiddleware",
]
