"""
HTTP middleware for request observability.

CorrelationMiddleware binds the request's correlation ID for the lifetime of
the request; RequestLoggingMiddleware writes one access line per request.
The correlation ID reaches log lines through CorrelationIdFilter.

Dependencies: starlette, backend.observability
System role: Request/response observability injection
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from backend.observability.correlation import clear_correlation_id, set_correlation_id

CORRELATION_HEADER = "X-Correlation-ID"

logger = logging.getLogger(__name__)


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and latency of every request."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        started = time.perf_counter()
        context = {"method": request.method, "path": request.url.path}

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "%s %s failed", request.method, request.url.path,
                extra={**context, "duration_ms": _elapsed_ms(started)},
            )
            raise

        logger.info(
            "%s %s -> %d", request.method, request.url.path, response.status_code,
            extra={
                **context,
                "status_code": response.status_code,
                "duration_ms": _elapsed_ms(started),
            },
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Echo the caller's X-Correlation-ID, or issue one, on every response."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
