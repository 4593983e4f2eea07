"""
FastAPI middleware for observability.

CorrelationMiddleware tags every request with an ID (taken from the
X-Correlation-ID header or generated) and echoes it back.
RequestLoggingMiddleware logs one line per completed request; keep-alive
pings of the health endpoint are logged at DEBUG so they do not flood INFO.

Dependencies: fastapi, starlette, diaspora_assist.observability.correlation
System role: Request/response observability injection
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from diaspora_assist.observability.correlation import (
    clear_correlation_id,
    set_correlation_id,
)

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"
QUIET_PATHS = frozenset({"/health"})


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log method, path, status and latency of each request."""

    async def dispatch(self, request: Request, call_next) -> Response:
        started = time.perf_counter()
        route = f"{request.method} {request.url.path}"

        try:
            response: Response = await call_next(request)
        except Exception as e:
            logger.exception(
                f"{route} - Unhandled {type(e).__name__}",
                extra={"http_path": request.url.path, "duration_ms": _elapsed_ms(started)},
            )
            raise

        level = logging.DEBUG if request.url.path in QUIET_PATHS else logging.INFO
        logger.log(
            level,
            f"{route} - {response.status_code}",
            extra={
                "http_method": request.method,
                "http_path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": _elapsed_ms(started),
                "user_agent": request.headers.get("user-agent", ""),
            },
        )
        return response


class CorrelationMiddleware(BaseHTTPMiddleware):
    """Bind a correlation ID for the lifetime of the request."""

    async def dispatch(self, request: Request, call_next) -> Response:
        """
        Args:
            request: Incoming request
            call_next: Next handler in the chain

        Returns:
            Response: Response carrying the X-Correlation-ID header
        """
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        try:
            response: Response = await call_next(request)
        finally:
            clear_correlation_id()
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
