"""
Request Logging Middleware

One log line per request: method, path, status and duration.

Usage:
    from storefront.middleware import RequestLoggingMiddleware
    app.add_middleware(RequestLoggingMiddleware)
"""

import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from storefront.logging import get_logger

logger = get_logger("storefront.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Access log in the spirit of a dev-mode request logger."""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        try:
            response: Response = await call_next(request)
        except Exception:
            elapsed_ms = (time.perf_counter() - start) * 1000
            logger.info("%s %s 500 %.1f ms", request.method, request.url.path, elapsed_ms)
            raise
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "%s %s %s %.1f ms",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response
