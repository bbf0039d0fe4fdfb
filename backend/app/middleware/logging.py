"""
Anjali Furniture Backend — Access Log Middleware
==================================================

What:  One access log line per HTTP request.
How:   Times the downstream handler and logs method, path, status, duration,
       request ID, and client IP. The level follows the status class so
       failed store calls (500) surface as errors.
When:  Inside RequestIDMiddleware, so the request ID is already set.

Privacy:
    Logged: method, path, status, duration, IP, request ID
    Never logged: request bodies (customer contact details) or the
    Authorization header
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.middleware.request_id import request_id_var

logger = logging.getLogger("anjali.access")

# Polled by the host's health checker every few seconds
UNLOGGED_PATHS = frozenset({"/health"})


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in UNLOGGED_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)

        rid = request_id_var.get("")
        client = request.client.host if request.client else "unknown"
        logger.log(
            level_for_status(response.status_code),
            "%s %s → %d in %.1fms [%s] from %s",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            rid,
            client,
            extra={
                "request_id": rid,
                "status": response.status_code,
                "duration_ms": elapsed_ms,
            },
        )
        return response
