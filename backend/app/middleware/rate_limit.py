"""
Anjali Furniture Backend — Rate Limiting Middleware
=====================================================

What:  Per-IP sliding window rate limiter for the /api/ prefix.
Why:   The API is public; this caps each caller at 100 requests per
       15 minutes so a single client cannot hammer the database.
How:   Tracks request timestamps per IP in memory.
When:  Right after CORS (rejects abuse before any processing).

Algorithm: Sliding Window Log
    1. Each IP gets a list of request timestamps
    2. On each request, drop timestamps older than the window
    3. If remaining count >= limit, reject with 429
    4. Otherwise, record the current timestamp and let the request through

Scope:
    Only paths starting with `path_prefix` are counted. /health and the
    OpenAPI docs are never limited.

    State lives in this process. Multiple uvicorn workers each keep their
    own window.
"""

import logging
import time
from collections import defaultdict
from typing import Dict, List, Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from app.config import settings
from app.exceptions import RateLimitExceededError
from app.schemas.envelope import failure

logger = logging.getLogger(__name__)


class RateLimitMiddleware(BaseHTTPMiddleware):
    """
    In-memory sliding window rate limiter.

    Args:
        max_requests:    Requests allowed per window (default: settings, 100)
        window_seconds:  Window length (default: settings, 900 = 15 minutes)
        path_prefix:     Only paths under this prefix are limited

    Response on rate limit:
        HTTP 429, Retry-After header, {"success": false, "error": ...}
    """

    def __init__(
        self,
        app: ASGIApp,
        max_requests: Optional[int] = None,
        window_seconds: Optional[int] = None,
        path_prefix: str = "/api/",
    ):
        super().__init__(app)
        self.max_requests = max_requests or settings.rate_limit_requests
        self.window_seconds = window_seconds or settings.rate_limit_window
        self.path_prefix = path_prefix
        self._requests: Dict[str, List[float]] = defaultdict(list)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if not request.url.path.startswith(self.path_prefix):
            return await call_next(request)

        # Behind a proxy this is the proxy's address unless uvicorn runs
        # with --proxy-headers
        client_ip = (
            getattr(request.client, "host", "unknown")
            if request.client
            else "unknown"
        )

        now = time.time()
        window_start = now - self.window_seconds

        self._requests[client_ip] = [
            ts for ts in self._requests[client_ip] if ts > window_start
        ]

        if len(self._requests[client_ip]) >= self.max_requests:
            oldest = self._requests[client_ip][0]
            exc = RateLimitExceededError(
                retry_after=int(oldest + self.window_seconds - now) + 1
            )
            logger.warning(
                "Rate limit exceeded for IP %s: %d requests in %ds window",
                client_ip,
                len(self._requests[client_ip]),
                self.window_seconds,
            )
            return failure(
                exc.status_code,
                exc.message,
                headers={"Retry-After": str(exc.retry_after)},
            )

        self._requests[client_ip].append(now)

        # Periodic cleanup of inactive IPs (roughly every 1000 requests)
        if sum(len(v) for v in self._requests.values()) % 1000 == 0:
            self._cleanup_inactive_ips(window_start)

        return await call_next(request)

    def _cleanup_inactive_ips(self, window_start: float) -> None:
        """Remove IPs that have no requests within the current window."""
        inactive_ips = [
            ip for ip, timestamps in self._requests.items()
            if not timestamps or max(timestamps) < window_start
        ]
        for ip in inactive_ips:
            del self._requests[ip]

        if inactive_ips:
            logger.debug("Cleaned up %d inactive IP entries", len(inactive_ips))
