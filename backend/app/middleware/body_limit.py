"""
Anjali Furniture Backend — Request Body Size Limit
====================================================

What:  Rejects requests whose declared body size exceeds MAX_BODY_SIZE.
Why:   Product payloads carry image URLs and descriptions, never files;
       anything past 10MB is a mistake or abuse and should not be parsed.
How:   Checks the Content-Length header before the request reaches routing.
       Chunked bodies without Content-Length are left to the server's limits.
"""

import logging
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from app.config import settings
from app.exceptions import BadRequestError, PayloadTooLargeError
from app.schemas.envelope import failure

logger = logging.getLogger(__name__)


class BodySizeLimitMiddleware(BaseHTTPMiddleware):
    """413 envelope for oversized bodies, 400 for a malformed Content-Length."""

    def __init__(self, app: ASGIApp, max_body_size: Optional[int] = None):
        super().__init__(app)
        self.max_body_size = max_body_size or settings.max_body_size

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        declared = request.headers.get("content-length")
        if declared is None:
            return await call_next(request)

        try:
            length = int(declared)
        except ValueError:
            exc = BadRequestError(message="Invalid Content-Length header")
            return failure(exc.status_code, exc.message)

        if length > self.max_body_size:
            exc = PayloadTooLargeError(limit=self.max_body_size)
            logger.warning(
                "Rejected %s %s: body of %d bytes exceeds %d",
                request.method, request.url.path, length, self.max_body_size,
            )
            return failure(exc.status_code, exc.message)

        return await call_next(request)
