"""
Anjali Furniture Backend — Custom Exception Hierarchy
=======================================================

What:  Application-specific exceptions for every failure the API reports.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) turn them into the
       `{"success": false, "error": <message>}` envelope with the right status.
Who:   Raised by the store gateway, the admin guard, and middleware.

Exception Hierarchy:
    AnjaliError (base)
    ├── BadRequestError          → 400 Bad Request
    ├── UnauthorizedError        → 401 Unauthorized
    ├── PayloadTooLargeError     → 413 Payload Too Large
    ├── RateLimitExceededError   → 429 Too Many Requests
    └── StoreError               → 500 Internal Server Error
            kind: not_found | conflict | unavailable | unknown

Store failures are deliberately flattened: every StoreError becomes a 500
whatever its kind. The kind is kept for logging and later refinement.
"""

from enum import Enum
from typing import Any, Dict, Optional


class AnjaliError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  Error description returned in the envelope
        context:  Additional debug info (logged, never returned to client)
    """

    status_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class BadRequestError(AnjaliError):
    """Raised when the request body cannot be used (not a JSON object, missing field)."""

    status_code = 400

    def __init__(
        self,
        message: str = "Invalid request body",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class UnauthorizedError(AnjaliError):
    """
    Raised when the admin guard rejects the bearer credential.

    HTTP:    401 Unauthorized
    Body:    {"success": false, "error": "Unauthorized"}

    The message is fixed so callers learn nothing about why the credential
    was rejected (missing header vs. wrong secret).
    """

    status_code = 401

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        super().__init__(message="Unauthorized", context=context)


class PayloadTooLargeError(AnjaliError):
    """Raised when a request body exceeds the configured size ceiling."""

    status_code = 413

    def __init__(
        self,
        limit: int,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["limit"] = limit
        super().__init__(
            message=f"Request body exceeds the {limit} byte limit",
            context=ctx,
        )
        self.limit = limit


class RateLimitExceededError(AnjaliError):
    """
    Raised when a client exceeds the per-IP request rate limit.

    Response includes a Retry-After header with the seconds until the
    oldest request in the window expires.
    """

    status_code = 429

    def __init__(
        self,
        retry_after: int = 60,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["retry_after"] = retry_after
        super().__init__(
            message="Too many requests, please try again later.",
            context=ctx,
        )
        self.retry_after = retry_after


class StoreErrorKind(str, Enum):
    """Classification of data-store failures."""

    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    UNAVAILABLE = "unavailable"
    UNKNOWN = "unknown"


class StoreError(AnjaliError):
    """
    Raised by the data-store gateway when an operation fails.

    What:    Row missing, constraint violated, database unreachable, or any
             other failure reported by the store.
    HTTP:    500 Internal Server Error for every kind.

    Attributes:
        kind:        StoreErrorKind tag
        collection:  Collection name the operation targeted (if known)
    """

    status_code = 500

    def __init__(
        self,
        message: str = "Data store operation failed",
        kind: StoreErrorKind = StoreErrorKind.UNKNOWN,
        collection: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["kind"] = kind.value
        if collection:
            ctx["collection"] = collection
        super().__init__(message=message, context=ctx)
        self.kind = kind
        self.collection = collection
