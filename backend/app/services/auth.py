"""
Anjali Furniture Backend — Admin Authorization
================================================

What:  The authorization capability gating the admin endpoints.
Why:   Handlers only ask "is this credential allowed?"; swapping the shared
       secret for JWT or role-based auth means adding another Authorizer,
       not touching route code.
How:   SharedSecretAuthorizer compares the raw `Authorization` header value
       against `Bearer <ADMIN_TOKEN>` (exact match, constant-time).

Guarded operations:
    GET /api/requests   (list customer requests)
    PUT /api/config     (update the singleton config)
Everything else is public.
"""

import secrets
from abc import ABC, abstractmethod
from typing import Optional

from app.config import settings

BEARER_PREFIX = "Bearer "


class Authorizer(ABC):
    """Decides whether a caller-supplied credential may use admin operations."""

    @abstractmethod
    def authorize(self, credential: Optional[str]) -> bool:
        """
        Args:
            credential: Raw `Authorization` header value, or None if absent.

        Returns:
            True only when the caller is allowed through.
        """


class SharedSecretAuthorizer(Authorizer):
    """
    Accepts exactly `Bearer <secret>`.

    An empty secret rejects every caller, so an unconfigured deployment
    never exposes the admin endpoints.
    """

    def __init__(self, secret: str):
        self._expected = f"{BEARER_PREFIX}{secret}" if secret else None

    def authorize(self, credential: Optional[str]) -> bool:
        if self._expected is None or credential is None:
            return False
        return secrets.compare_digest(
            credential.encode("utf-8"), self._expected.encode("utf-8")
        )


# Built once at import; the secret is never mutated afterwards
admin_authorizer: Authorizer = SharedSecretAuthorizer(settings.admin_token)
