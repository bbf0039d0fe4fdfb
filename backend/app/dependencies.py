"""
Anjali Furniture Backend — FastAPI Dependencies
=================================================

What:  Providers for the injected capabilities (data store, authorizer) and
       the admin guard applied to protected routes.
Why:   Routes never construct their collaborators; tests swap them through
       `app.dependency_overrides[get_store] = lambda: fake_store`.

Guard ordering:
    `require_admin` is attached through the route decorator's
    `dependencies=[...]`, which FastAPI resolves before the endpoint's own
    parameters, so a rejected caller never reaches the store.
"""

import logging
from typing import Optional

from fastapi import Depends, Header

from app.database import async_session_factory
from app.exceptions import UnauthorizedError
from app.middleware.request_id import request_id_var
from app.services.auth import Authorizer, admin_authorizer
from app.services.sql_store import SQLAlchemyStore
from app.services.store_base import DataStore

logger = logging.getLogger(__name__)

_store = SQLAlchemyStore(async_session_factory)


def get_store() -> DataStore:
    return _store


def get_authorizer() -> Authorizer:
    return admin_authorizer


async def require_admin(
    authorization: Optional[str] = Header(default=None),
    authorizer: Authorizer = Depends(get_authorizer),
) -> None:
    """Rejects the request with 401 unless the bearer credential is accepted."""
    if not authorizer.authorize(authorization):
        logger.warning(
            "[%s] Admin authorization failed (header %s)",
            request_id_var.get(""),
            "present" if authorization else "missing",
        )
        raise UnauthorizedError()
