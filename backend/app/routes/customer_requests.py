"""
Anjali Furniture Backend — Customer Request Route Handlers
============================================================

What:  Enquiries and custom-order requests from the storefront.

Routes:
    POST   /api/requests          public; stamps created_at
    GET    /api/requests          admin only (bearer secret)
    PATCH  /api/requests/{id}     applies only `status`
    DELETE /api/requests/{id}     delete

Authorization:
    Only the listing is guarded. PATCH and DELETE are public, matching the
    deployed storefront; hardening them means adding
    `dependencies=[Depends(require_admin)]` to those decorators.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from app.dependencies import get_store, require_admin
from app.schemas.envelope import (
    ErrorEnvelope,
    MessageEnvelope,
    SuccessEnvelope,
    confirmed,
    ok,
)
from app.schemas.payloads import StatusUpdate
from app.services.store_base import Collection, DataStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Customer Requests"])

_ERRORS = {500: {"description": "Store failure", "model": ErrorEnvelope}}


@router.post(
    "/requests",
    response_model=SuccessEnvelope,
    responses=_ERRORS,
    summary="Submit a customer request",
)
async def create_request(
    fields: Dict[str, Any] = Body(...),
    store: DataStore = Depends(get_store),
) -> SuccessEnvelope:
    """
    Stores the request with `created_at` set to the current UTC time.
    A client-supplied created_at is overwritten.
    """
    record = {**fields, "created_at": datetime.now(timezone.utc)}
    created = await store.create(Collection.CUSTOMER_REQUESTS, record)
    logger.info("Customer request %s received", created.get("id"))
    return ok(created)


@router.get(
    "/requests",
    response_model=SuccessEnvelope,
    responses={
        401: {"description": "Missing or wrong bearer token", "model": ErrorEnvelope},
        **_ERRORS,
    },
    dependencies=[Depends(require_admin)],
    summary="List customer requests (admin)",
)
async def list_requests(store: DataStore = Depends(get_store)) -> SuccessEnvelope:
    return ok(await store.list_all(Collection.CUSTOMER_REQUESTS))


@router.patch(
    "/requests/{request_id}",
    response_model=SuccessEnvelope,
    responses=_ERRORS,
    summary="Update a request's status",
)
async def update_request_status(
    request_id: str,
    body: StatusUpdate,
    store: DataStore = Depends(get_store),
) -> SuccessEnvelope:
    updated = await store.update(
        Collection.CUSTOMER_REQUESTS, request_id, {"status": body.status}
    )
    return ok(updated)


@router.delete(
    "/requests/{request_id}",
    response_model=MessageEnvelope,
    responses=_ERRORS,
    summary="Delete a customer request",
)
async def delete_request(
    request_id: str,
    store: DataStore = Depends(get_store),
) -> MessageEnvelope:
    await store.delete_by_id(Collection.CUSTOMER_REQUESTS, request_id)
    return confirmed("Request deleted")
