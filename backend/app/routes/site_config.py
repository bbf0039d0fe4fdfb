"""
Anjali Furniture Backend — Site Config Route Handlers
=======================================================

What:  Read and update the singleton storefront configuration.

Routes:
    GET /api/config    public
    PUT /api/config    admin only; stamps updated_at

Both always target the row with id SITE_CONFIG_ID. An `id` key in the PUT
body is dropped so the singleton can never be re-keyed.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from app.dependencies import get_store, require_admin
from app.models import SITE_CONFIG_ID
from app.schemas.envelope import ErrorEnvelope, SuccessEnvelope, ok
from app.services.store_base import Collection, DataStore

router = APIRouter(prefix="/api", tags=["Config"])

_ERRORS = {500: {"description": "Store failure", "model": ErrorEnvelope}}


@router.get("/config", response_model=SuccessEnvelope, responses=_ERRORS, summary="Get site config")
async def get_config(store: DataStore = Depends(get_store)) -> SuccessEnvelope:
    return ok(await store.get_by_id(Collection.CONFIG, SITE_CONFIG_ID))


@router.put(
    "/config",
    response_model=SuccessEnvelope,
    responses={
        401: {"description": "Missing or wrong bearer token", "model": ErrorEnvelope},
        **_ERRORS,
    },
    dependencies=[Depends(require_admin)],
    summary="Update site config (admin)",
)
async def update_config(
    fields: Dict[str, Any] = Body(...),
    store: DataStore = Depends(get_store),
) -> SuccessEnvelope:
    changes = {key: value for key, value in fields.items() if key != "id"}
    changes["updated_at"] = datetime.now(timezone.utc)
    return ok(await store.update(Collection.CONFIG, SITE_CONFIG_ID, changes))
