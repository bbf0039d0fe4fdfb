"""
Anjali Furniture Backend — Wood Route Handlers
================================================

What:  Catalogue of wood species. No single-record read: the storefront
       always shows the full list.

Routes:
    GET    /api/woods          list (newest first)
    POST   /api/woods          create
    PUT    /api/woods/{id}     update
    DELETE /api/woods/{id}     delete
"""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends

from app.dependencies import get_store
from app.schemas.envelope import (
    ErrorEnvelope,
    MessageEnvelope,
    SuccessEnvelope,
    confirmed,
    ok,
)
from app.services.store_base import Collection, DataStore

router = APIRouter(prefix="/api", tags=["Woods"])

_ERRORS = {500: {"description": "Store failure", "model": ErrorEnvelope}}


@router.get("/woods", response_model=SuccessEnvelope, responses=_ERRORS, summary="List woods")
async def list_woods(store: DataStore = Depends(get_store)) -> SuccessEnvelope:
    return ok(await store.list_all(Collection.WOODS))


@router.post("/woods", response_model=SuccessEnvelope, responses=_ERRORS, summary="Create a wood")
async def create_wood(
    fields: Dict[str, Any] = Body(...),
    store: DataStore = Depends(get_store),
) -> SuccessEnvelope:
    return ok(await store.create(Collection.WOODS, fields))


@router.put(
    "/woods/{wood_id}",
    response_model=SuccessEnvelope,
    responses=_ERRORS,
    summary="Update a wood",
)
async def update_wood(
    wood_id: str,
    fields: Dict[str, Any] = Body(...),
    store: DataStore = Depends(get_store),
) -> SuccessEnvelope:
    return ok(await store.update(Collection.WOODS, wood_id, fields))


@router.delete(
    "/woods/{wood_id}",
    response_model=MessageEnvelope,
    responses=_ERRORS,
    summary="Delete a wood",
)
async def delete_wood(
    wood_id: str,
    store: DataStore = Depends(get_store),
) -> MessageEnvelope:
    await store.delete_by_id(Collection.WOODS, wood_id)
    return confirmed("Wood deleted")
