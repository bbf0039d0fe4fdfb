"""
Anjali Furniture Backend — Product Route Handlers
===================================================

What:  Full CRUD over the product catalogue.
How:   Each handler makes exactly one store call and wraps the result in the
       success envelope. Store failures propagate as StoreError and are
       turned into 500 envelopes by the global exception handler.

Routes:
    GET    /api/products          list (newest first)
    GET    /api/products/{id}     single product
    POST   /api/products          create
    PUT    /api/products/{id}     update
    DELETE /api/products/{id}     delete
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

router = APIRouter(prefix="/api", tags=["Products"])

_ERRORS = {500: {"description": "Store failure", "model": ErrorEnvelope}}


@router.get(
    "/products",
    response_model=SuccessEnvelope,
    responses=_ERRORS,
    summary="List products, newest first",
)
async def list_products(store: DataStore = Depends(get_store)) -> SuccessEnvelope:
    return ok(await store.list_all(Collection.PRODUCTS))


@router.get(
    "/products/{product_id}",
    response_model=SuccessEnvelope,
    responses=_ERRORS,
    summary="Get a single product",
)
async def get_product(
    product_id: str,
    store: DataStore = Depends(get_store),
) -> SuccessEnvelope:
    return ok(await store.get_by_id(Collection.PRODUCTS, product_id))


@router.post(
    "/products",
    response_model=SuccessEnvelope,
    responses=_ERRORS,
    summary="Create a product",
)
async def create_product(
    fields: Dict[str, Any] = Body(...),
    store: DataStore = Depends(get_store),
) -> SuccessEnvelope:
    """The body is forwarded to the store as-is; the store assigns the id."""
    return ok(await store.create(Collection.PRODUCTS, fields))


@router.put(
    "/products/{product_id}",
    response_model=SuccessEnvelope,
    responses=_ERRORS,
    summary="Update a product",
)
async def update_product(
    product_id: str,
    fields: Dict[str, Any] = Body(...),
    store: DataStore = Depends(get_store),
) -> SuccessEnvelope:
    return ok(await store.update(Collection.PRODUCTS, product_id, fields))


@router.delete(
    "/products/{product_id}",
    response_model=MessageEnvelope,
    responses=_ERRORS,
    summary="Delete a product",
)
async def delete_product(
    product_id: str,
    store: DataStore = Depends(get_store),
) -> MessageEnvelope:
    await store.delete_by_id(Collection.PRODUCTS, product_id)
    return confirmed("Product deleted")
