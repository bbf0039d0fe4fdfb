"""
Anjali Furniture Backend — SQLAlchemy Data Store
==================================================

What:  DataStore implementation backed by async SQLAlchemy Core statements.
Why:   Keeps every table operation a single statement (INSERT/UPDATE ...
       RETURNING) so each API call is one round trip to the database.
How:   Each operation opens its own session and transaction from the
       session factory: commit on success, rollback on any error. SQLAlchemy
       and driver errors are classified into StoreErrorKind values.

Error classification:
    IntegrityError, MultipleResultsFound             → CONFLICT
    OperationalError, InterfaceError, DisconnectionError,
    pool TimeoutError, OSError, asyncio.TimeoutError → UNAVAILABLE
    zero rows matched on get/update/delete           → NOT_FOUND
    anything else (e.g. unknown column names)        → UNKNOWN
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Any, AsyncIterator, Dict, List

from sqlalchemy import DateTime, Table, delete, insert, select, update
from sqlalchemy.exc import (
    DisconnectionError,
    IntegrityError,
    InterfaceError,
    MultipleResultsFound,
    OperationalError,
    SQLAlchemyError,
)
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.exceptions import StoreError, StoreErrorKind
from app.models import CustomerRequest, Product, SiteConfig, Wood
from app.services.store_base import (
    Collection,
    DataStore,
    Fields,
    Record,
    RecordId,
    not_found,
)

logger = logging.getLogger(__name__)

TABLES: Dict[Collection, Table] = {
    Collection.PRODUCTS: Product.__table__,
    Collection.WOODS: Wood.__table__,
    Collection.CUSTOMER_REQUESTS: CustomerRequest.__table__,
    Collection.CONFIG: SiteConfig.__table__,
}

_UNAVAILABLE_ERRORS = (
    OperationalError,
    InterfaceError,
    DisconnectionError,
    PoolTimeoutError,
    OSError,
    asyncio.TimeoutError,
)


def classify_error(exc: BaseException) -> StoreErrorKind:
    """Maps a database exception onto the store error taxonomy."""
    if isinstance(exc, (IntegrityError, MultipleResultsFound)):
        return StoreErrorKind.CONFLICT
    if isinstance(exc, _UNAVAILABLE_ERRORS):
        return StoreErrorKind.UNAVAILABLE
    return StoreErrorKind.UNKNOWN


def store_message(exc: BaseException) -> str:
    """
    First line of the underlying driver message.

    SQLAlchemy appends the SQL statement and parameters after the first line;
    those stay in the server log.
    """
    source = getattr(exc, "orig", None) or exc
    text = str(source).strip()
    if not text:
        return type(source).__name__
    return text.splitlines()[0]


def parse_timestamp(value: str) -> datetime:
    """ISO-8601 text as the API emits it; a trailing 'Z' means UTC."""
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


def bind_values(table: Table, fields: Fields) -> Dict[str, Any]:
    """
    Copies `fields` for an INSERT/UPDATE, parsing ISO text bound for
    DateTime columns.

    Records come back over JSON with their timestamps as strings, and a
    client may send a fetched record back unchanged. Text that does not
    parse is left alone and fails in the driver like any other bad value.
    """
    values = dict(fields)
    for name, value in values.items():
        column = table.c.get(name)
        if column is None or not isinstance(value, str):
            continue
        if isinstance(column.type, DateTime):
            try:
                values[name] = parse_timestamp(value)
            except ValueError:
                pass
    return values


class SQLAlchemyStore(DataStore):
    """
    Production data store.

    Args:
        session_factory: async_sessionmaker bound to the application engine
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    @asynccontextmanager
    async def _transaction(
        self, collection: Collection, operation: str
    ) -> AsyncIterator[AsyncSession]:
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    yield session
        except (SQLAlchemyError, *_UNAVAILABLE_ERRORS) as exc:
            kind = classify_error(exc)
            message = store_message(exc)
            logger.error(
                "Store %s on %s failed (%s): %s",
                operation, collection.value, kind.value, message,
            )
            raise StoreError(
                message=message,
                kind=kind,
                collection=collection.value,
                context={"operation": operation, "error_type": type(exc).__name__},
            ) from exc

    @staticmethod
    def _coerce_id(collection: Collection, table: Table, record_id: RecordId) -> RecordId:
        """Converts a path id to the id column's Python type (e.g. '1' → 1)."""
        python_type = table.c.id.type.python_type
        if isinstance(record_id, python_type):
            return record_id
        try:
            return python_type(record_id)
        except (TypeError, ValueError):
            raise not_found(collection, record_id)

    async def _list(self, collection: Collection) -> List[Record]:
        table = TABLES[collection]
        stmt = select(table).order_by(table.c.created_at.desc())
        async with self._transaction(collection, "list") as session:
            result = await session.execute(stmt)
            return [dict(row) for row in result.mappings().all()]

    async def _get(self, collection: Collection, record_id: RecordId) -> Record:
        table = TABLES[collection]
        key = self._coerce_id(collection, table, record_id)
        stmt = select(table).where(table.c.id == key)
        async with self._transaction(collection, "get") as session:
            result = await session.execute(stmt)
            rows = result.mappings().all()
            if not rows:
                raise not_found(collection, record_id)
            if len(rows) > 1:
                raise StoreError(
                    message=f"Multiple {collection.value} rows found with id '{record_id}'",
                    kind=StoreErrorKind.CONFLICT,
                    collection=collection.value,
                )
            return dict(rows[0])

    async def _create(self, collection: Collection, fields: Fields) -> Record:
        table = TABLES[collection]
        stmt = insert(table).values(bind_values(table, fields)).returning(*table.c)
        async with self._transaction(collection, "create") as session:
            result = await session.execute(stmt)
            return dict(result.mappings().one())

    async def _update(
        self, collection: Collection, record_id: RecordId, fields: Fields
    ) -> Record:
        table = TABLES[collection]
        key = self._coerce_id(collection, table, record_id)
        stmt = (
            update(table)
            .where(table.c.id == key)
            .values(bind_values(table, fields))
            .returning(*table.c)
        )
        async with self._transaction(collection, "update") as session:
            result = await session.execute(stmt)
            row = result.mappings().first()
            if row is None:
                raise not_found(collection, record_id)
            return dict(row)

    async def _delete(self, collection: Collection, record_id: RecordId) -> None:
        table = TABLES[collection]
        key = self._coerce_id(collection, table, record_id)
        stmt = delete(table).where(table.c.id == key)
        async with self._transaction(collection, "delete") as session:
            result = await session.execute(stmt)
            if result.rowcount == 0:
                raise not_found(collection, record_id)
