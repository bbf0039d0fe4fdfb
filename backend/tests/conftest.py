"""
Anjali Furniture Backend — Test Configuration (conftest.py)
=============================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── store:          InMemoryStore, a dict-backed DataStore
    ├── test_app:       fresh create_app() with the store injected
    ├── test_client:    HTTPX AsyncClient talking to test_app over ASGI
    ├── admin_headers:  Authorization header carrying the test secret
    └── sql_store:      SQLAlchemyStore on in-memory SQLite (aiosqlite)
"""

import os
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional, Tuple
from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Override settings BEFORE any app imports so no test touches a real database
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["ADMIN_TOKEN"] = "test-admin-token"
os.environ["LOG_LEVEL"] = "WARNING"

from app.services.store_base import (  # noqa: E402
    Collection,
    DataStore,
    Fields,
    Record,
    RecordId,
    not_found,
)

ADMIN_TOKEN = "test-admin-token"


class InMemoryStore(DataStore):
    """
    Dict-backed DataStore for route tests.

    Attributes:
        tables:     collection → {id: record}
        calls:      (operation, collection) for every store call that got
                    past the operation-subset check
        fail_with:  when set, every operation raises this exception
    """

    def __init__(self) -> None:
        self.tables: Dict[Collection, Dict[Any, Record]] = {c: {} for c in Collection}
        self.calls: List[Tuple[str, Collection]] = []
        self.fail_with: Optional[Exception] = None
        # Strictly increasing clock so created_at ordering never ties
        self._clock = datetime(2026, 1, 1, tzinfo=timezone.utc)

    def _tick(self) -> datetime:
        self._clock += timedelta(seconds=1)
        return self._clock

    def _enter(self, operation: str, collection: Collection) -> None:
        self.calls.append((operation, collection))
        if self.fail_with is not None:
            raise self.fail_with

    def seed(self, collection: Collection, record: Record) -> Record:
        row = dict(record)
        row.setdefault("id", str(uuid4()))
        if collection is not Collection.CONFIG:
            row.setdefault("created_at", self._tick())
        self.tables[collection][row["id"]] = row
        return dict(row)

    async def _list(self, collection: Collection) -> List[Record]:
        self._enter("list", collection)
        rows = sorted(
            self.tables[collection].values(),
            key=lambda row: row["created_at"],
            reverse=True,
        )
        return [dict(row) for row in rows]

    async def _get(self, collection: Collection, record_id: RecordId) -> Record:
        self._enter("get", collection)
        if record_id not in self.tables[collection]:
            raise not_found(collection, record_id)
        return dict(self.tables[collection][record_id])

    async def _create(self, collection: Collection, fields: Fields) -> Record:
        self._enter("create", collection)
        row = dict(fields)
        row["id"] = str(uuid4())
        row.setdefault("created_at", self._tick())
        self.tables[collection][row["id"]] = row
        return dict(row)

    async def _update(
        self, collection: Collection, record_id: RecordId, fields: Fields
    ) -> Record:
        self._enter("update", collection)
        if record_id not in self.tables[collection]:
            raise not_found(collection, record_id)
        self.tables[collection][record_id].update(fields)
        return dict(self.tables[collection][record_id])

    async def _delete(self, collection: Collection, record_id: RecordId) -> None:
        self._enter("delete", collection)
        if self.tables[collection].pop(record_id, None) is None:
            raise not_found(collection, record_id)


def _parse_timestamp(value: str) -> datetime:
    """Parses the ISO-8601 text the API emits (accepts a trailing 'Z')."""
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def test_app(store):
    """A fresh application (own rate-limit window) using the in-memory store."""
    from app.dependencies import get_store
    from app.main import create_app

    application = create_app()
    application.dependency_overrides[get_store] = lambda: store
    return application


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    HTTPX AsyncClient routed directly to the ASGI app.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def admin_headers() -> Dict[str, str]:
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}


@pytest_asyncio.fixture
async def sql_store():
    """
    SQLAlchemyStore over a fresh in-memory SQLite database.

    StaticPool keeps one connection so every session sees the same database.
    The singleton config row is seeded like the initial migration does.
    """
    from sqlalchemy import insert
    from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
    from sqlalchemy.pool import StaticPool

    from app.database import Base
    from app.models import SITE_CONFIG_ID, SiteConfig
    from app.services.sql_store import SQLAlchemyStore

    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        await conn.execute(
            insert(SiteConfig.__table__).values(
                id=SITE_CONFIG_ID,
                store_name="Anjali Furniture",
                updated_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
            )
        )

    yield SQLAlchemyStore(async_sessionmaker(engine, expire_on_commit=False))

    await engine.dispose()


@pytest.fixture
def parse_timestamp():
    """Parser for the ISO-8601 timestamps in API responses."""
    return _parse_timestamp
