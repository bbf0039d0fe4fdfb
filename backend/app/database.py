"""
Anjali Furniture Backend — Database Engine Management
=======================================================

What:  Async SQLAlchemy engine, session factory, and declarative Base.
Why:   Centralizes all database connection logic in one place.
How:   Creates an async engine with connection pooling; the SQLAlchemyStore
       opens one short session per operation from `async_session_factory`.
When:  Engine is created at module import (no connection is opened until the
       first query); disposed during application shutdown.

Connection Pooling Strategy:
    pool_size=10, max_overflow=5, pool_pre_ping, pool_recycle=3600 for
    PostgreSQL. SQLite (tests, local experiments) keeps SQLAlchemy's own pool
    choice because it rejects the QueuePool sizing arguments.
"""

from typing import Any, Dict

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.config import settings


def _engine_options() -> Dict[str, Any]:
    options: Dict[str, Any] = {"echo": settings.log_level == "DEBUG"}
    if not settings.is_sqlite:
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )
    return options


# ── Engine Configuration ──────────────────────────────────────────────────
engine: AsyncEngine = create_async_engine(settings.database_url, **_engine_options())

# ── Session Factory ───────────────────────────────────────────────────────
# expire_on_commit=False: returned rows stay readable after commit
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Shares a single metadata object so Alembic and the store gateway see the
    same table definitions.
    """
    pass


# ── Lifecycle Helpers ─────────────────────────────────────────────────────
async def dispose_engine() -> None:
    """Closes all pooled connections. Called during application shutdown."""
    await engine.dispose()
