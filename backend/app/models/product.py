"""
Anjali Furniture Backend — Product and Wood Models
====================================================

What:  ORM models for the `products` and `woods` catalogue tables.
Who:   Used by SQLAlchemyStore (through `__table__`) and by Alembic.

Table Design Rationale:
    - String UUID primary key generated on insert: the store owns identity,
      handlers never choose ids
    - created_at defaults to the insert time; listings sort on it (newest first)
    - images/dimensions are JSON so the frontend can evolve their shape
      without migrations
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Optional

from sqlalchemy import JSON, Boolean, DateTime, Index, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


def generate_id() -> str:
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Product(Base):
    """A piece of furniture listed in the catalogue."""

    __tablename__ = "products"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    # asdecimal=False: prices serialize as JSON numbers
    price: Mapped[Optional[float]] = mapped_column(Numeric(12, 2, asdecimal=False), nullable=True)
    category: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    wood_type: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    dimensions: Mapped[Optional[Any]] = mapped_column(JSON, nullable=True)
    images: Mapped[Optional[Any]] = mapped_column(JSON, nullable=True)
    featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    in_stock: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now
    )

    __table_args__ = (
        Index("idx_products_created_at", created_at.desc()),
    )

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, name='{self.name}')>"


class Wood(Base):
    """A wood species offered for custom orders."""

    __tablename__ = "woods"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    price_per_cubic_foot: Mapped[Optional[float]] = mapped_column(
        Numeric(12, 2, asdecimal=False), nullable=True
    )
    image_url: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)
    available: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now
    )

    __table_args__ = (
        Index("idx_woods_created_at", created_at.desc()),
    )

    def __repr__(self) -> str:
        return f"<Wood(id={self.id}, name='{self.name}')>"
