"""
Anjali Furniture Backend — Site Config Model
==============================================

What:  ORM model for the singleton `config` table (store contact details,
       banner text, free-form frontend settings).

Singleton: exactly one row, id = 1, seeded by the initial migration.
Every read and update targets SITE_CONFIG_ID.
"""

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import JSON, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.product import utc_now

SITE_CONFIG_ID = 1


class SiteConfig(Base):
    """Storefront-wide settings edited from the admin dashboard."""

    __tablename__ = "config"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    store_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    contact_email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    contact_phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    whatsapp_number: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    address: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    announcement: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    settings: Mapped[Optional[Any]] = mapped_column(JSON, nullable=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now
    )

    def __repr__(self) -> str:
        return f"<SiteConfig(id={self.id}, updated_at='{self.updated_at}')>"
