"""
Anjali Furniture Backend — Customer Request Model
===================================================

What:  ORM model for the `customer_requests` table (enquiries and custom
       orders submitted from the storefront).

Lifecycle:
    1. Created publicly from the contact form (status = 'pending');
       the route handler stamps created_at
    2. Listed by the admin dashboard (guarded)
    3. Status moved along by the admin (e.g. 'approved', 'completed')
    4. Deleted when handled
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Index, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.product import generate_id, utc_now


class CustomerRequest(Base):
    """A customer's enquiry or custom-order request."""

    __tablename__ = "customer_requests"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=generate_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    message: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    product_id: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)
    request_type: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    status: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        default="pending",
        server_default=text("'pending'"),
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now
    )

    __table_args__ = (
        Index("idx_customer_requests_created_at", created_at.desc()),
    )

    def __repr__(self) -> str:
        return f"<CustomerRequest(id={self.id}, status='{self.status}')>"
