"""Create storefront tables

Revision ID: 001
Revises: None
Create Date: 2026-10-18 00:00:00.000000+00:00

What:  Creates products, woods, customer_requests, and the singleton config
       table, and seeds config row id = 1.
How:   Ids are text UUIDs generated by PostgreSQL (gen_random_uuid()), so
       rows inserted outside the API get identities too.

Rollback: downgrade() drops all four tables (destructive).
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id_column() -> sa.Column:
    return sa.Column(
        "id",
        sa.String(36),
        server_default=sa.text("gen_random_uuid()::text"),
        nullable=False,
    )


def _created_at_column() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.TIMESTAMP(timezone=True),
        server_default=sa.text("CURRENT_TIMESTAMP"),
        nullable=False,
    )


def upgrade() -> None:
    op.create_table(
        "products",
        _id_column(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("price", sa.Numeric(12, 2), nullable=True),
        sa.Column("category", sa.String(100), nullable=True),
        sa.Column("wood_type", sa.String(100), nullable=True),
        sa.Column("dimensions", sa.JSON(), nullable=True),
        sa.Column("images", sa.JSON(), nullable=True),
        sa.Column("featured", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("in_stock", sa.Boolean(), server_default=sa.true(), nullable=False),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_products_created_at", "products", [sa.text("created_at DESC")])

    op.create_table(
        "woods",
        _id_column(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("price_per_cubic_foot", sa.Numeric(12, 2), nullable=True),
        sa.Column("image_url", sa.String(1024), nullable=True),
        sa.Column("available", sa.Boolean(), server_default=sa.true(), nullable=False),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_woods_created_at", "woods", [sa.text("created_at DESC")])

    op.create_table(
        "customer_requests",
        _id_column(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("message", sa.Text(), nullable=True),
        sa.Column("product_id", sa.String(36), nullable=True),
        sa.Column("request_type", sa.String(50), nullable=True),
        sa.Column("status", sa.String(50), server_default=sa.text("'pending'"), nullable=False),
        _created_at_column(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_customer_requests_created_at",
        "customer_requests",
        [sa.text("created_at DESC")],
    )

    config = op.create_table(
        "config",
        sa.Column("id", sa.Integer(), autoincrement=False, nullable=False),
        sa.Column("store_name", sa.String(255), nullable=True),
        sa.Column("contact_email", sa.String(255), nullable=True),
        sa.Column("contact_phone", sa.String(50), nullable=True),
        sa.Column("whatsapp_number", sa.String(50), nullable=True),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("announcement", sa.Text(), nullable=True),
        sa.Column("settings", sa.JSON(), nullable=True),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("id = 1", name="ck_config_singleton"),
    )
    op.bulk_insert(config, [{"id": 1, "store_name": "Anjali Furniture"}])


def downgrade() -> None:
    op.drop_table("config")
    op.drop_index("idx_customer_requests_created_at", table_name="customer_requests")
    op.drop_table("customer_requests")
    op.drop_index("idx_woods_created_at", table_name="woods")
    op.drop_table("woods")
    op.drop_index("idx_products_created_at", table_name="products")
    op.drop_table("products")
