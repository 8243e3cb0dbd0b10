"""Create store, account and category tables.

Revision ID: 001_create_store_tables
Revises:
Create Date: 2026-10-19

Tables:
- categories: classification taxon, read-only for this service
- accounts: one monetary holder per store, NUMERIC(20, 8) balance
- stores: merchant profiles with text[] tags and lat/lng
"""

from typing import Sequence, Union

import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import ARRAY, UUID

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001_create_store_tables"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    """Create categories, accounts and stores."""
    op.create_table(
        "categories",
        sa.Column(
            "id",
            UUID(as_uuid=True),
            primary_key=True,
            server_default=sa.text("gen_random_uuid()"),
            comment="Category identifier",
        ),
        sa.Column("name", sa.String(255), nullable=False, comment="Category name"),
        sa.Column(
            "status",
            sa.String(20),
            nullable=False,
            server_default="pending",
            comment="pending, active or disable",
        ),
        *_timestamps(),
        sa.CheckConstraint("status IN ('pending', 'active', 'disable')", name="ck_categories_status"),
    )

    op.create_table(
        "accounts",
        sa.Column(
            "id",
            UUID(as_uuid=True),
            primary_key=True,
            server_default=sa.text("gen_random_uuid()"),
            comment="Account identifier",
        ),
        sa.Column(
            "balance",
            sa.Numeric(20, 8),
            nullable=False,
            server_default="0",
            comment="Balance, never negative",
        ),
        *_timestamps(),
        sa.CheckConstraint("balance >= 0", name="ck_accounts_balance_non_negative"),
    )

    op.create_table(
        "stores",
        sa.Column(
            "id",
            UUID(as_uuid=True),
            primary_key=True,
            server_default=sa.text("gen_random_uuid()"),
            comment="Store identifier",
        ),
        sa.Column("name", sa.String(255), nullable=False, comment="Store name"),
        sa.Column("description", sa.String(255), nullable=False, server_default="", comment="Short description"),
        sa.Column("image", sa.String(255), nullable=False, server_default="", comment="Image URI or empty"),
        sa.Column(
            "status",
            sa.String(20),
            nullable=False,
            server_default="pending",
            comment="pending, active, block or disable",
        ),
        sa.Column("user_id", UUID(as_uuid=True), nullable=False, comment="Owning user (external)"),
        sa.Column(
            "account_id",
            UUID(as_uuid=True),
            sa.ForeignKey("accounts.id"),
            nullable=False,
            comment="Account provisioned for this store",
        ),
        sa.Column(
            "category_id",
            UUID(as_uuid=True),
            sa.ForeignKey("categories.id"),
            nullable=False,
            comment="Store category",
        ),
        sa.Column(
            "tags",
            ARRAY(sa.Text()),
            nullable=False,
            server_default=sa.text("'{}'::text[]"),
            comment="Ordered tags, duplicates allowed",
        ),
        sa.Column("lat", sa.Double(), nullable=False, server_default="0", comment="Latitude"),
        sa.Column("lng", sa.Double(), nullable=False, server_default="0", comment="Longitude"),
        *_timestamps(),
        sa.UniqueConstraint("account_id", name="uq_stores_account_id"),
        sa.CheckConstraint("status IN ('pending', 'active', 'block', 'disable')", name="ck_stores_status"),
        sa.CheckConstraint("lat BETWEEN -90 AND 90", name="ck_stores_lat"),
        sa.CheckConstraint("lng BETWEEN -180 AND 180", name="ck_stores_lng"),
    )

    op.create_index("idx_stores_user_id", "stores", ["user_id"])
    op.create_index("idx_stores_category_id", "stores", ["category_id"])
    op.create_index("idx_stores_status", "stores", ["status"])
    op.create_index("idx_stores_created_at", "stores", ["created_at"])
    op.create_index("idx_stores_tags", "stores", ["tags"], postgresql_using="gin")


def downgrade() -> None:
    """Drop stores, accounts and categories."""
    op.drop_index("idx_stores_tags", table_name="stores")
    op.drop_index("idx_stores_created_at", table_name="stores")
    op.drop_index("idx_stores_status", table_name="stores")
    op.drop_index("idx_stores_category_id", table_name="stores")
    op.drop_index("idx_stores_user_id", table_name="stores")
    op.drop_table("stores")
    op.drop_table("accounts")
    op.drop_table("categories")
