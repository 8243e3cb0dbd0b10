"""
Store Domain Tables

stores, accounts and categories. Every id is a native UUID; status columns
hold the exact lowercase status values.
"""

import uuid
from decimal import Decimal

from sqlalchemy import CheckConstraint, Double, ForeignKey, Index, Numeric, String, Text, UniqueConstraint
from sqlalchemy.dialects.postgresql import ARRAY, UUID
from sqlalchemy.orm import Mapped, mapped_column

from storehub.database.base import Base, TimestampMixin

STORE_ACCOUNT_UNIQUE = "uq_stores_account_id"


class CategoryModel(Base, TimestampMixin):
    """Store category. Written by the catalog subsystem, read here."""

    __tablename__ = "categories"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        comment="Category identifier",
    )
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Category name",
    )
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="pending",
        comment="pending, active or disable",
    )

    __table_args__ = (CheckConstraint("status IN ('pending', 'active', 'disable')", name="ck_categories_status"),)

    def __repr__(self) -> str:
        return f"<CategoryModel(id={self.id}, name='{self.name}', status='{self.status}')>"


class AccountModel(Base, TimestampMixin):
    """Monetary holder owned by exactly one store."""

    __tablename__ = "accounts"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        comment="Account identifier",
    )
    balance: Mapped[Decimal] = mapped_column(
        Numeric(20, 8),
        nullable=False,
        default=Decimal("0"),
        comment="Balance, never negative",
    )

    __table_args__ = (CheckConstraint("balance >= 0", name="ck_accounts_balance_non_negative"),)

    def __repr__(self) -> str:
        return f"<AccountModel(id={self.id}, balance={self.balance})>"


class StoreModel(Base, TimestampMixin):
    """Merchant profile."""

    __tablename__ = "stores"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        comment="Store identifier",
    )
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Store name",
    )
    description: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default="",
        comment="Short description",
    )
    image: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default="",
        comment="Image URI or empty",
    )
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default="pending",
        comment="pending, active, block or disable",
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        nullable=False,
        comment="Owning user (external)",
    )
    account_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("accounts.id"),
        nullable=False,
        comment="Account provisioned for this store",
    )
    category_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("categories.id"),
        nullable=False,
        comment="Store category",
    )
    tags: Mapped[list[str]] = mapped_column(
        ARRAY(Text),
        nullable=False,
        default=list,
        comment="Ordered tags, duplicates allowed",
    )
    lat: Mapped[float] = mapped_column(
        Double,
        nullable=False,
        default=0.0,
        comment="Latitude",
    )
    lng: Mapped[float] = mapped_column(
        Double,
        nullable=False,
        default=0.0,
        comment="Longitude",
    )

    __table_args__ = (
        UniqueConstraint("account_id", name=STORE_ACCOUNT_UNIQUE),
        Index("idx_stores_user_id", "user_id"),
        Index("idx_stores_category_id", "category_id"),
        Index("idx_stores_status", "status"),
        Index("idx_stores_created_at", "created_at"),
        Index("idx_stores_tags", "tags", postgresql_using="gin"),
        CheckConstraint("status IN ('pending', 'active', 'block', 'disable')", name="ck_stores_status"),
        CheckConstraint("lat BETWEEN -90 AND 90", name="ck_stores_lat"),
        CheckConstraint("lng BETWEEN -180 AND 180", name="ck_stores_lng"),
    )

    def __repr__(self) -> str:
        return f"<StoreModel(id={self.id}, name='{self.name}', status='{self.status}')>"
