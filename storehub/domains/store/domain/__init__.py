"""
Store Domain Layer

Entities and value objects for stores, their accounts and categories.
"""

from .entities import Account, Category, Store
from .value_objects import (
    CategoryStatus,
    Position,
    SortSpec,
    StoreAction,
    StoreFilter,
    StoreStatus,
)

__all__ = [
    "Account",
    "Category",
    "Store",
    "CategoryStatus",
    "Position",
    "SortSpec",
    "StoreAction",
    "StoreFilter",
    "StoreStatus",
]
