"""
Store Domain Value Objects
"""

from .position import Position
from .sort import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    SORTABLE_COLUMNS,
    SortSpec,
    StoreFilter,
)
from .store_status import (
    STORE_TRANSITIONS,
    CategoryStatus,
    StoreAction,
    StoreStatus,
    allowed_actions,
    next_store_status,
)

__all__ = [
    "Position",
    "SortSpec",
    "StoreFilter",
    "SORTABLE_COLUMNS",
    "DEFAULT_LIMIT",
    "DEFAULT_PAGE",
    "StoreStatus",
    "CategoryStatus",
    "StoreAction",
    "STORE_TRANSITIONS",
    "next_store_status",
    "allowed_actions",
]
