"""
Store Application DTOs

Data Transfer Objects for the Store domain.
"""

from dataclasses import dataclass, field

from storehub.domains.store.domain.entities import Store
from storehub.domains.store.domain.value_objects import StoreFilter

# ==================== Command DTOs ====================


@dataclass
class CreateStoreRequest:
    """Request for creating a store"""

    name: str
    description: str
    category_id: str
    user_id: str
    tags: list[str] = field(default_factory=list)
    lat: float = 0.0
    lng: float = 0.0
    image: str = ""


@dataclass
class UpdateStoreRequest:
    """Request for replacing the editable fields of a store"""

    id: str
    name: str
    description: str
    category_id: str
    image: str = ""
    tags: list[str] = field(default_factory=list)
    lat: float = 0.0
    lng: float = 0.0


# ==================== Query DTOs ====================


@dataclass
class ListStoresRequest:
    """Request for one page of stores"""

    sort: str = ""
    limit: int = 0
    page: int = 0
    filters: StoreFilter | None = None


@dataclass
class StorePage:
    """One page of stores"""

    stores: list[Store]
    total: int
    page: int
    limit: int
    sort: str

    @property
    def has_next(self) -> bool:
        return self.page * self.limit < self.total


__all__ = [
    "CreateStoreRequest",
    "UpdateStoreRequest",
    "ListStoresRequest",
    "StorePage",
]
