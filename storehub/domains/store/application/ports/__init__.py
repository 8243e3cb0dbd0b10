"""
Store Application Ports

Interface definitions (ports) for the Store domain.
Uses Protocol for structural typing.

Every repository raises typed domain exceptions instead of returning None:
EntityNotFoundException for missing rows, DuplicateEntityException for
identity collisions and RepositoryException for any backend failure.
"""

from typing import Protocol, runtime_checkable

from storehub.domains.store.domain.entities import Account, Category, Store
from storehub.domains.store.domain.value_objects import CategoryStatus, SortSpec, StoreFilter


@runtime_checkable
class IStoreRepository(Protocol):
    """
    Interface for store repository.

    Defines the contract for store data access.
    """

    async def create(self, store: Store) -> None:
        """Insert a new store"""
        ...

    async def find_by_id(self, store_id: str) -> Store:
        """Get store by ID"""
        ...

    async def find_by_name(self, name: str) -> Store:
        """Get store by exact name"""
        ...

    async def find_all(
        self,
        sort: SortSpec,
        limit: int,
        page: int,
        filters: StoreFilter | None = None,
    ) -> tuple[list[Store], int]:
        """Get one page of stores and the total count matching filters"""
        ...

    async def update(self, store: Store) -> None:
        """Persist every mutable field of an existing store"""
        ...

    async def delete(self, store_id: str) -> None:
        """Delete store by ID"""
        ...


@runtime_checkable
class IAccountRepository(Protocol):
    """
    Interface for account repository.

    Defines the contract for account data access.
    """

    async def store(self, account: Account) -> None:
        """Insert a new account"""
        ...

    async def find_by_id(self, account_id: str) -> Account:
        """Get account by ID"""
        ...

    async def update(self, account: Account) -> None:
        """Persist the account balance"""
        ...

    async def delete(self, account_id: str) -> None:
        """Delete account by ID"""
        ...


@runtime_checkable
class ICategoryRepository(Protocol):
    """
    Interface for category repository.

    Read-only; categories are managed by another subsystem.
    """

    async def find_by_id(self, category_id: str, status: CategoryStatus | None = None) -> Category:
        """Get category by ID, optionally requiring a status"""
        ...


@runtime_checkable
class IEventPublisher(Protocol):
    """
    Interface for the lifecycle event publisher.

    Events for one key must be delivered in call order.
    """

    async def publish(self, payload: str, topic: str, key: str) -> None:
        """Publish one serialized store to a topic"""
        ...


@runtime_checkable
class IUnitOfWork(Protocol):
    """
    Interface for the transaction boundary shared by the repositories
    of one request.
    """

    async def commit(self) -> None:
        """Commit pending repository mutations"""
        ...

    async def rollback(self) -> None:
        """Discard pending repository mutations"""
        ...


__all__ = [
    "IStoreRepository",
    "IAccountRepository",
    "ICategoryRepository",
    "IEventPublisher",
    "IUnitOfWork",
]
