"""
In-Memory Repositories

Process-local implementations of the store, account and category ports.
Used by the test suite and by STORAGE_BACKEND=memory. Entities are copied
on the way in and out so callers never share state with the store.
"""

import asyncio
import copy

from storehub.core.domain import DuplicateEntityException, EntityNotFoundException
from storehub.domains.store.application.ports import (
    IAccountRepository,
    ICategoryRepository,
    IStoreRepository,
    IUnitOfWork,
)
from storehub.domains.store.domain.entities import Account, Category, Store
from storehub.domains.store.domain.value_objects import CategoryStatus, SortSpec, StoreFilter


class InMemoryStoreRepository(IStoreRepository):
    """Dictionary-backed store repository."""

    def __init__(self):
        self._stores: dict[str, Store] = {}
        self._lock = asyncio.Lock()

    async def create(self, store: Store) -> None:
        async with self._lock:
            if store.id in self._stores:
                raise DuplicateEntityException("Store", "id", store.id)
            self._stores[store.id] = copy.deepcopy(store)

    async def find_by_id(self, store_id: str) -> Store:
        async with self._lock:
            store = self._stores.get(store_id)
            if store is None:
                raise EntityNotFoundException("Store", store_id)
            return copy.deepcopy(store)

    async def find_by_name(self, name: str) -> Store:
        async with self._lock:
            matches = [s for s in self._stores.values() if s.name == name]
            if not matches:
                raise EntityNotFoundException("Store", name, message=f"Store named '{name}' not found")
            return copy.deepcopy(min(matches, key=lambda s: s.created_at))

    async def find_all(
        self,
        sort: SortSpec,
        limit: int,
        page: int,
        filters: StoreFilter | None = None,
    ) -> tuple[list[Store], int]:
        async with self._lock:
            stores = list(self._stores.values())
            if filters is not None:
                stores = [s for s in stores if filters.matches(s)]

            stores.sort(key=lambda s: s.id)
            stores.sort(key=sort.sort_key, reverse=sort.descending)

            offset = (page - 1) * limit
            return [copy.deepcopy(s) for s in stores[offset : offset + limit]], len(stores)

    async def update(self, store: Store) -> None:
        async with self._lock:
            if store.id not in self._stores:
                raise EntityNotFoundException("Store", store.id)
            self._stores[store.id] = copy.deepcopy(store)

    async def delete(self, store_id: str) -> None:
        async with self._lock:
            if self._stores.pop(store_id, None) is None:
                raise EntityNotFoundException("Store", store_id)

    def count(self) -> int:
        return len(self._stores)


class InMemoryAccountRepository(IAccountRepository):
    """Dictionary-backed account repository."""

    def __init__(self):
        self._accounts: dict[str, Account] = {}
        self._lock = asyncio.Lock()

    async def store(self, account: Account) -> None:
        async with self._lock:
            if account.id in self._accounts:
                raise DuplicateEntityException("Account", "id", account.id)
            self._accounts[account.id] = copy.deepcopy(account)

    async def find_by_id(self, account_id: str) -> Account:
        async with self._lock:
            account = self._accounts.get(account_id)
            if account is None:
                raise EntityNotFoundException("Account", account_id)
            return copy.deepcopy(account)

    async def update(self, account: Account) -> None:
        async with self._lock:
            if account.id not in self._accounts:
                raise EntityNotFoundException("Account", account.id)
            self._accounts[account.id] = copy.deepcopy(account)

    async def delete(self, account_id: str) -> None:
        async with self._lock:
            if self._accounts.pop(account_id, None) is None:
                raise EntityNotFoundException("Account", account_id)

    def count(self) -> int:
        return len(self._accounts)


class InMemoryCategoryRepository(ICategoryRepository):
    """Dictionary-backed category lookup, seeded with add()."""

    def __init__(self, categories: list[Category] | None = None):
        self._categories: dict[str, Category] = {}
        for category in categories or []:
            self.add(category)

    def add(self, category: Category) -> Category:
        self._categories[category.id] = copy.deepcopy(category)
        return category

    async def find_by_id(self, category_id: str, status: CategoryStatus | None = None) -> Category:
        category = self._categories.get(category_id)
        if category is None or (status is not None and category.status != status):
            raise EntityNotFoundException("Category", category_id)
        return copy.deepcopy(category)


class NullUnitOfWork(IUnitOfWork):
    """Unit of work for backends without transactions. Counts calls."""

    def __init__(self):
        self.commits = 0
        self.rollbacks = 0

    async def commit(self) -> None:
        self.commits += 1

    async def rollback(self) -> None:
        self.rollbacks += 1
