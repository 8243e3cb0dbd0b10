"""
Get Store Use Case
"""

from storehub.core.domain import EntityNotFoundException
from storehub.domains.store.application.ports import IStoreRepository
from storehub.domains.store.domain.entities import Store


class GetStoreUseCase:
    """
    Use Case: Get Store

    Loads a store by id, optionally requiring that it belongs to an owner.
    A store owned by someone else is reported as not found.
    """

    def __init__(self, store_repository: IStoreRepository):
        self.store_repository = store_repository

    async def execute(self, store_id: str, owner_id: str | None = None) -> Store:
        store = await self.store_repository.find_by_id(store_id)
        if owner_id is not None and not store.belongs_to(owner_id):
            raise EntityNotFoundException("Store", store_id)
        return store


__all__ = ["GetStoreUseCase"]
