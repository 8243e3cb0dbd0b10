"""
Delete Store Use Case

Removes a store and then its account.
"""

import logging

from storehub.domains.store.application.events import StoreEventEmitter
from storehub.domains.store.application.ports import IAccountRepository, IStoreRepository, IUnitOfWork
from storehub.domains.store.domain.entities import Store

from .base import transaction

logger = logging.getLogger(__name__)


class DeleteStoreUseCase:
    """
    Use Case: Delete Store

    The store row goes first so no store is ever left pointing at a missing
    account. The event carries the store as it was before deletion.
    """

    def __init__(
        self,
        store_repository: IStoreRepository,
        account_repository: IAccountRepository,
        unit_of_work: IUnitOfWork,
        events: StoreEventEmitter,
    ):
        self.store_repository = store_repository
        self.account_repository = account_repository
        self.unit_of_work = unit_of_work
        self.events = events

    async def execute(self, store_id: str) -> Store:
        store = await self.store_repository.find_by_id(store_id)

        async with transaction(self.unit_of_work):
            await self.store_repository.delete(store.id)
            await self.account_repository.delete(store.account_id)

        logger.info(f"Store deleted: {store.id} (account {store.account_id})")

        await self.events.store_deleted(store)
        return store


__all__ = ["DeleteStoreUseCase"]
