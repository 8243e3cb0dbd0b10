"""
Change Store Status Use Case

Activate, block or disable a store.
"""

import logging

from storehub.domains.store.application.events import StoreEventEmitter
from storehub.domains.store.application.ports import IStoreRepository, IUnitOfWork
from storehub.domains.store.domain.entities import Store
from storehub.domains.store.domain.value_objects import StoreAction

from .base import transaction

logger = logging.getLogger(__name__)


class ChangeStoreStatusUseCase:
    """
    Use Case: Change Store Status

    Loads the store, applies the transition, persists it and publishes the
    result to the "update" topic. A rejected transition raises before
    anything is written or published.
    """

    def __init__(
        self,
        store_repository: IStoreRepository,
        unit_of_work: IUnitOfWork,
        events: StoreEventEmitter,
    ):
        self.store_repository = store_repository
        self.unit_of_work = unit_of_work
        self.events = events

    async def execute(self, store_id: str, action: StoreAction) -> Store:
        """
        Apply a status transition.

        Raises:
            EntityNotFoundException: Unknown store
            InvalidOperationException: Transition not allowed from the
                current status
        """
        store = await self.store_repository.find_by_id(store_id)
        previous = store.status

        store.apply(action)

        async with transaction(self.unit_of_work):
            await self.store_repository.update(store)

        logger.info(f"Store {store.id} {action.value}: {previous.value} -> {store.status.value}")

        await self.events.store_updated(store)
        return store


__all__ = ["ChangeStoreStatusUseCase"]
