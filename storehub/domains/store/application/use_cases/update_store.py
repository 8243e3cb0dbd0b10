"""
Update Store Use Case

Replaces the editable fields of an existing store.
"""

import logging

from storehub.core.domain import ValidationException, is_canonical_id
from storehub.domains.store.application.dto import UpdateStoreRequest
from storehub.domains.store.application.events import StoreEventEmitter
from storehub.domains.store.application.ports import ICategoryRepository, IStoreRepository, IUnitOfWork
from storehub.domains.store.domain.entities import Store

from .base import transaction

logger = logging.getLogger(__name__)


class UpdateStoreUseCase:
    """
    Use Case: Update Store

    Identity, owner, account, status and created_at are taken from the
    stored record; only the descriptive fields, category, tags and
    position are replaced. A new category must exist, in any status.
    """

    def __init__(
        self,
        store_repository: IStoreRepository,
        category_repository: ICategoryRepository,
        unit_of_work: IUnitOfWork,
        events: StoreEventEmitter,
    ):
        self.store_repository = store_repository
        self.category_repository = category_repository
        self.unit_of_work = unit_of_work
        self.events = events

    async def execute(self, request: UpdateStoreRequest) -> Store:
        store = await self.store_repository.find_by_id(request.id)

        if request.category_id != store.category_id:
            if not is_canonical_id(request.category_id):
                raise ValidationException(f"Invalid category_id: {request.category_id!r}", field="category_id")
            await self.category_repository.find_by_id(request.category_id)

        store.replace_details(
            name=request.name,
            description=request.description,
            category_id=request.category_id,
            image=request.image,
            tags=request.tags,
            lat=request.lat,
            lng=request.lng,
        )

        async with transaction(self.unit_of_work):
            await self.store_repository.update(store)

        logger.info(f"Store updated: {store.id}")

        await self.events.store_updated(store)
        return store


__all__ = ["UpdateStoreUseCase"]
