"""
Create Store Use Case

Provisions an account and persists a new pending store under an active category.
"""

import logging

from storehub.core.domain import ValidationException, is_canonical_id
from storehub.domains.store.application.dto import CreateStoreRequest
from storehub.domains.store.application.events import StoreEventEmitter
from storehub.domains.store.application.ports import (
    IAccountRepository,
    ICategoryRepository,
    IStoreRepository,
    IUnitOfWork,
)
from storehub.domains.store.domain.entities import Account, Store
from storehub.domains.store.domain.value_objects import CategoryStatus

from .base import transaction

logger = logging.getLogger(__name__)


class CreateStoreUseCase:
    """
    Use Case: Create Store

    Responsibilities:
    - Require the category to exist and be active
    - Provision a zero-balance account
    - Persist the store linked to that account
    - Publish the new store to the "new" topic
    """

    def __init__(
        self,
        store_repository: IStoreRepository,
        account_repository: IAccountRepository,
        category_repository: ICategoryRepository,
        unit_of_work: IUnitOfWork,
        events: StoreEventEmitter,
    ):
        self.store_repository = store_repository
        self.account_repository = account_repository
        self.category_repository = category_repository
        self.unit_of_work = unit_of_work
        self.events = events

    async def execute(self, request: CreateStoreRequest) -> Store:
        """
        Create a store.

        Args:
            request: Store creation request

        Returns:
            The persisted store, status PENDING

        Raises:
            EntityNotFoundException: Category missing or not active
            ValidationException: Invalid store fields
            DuplicateEntityException: Id collision in a repository
            RepositoryException: Backend failure
            EventPublishException: Store persisted but not published
        """
        if not is_canonical_id(request.category_id):
            raise ValidationException(f"Invalid category_id: {request.category_id!r}", field="category_id")

        category = await self.category_repository.find_by_id(request.category_id, status=CategoryStatus.ACTIVE)

        async with transaction(self.unit_of_work):
            account = Account.create()
            await self.account_repository.store(account)

            store = Store.create(
                name=request.name,
                description=request.description,
                user_id=request.user_id,
                category_id=category.id,
                account_id=account.id,
                tags=request.tags,
                lat=request.lat,
                lng=request.lng,
                image=request.image,
            )
            await self.store_repository.create(store)

        logger.info(f"Store created: {store.id} (account {account.id}, category {category.id})")

        await self.events.store_created(store)
        return store


__all__ = ["CreateStoreUseCase"]
