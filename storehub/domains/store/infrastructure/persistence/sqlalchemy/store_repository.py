"""
Store Repository Implementation

SQLAlchemy implementation of IStoreRepository.
"""

import uuid

from sqlalchemy import ColumnElement, delete, func, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from storehub.core.domain import (
    DuplicateEntityException,
    EntityNotFoundException,
    RepositoryException,
    ValidationException,
)
from storehub.core.shared.logger import get_repository_logger
from storehub.domains.store.application.ports import IStoreRepository
from storehub.domains.store.domain.entities import Store
from storehub.domains.store.domain.value_objects import Position, SortSpec, StoreFilter, StoreStatus

from .common import is_unique_violation, parse_uuid, violated_constraint
from .models import STORE_ACCOUNT_UNIQUE, StoreModel

logger = get_repository_logger("store")


class SQLAlchemyStoreRepository(IStoreRepository):
    """
    SQLAlchemy implementation of store repository.

    Mutations are flushed immediately so constraint violations surface at
    the call site; committing is left to the unit of work.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository.

        Args:
            session: SQLAlchemy async session shared with the unit of work
        """
        self.session = session

    async def create(self, store: Store) -> None:
        try:
            self.session.add(self._to_model(store))
            await self.session.flush()
        except IntegrityError as e:
            await self.session.rollback()
            if is_unique_violation(e):
                if violated_constraint(e) == STORE_ACCOUNT_UNIQUE:
                    raise DuplicateEntityException("Store", "account_id", store.account_id) from e
                raise DuplicateEntityException("Store", "id", store.id) from e
            raise ValidationException(f"Store references a missing record: {e.orig}", field="category_id") from e
        except SQLAlchemyError as e:
            logger.error(f"Error creating store {store.id}: {e}")
            raise RepositoryException("create", "Failed to create store", e) from e

    async def find_by_id(self, store_id: str) -> Store:
        model_id = parse_uuid(store_id, "Store")
        try:
            result = await self.session.execute(select(StoreModel).where(StoreModel.id == model_id))
            model = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Error getting store {store_id}: {e}")
            raise RepositoryException("find_by_id", "Failed to load store", e) from e

        if model is None:
            raise EntityNotFoundException("Store", store_id)
        return self._to_entity(model)

    async def find_by_name(self, name: str) -> Store:
        try:
            result = await self.session.execute(
                select(StoreModel).where(StoreModel.name == name).order_by(StoreModel.created_at).limit(1)
            )
            model = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Error getting store by name '{name}': {e}")
            raise RepositoryException("find_by_name", "Failed to load store", e) from e

        if model is None:
            raise EntityNotFoundException("Store", name, message=f"Store named '{name}' not found")
        return self._to_entity(model)

    async def find_all(
        self,
        sort: SortSpec,
        limit: int,
        page: int,
        filters: StoreFilter | None = None,
    ) -> tuple[list[Store], int]:
        conditions = self._filter_conditions(filters)
        column = getattr(StoreModel, sort.column)
        order = column.desc() if sort.descending else column.asc()

        query = (
            select(StoreModel)
            .where(*conditions)
            .order_by(order, StoreModel.id)
            .offset((page - 1) * limit)
            .limit(limit)
        )
        count_query = select(func.count()).select_from(StoreModel).where(*conditions)

        try:
            result = await self.session.execute(query)
            models = result.scalars().all()
            total = (await self.session.execute(count_query)).scalar_one()
        except SQLAlchemyError as e:
            logger.error(f"Error listing stores ({sort}, limit={limit}, page={page}): {e}")
            raise RepositoryException("find_all", "Failed to list stores", e) from e

        return [self._to_entity(m) for m in models], int(total)

    async def update(self, store: Store) -> None:
        model_id = parse_uuid(store.id, "Store")
        stmt = (
            update(StoreModel)
            .where(StoreModel.id == model_id)
            .values(
                name=store.name,
                description=store.description,
                image=store.image,
                status=store.status.value,
                category_id=uuid.UUID(store.category_id),
                tags=list(store.tags),
                lat=store.lat,
                lng=store.lng,
                updated_at=store.updated_at,
            )
        )
        try:
            result = await self.session.execute(stmt)
        except IntegrityError as e:
            await self.session.rollback()
            raise ValidationException(f"Store references a missing record: {e.orig}", field="category_id") from e
        except SQLAlchemyError as e:
            logger.error(f"Error updating store {store.id}: {e}")
            raise RepositoryException("update", "Failed to update store", e) from e

        if result.rowcount == 0:
            raise EntityNotFoundException("Store", store.id)

    async def delete(self, store_id: str) -> None:
        model_id = parse_uuid(store_id, "Store")
        try:
            result = await self.session.execute(delete(StoreModel).where(StoreModel.id == model_id))
        except SQLAlchemyError as e:
            logger.error(f"Error deleting store {store_id}: {e}")
            raise RepositoryException("delete", "Failed to delete store", e) from e

        if result.rowcount == 0:
            raise EntityNotFoundException("Store", store_id)

    # Helpers

    @staticmethod
    def _filter_conditions(filters: StoreFilter | None) -> list[ColumnElement[bool]]:
        if filters is None:
            return []
        conditions: list[ColumnElement[bool]] = []
        if filters.user_id is not None:
            conditions.append(StoreModel.user_id == uuid.UUID(filters.user_id))
        if filters.status is not None:
            conditions.append(StoreModel.status == filters.status.value)
        if filters.category_id is not None:
            conditions.append(StoreModel.category_id == uuid.UUID(filters.category_id))
        if filters.tags:
            conditions.append(StoreModel.tags.overlap(list(filters.tags)))
        return conditions

    @staticmethod
    def _to_model(store: Store) -> StoreModel:
        return StoreModel(
            id=uuid.UUID(store.id),
            name=store.name,
            description=store.description,
            image=store.image,
            status=store.status.value,
            user_id=uuid.UUID(store.user_id),
            account_id=uuid.UUID(store.account_id),
            category_id=uuid.UUID(store.category_id),
            tags=list(store.tags),
            lat=store.lat,
            lng=store.lng,
            created_at=store.created_at,
            updated_at=store.updated_at,
        )

    @staticmethod
    def _to_entity(model: StoreModel) -> Store:
        return Store(
            id=str(model.id),
            name=model.name,
            description=model.description or "",
            image=model.image or "",
            status=StoreStatus.from_string(model.status),
            user_id=str(model.user_id),
            account_id=str(model.account_id),
            category_id=str(model.category_id),
            tags=list(model.tags or []),
            position=Position(lat=model.lat, lng=model.lng),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
