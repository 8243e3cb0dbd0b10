"""
Category Repository Implementation

Read-only SQLAlchemy implementation of ICategoryRepository.
"""

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from storehub.core.domain import EntityNotFoundException, RepositoryException
from storehub.core.shared.logger import get_repository_logger
from storehub.domains.store.application.ports import ICategoryRepository
from storehub.domains.store.domain.entities import Category
from storehub.domains.store.domain.value_objects import CategoryStatus

from .common import parse_uuid
from .models import CategoryModel

logger = get_repository_logger("category")


class SQLAlchemyCategoryRepository(ICategoryRepository):
    """SQLAlchemy implementation of category repository."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def find_by_id(self, category_id: str, status: CategoryStatus | None = None) -> Category:
        """
        Get category by ID.

        Args:
            category_id: Canonical category id
            status: When given, a category in any other status is not found
        """
        query = select(CategoryModel).where(CategoryModel.id == parse_uuid(category_id, "Category"))
        if status is not None:
            query = query.where(CategoryModel.status == status.value)

        try:
            result = await self.session.execute(query)
            model = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Error getting category {category_id}: {e}")
            raise RepositoryException("find_by_id", "Failed to load category", e) from e

        if model is None:
            raise EntityNotFoundException("Category", category_id)
        return Category(
            id=str(model.id),
            name=model.name,
            status=CategoryStatus.from_string(model.status),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
