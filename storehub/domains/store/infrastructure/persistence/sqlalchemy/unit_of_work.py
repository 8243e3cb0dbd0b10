"""
SQLAlchemy Unit of Work

Commits or rolls back the session shared by the store, account and
category repositories of one request.
"""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from storehub.core.domain import RepositoryException
from storehub.core.shared.logger import get_repository_logger
from storehub.domains.store.application.ports import IUnitOfWork

logger = get_repository_logger("unit_of_work")


class SQLAlchemyUnitOfWork(IUnitOfWork):
    def __init__(self, session: AsyncSession):
        self.session = session

    async def commit(self) -> None:
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Commit failed: {e}")
            raise RepositoryException("commit", "Failed to commit transaction", e) from e

    async def rollback(self) -> None:
        try:
            await self.session.rollback()
        except SQLAlchemyError as e:
            logger.error(f"Rollback failed: {e}")
            raise RepositoryException("rollback", "Failed to roll back transaction", e) from e
