"""
Account Repository Implementation

SQLAlchemy implementation of IAccountRepository.
"""

import uuid

from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from storehub.core.domain import DuplicateEntityException, EntityNotFoundException, RepositoryException
from storehub.core.shared.logger import get_repository_logger
from storehub.domains.store.application.ports import IAccountRepository
from storehub.domains.store.domain.entities import Account

from .common import parse_uuid
from .models import AccountModel

logger = get_repository_logger("account")


class SQLAlchemyAccountRepository(IAccountRepository):
    """SQLAlchemy implementation of account repository."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def store(self, account: Account) -> None:
        try:
            self.session.add(
                AccountModel(
                    id=uuid.UUID(account.id),
                    balance=account.balance,
                    created_at=account.created_at,
                    updated_at=account.updated_at,
                )
            )
            await self.session.flush()
        except IntegrityError as e:
            await self.session.rollback()
            raise DuplicateEntityException("Account", "id", account.id) from e
        except SQLAlchemyError as e:
            logger.error(f"Error storing account {account.id}: {e}")
            raise RepositoryException("store", "Failed to store account", e) from e

    async def find_by_id(self, account_id: str) -> Account:
        model_id = parse_uuid(account_id, "Account")
        try:
            result = await self.session.execute(select(AccountModel).where(AccountModel.id == model_id))
            model = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(f"Error getting account {account_id}: {e}")
            raise RepositoryException("find_by_id", "Failed to load account", e) from e

        if model is None:
            raise EntityNotFoundException("Account", account_id)
        return Account(
            id=str(model.id),
            balance=model.balance,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    async def update(self, account: Account) -> None:
        model_id = parse_uuid(account.id, "Account")
        try:
            result = await self.session.execute(
                update(AccountModel)
                .where(AccountModel.id == model_id)
                .values(balance=account.balance, updated_at=account.updated_at)
            )
        except SQLAlchemyError as e:
            logger.error(f"Error updating account {account.id}: {e}")
            raise RepositoryException("update", "Failed to update account", e) from e

        if result.rowcount == 0:
            raise EntityNotFoundException("Account", account.id)

    async def delete(self, account_id: str) -> None:
        model_id = parse_uuid(account_id, "Account")
        try:
            result = await self.session.execute(delete(AccountModel).where(AccountModel.id == model_id))
        except SQLAlchemyError as e:
            logger.error(f"Error deleting account {account_id}: {e}")
            raise RepositoryException("delete", "Failed to delete account", e) from e

        if result.rowcount == 0:
            raise EntityNotFoundException("Account", account_id)
