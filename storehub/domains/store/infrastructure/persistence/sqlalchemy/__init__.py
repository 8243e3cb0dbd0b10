"""
SQLAlchemy persistence for the Store domain.
"""

from .account_repository import SQLAlchemyAccountRepository
from .category_repository import SQLAlchemyCategoryRepository
from .models import AccountModel, CategoryModel, StoreModel
from .store_repository import SQLAlchemyStoreRepository
from .unit_of_work import SQLAlchemyUnitOfWork

__all__ = [
    "AccountModel",
    "CategoryModel",
    "StoreModel",
    "SQLAlchemyAccountRepository",
    "SQLAlchemyCategoryRepository",
    "SQLAlchemyStoreRepository",
    "SQLAlchemyUnitOfWork",
]
