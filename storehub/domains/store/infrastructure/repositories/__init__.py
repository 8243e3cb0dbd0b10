"""
Store Domain Repositories
"""

from storehub.domains.store.infrastructure.persistence.sqlalchemy import (
    SQLAlchemyAccountRepository,
    SQLAlchemyCategoryRepository,
    SQLAlchemyStoreRepository,
    SQLAlchemyUnitOfWork,
)

from .memory import (
    InMemoryAccountRepository,
    InMemoryCategoryRepository,
    InMemoryStoreRepository,
    NullUnitOfWork,
)

__all__ = [
    "SQLAlchemyStoreRepository",
    "SQLAlchemyAccountRepository",
    "SQLAlchemyCategoryRepository",
    "SQLAlchemyUnitOfWork",
    "InMemoryStoreRepository",
    "InMemoryAccountRepository",
    "InMemoryCategoryRepository",
    "NullUnitOfWork",
]
