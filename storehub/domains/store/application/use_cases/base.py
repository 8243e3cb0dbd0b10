"""
Shared helpers for store use cases.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from storehub.domains.store.application.ports import IUnitOfWork


@asynccontextmanager
async def transaction(unit_of_work: IUnitOfWork) -> AsyncIterator[None]:
    """
    Commit the enclosed repository mutations, or roll them back on error.

    Usage:
        async with transaction(self.unit_of_work):
            await self.store_repository.update(store)
        await self.events.store_updated(store)
    """
    try:
        yield
        await unit_of_work.commit()
    except Exception:
        await unit_of_work.rollback()
        raise
