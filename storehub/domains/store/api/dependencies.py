"""
Store API Dependencies

FastAPI dependencies for the store domain.
"""

from collections.abc import AsyncGenerator

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from storehub.core.container import DependencyContainer, get_container
from storehub.database.async_db import get_async_db_context
from storehub.domains.store.api.envelope import RequestEnvelope


def get_dependency_container() -> DependencyContainer:
    """Get dependency container instance."""
    return get_container()


async def get_store_session(
    container: DependencyContainer = Depends(get_dependency_container),
) -> AsyncGenerator[AsyncSession | None, None]:
    """Yield the request's database session, or None with the memory backend."""
    if not container.uses_database:
        yield None
        return
    async with get_async_db_context() as session:
        yield session


def get_request_envelope(
    container: DependencyContainer = Depends(get_dependency_container),
    session: AsyncSession | None = Depends(get_store_session),
) -> RequestEnvelope:
    """Get a RequestEnvelope bound to this request's session."""
    return container.create_request_envelope(session)


def get_request_timeout(
    x_request_timeout: float | None = Header(default=None, gt=0, le=300),
) -> float | None:
    """Caller-supplied deadline in seconds (X-Request-Timeout header)."""
    return x_request_timeout


__all__ = [
    "get_dependency_container",
    "get_request_envelope",
    "get_request_timeout",
    "get_store_session",
]
