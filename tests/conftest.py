"""
Shared pytest fixtures for all tests.

This module provides in-memory adapters, mock sessions and clients,
sample domain objects and a FastAPI test client wired to the memory
backends.
"""

import os
from collections.abc import Generator
from unittest.mock import AsyncMock, MagicMock, Mock

import pytest
from fastapi.testclient import TestClient
from redis.asyncio import Redis
from sqlalchemy.ext.asyncio import AsyncSession

# Ensure test environment
os.environ["ENVIRONMENT"] = "test"
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["EVENT_BACKEND"] = "memory"

from storehub.config.settings import Settings  # noqa: E402
from storehub.core.container import DependencyContainer, set_container  # noqa: E402
from storehub.core.domain import generate_uuid_str  # noqa: E402
from storehub.domains.store.application import StoreLifecycleCoordinator, StoreTopics  # noqa: E402
from storehub.domains.store.application.dto import CreateStoreRequest  # noqa: E402
from storehub.domains.store.domain.entities import Category, Store  # noqa: E402
from storehub.domains.store.domain.value_objects import CategoryStatus  # noqa: E402
from storehub.domains.store.infrastructure.messaging import InMemoryEventPublisher  # noqa: E402
from storehub.domains.store.infrastructure.repositories import (  # noqa: E402
    InMemoryAccountRepository,
    InMemoryCategoryRepository,
    InMemoryStoreRepository,
    NullUnitOfWork,
)

# ============================================================================
# SETTINGS FIXTURES
# ============================================================================


@pytest.fixture
def test_settings() -> Settings:
    """Settings for the memory backends, ignoring any local .env file."""
    return Settings(
        _env_file=None,
        ENVIRONMENT="test",
        STORAGE_BACKEND="memory",
        EVENT_BACKEND="memory",
        REQUEST_TIMEOUT_SECONDS=5.0,
    )


# ============================================================================
# DATABASE FIXTURES
# ============================================================================


@pytest.fixture
def mock_async_session():
    """Create a mock async database session."""
    session = AsyncMock(spec=AsyncSession)
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.flush = AsyncMock()
    session.add = MagicMock()
    return session


# ============================================================================
# REDIS FIXTURES
# ============================================================================


@pytest.fixture
def mock_redis() -> Mock:
    """Create a mock Redis client."""
    mock = Mock(spec=Redis)
    mock.ping = AsyncMock(return_value=True)
    mock.xadd = AsyncMock(return_value="1700000000000-0")
    mock.aclose = AsyncMock()
    return mock


# ============================================================================
# DOMAIN FIXTURES
# ============================================================================


@pytest.fixture
def user_id() -> str:
    return generate_uuid_str()


@pytest.fixture
def active_category() -> Category:
    """An active category that accepts new stores."""
    category = Category.create("Food")
    category.status = CategoryStatus.ACTIVE
    return category


@pytest.fixture
def pending_category() -> Category:
    return Category.create("Pending")


@pytest.fixture
def sample_store(user_id, active_category) -> Store:
    """A pending store with a fresh account id."""
    return Store.create(
        name="Coffee",
        description="Fresh coffee",
        user_id=user_id,
        category_id=active_category.id,
        account_id=generate_uuid_str(),
        tags=["hot", "drink"],
        lat=-8.8867698,
        lng=13.4771186,
    )


@pytest.fixture
def create_request(user_id, active_category) -> CreateStoreRequest:
    return CreateStoreRequest(
        name="Coffee",
        description="Fresh coffee",
        category_id=active_category.id,
        user_id=user_id,
        tags=["hot", "drink"],
        lat=-8.8867698,
        lng=13.4771186,
    )


# ============================================================================
# IN-MEMORY ADAPTER FIXTURES
# ============================================================================


@pytest.fixture
def store_repository() -> InMemoryStoreRepository:
    return InMemoryStoreRepository()


@pytest.fixture
def account_repository() -> InMemoryAccountRepository:
    return InMemoryAccountRepository()


@pytest.fixture
def category_repository(active_category, pending_category) -> InMemoryCategoryRepository:
    return InMemoryCategoryRepository([active_category, pending_category])


@pytest.fixture
def event_publisher() -> InMemoryEventPublisher:
    return InMemoryEventPublisher()


@pytest.fixture
def unit_of_work() -> NullUnitOfWork:
    return NullUnitOfWork()


@pytest.fixture
def coordinator(
    store_repository,
    account_repository,
    category_repository,
    event_publisher,
    unit_of_work,
) -> StoreLifecycleCoordinator:
    """Coordinator over the in-memory adapters."""
    return StoreLifecycleCoordinator(
        store_repository=store_repository,
        account_repository=account_repository,
        category_repository=category_repository,
        event_publisher=event_publisher,
        unit_of_work=unit_of_work,
        topics=StoreTopics(),
        default_timeout=5.0,
    )


# ============================================================================
# API CLIENT FIXTURES
# ============================================================================


@pytest.fixture
def memory_container(test_settings, active_category, pending_category) -> Generator[DependencyContainer, None, None]:
    """Global container using the memory backends, seeded with two categories."""
    container = DependencyContainer(test_settings)
    container.memory_categories.add(active_category)
    container.memory_categories.add(pending_category)
    set_container(container)
    yield container
    set_container(None)


@pytest.fixture
def api_client(memory_container, test_settings) -> Generator[TestClient, None, None]:
    """Create FastAPI test client."""
    from storehub.core.app_factory import create_app

    app = create_app(test_settings)
    with TestClient(app) as client:
        yield client
