"""
Dependency Injection Container

Wires concrete adapters to the store domain ports according to settings.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from storehub.config.settings import Settings, get_settings
from storehub.core.shared.metrics import EventCounter
from storehub.database.async_db import dispose_engine
from storehub.domains.store.api.envelope import RequestEnvelope
from storehub.domains.store.application import StoreLifecycleCoordinator, StoreTopics
from storehub.domains.store.application.ports import IEventPublisher
from storehub.domains.store.infrastructure.messaging import InMemoryEventPublisher, RedisStreamEventPublisher
from storehub.domains.store.infrastructure.repositories import (
    InMemoryAccountRepository,
    InMemoryCategoryRepository,
    InMemoryStoreRepository,
    NullUnitOfWork,
    SQLAlchemyAccountRepository,
    SQLAlchemyCategoryRepository,
    SQLAlchemyStoreRepository,
    SQLAlchemyUnitOfWork,
)

logger = logging.getLogger(__name__)


class DependencyContainer:
    """
    Builds coordinators and envelopes for incoming requests.

    Process-wide singletons (event publisher, event counter and, for the
    memory backend, the repositories themselves) live on the container.
    With the postgres backend, repositories and the unit of work are built
    per request around the request's session.
    """

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self.event_counter = EventCounter()
        self.topics = StoreTopics(
            new=self.settings.STORE_NEW_TOPIC,
            update=self.settings.STORE_UPDATE_TOPIC,
            delete=self.settings.STORE_DELETE_TOPIC,
        )

        self._event_publisher: IEventPublisher | None = None

        # Memory backend state
        self.memory_stores = InMemoryStoreRepository()
        self.memory_accounts = InMemoryAccountRepository()
        self.memory_categories = InMemoryCategoryRepository()

        logger.info(
            f"DependencyContainer initialized (storage={self.settings.STORAGE_BACKEND}, "
            f"events={self.settings.EVENT_BACKEND})"
        )

    @property
    def uses_database(self) -> bool:
        return self.settings.STORAGE_BACKEND == "postgres"

    # Messaging

    def get_event_publisher(self) -> IEventPublisher:
        """Get event publisher (singleton)."""
        if self._event_publisher is None:
            if self.settings.EVENT_BACKEND == "redis":
                self._event_publisher = RedisStreamEventPublisher(
                    redis_url=self.settings.redis_url,
                    max_stream_length=self.settings.EVENT_STREAM_MAXLEN,
                )
            else:
                self._event_publisher = InMemoryEventPublisher()
        return self._event_publisher

    def set_event_publisher(self, publisher: IEventPublisher) -> None:
        self._event_publisher = publisher

    # Store domain

    def create_store_coordinator(self, session: AsyncSession | None = None) -> StoreLifecycleCoordinator:
        """
        Create the store lifecycle coordinator.

        Args:
            session: Request session; required with the postgres backend
        """
        if self.uses_database:
            if session is None:
                raise ValueError("A database session is required when STORAGE_BACKEND=postgres")
            stores = SQLAlchemyStoreRepository(session)
            accounts = SQLAlchemyAccountRepository(session)
            categories = SQLAlchemyCategoryRepository(session)
            unit_of_work = SQLAlchemyUnitOfWork(session)
        else:
            stores = self.memory_stores
            accounts = self.memory_accounts
            categories = self.memory_categories
            unit_of_work = NullUnitOfWork()

        return StoreLifecycleCoordinator(
            store_repository=stores,
            account_repository=accounts,
            category_repository=categories,
            event_publisher=self.get_event_publisher(),
            unit_of_work=unit_of_work,
            topics=self.topics,
            default_timeout=self.settings.REQUEST_TIMEOUT_SECONDS,
            on_event_published=self.event_counter.record,
        )

    def create_request_envelope(self, session: AsyncSession | None = None) -> RequestEnvelope:
        return RequestEnvelope(
            self.create_store_coordinator(session),
            default_timeout=self.settings.REQUEST_TIMEOUT_SECONDS,
            max_page_limit=self.settings.MAX_PAGE_LIMIT,
        )

    # Lifecycle

    async def startup(self) -> None:
        publisher = self.get_event_publisher()
        if isinstance(publisher, RedisStreamEventPublisher):
            await publisher.connect()

    async def shutdown(self) -> None:
        publisher = self._event_publisher
        if isinstance(publisher, RedisStreamEventPublisher):
            await publisher.close()
        if self.uses_database:
            await dispose_engine()


# Global container instance
_container: DependencyContainer | None = None


def get_container() -> DependencyContainer:
    """Get or create the global container instance."""
    global _container
    if _container is None:
        _container = DependencyContainer()
    return _container


def set_container(container: DependencyContainer | None) -> None:
    """Replace the global container (tests, alternative wiring)."""
    global _container
    _container = container
