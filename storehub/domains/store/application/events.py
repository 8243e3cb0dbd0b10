"""
Store Lifecycle Events

Serializes a store and hands it to the event publisher under the topic
of the mutation that produced it.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from storehub.domains.store.application.ports import IEventPublisher
from storehub.domains.store.domain.entities import Store

logger = logging.getLogger(__name__)

EventHook = Callable[[str, Store], None]


@dataclass(frozen=True)
class StoreTopics:
    """Routing topics for store lifecycle events."""

    new: str = "store.new"
    update: str = "store.update"
    delete: str = "store.delete"

    def all(self) -> list[str]:
        return [self.new, self.update, self.delete]


class StoreEventEmitter:
    """
    Publishes one event per successful store mutation.

    Publisher errors propagate unchanged; ``on_event_published`` runs only
    after the publisher has accepted the event.
    """

    def __init__(
        self,
        publisher: IEventPublisher,
        topics: StoreTopics | None = None,
        on_event_published: EventHook | None = None,
    ):
        self.publisher = publisher
        self.topics = topics or StoreTopics()
        self.on_event_published = on_event_published

    async def emit(self, topic: str, store: Store) -> None:
        await self.publisher.publish(store.to_json(), topic, store.id)
        logger.debug(f"Published {topic} for store {store.id}")
        if self.on_event_published is not None:
            self.on_event_published(topic, store)

    async def store_created(self, store: Store) -> None:
        await self.emit(self.topics.new, store)

    async def store_updated(self, store: Store) -> None:
        await self.emit(self.topics.update, store)

    async def store_deleted(self, store: Store) -> None:
        await self.emit(self.topics.delete, store)


__all__ = ["EventHook", "StoreEventEmitter", "StoreTopics"]
