"""
In-Memory Event Publisher

Keeps every published event in order. Used by tests and EVENT_BACKEND=memory.
"""

import json
from dataclasses import dataclass
from typing import Any

from storehub.core.domain import EventPublishException
from storehub.domains.store.application.ports import IEventPublisher


@dataclass(frozen=True)
class PublishedEvent:
    topic: str
    key: str
    payload: str

    def data(self) -> dict[str, Any]:
        return json.loads(self.payload)


class InMemoryEventPublisher(IEventPublisher):
    """
    Records ``(topic, key, payload)`` for every publish.

    Set ``fail_with`` to make the next publishes raise EventPublishException.
    """

    def __init__(self):
        self.events: list[PublishedEvent] = []
        self.fail_with: Exception | None = None

    async def publish(self, payload: str, topic: str, key: str) -> None:
        if self.fail_with is not None:
            raise EventPublishException(topic, f"Failed to publish to {topic}", self.fail_with)
        self.events.append(PublishedEvent(topic=topic, key=key, payload=payload))

    def on_topic(self, topic: str) -> list[PublishedEvent]:
        return [e for e in self.events if e.topic == topic]

    def for_key(self, key: str) -> list[PublishedEvent]:
        return [e for e in self.events if e.key == key]

    def clear(self) -> None:
        self.events.clear()
