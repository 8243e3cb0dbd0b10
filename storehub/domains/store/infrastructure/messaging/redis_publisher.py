"""
Redis Streams Event Publisher

Appends store lifecycle events to one Redis stream per topic.
"""

import logging

import redis.asyncio as aioredis

from storehub.core.domain import EventPublishException
from storehub.domains.store.application.ports import IEventPublisher

logger = logging.getLogger(__name__)


class RedisStreamEventPublisher(IEventPublisher):
    """
    Event publisher backed by Redis Streams.

    Each publish is a single awaited XADD, so events leave in the order the
    coordinator emits them. Stream entries carry the store id under ``key``
    and the serialized store under ``payload``.

    Usage:
        publisher = RedisStreamEventPublisher(settings.redis_url)
        await publisher.connect()
        await publisher.publish(store.to_json(), "store.new", store.id)
    """

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379/0",
        max_stream_length: int = 100_000,
        client: aioredis.Redis | None = None,
    ):
        self._redis_url = redis_url
        self._max_len = max_stream_length
        self._redis: aioredis.Redis | None = client

    @property
    def connected(self) -> bool:
        return self._redis is not None

    async def connect(self) -> None:
        """Open the Redis connection and check it answers."""
        if self._redis is None:
            self._redis = aioredis.from_url(self._redis_url, decode_responses=True)
        try:
            await self._redis.ping()
        except (aioredis.RedisError, OSError) as e:
            logger.error(f"Redis event stream unreachable at {self._redis_url}: {e}")
            raise EventPublishException("*", "Event stream unreachable", e) from e
        logger.info(f"Redis event publisher connected: {self._redis_url}")

    async def close(self) -> None:
        if self._redis is not None:
            await self._redis.aclose()
            self._redis = None

    async def publish(self, payload: str, topic: str, key: str) -> None:
        """
        Append one event to the stream named after `topic`.

        Raises:
            EventPublishException: Not connected or Redis rejected the write
        """
        if self._redis is None:
            raise EventPublishException(topic, "Event publisher not connected")

        try:
            entry_id = await self._redis.xadd(
                topic,
                {"key": key, "payload": payload},
                maxlen=self._max_len,
                approximate=True,
            )
        except (aioredis.RedisError, OSError) as e:
            logger.error(f"Failed to publish {topic} for {key}: {e}")
            raise EventPublishException(topic, f"Failed to publish to {topic}", e) from e

        logger.debug(f"Published {topic} for {key} as {entry_id}")
