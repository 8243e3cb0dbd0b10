"""
Store Domain Messaging
"""

from .memory_publisher import InMemoryEventPublisher, PublishedEvent
from .redis_publisher import RedisStreamEventPublisher

__all__ = ["InMemoryEventPublisher", "PublishedEvent", "RedisStreamEventPublisher"]
