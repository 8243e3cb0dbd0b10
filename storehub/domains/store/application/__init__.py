"""
Store Application Layer

Ports, DTOs, use cases and the lifecycle coordinator.
"""

from .context import RequestContext
from .coordinator import StoreLifecycleCoordinator
from .events import StoreEventEmitter, StoreTopics

__all__ = [
    "RequestContext",
    "StoreEventEmitter",
    "StoreLifecycleCoordinator",
    "StoreTopics",
]
