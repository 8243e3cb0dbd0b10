"""
Event Counters

Per-topic counts of published lifecycle events, reported by /health.
"""

import threading
from collections import defaultdict
from typing import Any


class EventCounter:
    """Thread-safe counter keyed by topic."""

    def __init__(self) -> None:
        self._counts: dict[str, int] = defaultdict(int)
        self._lock = threading.Lock()

    def record(self, topic: str, *_: Any) -> None:
        """Count one event. Signature fits the coordinator's on_event_published hook."""
        with self._lock:
            self._counts[topic] += 1

    def get(self, topic: str) -> int:
        with self._lock:
            return self._counts.get(topic, 0)

    def snapshot(self) -> dict[str, int]:
        with self._lock:
            return dict(self._counts)

    def reset(self) -> None:
        with self._lock:
            self._counts.clear()
