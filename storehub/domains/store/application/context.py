"""
Request Context

Deadline and correlation id carried by every coordinator call.
"""

import asyncio
from dataclasses import dataclass, field

from storehub.core.domain import generate_uuid_str


def _loop_time() -> float:
    return asyncio.get_running_loop().time()


@dataclass(frozen=True)
class RequestContext:
    """
    Deadline-bearing context for one coordinator operation.

    ``deadline`` is an absolute time on the running event loop's clock, or
    None for no caller-imposed deadline.
    """

    deadline: float | None = None
    correlation_id: str = field(default_factory=generate_uuid_str)

    @classmethod
    def with_timeout(cls, timeout: float | None, correlation_id: str | None = None) -> "RequestContext":
        """Build a context expiring `timeout` seconds from now. Must run inside the event loop."""
        deadline = _loop_time() + timeout if timeout is not None else None
        if correlation_id:
            return cls(deadline=deadline, correlation_id=correlation_id)
        return cls(deadline=deadline)

    @classmethod
    def background(cls) -> "RequestContext":
        return cls()

    def remaining(self) -> float | None:
        """Seconds left before the deadline (never negative), or None."""
        if self.deadline is None:
            return None
        return max(0.0, self.deadline - _loop_time())

    def expired(self) -> bool:
        remaining = self.remaining()
        return remaining is not None and remaining <= 0

    def budget(self, default_timeout: float | None) -> float | None:
        """Smaller of the remaining time and `default_timeout`."""
        remaining = self.remaining()
        if remaining is None:
            return default_timeout
        if default_timeout is None:
            return remaining
        return min(remaining, default_timeout)
