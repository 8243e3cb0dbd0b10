from .async_db import (
    check_database_health,
    dispose_engine,
    get_async_db_context,
    get_async_engine,
    get_session_factory,
)
from .base import Base, TimestampMixin

__all__ = [
    "Base",
    "TimestampMixin",
    "check_database_health",
    "dispose_engine",
    "get_async_db_context",
    "get_async_engine",
    "get_session_factory",
]
