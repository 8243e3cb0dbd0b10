"""
Shared utilities module

Domain-agnostic helpers used across the service.
"""

from .logger import (
    ColoredFormatter,
    ContextLogger,
    JSONFormatter,
    configure_logging,
    get_correlation_id,
    get_logger,
    get_repository_logger,
    get_use_case_logger,
)
from .metrics import EventCounter

__all__ = [
    "ColoredFormatter",
    "ContextLogger",
    "EventCounter",
    "JSONFormatter",
    "configure_logging",
    "get_correlation_id",
    "get_logger",
    "get_repository_logger",
    "get_use_case_logger",
]
