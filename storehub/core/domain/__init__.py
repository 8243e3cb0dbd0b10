"""
Domain Layer - Core DDD building blocks

This module provides base classes for Domain-Driven Design:
- Entities: Objects with identity and lifecycle
- Value Objects: Immutable objects compared by value
- Exceptions: Typed errors with a transport-independent kind
"""

from storehub.core.domain.entities import (
    Entity,
    generate_uuid_str,
    is_canonical_id,
    utcnow,
)
from storehub.core.domain.exceptions import (
    DeadlineExceededException,
    DomainException,
    DuplicateEntityException,
    EntityNotFoundException,
    ErrorKind,
    EventPublishException,
    InternalException,
    InvalidOperationException,
    RepositoryException,
    StoreAlreadyActiveException,
    StoreBlockedException,
    StoreInactiveException,
    StorePendingException,
    ValidationException,
)
from storehub.core.domain.value_objects import StatusEnum, ValueObject

__all__ = [
    # Entities
    "Entity",
    "generate_uuid_str",
    "is_canonical_id",
    "utcnow",
    # Value Objects
    "ValueObject",
    "StatusEnum",
    # Exceptions
    "ErrorKind",
    "DomainException",
    "ValidationException",
    "EntityNotFoundException",
    "DuplicateEntityException",
    "InvalidOperationException",
    "StorePendingException",
    "StoreAlreadyActiveException",
    "StoreBlockedException",
    "StoreInactiveException",
    "InternalException",
    "RepositoryException",
    "EventPublishException",
    "DeadlineExceededException",
]
