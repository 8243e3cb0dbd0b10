"""
Domain Exceptions

Typed errors raised by the domain model, the repositories and the store
coordinator. Every exception carries an ``ErrorKind`` that transport adapters
translate into a wire status (see ``storehub.domains.store.api.envelope``).
"""

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Concept-level error taxonomy shared by every adapter."""

    NOT_FOUND = "not_found"
    BAD_REQUEST = "bad_request"
    CONFLICT = "conflict"
    PENDING = "pending"
    ACTIVE = "active"
    BLOCKED = "blocked"
    INACTIVED = "inactived"
    INTERNAL = "internal"

    def is_precondition(self) -> bool:
        """Check if the kind is a rejected status transition."""
        return self in (ErrorKind.PENDING, ErrorKind.ACTIVE, ErrorKind.BLOCKED, ErrorKind.INACTIVED)


class DomainException(Exception):
    """
    Base exception for all domain-related errors.

    Provides a standardized way to communicate business rule violations.
    """

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str, code: str | None = None, details: dict[str, Any] | None = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "ENTITY_NOT_FOUND")
            details: Additional context about the error
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__.upper()
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.code,
            "kind": self.kind.value,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(DomainException):
    """
    Raised when input fails shape or range validation.

    Use for invalid entity fields, malformed identifiers, bad sort expressions.
    """

    kind = ErrorKind.BAD_REQUEST

    def __init__(self, message: str, field: str | None = None, details: dict[str, Any] | None = None):
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, "VALIDATION_ERROR", details)
        self.field = field


class EntityNotFoundException(DomainException):
    """Raised when an entity is not found."""

    kind = ErrorKind.NOT_FOUND

    def __init__(
        self,
        entity_type: str,
        entity_id: Any,
        message: str | None = None,
    ):
        self.entity_type = entity_type
        self.entity_id = entity_id
        msg = message or f"{entity_type} with ID {entity_id} not found"
        super().__init__(
            msg,
            "ENTITY_NOT_FOUND",
            {"entity_type": entity_type, "entity_id": str(entity_id)},
        )


class DuplicateEntityException(DomainException):
    """Raised when attempting to create an entity whose identity already exists."""

    kind = ErrorKind.CONFLICT

    def __init__(self, entity_type: str, field: str, value: Any):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(
            f"{entity_type} with {field}='{value}' already exists",
            "DUPLICATE_ENTITY",
            {
                "entity_type": entity_type,
                "field": field,
                "value": str(value),
            },
        )


class InvalidOperationException(DomainException):
    """Raised when a status transition is not valid in the current state."""

    kind = ErrorKind.PENDING
    default_message = "Invalid operation"

    def __init__(self, operation: str, current_state: str, message: str | None = None):
        self.operation = operation
        self.current_state = current_state
        super().__init__(
            message or self.default_message,
            "INVALID_OPERATION",
            {"operation": operation, "current_state": current_state},
        )


class StorePendingException(InvalidOperationException):
    """The store is still pending."""

    kind = ErrorKind.PENDING
    default_message = "Is still pending"


class StoreAlreadyActiveException(InvalidOperationException):
    """The store is already active."""

    kind = ErrorKind.ACTIVE
    default_message = "Is already active"


class StoreBlockedException(InvalidOperationException):
    """The store is blocked."""

    kind = ErrorKind.BLOCKED
    default_message = "Already blocked"


class StoreInactiveException(InvalidOperationException):
    """The store is already disabled."""

    kind = ErrorKind.INACTIVED
    default_message = "Is already inactive"


class InternalException(DomainException):
    """Raised for backend, publisher, deadline and otherwise unexpected failures."""

    kind = ErrorKind.INTERNAL


class RepositoryException(InternalException):
    """Raised when the persistence backend fails."""

    def __init__(self, operation: str, message: str, original_error: Exception | None = None):
        self.operation = operation
        self.original_error = original_error
        details: dict[str, Any] = {"operation": operation}
        if original_error:
            details["original_error"] = str(original_error)
        super().__init__(message, "REPOSITORY_ERROR", details)


class EventPublishException(InternalException):
    """Raised when an event cannot be handed to the messaging fabric."""

    def __init__(self, topic: str, message: str, original_error: Exception | None = None):
        self.topic = topic
        self.original_error = original_error
        details: dict[str, Any] = {"topic": topic}
        if original_error:
            details["original_error"] = str(original_error)
        super().__init__(message, "EVENT_PUBLISH_ERROR", details)


class DeadlineExceededException(InternalException):
    """Raised when a request deadline expires before the operation completes."""

    def __init__(self, operation: str, timeout: float):
        self.operation = operation
        self.timeout = timeout
        super().__init__(
            f"Deadline exceeded after {timeout:.3f}s during '{operation}'",
            "DEADLINE_EXCEEDED",
            {"operation": operation, "timeout": timeout},
        )
