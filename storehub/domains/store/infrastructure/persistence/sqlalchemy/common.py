"""
Helpers shared by the SQLAlchemy repositories.
"""

import re
import uuid

from storehub.core.domain import EntityNotFoundException

_CONSTRAINT_IN_MESSAGE = re.compile(r'constraint "([^"]+)"')


def parse_uuid(value: str, entity_type: str) -> uuid.UUID:
    """
    Convert a canonical id string to a UUID.

    A malformed id cannot match any row, so it is reported as not found.
    """
    try:
        return uuid.UUID(str(value))
    except (TypeError, ValueError) as e:
        raise EntityNotFoundException(entity_type, value) from e


def is_unique_violation(error: Exception) -> bool:
    """Check if an IntegrityError comes from a primary key or unique constraint."""
    text = str(getattr(error, "orig", error)).lower()
    return "unique" in text or "duplicate" in text


def violated_constraint(error: Exception) -> str | None:
    """
    Name of the constraint behind an IntegrityError, if the driver reports it.

    asyncpg exposes it as ``constraint_name`` on the wrapped driver error;
    otherwise it is read from the quoted name in the message.
    """
    orig = getattr(error, "orig", error)
    for candidate in (orig, getattr(orig, "__cause__", None)):
        name = getattr(candidate, "constraint_name", None)
        if name:
            return name
    match = _CONSTRAINT_IN_MESSAGE.search(str(orig))
    return match.group(1) if match else None
