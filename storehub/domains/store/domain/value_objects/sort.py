"""
Listing Value Objects

Sort expressions and filters accepted when listing stores.
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from storehub.core.domain import ValidationException, ValueObject, is_canonical_id

from .store_status import StoreStatus

if TYPE_CHECKING:
    from ..entities.store import Store

SORTABLE_COLUMNS = ("created_at", "updated_at", "name", "status")
SORT_DIRECTIONS = ("ASC", "DESC")

DEFAULT_LIMIT = 10
DEFAULT_PAGE = 1


@dataclass(frozen=True)
class SortSpec(ValueObject):
    """
    Validated ordering for store listings.

    Example:
        ```python
        SortSpec.parse("")              # created_at DESC
        SortSpec.parse("name")          # name ASC
        SortSpec.parse("status desc")   # status DESC
        ```
    """

    column: str = "created_at"
    direction: str = "DESC"

    def _validate(self) -> None:
        if self.column not in SORTABLE_COLUMNS:
            raise ValidationException(f"Cannot sort by '{self.column}'", field="sort")
        if self.direction not in SORT_DIRECTIONS:
            raise ValidationException(f"Invalid sort direction '{self.direction}'", field="sort")

    @classmethod
    def parse(cls, expression: str | None) -> "SortSpec":
        """
        Parse a sort expression of the form ``<column> [ASC|DESC]``.

        An empty expression yields the default ordering (newest first).
        A column without a direction sorts ascending.

        Raises:
            ValidationException: Unknown column, unknown direction or
                extra tokens
        """
        if expression is None or not expression.strip():
            return cls()

        parts = expression.split()
        if len(parts) > 2:
            raise ValidationException(f"Invalid sort expression '{expression}'", field="sort")

        column = parts[0].lower()
        direction = parts[1].upper() if len(parts) == 2 else "ASC"
        return cls(column=column, direction=direction)

    @property
    def descending(self) -> bool:
        return self.direction == "DESC"

    def sort_key(self, store: "Store") -> Any:
        """Value of the sort column for an in-memory store."""
        value = getattr(store, self.column)
        if isinstance(value, StoreStatus):
            return value.value
        return value

    def __str__(self) -> str:
        return f"{self.column} {self.direction}"


@dataclass(frozen=True)
class StoreFilter(ValueObject):
    """
    Optional narrowing of a store listing.

    All given criteria must hold. ``tags`` matches a store carrying at least
    one of the listed tags.
    """

    user_id: str | None = None
    status: StoreStatus | None = None
    category_id: str | None = None
    tags: tuple[str, ...] = field(default_factory=tuple)

    def _validate(self) -> None:
        if self.user_id is not None and not is_canonical_id(self.user_id):
            raise ValidationException(f"Invalid user id '{self.user_id}'", field="user_id")
        if self.category_id is not None and not is_canonical_id(self.category_id):
            raise ValidationException(f"Invalid category id '{self.category_id}'", field="category_id")
        if self.status is not None and not isinstance(self.status, StoreStatus):
            raise ValidationException(f"Invalid status '{self.status}'", field="status")

    def is_empty(self) -> bool:
        return self.user_id is None and self.status is None and self.category_id is None and not self.tags

    def matches(self, store: "Store") -> bool:
        """Check a store against every criterion."""
        if self.user_id is not None and store.user_id != self.user_id:
            return False
        if self.status is not None and store.status != self.status:
            return False
        if self.category_id is not None and store.category_id != self.category_id:
            return False
        if self.tags and not set(self.tags) & set(store.tags):
            return False
        return True
