"""
Store Entity

Merchant profile and aggregate root of the store domain. Owns the status
state machine and the canonical JSON form published with every event.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from storehub.core.domain import (
    Entity,
    ValidationException,
    generate_uuid_str,
    is_canonical_id,
)

from ..value_objects.position import Position
from ..value_objects.store_status import StoreAction, StoreStatus, next_store_status

MAX_NAME_LENGTH = 255
MAX_DESCRIPTION_LENGTH = 255
MAX_IMAGE_LENGTH = 255


def _validate_text(value: Any, field_name: str, max_length: int, required: bool = False) -> str:
    if not isinstance(value, str):
        raise ValidationException(f"{field_name} must be a string", field=field_name)
    if required and not value.strip():
        raise ValidationException(f"{field_name} is required", field=field_name)
    if len(value) > max_length:
        raise ValidationException(
            f"{field_name} must be at most {max_length} characters",
            field=field_name,
        )
    return value


def _validate_id(value: Any, field_name: str) -> str:
    if not is_canonical_id(value):
        raise ValidationException(f"Invalid {field_name}: {value!r}", field=field_name)
    return value


def _validate_tags(tags: Iterable[str] | None) -> list[str]:
    if tags is None:
        return []
    if isinstance(tags, str):
        raise ValidationException("tags must be a list of strings", field="tags")
    result = list(tags)
    for tag in result:
        if not isinstance(tag, str):
            raise ValidationException(f"Invalid tag: {tag!r}", field="tags")
    return result


@dataclass
class Store(Entity[str]):
    """
    Store aggregate root.

    Status changes only through activate(), block() and disable(); each
    either moves the store to its next status and refreshes updated_at, or
    raises one of the precondition errors and leaves the store untouched.

    Example:
        ```python
        store = Store.create(
            name="Coffee",
            description="",
            user_id=user_id,
            category_id=category.id,
            account_id=account.id,
            tags=["hot", "drink"],
            lat=-8.8867698,
            lng=13.4771186,
        )
        store.activate()
        payload = store.to_json()
        ```
    """

    name: str = ""
    description: str = ""
    image: str = ""
    status: StoreStatus = StoreStatus.PENDING
    user_id: str = ""
    account_id: str = ""
    category_id: str = ""
    tags: list[str] = field(default_factory=list)
    position: Position = field(default_factory=Position)

    def __post_init__(self):
        if not isinstance(self.status, StoreStatus):
            self.status = StoreStatus.from_string(self.status)

    # Construction

    @classmethod
    def create(
        cls,
        name: str,
        description: str,
        user_id: str,
        category_id: str,
        account_id: str,
        tags: Iterable[str] | None = None,
        lat: float = 0.0,
        lng: float = 0.0,
        image: str = "",
    ) -> "Store":
        """
        Build a new pending store.

        Raises:
            ValidationException: Empty name, non-canonical ids, coordinates
                out of range or oversized text fields
        """
        store = cls(
            id=generate_uuid_str(),
            name=_validate_text(name, "name", MAX_NAME_LENGTH, required=True),
            description=_validate_text(description, "description", MAX_DESCRIPTION_LENGTH),
            image=_validate_text(image, "image", MAX_IMAGE_LENGTH),
            status=StoreStatus.PENDING,
            user_id=_validate_id(user_id, "user_id"),
            category_id=_validate_id(category_id, "category_id"),
            account_id=_validate_id(account_id, "account_id"),
            tags=_validate_tags(tags),
            position=Position(lat=lat, lng=lng),
        )
        store.updated_at = store.created_at
        return store

    # Accessors

    @property
    def lat(self) -> float:
        return self.position.lat

    @property
    def lng(self) -> float:
        return self.position.lng

    def belongs_to(self, user_id: str) -> bool:
        return self.user_id == user_id

    # Status transitions

    def activate(self) -> None:
        """Move to ACTIVE from any status except ACTIVE."""
        self._apply(StoreAction.ACTIVATE)

    def block(self) -> None:
        """Move to BLOCK; only an ACTIVE store can be blocked."""
        self._apply(StoreAction.BLOCK)

    def disable(self) -> None:
        """Move to DISABLE from PENDING or ACTIVE."""
        self._apply(StoreAction.DISABLE)

    def apply(self, action: StoreAction) -> None:
        self._apply(action)

    def _apply(self, action: StoreAction) -> None:
        self.status = next_store_status(action, self.status)
        self.touch()

    # Mutation

    def replace_details(
        self,
        name: str,
        description: str,
        category_id: str,
        image: str,
        tags: Iterable[str] | None,
        lat: float,
        lng: float,
    ) -> None:
        """
        Replace the editable fields.

        All fields are validated before any is assigned, so a rejected
        update leaves the store as it was. Identity, owner, account,
        status and created_at never change here.
        """
        name = _validate_text(name, "name", MAX_NAME_LENGTH, required=True)
        description = _validate_text(description, "description", MAX_DESCRIPTION_LENGTH)
        image = _validate_text(image, "image", MAX_IMAGE_LENGTH)
        category_id = _validate_id(category_id, "category_id")
        tags = _validate_tags(tags)
        position = Position(lat=lat, lng=lng)

        self.name = name
        self.description = description
        self.image = image
        self.category_id = category_id
        self.tags = tags
        self.position = position
        self.touch()

    # Serialization

    def to_dict(self) -> dict[str, Any]:
        """Canonical event representation. updated_at is not included."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "status": self.status.value,
            "user_id": self.user_id,
            "account_id": self.account_id,
            "category_id": self.category_id,
            "image": self.image,
            "tags": list(self.tags),
            "location": self.position.to_dict(),
            "created_at": self.created_at.isoformat(),
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Store":
        """
        Rebuild a store from its canonical representation.

        updated_at is not part of the payload and is set to created_at.

        Raises:
            ValidationException: Missing fields or malformed values
        """
        try:
            created_at = datetime.fromisoformat(data["created_at"])
            store = cls(
                id=data["id"],
                name=data["name"],
                description=data.get("description", ""),
                image=data.get("image", ""),
                status=StoreStatus.from_string(data["status"]),
                user_id=data["user_id"],
                account_id=data["account_id"],
                category_id=data["category_id"],
                tags=_validate_tags(data.get("tags")),
                position=Position.from_dict(data["location"]),
                created_at=created_at,
                updated_at=created_at,
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ValidationException(f"Invalid store payload: {e}", field="payload") from e
        return store

    @classmethod
    def from_json(cls, payload: str | bytes) -> "Store":
        try:
            data = json.loads(payload)
        except ValueError as e:
            raise ValidationException(f"Invalid store payload: {e}", field="payload") from e
        if not isinstance(data, dict):
            raise ValidationException("Store payload must be a JSON object", field="payload")
        return cls.from_dict(data)
