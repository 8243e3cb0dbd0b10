"""
Store API Schemas

Pydantic schemas for API request/response validation.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from storehub.domains.store.domain.entities import Store


class CreateStoreBody(BaseModel):
    """Create store request schema. Field rules are enforced by the domain (400)."""

    name: str
    description: str = ""
    category_id: str
    user_id: str
    image: str = ""
    tags: list[str] = Field(default_factory=list)
    latitude: float = 0.0
    longitude: float = 0.0


class UpdateStoreBody(BaseModel):
    """Update store request schema. Replaces every editable field."""

    name: str
    description: str = ""
    category_id: str
    image: str = ""
    tags: list[str] = Field(default_factory=list)
    latitude: float = 0.0
    longitude: float = 0.0


class LocationSchema(BaseModel):
    lat: float
    lng: float


class StoreResponse(BaseModel):
    """Store response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str
    status: str
    user_id: str
    account_id: str
    category_id: str
    image: str
    tags: list[str]
    location: LocationSchema
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, store: Store) -> "StoreResponse":
        return cls(
            id=store.id,
            name=store.name,
            description=store.description,
            status=store.status.value,
            user_id=store.user_id,
            account_id=store.account_id,
            category_id=store.category_id,
            image=store.image,
            tags=list(store.tags),
            location=LocationSchema(lat=store.lat, lng=store.lng),
            created_at=store.created_at,
            updated_at=store.updated_at,
        )


class ErrorResponse(BaseModel):
    """Error body returned for every failed store request."""

    error: bool = True
    message: str
    code: str
    kind: str
    status_code: int
