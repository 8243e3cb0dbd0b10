"""
Unit tests for the Store entity.

Tests:
- Store.create validation
- Status transitions
- replace_details
- Canonical JSON form
"""

import json

import pytest

from storehub.core.domain import (
    ErrorKind,
    StoreAlreadyActiveException,
    StoreBlockedException,
    StoreInactiveException,
    StorePendingException,
    ValidationException,
    generate_uuid_str,
    is_canonical_id,
)
from storehub.domains.store.domain.entities import Store
from storehub.domains.store.domain.value_objects import (
    STORE_TRANSITIONS,
    StoreAction,
    StoreStatus,
    allowed_actions,
)


def _store_in(status: StoreStatus, sample_store: Store) -> Store:
    sample_store.status = status
    return sample_store


# ============================================================================
# Creation
# ============================================================================


@pytest.mark.unit
class TestStoreCreate:
    """Tests for Store.create."""

    def test_new_store_is_pending_with_canonical_id(self, sample_store):
        assert sample_store.status == StoreStatus.PENDING
        assert is_canonical_id(sample_store.id)
        assert sample_store.updated_at == sample_store.created_at

    def test_keeps_fields(self, sample_store, user_id):
        assert sample_store.name == "Coffee"
        assert sample_store.user_id == user_id
        assert sample_store.tags == ["hot", "drink"]
        assert sample_store.lat == pytest.approx(-8.8867698)
        assert sample_store.lng == pytest.approx(13.4771186)
        assert sample_store.image == ""

    def test_each_store_gets_a_new_id(self, user_id):
        ids = {
            Store.create("A", "", user_id, generate_uuid_str(), generate_uuid_str()).id
            for _ in range(5)
        }
        assert len(ids) == 5

    @pytest.mark.parametrize("name", ["", "   "])
    def test_empty_name_rejected(self, name, user_id):
        with pytest.raises(ValidationException) as exc_info:
            Store.create(name, "", user_id, generate_uuid_str(), generate_uuid_str())
        assert exc_info.value.field == "name"
        assert exc_info.value.kind == ErrorKind.BAD_REQUEST

    def test_long_name_rejected(self, user_id):
        with pytest.raises(ValidationException) as exc_info:
            Store.create("x" * 256, "", user_id, generate_uuid_str(), generate_uuid_str())
        assert exc_info.value.field == "name"

    @pytest.mark.parametrize(
        "bad_id",
        ["", "123", "F1C0B6C2-5A4B-4C1E-9E5D-0A1B2C3D4E5F", "f1c0b6c25a4b4c1e9e5d0a1b2c3d4e5f"],
    )
    def test_non_canonical_user_id_rejected(self, bad_id):
        with pytest.raises(ValidationException) as exc_info:
            Store.create("A", "", bad_id, generate_uuid_str(), generate_uuid_str())
        assert exc_info.value.field == "user_id"

    @pytest.mark.parametrize("lat,lng", [(91.0, 0.0), (-90.5, 0.0), (0.0, 180.1), (0.0, float("nan"))])
    def test_out_of_range_coordinates_rejected(self, lat, lng, user_id):
        with pytest.raises(ValidationException):
            Store.create("A", "", user_id, generate_uuid_str(), generate_uuid_str(), lat=lat, lng=lng)

    def test_tags_must_be_a_list(self, user_id):
        with pytest.raises(ValidationException) as exc_info:
            Store.create("A", "", user_id, generate_uuid_str(), generate_uuid_str(), tags="hot")
        assert exc_info.value.field == "tags"


# ============================================================================
# Status transitions
# ============================================================================


@pytest.mark.unit
class TestStoreTransitions:
    """The transition table, one case per (action, status) pair."""

    @pytest.mark.parametrize(
        "action,current,expected",
        [
            (StoreAction.ACTIVATE, StoreStatus.PENDING, StoreStatus.ACTIVE),
            (StoreAction.ACTIVATE, StoreStatus.BLOCK, StoreStatus.ACTIVE),
            (StoreAction.ACTIVATE, StoreStatus.DISABLE, StoreStatus.ACTIVE),
            (StoreAction.BLOCK, StoreStatus.ACTIVE, StoreStatus.BLOCK),
            (StoreAction.DISABLE, StoreStatus.PENDING, StoreStatus.DISABLE),
            (StoreAction.DISABLE, StoreStatus.ACTIVE, StoreStatus.DISABLE),
        ],
    )
    def test_allowed_transition(self, action, current, expected, sample_store):
        store = _store_in(current, sample_store)
        before = store.updated_at

        store.apply(action)

        assert store.status == expected
        assert store.updated_at >= before

    @pytest.mark.parametrize(
        "action,current,error",
        [
            (StoreAction.ACTIVATE, StoreStatus.ACTIVE, StoreAlreadyActiveException),
            (StoreAction.BLOCK, StoreStatus.PENDING, StorePendingException),
            (StoreAction.BLOCK, StoreStatus.BLOCK, StoreBlockedException),
            (StoreAction.BLOCK, StoreStatus.DISABLE, StorePendingException),
            (StoreAction.DISABLE, StoreStatus.BLOCK, StoreBlockedException),
            (StoreAction.DISABLE, StoreStatus.DISABLE, StoreInactiveException),
        ],
    )
    def test_rejected_transition_leaves_store_unchanged(self, action, current, error, sample_store):
        store = _store_in(current, sample_store)
        before = store.updated_at

        with pytest.raises(error):
            store.apply(action)

        assert store.status == current
        assert store.updated_at == before

    def test_table_covers_every_pair(self):
        assert len(STORE_TRANSITIONS) == len(StoreAction) * len(StoreStatus)

    def test_error_messages(self, sample_store):
        with pytest.raises(StorePendingException, match="Is still pending"):
            sample_store.block()
        sample_store.activate()
        with pytest.raises(StoreAlreadyActiveException, match="Is already active"):
            sample_store.activate()
        sample_store.block()
        with pytest.raises(StoreBlockedException, match="Already blocked"):
            sample_store.disable()

    def test_allowed_actions(self):
        assert allowed_actions(StoreStatus.PENDING) == [StoreAction.ACTIVATE, StoreAction.DISABLE]
        assert allowed_actions(StoreStatus.ACTIVE) == [StoreAction.BLOCK, StoreAction.DISABLE]
        assert allowed_actions(StoreStatus.BLOCK) == [StoreAction.ACTIVATE]


# ============================================================================
# replace_details
# ============================================================================


@pytest.mark.unit
class TestReplaceDetails:
    def test_replaces_editable_fields_only(self, sample_store):
        original = (sample_store.id, sample_store.user_id, sample_store.account_id, sample_store.created_at)
        new_category = generate_uuid_str()

        sample_store.replace_details(
            name="Tea",
            description="Green tea",
            category_id=new_category,
            image="tea.png",
            tags=["cold"],
            lat=10.0,
            lng=20.0,
        )

        assert sample_store.name == "Tea"
        assert sample_store.category_id == new_category
        assert sample_store.tags == ["cold"]
        assert (sample_store.lat, sample_store.lng) == (10.0, 20.0)
        assert sample_store.status == StoreStatus.PENDING
        assert (
            sample_store.id,
            sample_store.user_id,
            sample_store.account_id,
            sample_store.created_at,
        ) == original

    def test_invalid_field_changes_nothing(self, sample_store):
        snapshot = sample_store.to_dict()

        with pytest.raises(ValidationException):
            sample_store.replace_details("Tea", "", sample_store.category_id, "", ["cold"], 95.0, 0.0)

        assert sample_store.to_dict() == snapshot


# ============================================================================
# Serialization
# ============================================================================


@pytest.mark.unit
class TestStoreSerialization:
    def test_canonical_fields(self, sample_store):
        data = json.loads(sample_store.to_json())

        assert set(data) == {
            "id",
            "name",
            "description",
            "status",
            "user_id",
            "account_id",
            "category_id",
            "image",
            "tags",
            "location",
            "created_at",
        }
        assert data["status"] == "pending"
        assert data["location"] == {"lat": -8.8867698, "lng": 13.4771186}

    def test_from_json_restores_store(self, sample_store):
        restored = Store.from_json(sample_store.to_json())

        assert restored == sample_store
        assert restored.to_dict() == sample_store.to_dict()
        assert restored.updated_at == restored.created_at

    def test_non_ascii_is_kept(self, sample_store):
        sample_store.name = "Café Luanda"
        assert "Café Luanda" in sample_store.to_json()

    @pytest.mark.parametrize("payload", ["not json", "[]", '{"id": "x"}'])
    def test_invalid_payload(self, payload):
        with pytest.raises(ValidationException) as exc_info:
            Store.from_json(payload)
        assert exc_info.value.field == "payload"
