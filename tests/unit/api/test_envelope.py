"""
Unit tests for the store request envelope: error mapping and input checks.
"""

from unittest.mock import AsyncMock

import pytest

from storehub.core.domain import (
    DeadlineExceededException,
    DuplicateEntityException,
    EntityNotFoundException,
    ErrorKind,
    EventPublishException,
    RepositoryException,
    StoreAlreadyActiveException,
    StoreBlockedException,
    StoreInactiveException,
    StorePendingException,
    ValidationException,
    generate_uuid_str,
)
from storehub.core.shared.logger import correlation_id_var
from storehub.domains.store.api.envelope import (
    INTERNAL_ERROR_MESSAGE,
    RequestEnvelope,
    error_kind,
    error_payload,
)
from storehub.domains.store.domain.value_objects import StoreAction, StoreStatus

# ============================================================================
# Error mapping
# ============================================================================


@pytest.mark.unit
@pytest.mark.api
class TestErrorPayload:
    @pytest.mark.parametrize(
        "exc,http_status,grpc_code",
        [
            (EntityNotFoundException("Store", "x"), 404, "NOT_FOUND"),
            (ValidationException("bad", field="name"), 400, "INVALID_ARGUMENT"),
            (DuplicateEntityException("Store", "id", "x"), 409, "ALREADY_EXISTS"),
            (StorePendingException("block", "pending"), 409, "FAILED_PRECONDITION"),
            (StoreAlreadyActiveException("activate", "active"), 409, "FAILED_PRECONDITION"),
            (StoreBlockedException("block", "block"), 409, "FAILED_PRECONDITION"),
            (StoreInactiveException("disable", "disable"), 409, "FAILED_PRECONDITION"),
            (RepositoryException("create", "db down"), 500, "INTERNAL"),
            (EventPublishException("store.new", "broker down"), 500, "INTERNAL"),
            (DeadlineExceededException("get", 1.0), 500, "INTERNAL"),
        ],
    )
    def test_status_mapping(self, exc, http_status, grpc_code):
        payload = error_payload(exc)
        assert (payload.http_status, payload.grpc_code) == (http_status, grpc_code)

    def test_precondition_keeps_message(self):
        assert error_payload(StoreInactiveException("disable", "disable")).message == "Is already inactive"

    def test_internal_message_is_hidden(self):
        payload = error_payload(RepositoryException("create", "password authentication failed"))
        assert payload.message == INTERNAL_ERROR_MESSAGE

    def test_unknown_exception_is_internal(self):
        exc = RuntimeError("boom")
        assert error_kind(exc) == ErrorKind.INTERNAL
        assert error_payload(exc).http_status == 500


# ============================================================================
# Input checks
# ============================================================================


@pytest.fixture
def mock_coordinator():
    return AsyncMock()


@pytest.fixture
def envelope(mock_coordinator):
    return RequestEnvelope(mock_coordinator, default_timeout=2.0, max_page_limit=100)


@pytest.mark.unit
@pytest.mark.api
class TestRequestEnvelope:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("limit,page,field", [(-1, 1, "limit"), (101, 1, "limit"), (10, -1, "page")])
    async def test_index_rejects_bad_paging(self, envelope, mock_coordinator, limit, page, field):
        with pytest.raises(ValidationException) as exc_info:
            await envelope.index(limit=limit, page=page)

        assert exc_info.value.field == field
        mock_coordinator.index.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_index_builds_filters(self, envelope, mock_coordinator, user_id):
        await envelope.index(sort="name", limit=100, page=0, user_id=user_id, status="ACTIVE", tags=["hot"])

        ctx, sort, limit, page, filters = mock_coordinator.index.await_args.args
        assert (sort, limit, page) == ("name", 100, 0)
        assert filters.user_id == user_id
        assert filters.status == StoreStatus.ACTIVE
        assert filters.tags == ("hot",)
        assert 0 < ctx.remaining() <= 2.0

    @pytest.mark.asyncio
    async def test_index_unknown_status(self, envelope):
        with pytest.raises(ValidationException):
            await envelope.index(status="archived")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("store_id", ["", "abc", "F1C0B6C2-5A4B-4C1E-9E5D-0A1B2C3D4E5F"])
    async def test_malformed_store_id(self, envelope, mock_coordinator, store_id):
        with pytest.raises(ValidationException):
            await envelope.get(store_id)
        with pytest.raises(ValidationException):
            await envelope.delete(store_id)
        with pytest.raises(ValidationException):
            await envelope.activate(store_id)

        mock_coordinator.get.assert_not_awaited()
        mock_coordinator.transition.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_malformed_owner_id(self, envelope):
        with pytest.raises(ValidationException) as exc_info:
            await envelope.get(generate_uuid_str(), owner_id="me")
        assert exc_info.value.field == "owner_id"

    @pytest.mark.asyncio
    async def test_block_forwards_action(self, envelope, mock_coordinator):
        store_id = generate_uuid_str()

        await envelope.block(store_id)

        _, forwarded_id, action = mock_coordinator.transition.await_args.args
        assert (forwarded_id, action) == (store_id, StoreAction.BLOCK)

    @pytest.mark.asyncio
    async def test_context_uses_bound_correlation_id(self, envelope):
        token = correlation_id_var.set("req-42")
        try:
            ctx = envelope.context()
        finally:
            correlation_id_var.reset(token)

        assert ctx.correlation_id == "req-42"

    @pytest.mark.asyncio
    async def test_explicit_timeout_overrides_default(self, envelope):
        ctx = envelope.context(timeout=0.5)
        assert ctx.remaining() <= 0.5
