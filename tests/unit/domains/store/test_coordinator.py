"""
Unit tests for StoreLifecycleCoordinator and RequestContext.

Covers deadline handling; the happy paths run against the in-memory
adapters in tests/integration.
"""

import asyncio
from unittest.mock import AsyncMock

import pytest

from storehub.core.domain import DeadlineExceededException, ErrorKind, generate_uuid_str
from storehub.domains.store.application import RequestContext, StoreLifecycleCoordinator
from storehub.domains.store.application.events import StoreTopics

# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def slow_store_repository(sample_store):
    """Store repository whose lookups take far longer than any test deadline."""

    async def slow_find(store_id):
        await asyncio.sleep(10)
        return sample_store

    repo = AsyncMock()
    repo.find_by_id.side_effect = slow_find
    return repo


def _coordinator(store_repository, publisher=None, default_timeout=5.0, hook=None):
    return StoreLifecycleCoordinator(
        store_repository=store_repository,
        account_repository=AsyncMock(),
        category_repository=AsyncMock(),
        event_publisher=publisher or AsyncMock(),
        unit_of_work=AsyncMock(),
        topics=StoreTopics(),
        default_timeout=default_timeout,
        on_event_published=hook,
    )


# ============================================================================
# RequestContext Tests
# ============================================================================


@pytest.mark.unit
@pytest.mark.asyncio
async def test_context_budget_is_smallest_bound():
    ctx = RequestContext.with_timeout(1.0, correlation_id="abc")

    assert ctx.correlation_id == "abc"
    assert 0 < ctx.budget(5.0) <= 1.0
    assert ctx.budget(0.5) == 0.5
    assert not ctx.expired()


@pytest.mark.unit
@pytest.mark.asyncio
async def test_background_context_uses_default():
    ctx = RequestContext.background()

    assert ctx.remaining() is None
    assert ctx.budget(5.0) == 5.0
    assert ctx.budget(None) is None
    assert ctx.correlation_id


@pytest.mark.unit
@pytest.mark.asyncio
async def test_past_deadline_is_expired():
    ctx = RequestContext(deadline=0.0)
    assert ctx.remaining() == 0.0
    assert ctx.expired()


# ============================================================================
# Deadline Tests
# ============================================================================


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_deadline_cancels_slow_repository(slow_store_repository):
    coordinator = _coordinator(slow_store_repository)
    ctx = RequestContext.with_timeout(0.05)

    with pytest.raises(DeadlineExceededException) as exc_info:
        await coordinator.get(ctx, generate_uuid_str())

    assert exc_info.value.kind == ErrorKind.INTERNAL
    assert exc_info.value.operation == "get"


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_default_timeout_applies_without_deadline(slow_store_repository):
    coordinator = _coordinator(slow_store_repository, default_timeout=0.05)

    with pytest.raises(DeadlineExceededException):
        await coordinator.activate(RequestContext.background(), generate_uuid_str())


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_expired_deadline_never_touches_repositories():
    store_repository = AsyncMock()
    coordinator = _coordinator(store_repository)

    with pytest.raises(DeadlineExceededException):
        await coordinator.delete(RequestContext(deadline=0.0), generate_uuid_str())

    store_repository.find_by_id.assert_not_awaited()


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_slow_publisher_times_out_after_commit(sample_store):
    """A publish cut off by the deadline leaves the committed transition in place."""

    async def slow_publish(*_):
        await asyncio.sleep(10)

    store_repository = AsyncMock()
    store_repository.find_by_id.return_value = sample_store
    publisher = AsyncMock()
    publisher.publish.side_effect = slow_publish
    coordinator = _coordinator(store_repository, publisher=publisher)

    with pytest.raises(DeadlineExceededException):
        await coordinator.activate(RequestContext.with_timeout(0.05), sample_store.id)

    store_repository.update.assert_awaited_once()
