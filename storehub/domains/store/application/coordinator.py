"""
Store Lifecycle Coordinator

Single entry point for every store operation. Bounds each call by the
request deadline, delegates to the matching use case and logs the outcome.
"""

import asyncio
from collections.abc import Awaitable
from typing import TypeVar

from storehub.core.domain import (
    DeadlineExceededException,
    DomainException,
    ErrorKind,
)
from storehub.core.shared.logger import get_use_case_logger
from storehub.domains.store.application.context import RequestContext
from storehub.domains.store.application.dto import (
    CreateStoreRequest,
    ListStoresRequest,
    StorePage,
    UpdateStoreRequest,
)
from storehub.domains.store.application.events import EventHook, StoreEventEmitter, StoreTopics
from storehub.domains.store.application.ports import (
    IAccountRepository,
    ICategoryRepository,
    IEventPublisher,
    IStoreRepository,
    IUnitOfWork,
)
from storehub.domains.store.application.use_cases import (
    ChangeStoreStatusUseCase,
    CreateStoreUseCase,
    DeleteStoreUseCase,
    GetStoreUseCase,
    ListStoresUseCase,
    UpdateStoreUseCase,
)
from storehub.domains.store.domain.entities import Store
from storehub.domains.store.domain.value_objects import StoreAction, StoreFilter

T = TypeVar("T")


class StoreLifecycleCoordinator:
    """
    Orchestrates store creation, retrieval, listing, status transitions,
    updates and deletion.

    Steps of one call run strictly in sequence. Nothing is retried, and
    nothing committed before a failure is undone. When the deadline
    expires the in-flight repository or publisher call is cancelled and
    DeadlineExceededException is raised.

    Example:
        ```python
        coordinator = StoreLifecycleCoordinator(
            store_repository=stores,
            account_repository=accounts,
            category_repository=categories,
            event_publisher=publisher,
            unit_of_work=uow,
            default_timeout=5.0,
        )
        ctx = RequestContext.with_timeout(2.0)
        store = await coordinator.create(ctx, CreateStoreRequest(...))
        await coordinator.activate(ctx, store.id)
        ```
    """

    def __init__(
        self,
        store_repository: IStoreRepository,
        account_repository: IAccountRepository,
        category_repository: ICategoryRepository,
        event_publisher: IEventPublisher,
        unit_of_work: IUnitOfWork,
        topics: StoreTopics | None = None,
        default_timeout: float | None = None,
        on_event_published: EventHook | None = None,
    ):
        events = StoreEventEmitter(event_publisher, topics, on_event_published)
        self.default_timeout = default_timeout
        self.logger = get_use_case_logger("store_lifecycle")

        self._create = CreateStoreUseCase(
            store_repository, account_repository, category_repository, unit_of_work, events
        )
        self._get = GetStoreUseCase(store_repository)
        self._list = ListStoresUseCase(store_repository)
        self._change_status = ChangeStoreStatusUseCase(store_repository, unit_of_work, events)
        self._update = UpdateStoreUseCase(store_repository, category_repository, unit_of_work, events)
        self._delete = DeleteStoreUseCase(store_repository, account_repository, unit_of_work, events)

    # Commands

    async def create(self, ctx: RequestContext, request: CreateStoreRequest) -> Store:
        return await self._run(ctx, "create", self._create.execute(request), category_id=request.category_id)

    async def activate(self, ctx: RequestContext, store_id: str) -> Store:
        return await self.transition(ctx, store_id, StoreAction.ACTIVATE)

    async def block(self, ctx: RequestContext, store_id: str) -> Store:
        return await self.transition(ctx, store_id, StoreAction.BLOCK)

    async def disable(self, ctx: RequestContext, store_id: str) -> Store:
        return await self.transition(ctx, store_id, StoreAction.DISABLE)

    async def transition(self, ctx: RequestContext, store_id: str, action: StoreAction) -> Store:
        return await self._run(ctx, action.value, self._change_status.execute(store_id, action), store_id=store_id)

    async def update(self, ctx: RequestContext, request: UpdateStoreRequest) -> Store:
        return await self._run(ctx, "update", self._update.execute(request), store_id=request.id)

    async def delete(self, ctx: RequestContext, store_id: str) -> Store:
        return await self._run(ctx, "delete", self._delete.execute(store_id), store_id=store_id)

    # Queries

    async def get(self, ctx: RequestContext, store_id: str, owner_id: str | None = None) -> Store:
        return await self._run(ctx, "get", self._get.execute(store_id, owner_id), store_id=store_id)

    async def index(
        self,
        ctx: RequestContext,
        sort: str = "",
        limit: int = 0,
        page: int = 0,
        filters: StoreFilter | None = None,
    ) -> StorePage:
        request = ListStoresRequest(sort=sort, limit=limit, page=page, filters=filters)
        return await self._run(ctx, "index", self._list.execute(request), sort=sort, limit=limit, page=page)

    # Execution

    async def _run(self, ctx: RequestContext, operation: str, call: Awaitable[T], **fields) -> T:
        log = self.logger.with_context(operation=operation, correlation_id=ctx.correlation_id, **fields)
        timeout = ctx.budget(self.default_timeout)

        if timeout is not None and timeout <= 0:
            # Never started; close the coroutine so it is not reported as unawaited
            close = getattr(call, "close", None)
            if close is not None:
                close()
            log.error(f"Store {operation} rejected: deadline already expired")
            raise DeadlineExceededException(operation, 0.0)

        try:
            result = await asyncio.wait_for(call, timeout=timeout)
        except asyncio.TimeoutError:
            log.error(f"Store {operation} timed out after {timeout:.3f}s")
            raise DeadlineExceededException(operation, timeout) from None
        except DomainException as e:
            if e.kind == ErrorKind.INTERNAL:
                log.exception(f"Store {operation} failed: {e.message}")
            elif e.kind.is_precondition():
                log.warning(f"Store {operation} rejected: {e.message}", kind=e.kind.value)
            else:
                log.warning(f"Store {operation} failed: {e.message}", kind=e.kind.value)
            raise
        except Exception as e:
            log.exception(f"Unexpected error during store {operation}: {e}")
            raise

        log.debug(f"Store {operation} completed")
        return result


__all__ = ["StoreLifecycleCoordinator"]
