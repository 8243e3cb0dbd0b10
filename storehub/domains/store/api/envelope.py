"""
Request Envelope

Pre-gate in front of the store lifecycle coordinator. Attaches a deadline,
checks the shape of inputs the domain constructors do not check themselves
and translates errors to transport status codes. It never changes business
state on its own.
"""

from dataclasses import dataclass

from storehub.core.domain import DomainException, ErrorKind, ValidationException, is_canonical_id
from storehub.core.shared.logger import get_correlation_id
from storehub.domains.store.application import RequestContext, StoreLifecycleCoordinator
from storehub.domains.store.application.dto import CreateStoreRequest, StorePage, UpdateStoreRequest
from storehub.domains.store.domain.entities import Store
from storehub.domains.store.domain.value_objects import StoreAction, StoreFilter, StoreStatus

MAX_PAGE_LIMIT = 100
INTERNAL_ERROR_MESSAGE = "internal server error"


@dataclass(frozen=True)
class ErrorPayload:
    """Transport-level rendering of an error."""

    http_status: int
    grpc_code: str
    message: str


# ErrorKind -> (HTTP status, gRPC status code name)
ERROR_STATUS: dict[ErrorKind, tuple[int, str]] = {
    ErrorKind.NOT_FOUND: (404, "NOT_FOUND"),
    ErrorKind.BAD_REQUEST: (400, "INVALID_ARGUMENT"),
    ErrorKind.CONFLICT: (409, "ALREADY_EXISTS"),
    ErrorKind.PENDING: (409, "FAILED_PRECONDITION"),
    ErrorKind.ACTIVE: (409, "FAILED_PRECONDITION"),
    ErrorKind.BLOCKED: (409, "FAILED_PRECONDITION"),
    ErrorKind.INACTIVED: (409, "FAILED_PRECONDITION"),
    ErrorKind.INTERNAL: (500, "INTERNAL"),
}


def error_kind(exc: BaseException) -> ErrorKind:
    """Kind of any exception; anything outside the domain hierarchy is internal."""
    if isinstance(exc, DomainException):
        return exc.kind
    return ErrorKind.INTERNAL


def error_payload(exc: BaseException) -> ErrorPayload:
    """
    Map an exception to its HTTP status, gRPC code name and client message.

    Internal failures never expose their message.
    """
    kind = error_kind(exc)
    http_status, grpc_code = ERROR_STATUS[kind]
    if kind == ErrorKind.INTERNAL:
        message = INTERNAL_ERROR_MESSAGE
    else:
        message = exc.message if isinstance(exc, DomainException) else str(exc)
    return ErrorPayload(http_status=http_status, grpc_code=grpc_code, message=message)


def require_canonical_id(value: str | None, field: str) -> None:
    if not is_canonical_id(value):
        raise ValidationException(f"Invalid {field}: {value!r}", field=field)


class RequestEnvelope:
    """
    Deadline-attaching, shape-validating facade over the coordinator.

    Example:
        ```python
        envelope = RequestEnvelope(coordinator, default_timeout=5.0)
        page = await envelope.index(sort="name", limit=20, page=2)
        ```
    """

    def __init__(
        self,
        coordinator: StoreLifecycleCoordinator,
        default_timeout: float | None = None,
        max_page_limit: int = MAX_PAGE_LIMIT,
    ):
        self.coordinator = coordinator
        self.default_timeout = default_timeout
        self.max_page_limit = max_page_limit

    def context(self, timeout: float | None = None, correlation_id: str | None = None) -> RequestContext:
        """Build the request context for one call. Must run inside the event loop."""
        return RequestContext.with_timeout(
            timeout if timeout is not None else self.default_timeout,
            correlation_id or get_correlation_id(),
        )

    # Commands

    async def create(self, request: CreateStoreRequest, timeout: float | None = None) -> Store:
        return await self.coordinator.create(self.context(timeout), request)

    async def transition(self, store_id: str, action: StoreAction, timeout: float | None = None) -> Store:
        require_canonical_id(store_id, "id")
        return await self.coordinator.transition(self.context(timeout), store_id, action)

    async def activate(self, store_id: str, timeout: float | None = None) -> Store:
        return await self.transition(store_id, StoreAction.ACTIVATE, timeout)

    async def block(self, store_id: str, timeout: float | None = None) -> Store:
        return await self.transition(store_id, StoreAction.BLOCK, timeout)

    async def disable(self, store_id: str, timeout: float | None = None) -> Store:
        return await self.transition(store_id, StoreAction.DISABLE, timeout)

    async def update(self, request: UpdateStoreRequest, timeout: float | None = None) -> Store:
        require_canonical_id(request.id, "id")
        return await self.coordinator.update(self.context(timeout), request)

    async def delete(self, store_id: str, timeout: float | None = None) -> Store:
        require_canonical_id(store_id, "id")
        return await self.coordinator.delete(self.context(timeout), store_id)

    # Queries

    async def get(self, store_id: str, owner_id: str | None = None, timeout: float | None = None) -> Store:
        require_canonical_id(store_id, "id")
        if owner_id is not None:
            require_canonical_id(owner_id, "owner_id")
        return await self.coordinator.get(self.context(timeout), store_id, owner_id)

    async def index(
        self,
        sort: str = "",
        limit: int = 0,
        page: int = 0,
        user_id: str | None = None,
        status: str | None = None,
        category_id: str | None = None,
        tags: list[str] | None = None,
        timeout: float | None = None,
    ) -> StorePage:
        if limit < 0:
            raise ValidationException("limit cannot be negative", field="limit")
        if limit > self.max_page_limit:
            raise ValidationException(f"limit cannot exceed {self.max_page_limit}", field="limit")
        if page < 0:
            raise ValidationException("page cannot be negative", field="page")

        filters = StoreFilter(
            user_id=user_id,
            status=StoreStatus.from_string(status) if status else None,
            category_id=category_id,
            tags=tuple(tags or ()),
        )
        return await self.coordinator.index(self.context(timeout), sort, limit, page, filters)


__all__ = [
    "ERROR_STATUS",
    "INTERNAL_ERROR_MESSAGE",
    "MAX_PAGE_LIMIT",
    "ErrorPayload",
    "RequestEnvelope",
    "error_kind",
    "error_payload",
]
