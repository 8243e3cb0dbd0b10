"""
Store API Routes

FastAPI router for store lifecycle endpoints.
"""

from fastapi import APIRouter, Depends, Query, Response, status

from storehub.domains.store.api.dependencies import get_request_envelope, get_request_timeout
from storehub.domains.store.api.envelope import RequestEnvelope
from storehub.domains.store.api.schemas import (
    CreateStoreBody,
    ErrorResponse,
    StoreResponse,
    UpdateStoreBody,
)
from storehub.domains.store.application.dto import CreateStoreRequest, UpdateStoreRequest
from storehub.domains.store.domain.value_objects import StoreAction

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    409: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}

router = APIRouter(prefix="/stores", tags=["Stores"], responses=ERROR_RESPONSES)


@router.post("", response_model=StoreResponse, status_code=status.HTTP_201_CREATED)
async def create_store(
    body: CreateStoreBody,
    envelope: RequestEnvelope = Depends(get_request_envelope),
    timeout: float | None = Depends(get_request_timeout),
):
    """Create a pending store with a fresh zero-balance account."""
    store = await envelope.create(
        CreateStoreRequest(
            name=body.name,
            description=body.description,
            category_id=body.category_id,
            user_id=body.user_id,
            tags=body.tags,
            lat=body.latitude,
            lng=body.longitude,
            image=body.image,
        ),
        timeout=timeout,
    )
    return StoreResponse.from_entity(store)


@router.get("", response_model=list[StoreResponse])
async def list_stores(
    response: Response,
    sort: str = "",
    limit: int = 0,
    page: int = 0,
    user_id: str | None = None,
    status_filter: str | None = Query(default=None, alias="status"),
    category_id: str | None = None,
    tags: list[str] | None = Query(default=None),
    envelope: RequestEnvelope = Depends(get_request_envelope),
    timeout: float | None = Depends(get_request_timeout),
):
    """List stores; the total matching count is returned in the X-Total header."""
    result = await envelope.index(
        sort=sort,
        limit=limit,
        page=page,
        user_id=user_id,
        status=status_filter,
        category_id=category_id,
        tags=tags,
        timeout=timeout,
    )
    response.headers["X-Total"] = str(result.total)
    return [StoreResponse.from_entity(store) for store in result.stores]


@router.get("/{store_id}", response_model=StoreResponse)
async def get_store(
    store_id: str,
    owner_id: str | None = None,
    envelope: RequestEnvelope = Depends(get_request_envelope),
    timeout: float | None = Depends(get_request_timeout),
):
    """Get a store, optionally only if it belongs to owner_id."""
    store = await envelope.get(store_id, owner_id=owner_id, timeout=timeout)
    return StoreResponse.from_entity(store)


@router.put("/{store_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_store(
    store_id: str,
    body: UpdateStoreBody,
    envelope: RequestEnvelope = Depends(get_request_envelope),
    timeout: float | None = Depends(get_request_timeout),
) -> Response:
    """Replace the editable fields of a store."""
    await envelope.update(
        UpdateStoreRequest(
            id=store_id,
            name=body.name,
            description=body.description,
            category_id=body.category_id,
            image=body.image,
            tags=body.tags,
            lat=body.latitude,
            lng=body.longitude,
        ),
        timeout=timeout,
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{store_id}/{action}", status_code=status.HTTP_204_NO_CONTENT)
async def change_store_status(
    store_id: str,
    action: StoreAction,
    envelope: RequestEnvelope = Depends(get_request_envelope),
    timeout: float | None = Depends(get_request_timeout),
) -> Response:
    """Activate, block or disable a store."""
    await envelope.transition(store_id, action, timeout=timeout)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{store_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_store(
    store_id: str,
    envelope: RequestEnvelope = Depends(get_request_envelope),
    timeout: float | None = Depends(get_request_timeout),
) -> Response:
    """Delete a store and its account."""
    await envelope.delete(store_id, timeout=timeout)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


__all__ = ["router"]
