"""
List Stores Use Case

Paginated, sorted and optionally filtered store listing.
"""

from storehub.domains.store.application.dto import ListStoresRequest, StorePage
from storehub.domains.store.application.ports import IStoreRepository
from storehub.domains.store.domain.value_objects import DEFAULT_LIMIT, DEFAULT_PAGE, SortSpec


class ListStoresUseCase:
    """
    Use Case: List Stores

    Defaults applied before the repository is called:
    - limit <= 0 -> 10
    - page <= 0 -> 1
    - empty sort -> created_at DESC
    """

    def __init__(self, store_repository: IStoreRepository):
        self.store_repository = store_repository

    async def execute(self, request: ListStoresRequest) -> StorePage:
        sort = SortSpec.parse(request.sort)
        limit = request.limit if request.limit > 0 else DEFAULT_LIMIT
        page = request.page if request.page > 0 else DEFAULT_PAGE

        filters = request.filters
        if filters is not None and filters.is_empty():
            filters = None

        stores, total = await self.store_repository.find_all(sort, limit, page, filters)
        return StorePage(stores=stores, total=total, page=page, limit=limit, sort=str(sort))


__all__ = ["ListStoresUseCase"]
