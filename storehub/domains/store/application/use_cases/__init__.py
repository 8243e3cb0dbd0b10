"""
Store Use Cases
"""

from .change_store_status import ChangeStoreStatusUseCase
from .create_store import CreateStoreUseCase
from .delete_store import DeleteStoreUseCase
from .get_store import GetStoreUseCase
from .list_stores import ListStoresUseCase
from .update_store import UpdateStoreUseCase

__all__ = [
    "CreateStoreUseCase",
    "GetStoreUseCase",
    "ListStoresUseCase",
    "ChangeStoreStatusUseCase",
    "UpdateStoreUseCase",
    "DeleteStoreUseCase",
]
