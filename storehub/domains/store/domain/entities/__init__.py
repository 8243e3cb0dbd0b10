"""
Store Domain Entities
"""

from .account import Account
from .category import Category
from .store import Store

__all__ = ["Account", "Category", "Store"]
