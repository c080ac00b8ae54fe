"""
ドメイン層

識別子契約・レコード型・キー付きストア・エラー種別を提供します。
"""

from .errors import StoreError, StoreErrorKind
from .models import IdentifiableItem, StockedItem, InventoryItem, ElectronicItem, GroceryItem
from .keyed_store import KeyedStore

__all__ = [
    "StoreError",
    "StoreErrorKind",
    "IdentifiableItem",
    "StockedItem",
    "InventoryItem",
    "ElectronicItem",
    "GroceryItem",
    "KeyedStore",
]
