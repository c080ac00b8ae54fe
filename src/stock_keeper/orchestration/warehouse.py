"""倉庫ストアファサード"""

from typing import Callable, Dict, List, Type
import logging

from ..domain.errors import StoreError, StoreErrorKind
from ..domain.keyed_store import KeyedStore
from ..domain.models import ElectronicItem, GroceryItem, StockedItem


class WarehouseManager:
    """
    カテゴリー別ストアの統一操作

    Responsibilities:
    - カテゴリーごとに1つの KeyedStore を保持
    - 一覧表示・在庫追加・削除をカテゴリー名で受け付ける

    Note:
        カテゴリー間で識別子空間は共有しません。同じ id が
        electronics と groceries に同時に存在し得ます。
    """

    ELECTRONICS = "electronics"
    GROCERIES = "groceries"

    def __init__(self):
        self._stores: Dict[str, KeyedStore] = {}
        self._item_types: Dict[str, Type[StockedItem]] = {}
        self.logger = logging.getLogger(__name__)

    @classmethod
    def default(cls) -> "WarehouseManager":
        """electronics と groceries を登録済みのマネージャーを生成"""
        manager = cls()
        manager.register_category(cls.ELECTRONICS, ElectronicItem)
        manager.register_category(cls.GROCERIES, GroceryItem)
        return manager

    def register_category(self, name: str, item_type: Type[StockedItem]) -> KeyedStore:
        """
        カテゴリーを登録し、空のストアを作成

        Raises:
            StoreError: DUPLICATE_IDENTIFIER（同名カテゴリーが登録済み）
        """
        if name in self._stores:
            raise StoreError(
                StoreErrorKind.DUPLICATE_IDENTIFIER,
                f"Category '{name}' is already registered.",
                category=name,
            )
        store: KeyedStore = KeyedStore()
        self._stores[name] = store
        self._item_types[name] = item_type
        return store

    def categories(self) -> List[str]:
        return list(self._stores)

    def store(self, category: str) -> KeyedStore:
        """
        カテゴリーのストアを取得

        Raises:
            StoreError: CATEGORY_NOT_FOUND
        """
        try:
            return self._stores[category]
        except KeyError:
            raise StoreError(
                StoreErrorKind.CATEGORY_NOT_FOUND,
                f"Category '{category}' not found.",
                category=category,
            ) from None

    def add_item(self, category: str, item: StockedItem) -> None:
        """
        カテゴリーにアイテムを追加

        Raises:
            StoreError: CATEGORY_NOT_FOUND、DUPLICATE_IDENTIFIER
            TypeError: カテゴリーのアイテム型と一致しない場合
        """
        store = self.store(category)
        expected = self._item_types[category]
        if not isinstance(item, expected):
            raise TypeError(
                f"Category '{category}' holds {expected.__name__}, got {type(item).__name__}"
            )
        store.add(item)

    def print_all(self, category: str, sink: Callable[[str], None] = print) -> List[str]:
        """
        カテゴリーの全アイテムを整形して出力

        Args:
            category: カテゴリー名
            sink: 1行ずつ受け取る出力先

        Returns:
            List[str]: 出力した行
        """
        lines = [
            f"ID: {item.id}, Name: {item.name}, Quantity: {item.quantity}"
            for item in self.store(category).get_all()
        ]
        for line in lines:
            sink(line)
        return lines

    def increase_stock(self, category: str, item_id: int, delta: int) -> StockedItem:
        """
        在庫数を delta だけ増やす

        Returns:
            StockedItem: 更新後のアイテム

        Raises:
            StoreError: CATEGORY_NOT_FOUND、NOT_FOUND、INVALID_VALUE
            （いずれの場合も在庫数は変更されない）
        """
        store = self.store(category)
        item = store.get_by_id(item_id)
        updated = store.update_quantity(item_id, item.quantity + delta)
        self.logger.info(f"Stock updated for {updated.name}. New quantity: {updated.quantity}")
        return updated

    def remove_item(self, category: str, item_id: int) -> None:
        """
        カテゴリーからアイテムを削除

        Raises:
            StoreError: CATEGORY_NOT_FOUND、NOT_FOUND
        """
        self.store(category).remove(item_id)
        self.logger.info(f"Item with ID {item_id} removed from {category}")
