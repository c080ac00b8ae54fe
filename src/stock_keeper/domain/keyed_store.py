"""
キー付きストア

識別子をキーとしてアイテムを保持し、追加・削除・更新時に
一意性・存在性の制約を検証するジェネリックなインメモリストアです。
"""

from typing import Callable, Dict, Generic, Iterable, List, Optional, TypeVar
import logging

from pydantic import ValidationError

from .errors import StoreError, StoreErrorKind
from .models import IdentifiableItem

T = TypeVar("T", bound=IdentifiableItem)

logger = logging.getLogger(__name__)


class KeyedStore(Generic[T]):
    """
    識別子をキーとするアイテムストア

    Responsibilities:
    - 識別子の一意性を保証した追加
    - 識別子指定の取得・削除・数量更新（欠落はエラー）
    - 条件指定の検索・削除（欠落は通常の結果）
    - 挿入順を保った防御的スナップショットの提供

    Note:
        スレッドセーフではありません。複数スレッドから使う場合は
        呼び出し側でストア単位の排他制御を行ってください。
    """

    def __init__(self, quantity_field: str = "quantity"):
        """
        KeyedStore を初期化

        Args:
            quantity_field: update_quantity で更新する数値フィールド名
        """
        self.quantity_field = quantity_field
        # dict は挿入順を保持する
        self._items: Dict[int, T] = {}

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def add(self, item: T) -> None:
        """
        アイテムを識別子をキーとして追加

        Raises:
            StoreError: DUPLICATE_IDENTIFIER（既存エントリーは変更されない）
        """
        if item.id in self._items:
            raise StoreError.duplicate(item.id)
        self._items[item.id] = item
        logger.debug(f"Added item {item.id}")

    def get_by_id(self, item_id: int) -> T:
        """
        識別子でアイテムを取得

        Raises:
            StoreError: NOT_FOUND
        """
        try:
            return self._items[item_id]
        except KeyError:
            raise StoreError.not_found(item_id) from None

    def remove(self, item_id: int) -> None:
        """
        識別子でアイテムを削除

        Raises:
            StoreError: NOT_FOUND（ストアは変更されない）
        """
        if item_id not in self._items:
            raise StoreError.not_found(item_id)
        del self._items[item_id]
        logger.debug(f"Removed item {item_id}")

    def update_quantity(self, item_id: int, new_value: int) -> T:
        """
        数量フィールドの値を置き換え

        Args:
            item_id: 対象アイテムの識別子
            new_value: 新しい数量

        Returns:
            T: 更新後のアイテム

        Raises:
            StoreError: INVALID_VALUE（負の値、またはモデルのバリデーション違反）、
                NOT_FOUND（識別子が存在しない）。いずれの場合もストアは変更されない

        Note:
            値の範囲チェックは存在チェックより先に行います。
            負の値は識別子の有無にかかわらず INVALID_VALUE になります。
        """
        if new_value < 0:
            raise StoreError(
                StoreErrorKind.INVALID_VALUE,
                f"Quantity cannot be negative: {new_value}",
                identifier=item_id,
            )
        current = self.get_by_id(item_id)
        if self.quantity_field not in type(current).model_fields:
            raise TypeError(
                f"{type(current).__name__} has no field '{self.quantity_field}'"
            )

        # アイテムは frozen のため、バリデーションを通した新しいインスタンスで置き換える
        try:
            updated = type(current).model_validate(
                {**current.model_dump(), self.quantity_field: new_value}
            )
        except ValidationError as e:
            raise StoreError(
                StoreErrorKind.INVALID_VALUE,
                f"Invalid {self.quantity_field} for item {item_id}: {new_value!r}",
                identifier=item_id,
            ) from e
        self._items[item_id] = updated
        logger.debug(f"Updated {self.quantity_field} of item {item_id} to {new_value}")
        return updated

    def get_all(self) -> List[T]:
        """
        全アイテムのスナップショットを挿入順で取得

        Returns:
            List[T]: 新しいリスト（リストの変更はストアに影響しない。
            アイテム内の可変フィールドは共有される。IdentifiableItem を参照）
        """
        return list(self._items.values())

    def find_by(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """条件に一致する最初のアイテムを返す（見つからない場合は None）"""
        for item in self._items.values():
            if predicate(item):
                return item
        return None

    def remove_by(self, predicate: Callable[[T], bool]) -> bool:
        """
        条件に一致する最初のアイテムを削除

        Returns:
            bool: 削除した場合は True
        """
        item = self.find_by(predicate)
        if item is None:
            return False
        del self._items[item.id]
        logger.debug(f"Removed item {item.id} by predicate")
        return True

    def replace_all(self, items: Iterable[T]) -> None:
        """
        ストアの内容を置き換え

        Raises:
            StoreError: DUPLICATE_IDENTIFIER（ストアは変更されない）
        """
        replacement: Dict[int, T] = {}
        for item in items:
            if item.id in replacement:
                raise StoreError.duplicate(item.id)
            replacement[item.id] = item
        self._items = replacement
        logger.debug(f"Replaced store contents with {len(replacement)} items")

    def clear(self) -> None:
        """全アイテムを削除"""
        self._items.clear()
