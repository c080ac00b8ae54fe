"""在庫ログサービス"""

from pathlib import Path
from typing import Generic, List, Type, TypeVar, Union
import logging

from ..domain.errors import StoreError
from ..domain.keyed_store import KeyedStore
from ..domain.models import IdentifiableItem
from ..infrastructure.json_persistence import JsonPersistence, PersistenceResult

T = TypeVar("T", bound=IdentifiableItem)


class InventoryLog(Generic[T]):
    """
    ファイルに紐づいた在庫ログ

    Responsibilities:
    - KeyedStore へのアイテム追加・一覧取得
    - JSON ファイルへの保存と、新しいセッションでの復元

    Invariants: 保存・読み込みに失敗してもメモリ上の状態は変更されない
    """

    def __init__(self, item_type: Type[T], file_path: Union[str, Path]):
        """
        InventoryLog を初期化

        Args:
            item_type: 記録するアイテムのモデルクラス
            file_path: 保存先 JSON ファイルパス
        """
        self.file_path = Path(file_path)
        self.store: KeyedStore[T] = KeyedStore()
        self.persistence: JsonPersistence[T] = JsonPersistence(item_type)
        self.logger = logging.getLogger(__name__)

    def add(self, item: T) -> None:
        self.store.add(item)

    def get_all(self) -> List[T]:
        return self.store.get_all()

    def save_to_file(self) -> PersistenceResult:
        """現在のスナップショットをファイルに保存"""
        return self.persistence.save(self.store.get_all(), self.file_path)

    def load_from_file(self) -> PersistenceResult:
        """
        ファイルからストアの内容を復元

        Returns:
            PersistenceResult: 読み込み結果

        Postconditions: 成功時のみストアの内容が置き換わる
        """
        result = self.persistence.load(self.file_path)
        if not result.success:
            return result

        try:
            self.store.replace_all(result.items)
        except StoreError as e:
            e.resource = str(self.file_path)
            self.logger.error(f"Rejected contents of {self.file_path}: {e}")
            return PersistenceResult(success=False, resource=str(self.file_path), error=e)
        return result
