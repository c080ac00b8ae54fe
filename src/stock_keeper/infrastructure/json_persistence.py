"""
JSON 永続化アダプター

ストアのスナップショットを JSON ファイルとして保存・復元します。
読み書きの失敗は例外として送出せず、PersistenceResult に載せて返します。
"""

import json
import logging
from pathlib import Path
from typing import Any, Generic, List, Optional, Sequence, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..domain.errors import StoreError, StoreErrorKind
from ..domain.models import IdentifiableItem

T = TypeVar("T", bound=IdentifiableItem)


class PersistenceResult(BaseModel):
    """
    永続化結果

    Attributes:
        success: 保存・読み込みが成功したか
        resource: 対象ファイルパス
        items: 読み込んだアイテム（保存時・失敗時は空リスト）
        error: 失敗時のエラー
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    success: bool
    resource: str
    items: List[Any] = Field(default_factory=list)
    error: Optional[StoreError] = None


class JsonPersistence(Generic[T]):
    """
    アイテムリストの JSON 永続化

    1アイテム1オブジェクトの JSON 配列として保存します。フィールド名は
    モデルの属性名と一致し、スキーマバージョンは持ちません。

    Note:
        datetime は ISO 8601 文字列（マイクロ秒精度）として保存され、
        タイムゾーンの有無を含めてそのまま復元されます。
    """

    def __init__(self, item_type: Type[T]):
        """
        JsonPersistence を初期化

        Args:
            item_type: 読み込み時に復元するアイテムのモデルクラス
        """
        self.item_type = item_type
        self.logger = logging.getLogger(__name__)

    def save(self, items: Sequence[T], resource: Union[str, Path]) -> PersistenceResult:
        """
        アイテムリストを JSON ファイルに保存

        Args:
            items: 保存するアイテム
            resource: 保存先ファイルパス（既存の内容は上書き）

        Returns:
            PersistenceResult: 保存結果（失敗時は IO_ERROR を含む）

        Note:
            - ensure_ascii=False で非 ASCII 文字をそのまま保存
            - indent=2 で人間が読みやすい形式に整形
            - 書き込み途中で失敗した場合、ファイルは不完全な状態で残り得る
        """
        path = Path(resource)
        try:
            json_data = [item.model_dump(mode="json") for item in items]
            with open(path, "w", encoding="utf-8") as f:
                json.dump(json_data, f, ensure_ascii=False, indent=2)
        except (OSError, TypeError, ValueError) as e:
            error = StoreError(
                StoreErrorKind.IO_ERROR,
                f"Error saving to file {path}: {e}",
                resource=str(path),
            )
            self.logger.error(str(error))
            return PersistenceResult(success=False, resource=str(path), error=error)

        self.logger.info(f"Saved {len(json_data)} items to {path}")
        return PersistenceResult(success=True, resource=str(path))

    def load(self, resource: Union[str, Path]) -> PersistenceResult:
        """
        JSON ファイルからアイテムリストを読み込み

        Args:
            resource: 読み込み元ファイルパス

        Returns:
            PersistenceResult: 読み込み結果。失敗時は items が空リストで、
            error に RESOURCE_NOT_FOUND / DECODE_ERROR / IO_ERROR のいずれかが入る
        """
        path = Path(resource)
        if not path.exists():
            return self._failure(
                path, StoreErrorKind.RESOURCE_NOT_FOUND, f"Inventory file not found: {path}"
            )

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            return self._failure(path, StoreErrorKind.DECODE_ERROR, f"Malformed JSON in {path}: {e}")
        except OSError as e:
            return self._failure(path, StoreErrorKind.IO_ERROR, f"Error loading from file {path}: {e}")

        if not isinstance(data, list):
            return self._failure(
                path, StoreErrorKind.DECODE_ERROR, f"Expected a JSON array in {path}"
            )

        try:
            items = [self.item_type.model_validate(item) for item in data]
        except ValidationError as e:
            return self._failure(path, StoreErrorKind.DECODE_ERROR, f"Invalid item in {path}: {e}")

        self.logger.info(f"Loaded {len(items)} items from {path}")
        return PersistenceResult(success=True, resource=str(path), items=items)

    def _failure(self, path: Path, kind: StoreErrorKind, message: str) -> PersistenceResult:
        """失敗結果を生成し、エラーをログに記録"""
        error = StoreError(kind, message, resource=str(path))
        self.logger.error(message)
        return PersistenceResult(success=False, resource=str(path), error=error)
