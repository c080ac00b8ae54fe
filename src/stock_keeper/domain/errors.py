"""
ストアエラー定義

ストア・永続化・ファサードのすべての失敗を、種別タグ付きの単一例外
StoreError で表現します。呼び出し側は kind を見て処理を分岐します。
"""

from enum import Enum
from typing import Any, Optional


class StoreErrorKind(str, Enum):
    """エラー種別"""
    DUPLICATE_IDENTIFIER = "duplicate_identifier"
    NOT_FOUND = "not_found"
    INVALID_VALUE = "invalid_value"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DECODE_ERROR = "decode_error"
    IO_ERROR = "io_error"
    CATEGORY_NOT_FOUND = "category_not_found"


class StoreError(Exception):
    """
    ストアエラー例外

    識別子の重複・欠落、値の範囲違反、永続化リソースの読み書き失敗などを表します。
    """

    def __init__(
        self,
        kind: StoreErrorKind,
        message: str,
        identifier: Optional[Any] = None,
        resource: Optional[str] = None,
        category: Optional[str] = None,
    ):
        """
        Args:
            kind: エラー種別
            message: エラーメッセージ
            identifier: 対象アイテムの識別子（該当する場合）
            resource: 対象リソース（ファイルパス等、該当する場合）
            category: 対象カテゴリー名（該当する場合）
        """
        super().__init__(message)
        self.kind = kind
        self.identifier = identifier
        self.resource = resource
        self.category = category

    @classmethod
    def duplicate(cls, identifier: Any) -> "StoreError":
        return cls(
            StoreErrorKind.DUPLICATE_IDENTIFIER,
            f"Item with ID {identifier} already exists.",
            identifier=identifier,
        )

    @classmethod
    def not_found(cls, identifier: Any) -> "StoreError":
        return cls(
            StoreErrorKind.NOT_FOUND,
            f"Item with ID {identifier} not found.",
            identifier=identifier,
        )

    def __repr__(self) -> str:
        return f"StoreError(kind={self.kind.value!r}, message={str(self)!r})"
