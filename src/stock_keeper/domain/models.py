"""
データモデル定義

このモジュールは stock_keeper のドメイン層のデータモデルを定義します:
- IdentifiableItem: ストアに格納できるすべてのアイテムの基底（識別子契約）
- StockedItem: 名前と在庫数を持つアイテム
- InventoryItem / ElectronicItem / GroceryItem: 具体的なレコード型
"""

from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator


class IdentifiableItem(BaseModel):
    """
    識別子契約

    ストアに格納するアイテムは整数の識別子 id を公開します。
    モデルは frozen のため、格納後に識別子が変わることはありません。

    Note:
        frozen が防ぐのは属性の再代入のみです。list や dict のような
        可変フィールドを持つサブクラスでは、取得したアイテム経由で
        その中身を変更するとストア内の状態も変わります。
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="アイテム識別子")


class StockedItem(IdentifiableItem):
    """
    在庫数を持つアイテム

    KeyedStore.update_quantity の対象となる quantity フィールドを持ちます。
    """

    name: str = Field(..., description="品名")
    quantity: int = Field(..., description="在庫数")

    @field_validator("quantity")
    @classmethod
    def validate_quantity(cls, v: int) -> int:
        """
        在庫数の負値チェックバリデーション

        Raises:
            ValueError: 負の値が渡された場合
        """
        if v < 0:
            raise ValueError(f"在庫数は負の値にできません: {v}")
        return v


class InventoryItem(StockedItem):
    """在庫ログに記録されるアイテム"""

    date_added: datetime = Field(..., description="登録日時")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "name": "Alienware Aurora 16X",
                "quantity": 10,
                "date_added": "2026-01-05T09:30:00",
            }
        }
    )


class ElectronicItem(StockedItem):
    """倉庫の電子機器アイテム"""

    brand: str = Field(..., description="ブランド")
    warranty_months: int = Field(..., ge=0, description="保証期間 (月単位)")


class GroceryItem(StockedItem):
    """倉庫の食料品アイテム"""

    expiry_date: datetime = Field(..., description="賞味期限")
