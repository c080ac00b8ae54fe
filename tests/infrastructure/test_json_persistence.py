"""
JsonPersistence のユニットテスト

JSON ファイルへの保存・読み込みと、失敗時の結果を検証します。
"""

import json
import logging
import pytest
from pathlib import Path
from datetime import datetime, timezone
from tempfile import TemporaryDirectory

from src.stock_keeper.infrastructure.json_persistence import JsonPersistence, PersistenceResult
from src.stock_keeper.domain.errors import StoreErrorKind
from src.stock_keeper.domain.models import StockedItem, InventoryItem


@pytest.fixture
def persistence():
    return JsonPersistence(StockedItem)


@pytest.fixture
def sample_items():
    return [
        StockedItem(id=1, name="X", quantity=10),
        StockedItem(id=2, name="Y", quantity=20),
    ]


class TestJsonPersistenceSave:
    """保存のテスト"""

    def test_save_writes_json_array(self, persistence, sample_items):
        """1アイテム1オブジェクトの JSON 配列として保存されること"""
        with TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir) / "inventory.json"
            result = persistence.save(sample_items, path)

            assert result.success is True
            assert result.error is None
            assert result.resource == str(path)
            with open(path, "r", encoding="utf-8") as f:
                saved = json.load(f)
            assert saved == [
                {"id": 1, "name": "X", "quantity": 10},
                {"id": 2, "name": "Y", "quantity": 20},
            ]

    def test_save_overwrites_existing_content(self, persistence, sample_items):
        """既存の内容を完全に上書きすること"""
        with TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir) / "inventory.json"
            path.write_text("previous content that is much longer than the new one", encoding="utf-8")

            persistence.save(sample_items[:1], path)

            assert json.loads(path.read_text(encoding="utf-8")) == [
                {"id": 1, "name": "X", "quantity": 10}
            ]

    def test_save_preserves_non_ascii(self, persistence):
        """非 ASCII 文字をエスケープせずに保存すること"""
        with TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir) / "inventory.json"
            persistence.save([StockedItem(id=1, name="コーヒー", quantity=1)], path)
            assert "コーヒー" in path.read_text(encoding="utf-8")

    def test_save_to_missing_directory_reports_io_error(self, persistence, sample_items, caplog):
        """書き込みに失敗した場合は例外をスローせず IO_ERROR を返すこと"""
        with TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir) / "missing" / "inventory.json"

            with caplog.at_level(logging.ERROR):
                result = persistence.save(sample_items, path)

            assert result.success is False
            assert result.error.kind == StoreErrorKind.IO_ERROR
            assert result.error.resource == str(path)
            assert str(path) in str(result.error)
            assert "Error saving to file" in caplog.text


class TestJsonPersistenceLoad:
    """読み込みのテスト"""

    def test_round_trip(self, persistence, sample_items):
        """保存した内容を同じ順序・同じ値で読み込めること"""
        with TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir) / "inventory.json"
            persistence.save(sample_items, path)
            result = persistence.load(path)

            assert result.success is True
            assert result.items == sample_items
            assert all(isinstance(item, StockedItem) for item in result.items)

    def test_round_trip_preserves_datetimes(self):
        """datetime をマイクロ秒精度・タイムゾーン付きで復元できること"""
        persistence = JsonPersistence(InventoryItem)
        items = [
            InventoryItem(id=1, name="A", quantity=1, date_added=datetime(2026, 1, 5, 9, 30, 15, 123456)),
            InventoryItem(
                id=2, name="B", quantity=2,
                date_added=datetime(2026, 1, 6, 12, 0, tzinfo=timezone.utc),
            ),
        ]
        with TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir) / "inventory.json"
            persistence.save(items, path)
            result = persistence.load(path)

            assert result.items == items
            assert result.items[0].date_added.tzinfo is None
            assert result.items[1].date_added.tzinfo is not None

    def test_load_empty_array(self, persistence):
        """空の配列は空リストとして読み込めること"""
        with TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir) / "inventory.json"
            persistence.save([], path)
            result = persistence.load(path)
            assert result.success is True
            assert result.items == []

    def test_load_missing_file_reports_resource_not_found(self, persistence):
        """ファイルが存在しない場合は空リストと RESOURCE_NOT_FOUND を返すこと"""
        with TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir) / "missing.json"
            result = persistence.load(path)

            assert result.success is False
            assert result.items == []
            assert result.error.kind == StoreErrorKind.RESOURCE_NOT_FOUND
            assert result.error.resource == str(path)

    def test_load_invalid_json_reports_decode_error(self, persistence):
        """不正な JSON は DECODE_ERROR を返すこと"""
        with TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir) / "inventory.json"
            path.write_text("{ invalid json }", encoding="utf-8")
            result = persistence.load(path)

            assert result.success is False
            assert result.items == []
            assert result.error.kind == StoreErrorKind.DECODE_ERROR

    def test_load_truncated_file_reports_decode_error(self, persistence, sample_items):
        """途中で切れたファイルは DECODE_ERROR を返すこと"""
        with TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir) / "inventory.json"
            persistence.save(sample_items, path)
            content = path.read_text(encoding="utf-8")
            path.write_text(content[: len(content) // 2], encoding="utf-8")

            result = persistence.load(path)
            assert result.error.kind == StoreErrorKind.DECODE_ERROR

    def test_load_non_array_reports_decode_error(self, persistence):
        """トップレベルが配列でない場合は DECODE_ERROR を返すこと"""
        with TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir) / "inventory.json"
            path.write_text('{"id": 1, "name": "X", "quantity": 1}', encoding="utf-8")
            result = persistence.load(path)

            assert result.success is False
            assert result.error.kind == StoreErrorKind.DECODE_ERROR

    def test_load_invalid_item_reports_decode_error(self, persistence):
        """アイテムのバリデーションに失敗した場合は DECODE_ERROR を返すこと"""
        with TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir) / "inventory.json"
            path.write_text(
                json.dumps([
                    {"id": 1, "name": "X", "quantity": 1},
                    {"id": 2, "name": "Y", "quantity": -3},
                ]),
                encoding="utf-8",
            )
            result = persistence.load(path)

            assert result.success is False
            assert result.items == []
            assert result.error.kind == StoreErrorKind.DECODE_ERROR

    def test_load_directory_reports_io_error(self, persistence):
        """読み込めないリソースは IO_ERROR を返すこと"""
        with TemporaryDirectory() as tmp_dir:
            result = persistence.load(Path(tmp_dir))

            assert result.success is False
            assert result.error.kind == StoreErrorKind.IO_ERROR

    def test_result_is_pydantic_model(self, persistence):
        """結果は PersistenceResult として返ること"""
        with TemporaryDirectory() as tmp_dir:
            result = persistence.load(Path(tmp_dir) / "missing.json")
            assert isinstance(result, PersistenceResult)
