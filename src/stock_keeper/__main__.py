"""CLI エントリーポイント"""

import sys
import logging
import os
from datetime import datetime, timedelta

from .domain.errors import StoreError
from .domain.models import InventoryItem, ElectronicItem, GroceryItem
from .orchestration.inventory_log import InventoryLog
from .orchestration.warehouse import WarehouseManager


def seed_inventory(log: InventoryLog) -> None:
    """在庫ログにサンプルデータを登録"""
    now = datetime.now()
    log.add(InventoryItem(id=1, name="Alienware Aurora 16X", quantity=10, date_added=now))
    log.add(InventoryItem(id=2, name="Logitech 15 pro wireless", quantity=20, date_added=now))
    log.add(InventoryItem(id=3, name="Oraimo Freepods 12", quantity=30, date_added=now))


def seed_warehouse(manager: WarehouseManager) -> None:
    """倉庫にサンプルデータを登録"""
    now = datetime.now()
    electronics = WarehouseManager.ELECTRONICS
    groceries = WarehouseManager.GROCERIES
    manager.add_item(electronics, ElectronicItem(
        id=1, name="Freepods pro 12", quantity=10, brand="Oraimo", warranty_months=24))
    manager.add_item(electronics, ElectronicItem(
        id=2, name="Galaxy A30", quantity=8, brand="Samsung", warranty_months=12))
    manager.add_item(electronics, ElectronicItem(
        id=3, name="Blue pin Adapter 23A", quantity=25, brand="HP", warranty_months=18))
    manager.add_item(groceries, GroceryItem(
        id=1, name="Cowbell Coffee", quantity=20, expiry_date=now + timedelta(days=7)))
    manager.add_item(groceries, GroceryItem(
        id=2, name="Oba Spaghetti", quantity=15, expiry_date=now + timedelta(days=3)))
    manager.add_item(groceries, GroceryItem(
        id=3, name="Gino Curry powder", quantity=35, expiry_date=now + timedelta(days=10)))


def run_inventory_session(data_file: str, logger: logging.Logger) -> bool:
    """
    在庫ログのセッションを実行

    サンプルデータを保存した後、新しいセッションとして同じファイルから読み込みます。

    Returns:
        bool: 保存・読み込みがともに成功すれば True
    """
    log = InventoryLog(InventoryItem, data_file)
    seed_inventory(log)
    if not log.save_to_file().success:
        return False

    logger.info(f"New session. Reading contents from {data_file}")
    log = InventoryLog(InventoryItem, data_file)
    if not log.load_from_file().success:
        return False

    for item in log.get_all():
        logger.info(
            f"ID: {item.id}, Name: {item.name}, Quantity: {item.quantity}, "
            f"Date Added: {item.date_added.isoformat()}"
        )
    return True


def run_warehouse_session(logger: logging.Logger) -> None:
    """倉庫の一覧表示と異常系操作を実行"""
    manager = WarehouseManager.default()
    seed_warehouse(manager)

    for category in manager.categories():
        logger.info(f"{category} items:")
        manager.print_all(category, sink=logger.info)

    # 想定どおりの失敗はログ記録のみで継続
    try:
        manager.add_item(WarehouseManager.ELECTRONICS, ElectronicItem(
            id=1, name="MacBook Pro", quantity=5, brand="Apple", warranty_months=12))
    except StoreError as e:
        logger.warning(f"Failed to add MacBook Pro: {e} ({e.kind.value})")

    try:
        manager.remove_item(WarehouseManager.GROCERIES, 99)
    except StoreError as e:
        logger.warning(f"Failed to remove grocery item 99: {e} ({e.kind.value})")

    try:
        manager.store(WarehouseManager.ELECTRONICS).update_quantity(2, -5)
    except StoreError as e:
        logger.warning(f"Failed to update electronic item 2: {e} ({e.kind.value})")


def resolve_log_level(name: str) -> int:
    """ログレベル名を数値に変換（不明な名前は INFO）"""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def main():
    """
    CLI エントリーポイント

    Usage:
        python -m stock_keeper

    Environment:
        STOCK_KEEPER_DATA_FILE: 在庫ログの保存先（既定 inventory.json）
        STOCK_KEEPER_LOG_LEVEL: ログレベル（既定 INFO）

    Exit codes:
        0: 成功
        1: 失敗
    """
    # ロギング設定
    level_name = os.environ.get("STOCK_KEEPER_LOG_LEVEL", "INFO")
    level = resolve_log_level(level_name)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    logger = logging.getLogger(__name__)
    if not isinstance(logging.getLevelName(level_name.strip().upper()), int):
        logger.warning(f"Unknown log level '{level_name}', falling back to INFO")
    data_file = os.environ.get("STOCK_KEEPER_DATA_FILE", "inventory.json")

    try:
        if not run_inventory_session(data_file, logger):
            logger.error(f"Inventory session failed for {data_file}")
            sys.exit(1)

        run_warehouse_session(logger)
        sys.exit(0)

    except Exception as e:
        logger.error(f"Unexpected error: {str(e)}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
