"""
インフラストラクチャ層

ファイル I/O による永続化を提供します。
"""

from .json_persistence import JsonPersistence, PersistenceResult

__all__ = ["JsonPersistence", "PersistenceResult"]
