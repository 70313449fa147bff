from .kv_store import SQLiteKVStore

__all__ = ["SQLiteKVStore"]
