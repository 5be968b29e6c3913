"""
Storage backends for objectgraph.

This module provides the backends an ObjectStore flushes to and
reloads from:
- MemoryStorage: snapshot kept in the storage instance
- LocalKeyValueStorage: JSON document in a SQLite file
- SessionKeyValueStorage: JSON document in a process lifetime engine

All push and pull operations are async.
"""

from objectgraph.storage.base import Storage
from objectgraph.storage.engines import SessionKeyValueEngine, SqliteKeyValueEngine
from objectgraph.storage.factory import StorageBackendFactory
from objectgraph.storage.key_value import (
    KeyValueStorage,
    LocalKeyValueStorage,
    SessionKeyValueStorage,
)
from objectgraph.storage.memory import MemoryStorage

__all__ = [
    "KeyValueStorage",
    "LocalKeyValueStorage",
    "MemoryStorage",
    "SessionKeyValueEngine",
    "SessionKeyValueStorage",
    "SqliteKeyValueEngine",
    "Storage",
    "StorageBackendFactory",
]
