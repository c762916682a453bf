"""
Storage module - Pluggable key-value persistence backends.

Every backend stores opaque JSON strings under string keys. Serialization and
schema handling belong to the caller.

Usage:
    from common.storage import MemoryKeyValueStore

    store = MemoryKeyValueStore()
    await store.save("session-1:mentor-theme", '"dark"')
    raw = await store.load("session-1:mentor-theme")
"""

from common.storage.base import KeyValueStore, PersistenceError
from common.storage.memory import MemoryKeyValueStore
from common.storage.file_store import JsonFileStore

__all__ = [
    "KeyValueStore",
    "PersistenceError",
    "MemoryKeyValueStore",
    "JsonFileStore",
]
