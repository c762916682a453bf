"""
In-memory key-value store.

Used for tests and for single-process development servers where state
may be lost on restart.
"""

from typing import Dict, Optional

from common.storage.base import KeyValueStore


class MemoryKeyValueStore(KeyValueStore):
    """Dictionary-backed store. Not shared between processes."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial) if initial else {}

    async def load(self, key: str) -> Optional[str]:
        return self._data.get(key)

    async def save(self, key: str, value: str) -> None:
        self._data[key] = value

    async def delete(self, key: str) -> None:
        self._data.pop(key, None)

