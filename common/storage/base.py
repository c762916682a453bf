"""
Abstract key-value store interface.

Defines the contract that all persistence backends must implement.
This allows swapping between in-memory and file storage
without changing application code.

Example:
    from common.storage import KeyValueStore, JsonFileStore, MemoryKeyValueStore

    def get_store(settings) -> KeyValueStore:
        if settings.STORAGE_BACKEND == "file":
            return JsonFileStore(settings.STORAGE_PATH)
        return MemoryKeyValueStore()
"""

from abc import ABC, abstractmethod
from typing import Optional


class PersistenceError(Exception):
    """
    Raised when a backend cannot read or write a stored value.

    Callers loading state are expected to treat this as "no prior state".
    """

    def __init__(self, message: str, key: Optional[str] = None):
        self.key = key
        super().__init__(message)


class KeyValueStore(ABC):
    """
    Abstract key-value store.

    Values are JSON documents serialized to strings.
    """

    @abstractmethod
    async def load(self, key: str) -> Optional[str]:
        """
        Load the raw value stored under a key.

        Args:
            key: Storage key

        Returns:
            The stored string, or None if the key has never been saved

        Raises:
            PersistenceError: If the backend cannot be read
        """
        pass

    @abstractmethod
    async def save(self, key: str, value: str) -> None:
        """
        Store a raw value under a key, replacing any previous value.

        Args:
            key: Storage key
            value: Serialized JSON document

        Raises:
            PersistenceError: If the backend cannot be written
        """
        pass

    @abstractmethod
    async def delete(self, key: str) -> None:
        """
        Remove a key. Removing a missing key is not an error.

        Args:
            key: Storage key
        """
        pass

    async def health_check(self) -> bool:
        """
        Check if the backend is reachable.

        Returns:
            True if a probe value can be written and read back
        """
        probe = "__health__"
        try:
            await self.save(probe, "true")
            return await self.load(probe) == "true"
        except PersistenceError:
            return False
