"""
JSON file key-value store.

Stores each key as its own file inside a directory. Writes go to a
temporary file first and are moved into place, so a crash never leaves
a half-written value behind. File I/O runs in a worker thread so the
event loop is never blocked on disk.

Example:
    from common.storage import JsonFileStore

    store = JsonFileStore("./data")
    await store.save("abc:mentor-stats", stats_json)
"""

import asyncio
import logging
import os
import re
import tempfile
from pathlib import Path
from typing import Optional, Union

from common.storage.base import KeyValueStore, PersistenceError

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9_.-]")


class JsonFileStore(KeyValueStore):
    """
    File-per-key store rooted at a directory.

    Keys are sanitized into file names; characters outside
    [A-Za-z0-9_.-] are replaced by underscores.
    """

    def __init__(self, directory: Union[str, Path]):
        """
        Initialize JsonFileStore.

        Args:
            directory: Directory holding the value files (created if missing)
        """
        self._directory = Path(directory)
        self._directory.mkdir(parents=True, exist_ok=True)

    @property
    def directory(self) -> Path:
        return self._directory

    def _path_for(self, key: str) -> Path:
        return self._directory / f"{_UNSAFE_CHARS.sub('_', key)}.json"

    def _read(self, path: Path) -> Optional[str]:
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def _write(self, path: Path, value: str) -> None:
        fd, tmp_name = tempfile.mkstemp(dir=self._directory, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                tmp.write(value)
            os.replace(tmp_name, path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    async def load(self, key: str) -> Optional[str]:
        path = self._path_for(key)

        try:
            return await asyncio.to_thread(self._read, path)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to read {path}: {e}")
            raise PersistenceError(f"Could not read stored value: {e}", key=key)

    async def save(self, key: str, value: str) -> None:
        path = self._path_for(key)

        try:
            await asyncio.to_thread(self._write, path, value)
        except OSError as e:
            logger.error(f"Failed to write {path}: {e}")
            raise PersistenceError(f"Could not write value: {e}", key=key)

    async def delete(self, key: str) -> None:
        try:
            await asyncio.to_thread(self._path_for(key).unlink, missing_ok=True)
        except OSError as e:
            raise PersistenceError(f"Could not delete value: {e}", key=key)
