"""
Per-session persistence of the independent aggregates.

Each aggregate lives under its own key, namespaced by session id:

    {session}:mentor-profile   UserProfile
    {session}:mentor-quests    List[Quest]
    {session}:mentor-path      LearningPath
    {session}:mentor-tools     List[Tool]   (the user's toolkit)
    {session}:mentor-stats     UserStats
    {session}:mentor-theme     "dark" | "light"

Loading never fails: a missing, unreadable or corrupted entry is logged
and replaced by a fresh default. Saves go straight through to the store.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict, List, Optional, TypeVar

from pydantic import TypeAdapter, ValidationError

from common.storage.base import KeyValueStore, PersistenceError
from forge.models import (
    DEFAULT_THEME,
    LearningPath,
    Quest,
    Theme,
    Tool,
    UserProfile,
    UserStats,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

PROFILE_KEY = "mentor-profile"
QUESTS_KEY = "mentor-quests"
PATH_KEY = "mentor-path"
TOOLS_KEY = "mentor-tools"
STATS_KEY = "mentor-stats"
THEME_KEY = "mentor-theme"

_PROFILE = TypeAdapter(UserProfile)
_PATH = TypeAdapter(LearningPath)
_STATS = TypeAdapter(UserStats)
_QUEST_LIST = TypeAdapter(List[Quest])
_TOOL_LIST = TypeAdapter(List[Tool])
_THEME = TypeAdapter(Theme)


class SessionStateRepository:
    """
    Loads and saves session aggregates through a KeyValueStore.

    Also serializes mutations per session: a mutating action (load,
    transition, save) runs to completion before the next action for the
    same session starts. A session's lock is dropped once no action
    holds or awaits it.
    """

    def __init__(self, store: KeyValueStore):
        """
        Initialize SessionStateRepository.

        Args:
            store: Key-value backend
        """
        self._store = store
        # session id -> (lock, number of actions holding or awaiting it)
        self._locks: Dict[str, List] = {}

    def is_locked(self, session_id: str) -> bool:
        return session_id in self._locks

    @asynccontextmanager
    async def lock(self, session_id: str) -> AsyncIterator[None]:
        """Hold the session's mutation lock for the duration of the block."""
        entry = self._locks.setdefault(session_id, [asyncio.Lock(), 0])
        entry[1] += 1
        try:
            async with entry[0]:
                yield
        finally:
            entry[1] -= 1
            if entry[1] == 0:
                del self._locks[session_id]

    @staticmethod
    def _key(session_id: str, name: str) -> str:
        return f"{session_id}:{name}"

    async def _load_raw(self, session_id: str, name: str) -> Optional[str]:
        try:
            return await self._store.load(self._key(session_id, name))
        except PersistenceError as e:
            logger.warning(f"Could not read {name} for session {session_id}: {e}")
            return None

    async def _load(self, session_id: str, name: str, adapter: TypeAdapter) -> Optional[T]:
        raw = await self._load_raw(session_id, name)
        if raw is None:
            return None

        try:
            return adapter.validate_json(raw)
        except ValidationError as e:
            logger.warning(
                f"Discarding corrupted {name} for session {session_id}: "
                f"{e.error_count()} validation error(s)"
            )
            return None

    async def _save(self, session_id: str, name: str, adapter: TypeAdapter, value) -> None:
        await self._store.save(self._key(session_id, name), adapter.dump_json(value).decode("utf-8"))

    # ─────────────────────────────────────────────────────────────────
    # Profile
    # ─────────────────────────────────────────────────────────────────

    async def load_profile(self, session_id: str) -> Optional[UserProfile]:
        return await self._load(session_id, PROFILE_KEY, _PROFILE)

    async def save_profile(self, session_id: str, profile: UserProfile) -> None:
        await self._save(session_id, PROFILE_KEY, _PROFILE, profile)

    # ─────────────────────────────────────────────────────────────────
    # Quests
    # ─────────────────────────────────────────────────────────────────

    async def load_quests(self, session_id: str) -> List[Quest]:
        quests = await self._load(session_id, QUESTS_KEY, _QUEST_LIST)
        return quests if quests is not None else []

    async def save_quests(self, session_id: str, quests: List[Quest]) -> None:
        await self._save(session_id, QUESTS_KEY, _QUEST_LIST, quests)

    # ─────────────────────────────────────────────────────────────────
    # Learning path
    # ─────────────────────────────────────────────────────────────────

    async def load_path(self, session_id: str) -> Optional[LearningPath]:
        return await self._load(session_id, PATH_KEY, _PATH)

    async def save_path(self, session_id: str, path: LearningPath) -> None:
        await self._save(session_id, PATH_KEY, _PATH, path)

    async def delete_path(self, session_id: str) -> None:
        await self._store.delete(self._key(session_id, PATH_KEY))

    # ─────────────────────────────────────────────────────────────────
    # Toolkit
    # ─────────────────────────────────────────────────────────────────

    async def load_tools(self, session_id: str) -> List[Tool]:
        tools = await self._load(session_id, TOOLS_KEY, _TOOL_LIST)
        return tools if tools is not None else []

    async def save_tools(self, session_id: str, tools: List[Tool]) -> None:
        await self._save(session_id, TOOLS_KEY, _TOOL_LIST, tools)

    # ─────────────────────────────────────────────────────────────────
    # Stats
    # ─────────────────────────────────────────────────────────────────

    async def load_stats(self, session_id: str) -> UserStats:
        stats = await self._load(session_id, STATS_KEY, _STATS)
        return stats if stats is not None else UserStats()

    async def save_stats(self, session_id: str, stats: UserStats) -> None:
        await self._save(session_id, STATS_KEY, _STATS, stats)

    # ─────────────────────────────────────────────────────────────────
    # Theme
    # ─────────────────────────────────────────────────────────────────

    async def load_theme(self, session_id: str) -> Theme:
        theme = await self._load(session_id, THEME_KEY, _THEME)
        return theme if theme is not None else DEFAULT_THEME

    async def save_theme(self, session_id: str, theme: Theme) -> None:
        await self._save(session_id, THEME_KEY, _THEME, theme)
