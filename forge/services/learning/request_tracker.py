"""
Tracks in-flight path-generation requests.

Only one generation may be outstanding per session; a second submission
is rejected until the first resolves.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Set

from common.utils.exceptions import ConflictException

logger = logging.getLogger(__name__)


class PathRequestTracker:
    """Set of sessions with a generation request outstanding."""

    def __init__(self):
        self._in_flight: Set[str] = set()

    def is_in_flight(self, session_id: str) -> bool:
        return session_id in self._in_flight

    @asynccontextmanager
    async def track(self, session_id: str) -> AsyncIterator[None]:
        """
        Hold the session's generation slot for the duration of the block.

        Raises:
            ConflictException: If a request is already in flight
        """
        if session_id in self._in_flight:
            logger.info(f"Rejected duplicate path generation for session {session_id}")
            raise ConflictException(
                message="A learning path is already being generated",
                code="PATH_GENERATION_IN_PROGRESS",
            )

        self._in_flight.add(session_id)
        try:
            yield
        finally:
            self._in_flight.discard(session_id)
