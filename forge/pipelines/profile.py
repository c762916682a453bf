"""
Profile and theme pipeline functions.
"""

import logging
from typing import Any, Dict, Optional

from forge.models import Theme, UserProfile
from forge.services.session import SessionStateRepository

logger = logging.getLogger(__name__)


async def get_profile_pipeline(
    repository: SessionStateRepository,
    session_id: str,
) -> Optional[Dict[str, Any]]:
    profile = await repository.load_profile(session_id)
    return profile.model_dump(mode="json") if profile else None


async def save_profile_pipeline(
    repository: SessionStateRepository,
    session_id: str,
    profile: UserProfile,
) -> Dict[str, Any]:
    async with repository.lock(session_id):
        await repository.save_profile(session_id, profile)
    logger.info(f"Saved profile for session {session_id}")
    return profile.model_dump(mode="json")


async def get_theme_pipeline(
    repository: SessionStateRepository,
    session_id: str,
) -> Dict[str, Any]:
    return {"theme": await repository.load_theme(session_id)}


async def set_theme_pipeline(
    repository: SessionStateRepository,
    session_id: str,
    theme: Theme,
) -> Dict[str, Any]:
    async with repository.lock(session_id):
        await repository.save_theme(session_id, theme)
    return {"theme": theme}
