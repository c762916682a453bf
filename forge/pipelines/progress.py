"""
Progress dashboard pipeline functions.
"""

import logging
from typing import Any, Dict

from forge.services.progression import level_progress_percent, level_span
from forge.services.session import SessionStateRepository

logger = logging.getLogger(__name__)

RECENT_ACHIEVEMENTS_LIMIT = 3


async def get_progress_pipeline(
    repository: SessionStateRepository,
    session_id: str,
) -> Dict[str, Any]:
    """
    Get the stats aggregate plus dashboard-only derived values.

    displayProgress uses the quadratic display curve and never decides
    a level; level, xp and xpToNextLevel come from the linear rule.

    Returns:
        dict with stats, displayProgress and recentAchievements
    """
    stats = await repository.load_stats(session_id)

    recent = sorted(stats.achievements, key=lambda a: a.unlockedAt, reverse=True)

    return {
        "stats": stats.model_dump(mode="json"),
        "displayProgress": {
            "percentage": level_progress_percent(stats.totalXP, stats.level),
            "levelSpan": level_span(stats.level),
        },
        "recentAchievements": [
            a.model_dump(mode="json") for a in recent[:RECENT_ACHIEVEMENTS_LIMIT]
        ],
    }
