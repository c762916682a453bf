"""
Achievement unlock rules.

Rules are evaluated once per quest completion against the stats before
and after the award. Quest-count rules fire on an exact count, so each
fires once when the count is reached and never retroactively.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from forge.models.progress import Achievement, Rarity, UserStats

logger = logging.getLogger(__name__)

# (count, id, name, description, icon, rarity)
QUEST_COUNT_ACHIEVEMENTS: List[Tuple[int, str, str, str, str, Rarity]] = [
    (1, "first-quest", "First Steps", "Complete your first quest", "Trophy", "common"),
    (5, "quest-warrior", "Quest Warrior", "Complete 5 quests", "Award", "rare"),
    (10, "quest-master", "Quest Master", "Complete 10 quests", "Star", "epic"),
]

EPIC_LEVEL = 5


def level_achievement(level: int, unlocked_at: datetime) -> Achievement:
    """Build the achievement for reaching a level."""
    return Achievement(
        id=f"level-{level}",
        name=f"Level {level} Reached",
        description=f"Reach level {level}",
        icon="Zap",
        unlockedAt=unlocked_at,
        rarity="rare" if level < EPIC_LEVEL else "epic",
    )


def evaluate_achievements(
    before: UserStats,
    after: UserStats,
    now: Optional[datetime] = None,
) -> List[Achievement]:
    """
    Decide which achievements a completion unlocks.

    Args:
        before: Stats before the award
        after: Stats after the award
        now: Unlock timestamp (defaults to current UTC time)

    Returns:
        Newly unlocked achievements, in rule order; possibly empty
    """
    unlocked_at = now or datetime.now(timezone.utc)
    unlocked: List[Achievement] = []

    for count, achievement_id, name, description, icon, rarity in QUEST_COUNT_ACHIEVEMENTS:
        if after.questsCompleted == count and before.questsCompleted != count:
            unlocked.append(Achievement(
                id=achievement_id,
                name=name,
                description=description,
                icon=icon,
                unlockedAt=unlocked_at,
                rarity=rarity,
            ))

    if after.level > before.level:
        unlocked.append(level_achievement(after.level, unlocked_at))

    return unlocked


def unlock_achievements(stats: UserStats, achievements: List[Achievement]) -> UserStats:
    """
    Append achievements to the stats aggregate.

    Existing entries are never touched. An id already unlocked is skipped.

    Args:
        stats: Current stats
        achievements: Achievements returned by evaluate_achievements

    Returns:
        New UserStats with the achievements appended
    """
    merged = list(stats.achievements)
    for achievement in achievements:
        if any(a.id == achievement.id for a in merged):
            logger.debug(f"Achievement {achievement.id} already unlocked, skipping")
            continue
        merged.append(achievement)

    return stats.model_copy(update={"achievements": merged})
