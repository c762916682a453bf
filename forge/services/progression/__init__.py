"""
Progression engine: levels, experience awards and achievement unlocks.
"""

from forge.services.progression.leveling import (
    XP_PER_LEVEL,
    LevelState,
    level_threshold,
    derive_level,
    award_experience,
    level_span,
    level_progress_percent,
)
from forge.services.progression.achievements import (
    evaluate_achievements,
    unlock_achievements,
    level_achievement,
)

__all__ = [
    "XP_PER_LEVEL",
    "LevelState",
    "level_threshold",
    "derive_level",
    "award_experience",
    "level_span",
    "level_progress_percent",
    "evaluate_achievements",
    "unlock_achievements",
    "level_achievement",
]
