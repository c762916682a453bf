"""
Level derivation and experience awards.

Pure functions only: no I/O, no settings access. The linear threshold
(XP_PER_LEVEL per level) is the single source of truth for levelling.
The quadratic "span" helpers at the bottom only feed the dashboard
progress bar and never decide a level.
"""

from dataclasses import dataclass

from forge.models.progress import UserStats

XP_PER_LEVEL = 150


@dataclass(frozen=True)
class LevelState:
    """Level display state derived from cumulative experience."""
    level: int
    xpInLevel: int
    xpToNextLevel: int


def level_threshold(level: int) -> int:
    """
    Cumulative experience at which a level is reached.

    Args:
        level: Level number (>= 1)

    Returns:
        XP_PER_LEVEL * (level - 1)

    Example:
        >>> level_threshold(1)
        0
        >>> level_threshold(3)
        300
    """
    if level < 1:
        raise ValueError("level must be >= 1")
    return XP_PER_LEVEL * (level - 1)


def derive_level(total_xp: int) -> LevelState:
    """
    Derive level, in-level experience and experience still needed.

    Args:
        total_xp: Cumulative experience (>= 0)

    Returns:
        LevelState where xpInLevel = total_xp - level_threshold(level)
        and xpToNextLevel = level_threshold(level + 1) - total_xp

    Example:
        >>> derive_level(160)
        LevelState(level=2, xpInLevel=10, xpToNextLevel=140)
    """
    if total_xp < 0:
        raise ValueError("total_xp must be >= 0")

    level = total_xp // XP_PER_LEVEL + 1
    return LevelState(
        level=level,
        xpInLevel=total_xp - level_threshold(level),
        xpToNextLevel=level_threshold(level + 1) - total_xp,
    )


def award_experience(stats: UserStats, xp_gained: int) -> UserStats:
    """
    Apply one quest completion to the stats aggregate.

    Every completion adds the reward, counts one quest and extends the
    streak. Streaks never reset on time.

    Args:
        stats: Stats before the completion
        xp_gained: Positive experience reward

    Returns:
        New UserStats; the input is not modified
    """
    if xp_gained <= 0:
        raise ValueError("xp_gained must be positive")

    total_xp = stats.totalXP + xp_gained
    level_state = derive_level(total_xp)
    current_streak = stats.currentStreak + 1

    return stats.model_copy(update={
        "totalXP": total_xp,
        "level": level_state.level,
        "xp": level_state.xpInLevel,
        "xpToNextLevel": level_state.xpToNextLevel,
        "questsCompleted": stats.questsCompleted + 1,
        "currentStreak": current_streak,
        "longestStreak": max(stats.longestStreak, current_streak),
        "achievements": list(stats.achievements),
    })


# Display-only curve. Not used for level-up decisions.

def level_span(level: int) -> int:
    """Experience span drawn for a level on the progress bar."""
    return level * 100 + (level - 1) * 50


def level_progress_percent(total_xp: int, level: int) -> float:
    """
    Progress-bar fill for the current level, clamped to [0, 100].

    Args:
        total_xp: Cumulative experience
        level: Level currently displayed

    Returns:
        Percentage of the display span covered
    """
    current_level_xp = level_span(level - 1) if level > 1 else 0
    next_level_xp = level_span(level)
    level_range = next_level_xp - current_level_xp
    if level_range <= 0:
        return 0.0

    progress = (total_xp - current_level_xp) / level_range * 100
    return max(0.0, min(100.0, progress))
