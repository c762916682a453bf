"""
Progression entities: unlocked achievements and the per-session stats aggregate.
"""

from datetime import datetime
from typing import List, Literal

from pydantic import BaseModel, Field, model_validator

Rarity = Literal["common", "rare", "epic", "legendary"]


class Achievement(BaseModel):
    """Unlocked badge. Never mutated once unlocked."""
    id: str
    name: str
    description: str
    icon: str  # Symbolic icon name, resolved by the client
    unlockedAt: datetime
    rarity: Rarity


class UserStats(BaseModel):
    """
    Session-wide progression state.

    level, xp and xpToNextLevel are derived from totalXP; see
    forge.services.progression.leveling.derive_level.
    """
    level: int = Field(1, ge=1)
    xp: int = Field(0, ge=0)
    xpToNextLevel: int = Field(150, ge=0)
    totalXP: int = Field(0, ge=0)
    questsCompleted: int = Field(0, ge=0)
    currentStreak: int = Field(0, ge=0)
    longestStreak: int = Field(0, ge=0)
    achievements: List[Achievement] = []

    @model_validator(mode="after")
    def _longest_streak_covers_current(self) -> "UserStats":
        if self.longestStreak < self.currentStreak:
            raise ValueError("longestStreak cannot be lower than currentStreak")
        return self

    def has_achievement(self, achievement_id: str) -> bool:
        return any(a.id == achievement_id for a in self.achievements)
