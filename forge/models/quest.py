"""
Quest entity.

A quest is a unit of gamified work with an experience reward. Quests are
created active and end in exactly one terminal state.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field, model_validator

QuestType = Literal["daily", "weekly", "learning", "habit"]
Difficulty = Literal["Easy", "Medium", "Hard"]
QuestStatus = Literal["active", "completed", "failed"]

QUEST_TYPES = ("daily", "weekly", "learning", "habit")
DIFFICULTIES = ("Easy", "Medium", "Hard")


class Quest(BaseModel):
    """Quest record as persisted and returned by the API."""
    id: str
    title: str
    description: str = ""
    type: QuestType
    difficulty: Difficulty
    xpReward: int = Field(..., gt=0)
    status: QuestStatus = "active"
    progress: Optional[int] = Field(None, ge=0)
    maxProgress: Optional[int] = Field(None, gt=0)
    createdAt: datetime
    deadline: Optional[datetime] = None

    @model_validator(mode="after")
    def _progress_within_bounds(self) -> "Quest":
        if self.progress is not None and self.maxProgress is not None:
            if self.progress > self.maxProgress:
                raise ValueError("progress cannot exceed maxProgress")
        return self

    @property
    def is_trackable(self) -> bool:
        """True when the quest advances through incremental progress."""
        return self.maxProgress is not None
