"""
Pydantic models for quest request validation.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from forge.models import Difficulty, QuestType


# =============================================================================
# Request Schemas
# =============================================================================

class CreateQuestRequest(BaseModel):
    """POST /api/quests"""
    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(default="", max_length=2000)
    type: QuestType = "daily"
    difficulty: Difficulty = "Medium"
    xpReward: int = Field(..., gt=0)
    maxProgress: Optional[int] = Field(default=None, gt=0)
    deadline: Optional[datetime] = None


class QuestProgressRequest(BaseModel):
    """PUT /api/quests/{quest_id}/progress"""
    progress: int
