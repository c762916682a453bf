"""
Entity models shared by services, pipelines and routers.
"""

from forge.models.quest import (
    Quest,
    QuestType,
    QuestStatus,
    Difficulty,
    QUEST_TYPES,
    DIFFICULTIES,
)
from forge.models.learning_path import Task, Milestone, LearningPath
from forge.models.tool import Tool
from forge.models.progress import Achievement, Rarity, UserStats
from forge.models.profile import UserProfile, Theme, DEFAULT_THEME

__all__ = [
    "Quest",
    "QuestType",
    "QuestStatus",
    "Difficulty",
    "QUEST_TYPES",
    "DIFFICULTIES",
    "Task",
    "Milestone",
    "LearningPath",
    "Tool",
    "Achievement",
    "Rarity",
    "UserStats",
    "UserProfile",
    "Theme",
    "DEFAULT_THEME",
]
