"""
Quest lifecycle controller.
"""

from forge.services.quests.lifecycle import (
    QuestTransition,
    create_quest,
    complete_quest,
    fail_quest,
    update_quest_progress,
    days_until_deadline,
)

__all__ = [
    "QuestTransition",
    "create_quest",
    "complete_quest",
    "fail_quest",
    "update_quest_progress",
    "days_until_deadline",
]
