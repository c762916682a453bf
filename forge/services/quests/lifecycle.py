"""
Quest lifecycle transitions.

States: active -> completed, active -> failed. Completed and failed are
absorbing; any transition out of them raises InvalidStateException and
leaves the quest untouched.

These functions never award experience themselves. A result with
completed=True tells the caller to award the quest's reward exactly once.
"""

import math
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from common.utils.exceptions import InvalidStateException, ValidationException
from forge.models.quest import Quest, QuestType, Difficulty


@dataclass(frozen=True)
class QuestTransition:
    """Outcome of a lifecycle operation."""
    quest: Quest
    completed: bool


def create_quest(
    title: str,
    quest_type: QuestType,
    difficulty: Difficulty,
    xp_reward: int,
    description: str = "",
    max_progress: Optional[int] = None,
    deadline: Optional[datetime] = None,
    now: Optional[datetime] = None,
) -> Quest:
    """
    Create a new active quest.

    Trackable quests (with max_progress) start at progress 0.
    """
    if not title or not title.strip():
        raise ValidationException(message="Quest title is required", code="QUEST_TITLE_REQUIRED")

    return Quest(
        id=uuid.uuid4().hex,
        title=title.strip(),
        description=description,
        type=quest_type,
        difficulty=difficulty,
        xpReward=xp_reward,
        status="active",
        progress=0 if max_progress is not None else None,
        maxProgress=max_progress,
        createdAt=now or datetime.now(timezone.utc),
        deadline=deadline,
    )


def _require_active(quest: Quest, action: str) -> None:
    if quest.status != "active":
        raise InvalidStateException(
            message=f"Cannot {action} a quest that is {quest.status}",
            code="INVALID_QUEST_STATE",
            current_state=quest.status,
        )


def complete_quest(quest: Quest) -> QuestTransition:
    """
    Mark an active quest completed.

    Raises:
        InvalidStateException: If the quest is not active
    """
    _require_active(quest, "complete")
    return QuestTransition(
        quest=quest.model_copy(update={"status": "completed"}),
        completed=True,
    )


def fail_quest(quest: Quest) -> QuestTransition:
    """
    Mark an active quest failed. No experience is awarded.

    Raises:
        InvalidStateException: If the quest is not active
    """
    _require_active(quest, "fail")
    return QuestTransition(
        quest=quest.model_copy(update={"status": "failed"}),
        completed=False,
    )


def update_quest_progress(quest: Quest, new_progress: int) -> QuestTransition:
    """
    Set progress on a trackable quest.

    The value is clamped into [0, maxProgress]. Reaching maxProgress
    completes the quest in the same step.

    Raises:
        InvalidStateException: If the quest is not active
        ValidationException: If the quest has no maxProgress
    """
    _require_active(quest, "update progress on")

    if quest.maxProgress is None:
        raise ValidationException(
            message="Quest does not track progress",
            code="QUEST_NOT_TRACKABLE",
        )

    clamped = max(0, min(new_progress, quest.maxProgress))

    if clamped >= quest.maxProgress:
        return QuestTransition(
            quest=quest.model_copy(update={"progress": clamped, "status": "completed"}),
            completed=True,
        )

    return QuestTransition(
        quest=quest.model_copy(update={"progress": clamped}),
        completed=False,
    )


def days_until_deadline(quest: Quest, now: Optional[datetime] = None) -> Optional[int]:
    """Whole days left before the deadline, rounded up. None without a deadline."""
    if quest.deadline is None:
        return None
    now = now or datetime.now(timezone.utc)
    return math.ceil((quest.deadline - now).total_seconds() / 86400)
