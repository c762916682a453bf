"""
Quest pipeline functions.

Stateless orchestration logic for quest lifecycle operations. Every
mutation runs under the session lock: load, transition, persist.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from common.utils.exceptions import NotFoundException
from forge.models import Quest, UserStats, QuestType, Difficulty
from forge.services.progression import (
    award_experience,
    evaluate_achievements,
    unlock_achievements,
)
from forge.services.quests import (
    QuestTransition,
    complete_quest,
    create_quest,
    days_until_deadline,
    fail_quest,
    update_quest_progress,
)
from forge.services.session import SessionStateRepository

logger = logging.getLogger(__name__)

RECENT_COMPLETED_LIMIT = 5


def _find_index(quests: List[Quest], quest_id: str) -> int:
    for index, quest in enumerate(quests):
        if quest.id == quest_id:
            return index
    raise NotFoundException(message="Quest not found", code="QUEST_NOT_FOUND")


def format_quest(quest: Quest, now: Optional[datetime] = None) -> Dict[str, Any]:
    """Serialize a quest with its derived deadline countdown."""
    data = quest.model_dump(mode="json")
    data["daysUntilDeadline"] = days_until_deadline(quest, now)
    return data


async def _apply_transition(
    repository: SessionStateRepository,
    session_id: str,
    quests: List[Quest],
    index: int,
    transition: QuestTransition,
    now: Optional[datetime],
) -> Dict[str, Any]:
    """
    Persist a transition and, on completion, award its experience once.

    Quests are saved before stats.
    """
    updated = list(quests)
    updated[index] = transition.quest

    stats_before = await repository.load_stats(session_id)
    stats_after: UserStats = stats_before
    unlocked = []
    xp_gained = 0

    if transition.completed:
        xp_gained = transition.quest.xpReward
        stats_after = award_experience(stats_before, xp_gained)
        unlocked = evaluate_achievements(stats_before, stats_after, now)
        stats_after = unlock_achievements(stats_after, unlocked)

    await repository.save_quests(session_id, updated)

    if transition.completed:
        await repository.save_stats(session_id, stats_after)
        logger.info(
            f"Quest {transition.quest.id} completed for session {session_id}: "
            f"+{xp_gained} XP, level {stats_after.level}"
        )
        if stats_after.level > stats_before.level:
            logger.info(f"Session {session_id} reached level {stats_after.level}")
        if unlocked:
            logger.info(
                f"Unlocked achievements for session {session_id}: "
                f"{', '.join(a.id for a in unlocked)}"
            )

    return {
        "quest": format_quest(transition.quest, now),
        "stats": stats_after.model_dump(mode="json"),
        "xpGained": xp_gained,
        "leveledUp": stats_after.level > stats_before.level,
        "unlockedAchievements": [a.model_dump(mode="json") for a in unlocked],
    }


async def list_quests_pipeline(
    repository: SessionStateRepository,
    session_id: str,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """
    List quests split into active and recently completed.

    Returns:
        dict with active, completed (latest five) and failed quest lists
    """
    quests = await repository.load_quests(session_id)

    active = [q for q in quests if q.status == "active"]
    completed = [q for q in quests if q.status == "completed"]
    failed = [q for q in quests if q.status == "failed"]

    return {
        "active": [format_quest(q, now) for q in active],
        "completed": [format_quest(q, now) for q in completed[-RECENT_COMPLETED_LIMIT:][::-1]],
        "failed": [format_quest(q, now) for q in failed],
        "completedCount": len(completed),
    }


async def create_quest_pipeline(
    repository: SessionStateRepository,
    session_id: str,
    title: str,
    quest_type: QuestType,
    difficulty: Difficulty,
    xp_reward: int,
    description: str = "",
    max_progress: Optional[int] = None,
    deadline: Optional[datetime] = None,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """Create an active quest and append it to the session's collection."""
    now = now or datetime.now(timezone.utc)
    quest = create_quest(
        title=title,
        quest_type=quest_type,
        difficulty=difficulty,
        xp_reward=xp_reward,
        description=description,
        max_progress=max_progress,
        deadline=deadline,
        now=now,
    )

    async with repository.lock(session_id):
        quests = await repository.load_quests(session_id)
        quests.append(quest)
        await repository.save_quests(session_id, quests)

    logger.info(f"Created quest {quest.id} for session {session_id}")
    return format_quest(quest, now)


async def complete_quest_pipeline(
    repository: SessionStateRepository,
    session_id: str,
    quest_id: str,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """
    Complete an active quest, award its XP and unlock achievements.

    Returns:
        Toast data: quest, stats, xpGained, leveledUp, unlockedAchievements

    Raises:
        NotFoundException: Unknown quest id
        InvalidStateException: Quest is not active
    """
    async with repository.lock(session_id):
        quests = await repository.load_quests(session_id)
        index = _find_index(quests, quest_id)
        transition = complete_quest(quests[index])
        return await _apply_transition(repository, session_id, quests, index, transition, now)


async def update_quest_progress_pipeline(
    repository: SessionStateRepository,
    session_id: str,
    quest_id: str,
    progress: int,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """
    Set progress on a trackable quest, completing it when the maximum is reached.

    Raises:
        NotFoundException: Unknown quest id
        InvalidStateException: Quest is not active
        ValidationException: Quest has no maxProgress
    """
    async with repository.lock(session_id):
        quests = await repository.load_quests(session_id)
        index = _find_index(quests, quest_id)
        transition = update_quest_progress(quests[index], progress)
        return await _apply_transition(repository, session_id, quests, index, transition, now)


async def fail_quest_pipeline(
    repository: SessionStateRepository,
    session_id: str,
    quest_id: str,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """Fail an active quest. Stats are left untouched."""
    async with repository.lock(session_id):
        quests = await repository.load_quests(session_id)
        index = _find_index(quests, quest_id)
        transition = fail_quest(quests[index])
        quests[index] = transition.quest
        await repository.save_quests(session_id, quests)

    logger.info(f"Quest {quest_id} failed for session {session_id}")
    return format_quest(transition.quest, now)
