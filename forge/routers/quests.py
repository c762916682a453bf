"""
FastAPI router for quest endpoints.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from common.utils import success_response
from forge.dependencies import require_session, get_session_repository
from forge.services.session import SessionStateRepository
from forge.schemas.quests import CreateQuestRequest, QuestProgressRequest
from forge.pipelines import quests as pipelines

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/quests", tags=["quests"])


def _completion_message(result: dict) -> str:
    quest = result["quest"]
    return f"You earned {result['xpGained']} XP for completing \"{quest['title']}\""


@router.get("")
async def list_quests(
    session_id: Annotated[str, Depends(require_session)],
    repository: Annotated[SessionStateRepository, Depends(get_session_repository)],
):
    """List active quests and the latest completed ones."""
    result = await pipelines.list_quests_pipeline(repository=repository, session_id=session_id)
    return success_response(result)


@router.post("", status_code=201)
async def create_quest(
    body: CreateQuestRequest,
    session_id: Annotated[str, Depends(require_session)],
    repository: Annotated[SessionStateRepository, Depends(get_session_repository)],
):
    """Create an active quest."""
    result = await pipelines.create_quest_pipeline(
        repository=repository,
        session_id=session_id,
        title=body.title,
        quest_type=body.type,
        difficulty=body.difficulty,
        xp_reward=body.xpReward,
        description=body.description,
        max_progress=body.maxProgress,
        deadline=body.deadline,
    )
    return success_response(result)


@router.post("/{quest_id}/complete")
async def complete_quest(
    quest_id: str,
    session_id: Annotated[str, Depends(require_session)],
    repository: Annotated[SessionStateRepository, Depends(get_session_repository)],
):
    """
    Complete an active quest.

    Awards its XP once and returns the updated stats plus any unlocked
    achievements.
    """
    result = await pipelines.complete_quest_pipeline(
        repository=repository,
        session_id=session_id,
        quest_id=quest_id,
    )
    return success_response(result, message=_completion_message(result))


@router.put("/{quest_id}/progress")
async def update_progress(
    quest_id: str,
    body: QuestProgressRequest,
    session_id: Annotated[str, Depends(require_session)],
    repository: Annotated[SessionStateRepository, Depends(get_session_repository)],
):
    """Set progress on a trackable quest; reaching the maximum completes it."""
    result = await pipelines.update_quest_progress_pipeline(
        repository=repository,
        session_id=session_id,
        quest_id=quest_id,
        progress=body.progress,
    )
    message = _completion_message(result) if result["xpGained"] else None
    return success_response(result, message=message)


@router.post("/{quest_id}/fail")
async def fail_quest(
    quest_id: str,
    session_id: Annotated[str, Depends(require_session)],
    repository: Annotated[SessionStateRepository, Depends(get_session_repository)],
):
    """Abandon an active quest."""
    result = await pipelines.fail_quest_pipeline(
        repository=repository,
        session_id=session_id,
        quest_id=quest_id,
    )
    return success_response(result)
