"""
FastAPI router for learning path endpoints.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from common.utils import success_response
from forge.dependencies import (
    require_session,
    get_session_repository,
    get_path_client,
    get_path_tracker,
)
from forge.services.learning import PathGenerationClient, PathRequestTracker
from forge.services.session import SessionStateRepository
from forge.schemas.learning import GeneratePathRequest
from forge.pipelines import learning as pipelines

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/learning", tags=["learning"])


@router.post("/path")
async def generate_path(
    body: GeneratePathRequest,
    session_id: Annotated[str, Depends(require_session)],
    repository: Annotated[SessionStateRepository, Depends(get_session_repository)],
    client: Annotated[PathGenerationClient, Depends(get_path_client)],
    tracker: Annotated[PathRequestTracker, Depends(get_path_tracker)],
):
    """
    Generate a learning path for a goal.

    Falls back to a starter path when generation is unavailable; the
    response then carries a notice.
    """
    result = await pipelines.generate_path_pipeline(
        repository=repository,
        client=client,
        tracker=tracker,
        session_id=session_id,
        goal=body.goal,
    )
    return success_response(result, message=result["notice"])


@router.get("/path")
async def get_path(
    session_id: Annotated[str, Depends(require_session)],
    repository: Annotated[SessionStateRepository, Depends(get_session_repository)],
):
    """Get the current learning path with its progress summary."""
    result = await pipelines.get_path_pipeline(repository=repository, session_id=session_id)
    return success_response({"path": None, "progress": None} if result is None else result)


@router.delete("/path")
async def reset_path(
    session_id: Annotated[str, Depends(require_session)],
    repository: Annotated[SessionStateRepository, Depends(get_session_repository)],
):
    """Discard the current path."""
    await pipelines.reset_path_pipeline(repository=repository, session_id=session_id)
    return success_response(message="Learning path reset")


@router.post("/path/milestones/{milestone_id}/tasks/{task_id}/toggle")
async def toggle_task(
    milestone_id: str,
    task_id: str,
    session_id: Annotated[str, Depends(require_session)],
    repository: Annotated[SessionStateRepository, Depends(get_session_repository)],
):
    """Flip a task's completed flag."""
    result = await pipelines.toggle_task_pipeline(
        repository=repository,
        session_id=session_id,
        milestone_id=milestone_id,
        task_id=task_id,
    )
    return success_response(result)
