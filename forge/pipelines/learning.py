"""
Learning path pipeline functions.

Generation goes through the path-generation client; any upstream failure
is recovered with the local fallback path and a non-blocking notice.
"""

import logging
from typing import Any, Dict, Optional

from common.utils.exceptions import ExternalServiceException, NotFoundException, ValidationException
from forge.models import LearningPath
from forge.services.learning import (
    LearningPathGenerator,
    PathGenerationClient,
    PathRequestTracker,
    build_fallback_path,
    summarize_progress,
    toggle_path_task,
)
from forge.services.session import SessionStateRepository

logger = logging.getLogger(__name__)

FALLBACK_NOTICE = (
    "We couldn't reach the path generator, so we've set up a starter path for you. "
    "You can create a new path at any time."
)


def _format_path(path: LearningPath) -> Dict[str, Any]:
    return {
        "path": path.model_dump(mode="json"),
        "progress": summarize_progress(path),
    }


async def generate_path_pipeline(
    repository: SessionStateRepository,
    client: PathGenerationClient,
    tracker: PathRequestTracker,
    session_id: str,
    goal: str,
) -> Dict[str, Any]:
    """
    Generate and persist a learning path for a goal.

    Args:
        repository: Session state
        client: Path-generation client
        tracker: In-flight request guard
        session_id: Current session
        goal: Free-text goal

    Returns:
        dict with path, progress, source ("service" or "fallback") and notice

    Raises:
        ValidationException: Empty goal
        ConflictException: A generation is already in flight for the session
    """
    goal = (goal or "").strip()
    if not goal:
        raise ValidationException(message="Goal is required", code="GOAL_REQUIRED")

    async with tracker.track(session_id):
        notice: Optional[str] = None
        source = "service"
        try:
            path = await client.fetch_path(goal)
        except ExternalServiceException as e:
            logger.warning(f"Path generation unavailable for session {session_id}, using fallback: {e.message}")
            path = build_fallback_path(goal)
            source = "fallback"
            notice = FALLBACK_NOTICE

        async with repository.lock(session_id):
            await repository.save_path(session_id, path)

    logger.info(
        f"Learning path ({source}) saved for session {session_id}: "
        f"{len(path.milestones)} milestones, {len(path.suggestedTools)} tools"
    )

    return {
        **_format_path(path),
        "source": source,
        "notice": notice,
    }


async def get_path_pipeline(
    repository: SessionStateRepository,
    session_id: str,
) -> Optional[Dict[str, Any]]:
    """Get the current path and its progress summary, or None."""
    path = await repository.load_path(session_id)
    if path is None:
        return None
    return _format_path(path)


async def toggle_task_pipeline(
    repository: SessionStateRepository,
    session_id: str,
    milestone_id: str,
    task_id: str,
) -> Dict[str, Any]:
    """
    Flip a task's completed flag and return the refreshed progress.

    Raises:
        NotFoundException: No path, or unknown milestone/task
    """
    async with repository.lock(session_id):
        path = await repository.load_path(session_id)
        if path is None:
            raise NotFoundException(message="No learning path", code="PATH_NOT_FOUND")

        path = toggle_path_task(path, milestone_id, task_id)
        await repository.save_path(session_id, path)

    return _format_path(path)


async def reset_path_pipeline(
    repository: SessionStateRepository,
    session_id: str,
) -> None:
    """Discard the current path so a new one can be created."""
    async with repository.lock(session_id):
        await repository.delete_path(session_id)
    logger.info(f"Learning path reset for session {session_id}")


async def hosted_generation_pipeline(
    generator: LearningPathGenerator,
    goal: Optional[str],
) -> Dict[str, Any]:
    """
    Server-side generation: prompt the model and return the reshaped path.

    Raises:
        ValidationException: Missing goal
        ExternalServiceException: Provider failure or unparseable reply
    """
    path = await generator.generate(goal or "")
    return path.model_dump(mode="json")
