"""
FastAPI router for progress endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from common.utils import success_response
from forge.dependencies import require_session, get_session_repository
from forge.services.session import SessionStateRepository
from forge.pipelines import progress as pipelines

router = APIRouter(prefix="/progress", tags=["progress"])


@router.get("")
async def get_progress(
    session_id: Annotated[str, Depends(require_session)],
    repository: Annotated[SessionStateRepository, Depends(get_session_repository)],
):
    """Get level, experience, streaks and achievements."""
    result = await pipelines.get_progress_pipeline(repository=repository, session_id=session_id)
    return success_response(result)
