"""
FastAPI router for profile and theme endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from common.utils import success_response
from forge.dependencies import require_session, get_session_repository
from forge.models import UserProfile
from forge.services.session import SessionStateRepository
from forge.schemas.profile import ThemeRequest
from forge.pipelines import profile as pipelines

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("")
async def get_profile(
    session_id: Annotated[str, Depends(require_session)],
    repository: Annotated[SessionStateRepository, Depends(get_session_repository)],
):
    """Get the profile, or null before setup."""
    result = await pipelines.get_profile_pipeline(repository=repository, session_id=session_id)
    return success_response({"profile": result})


@router.put("")
async def save_profile(
    body: UserProfile,
    session_id: Annotated[str, Depends(require_session)],
    repository: Annotated[SessionStateRepository, Depends(get_session_repository)],
):
    """Create or replace the profile."""
    result = await pipelines.save_profile_pipeline(
        repository=repository,
        session_id=session_id,
        profile=body,
    )
    return success_response({"profile": result})


@router.get("/theme")
async def get_theme(
    session_id: Annotated[str, Depends(require_session)],
    repository: Annotated[SessionStateRepository, Depends(get_session_repository)],
):
    result = await pipelines.get_theme_pipeline(repository=repository, session_id=session_id)
    return success_response(result)


@router.put("/theme")
async def set_theme(
    body: ThemeRequest,
    session_id: Annotated[str, Depends(require_session)],
    repository: Annotated[SessionStateRepository, Depends(get_session_repository)],
):
    result = await pipelines.set_theme_pipeline(
        repository=repository,
        session_id=session_id,
        theme=body.theme,
    )
    return success_response(result)
