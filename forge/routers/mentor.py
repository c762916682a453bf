"""
FastAPI router for mentor dialogue endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from common.utils import success_response
from forge.dependencies import require_session, get_session_repository, get_mentor_responder
from forge.services.mentor import MentorResponder
from forge.services.session import SessionStateRepository
from forge.schemas.mentor import MentorMessageRequest
from forge.pipelines import mentor as pipelines

router = APIRouter(prefix="/mentor", tags=["mentor"])


@router.get("/greeting")
async def get_greeting(
    session_id: Annotated[str, Depends(require_session)],
    repository: Annotated[SessionStateRepository, Depends(get_session_repository)],
    responder: Annotated[MentorResponder, Depends(get_mentor_responder)],
):
    """Get the mentor's opening message."""
    result = await pipelines.greeting_pipeline(
        repository=repository,
        responder=responder,
        session_id=session_id,
    )
    return success_response(result)


@router.post("/messages")
async def send_message(
    body: MentorMessageRequest,
    session_id: Annotated[str, Depends(require_session)],
    repository: Annotated[SessionStateRepository, Depends(get_session_repository)],
    responder: Annotated[MentorResponder, Depends(get_mentor_responder)],
):
    """Send a message to the mentor; goal statements produce a quest."""
    result = await pipelines.send_message_pipeline(
        repository=repository,
        responder=responder,
        session_id=session_id,
        message=body.message,
    )
    return success_response(result)
