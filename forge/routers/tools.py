"""
FastAPI router for toolkit endpoints.
"""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query

from common.utils import success_response
from forge.dependencies import require_session, get_session_repository
from forge.services.session import SessionStateRepository
from forge.schemas.tools import AddToolRequest, CustomToolRequest
from forge.pipelines import tools as pipelines

router = APIRouter(prefix="/tools", tags=["tools"])


@router.get("")
async def get_toolkit(
    session_id: Annotated[str, Depends(require_session)],
    repository: Annotated[SessionStateRepository, Depends(get_session_repository)],
    q: Optional[str] = Query(None, max_length=100),
):
    """Get the toolkit and the path's suggestions not yet added."""
    result = await pipelines.get_toolkit_pipeline(repository=repository, session_id=session_id, query=q)
    return success_response(result)


@router.post("", status_code=201)
async def add_suggested_tool(
    body: AddToolRequest,
    session_id: Annotated[str, Depends(require_session)],
    repository: Annotated[SessionStateRepository, Depends(get_session_repository)],
):
    """Add a suggested tool to the toolkit."""
    result = await pipelines.add_suggested_tool_pipeline(
        repository=repository,
        session_id=session_id,
        tool_id=body.toolId,
    )
    return success_response(result)


@router.post("/custom", status_code=201)
async def add_custom_tool(
    body: CustomToolRequest,
    session_id: Annotated[str, Depends(require_session)],
    repository: Annotated[SessionStateRepository, Depends(get_session_repository)],
):
    """Add a user-authored tool."""
    result = await pipelines.add_custom_tool_pipeline(
        repository=repository,
        session_id=session_id,
        name=body.name,
        category=body.category,
        description=body.description,
        url=body.url,
    )
    return success_response(result)


@router.delete("/{tool_id}")
async def remove_tool(
    tool_id: str,
    session_id: Annotated[str, Depends(require_session)],
    repository: Annotated[SessionStateRepository, Depends(get_session_repository)],
):
    """Remove a tool from the toolkit."""
    result = await pipelines.remove_tool_pipeline(
        repository=repository,
        session_id=session_id,
        tool_id=tool_id,
    )
    return success_response(result)
