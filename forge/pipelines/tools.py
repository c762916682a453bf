"""
Toolkit pipeline functions.

Suggestions come from the persisted learning path; the user's toolkit
is its own aggregate and is saved after every mutation.
"""

import logging
from typing import Any, Dict, List, Optional

from forge.models import Tool
from forge.services.session import SessionStateRepository
from forge.services.tools import (
    add_tool,
    add_suggested_tool,
    create_custom_tool,
    filter_suggestions,
    remove_tool,
)

logger = logging.getLogger(__name__)


async def _suggested_tools(repository: SessionStateRepository, session_id: str) -> List[Tool]:
    path = await repository.load_path(session_id)
    return list(path.suggestedTools) if path else []


def _dump(tools: List[Tool]) -> List[Dict[str, Any]]:
    return [tool.model_dump(mode="json", exclude_none=True) for tool in tools]


async def get_toolkit_pipeline(
    repository: SessionStateRepository,
    session_id: str,
    query: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Get the user's toolkit and the suggestions not yet added.

    Returns:
        dict with tools and suggestions (filtered by query)
    """
    user_tools = await repository.load_tools(session_id)
    suggested = await _suggested_tools(repository, session_id)

    return {
        "tools": _dump(user_tools),
        "suggestions": _dump(filter_suggestions(suggested, user_tools, query)),
    }


async def add_suggested_tool_pipeline(
    repository: SessionStateRepository,
    session_id: str,
    tool_id: str,
) -> Dict[str, Any]:
    """
    Copy a suggested tool into the toolkit.

    Raises:
        NotFoundException: Unknown suggestion
        ConflictException: Already added
    """
    async with repository.lock(session_id):
        user_tools = await repository.load_tools(session_id)
        suggested = await _suggested_tools(repository, session_id)
        user_tools = add_suggested_tool(user_tools, suggested, tool_id)
        await repository.save_tools(session_id, user_tools)

    logger.info(f"Added tool {tool_id} to toolkit for session {session_id}")
    return {"tools": _dump(user_tools)}


async def add_custom_tool_pipeline(
    repository: SessionStateRepository,
    session_id: str,
    name: str,
    category: Optional[str] = None,
    description: str = "",
    url: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Create a custom tool and add it to the toolkit.

    Raises:
        ValidationException: Blank name
    """
    async with repository.lock(session_id):
        user_tools = await repository.load_tools(session_id)
        tool = create_custom_tool(
            name,
            category=category,
            description=description,
            url=url,
            taken_ids=[t.id for t in user_tools],
        )
        user_tools = add_tool(user_tools, tool)
        await repository.save_tools(session_id, user_tools)

    logger.info(f"Added custom tool {tool.id} for session {session_id}")
    return {"tool": tool.model_dump(mode="json", exclude_none=True), "tools": _dump(user_tools)}


async def remove_tool_pipeline(
    repository: SessionStateRepository,
    session_id: str,
    tool_id: str,
) -> Dict[str, Any]:
    """
    Remove a tool from the toolkit.

    Raises:
        NotFoundException: Tool not in toolkit
    """
    async with repository.lock(session_id):
        user_tools = await repository.load_tools(session_id)
        user_tools = remove_tool(user_tools, tool_id)
        await repository.save_tools(session_id, user_tools)

    logger.info(f"Removed tool {tool_id} for session {session_id}")
    return {"tools": _dump(user_tools)}
