"""
User toolkit operations.

The toolkit is the user's own list of tools, separate from the
suggestions attached to a learning path. Suggestions are copied in;
custom tools are authored by the user.
"""

import time
from typing import Iterable, List, Optional

from common.utils.exceptions import ConflictException, NotFoundException, ValidationException
from forge.models.tool import Tool


def _matches(tool: Tool, query: str) -> bool:
    needle = query.lower()
    return (
        needle in tool.name.lower()
        or needle in tool.category.lower()
        or needle in tool.description.lower()
    )


def filter_suggestions(
    suggested: List[Tool],
    user_tools: List[Tool],
    query: Optional[str] = None,
) -> List[Tool]:
    """
    Suggestions not yet in the toolkit, optionally filtered by a
    case-insensitive query over name, category and description.
    """
    owned = {tool.id for tool in user_tools}
    query = (query or "").strip()
    return [
        tool for tool in suggested
        if tool.id not in owned and (not query or _matches(tool, query))
    ]


def add_tool(user_tools: List[Tool], tool: Tool) -> List[Tool]:
    """
    Append a tool to the toolkit.

    Raises:
        ConflictException: If a tool with the same id is already present
    """
    if any(existing.id == tool.id for existing in user_tools):
        raise ConflictException(message="Tool already in toolkit", code="TOOL_ALREADY_ADDED")
    return [*user_tools, tool]


def add_suggested_tool(user_tools: List[Tool], suggested: List[Tool], tool_id: str) -> List[Tool]:
    """
    Copy a suggested tool into the toolkit.

    Raises:
        NotFoundException: If no suggestion has that id
        ConflictException: If it was already added
    """
    tool = next((t for t in suggested if t.id == tool_id), None)
    if tool is None:
        raise NotFoundException(message="Suggested tool not found", code="TOOL_NOT_FOUND")
    return add_tool(user_tools, tool.model_copy())


def create_custom_tool(
    name: str,
    category: Optional[str] = None,
    description: str = "",
    url: Optional[str] = None,
    now_ms: Optional[int] = None,
    taken_ids: Iterable[str] = (),
) -> Tool:
    """
    Build a user-authored tool.

    The id is custom-{epoch millis}; the stamp is bumped past any id in
    taken_ids so two tools created in the same millisecond stay distinct.

    Raises:
        ValidationException: If the name is blank
    """
    if not name or not name.strip():
        raise ValidationException(message="Tool name is required", code="TOOL_NAME_REQUIRED")

    stamp = now_ms if now_ms is not None else int(time.time() * 1000)
    taken = set(taken_ids)
    while f"custom-{stamp}" in taken:
        stamp += 1

    return Tool(
        id=f"custom-{stamp}",
        name=name.strip(),
        category=(category or "").strip() or "Custom",
        description=description,
        url=url or None,
        isCustom=True,
    )


def remove_tool(user_tools: List[Tool], tool_id: str) -> List[Tool]:
    """
    Remove a tool from the toolkit.

    Raises:
        NotFoundException: If the toolkit has no tool with that id
    """
    remaining = [tool for tool in user_tools if tool.id != tool_id]
    if len(remaining) == len(user_tools):
        raise NotFoundException(message="Tool not found", code="TOOL_NOT_FOUND")
    return remaining
