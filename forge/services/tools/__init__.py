"""
User toolkit operations.
"""

from forge.services.tools.toolkit import (
    filter_suggestions,
    add_tool,
    add_suggested_tool,
    create_custom_tool,
    remove_tool,
)

__all__ = [
    "filter_suggestions",
    "add_tool",
    "add_suggested_tool",
    "create_custom_tool",
    "remove_tool",
]
