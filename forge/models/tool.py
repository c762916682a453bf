"""
Tool entity - an app, site or resource that supports the goal.
"""

from typing import Optional

from pydantic import BaseModel


class Tool(BaseModel):
    """Suggested or user-authored tool."""
    id: str
    name: str
    category: str = "General"  # Free text
    description: str = ""
    url: Optional[str] = None
    isCustom: Optional[bool] = None
