"""
Pydantic models for toolkit request validation.
"""

from typing import Optional
from pydantic import BaseModel, Field


# =============================================================================
# Request Schemas
# =============================================================================

class AddToolRequest(BaseModel):
    """POST /api/tools"""
    toolId: str = Field(..., min_length=1)


class CustomToolRequest(BaseModel):
    """POST /api/tools/custom"""
    name: str = Field(..., max_length=100)
    category: Optional[str] = Field(default=None, max_length=50)
    description: str = Field(default="", max_length=500)
    url: Optional[str] = None
