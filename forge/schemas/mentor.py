"""
Pydantic models for mentor request validation.
"""

from pydantic import BaseModel, Field


class MentorMessageRequest(BaseModel):
    """POST /api/mentor/messages"""
    message: str = Field(..., max_length=2000)
