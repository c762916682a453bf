"""
Pydantic models for learning path request validation.
"""

from typing import Optional
from pydantic import BaseModel, Field


# =============================================================================
# Request Schemas
# =============================================================================

class GeneratePathRequest(BaseModel):
    """POST /api/learning/path"""
    goal: str = Field(..., max_length=2000)


class HostedGenerationRequest(BaseModel):
    """POST /api/functions/v1/generate-learning-path"""
    # Missing goal is answered with the 400 error body, not a 422
    goal: Optional[str] = None
