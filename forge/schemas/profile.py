"""
Pydantic models for profile request validation.
"""

from pydantic import BaseModel

from forge.models import Theme


class ThemeRequest(BaseModel):
    """PUT /api/profile/theme"""
    theme: Theme
