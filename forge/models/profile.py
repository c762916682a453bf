"""
User profile collected by the onboarding wizard, and the theme preference.
"""

from typing import List, Literal

from pydantic import BaseModel, Field

MotivationStyle = Literal["encouraging", "challenging", "analytical"]
ExperienceLevel = Literal["beginner", "intermediate", "advanced"]
PreferredDifficulty = Literal["easy", "medium", "hard"]
Theme = Literal["dark", "light"]

DEFAULT_THEME: Theme = "dark"


class UserProfile(BaseModel):
    """Mentor personalization profile."""
    name: str = Field(..., min_length=1, max_length=100)
    goals: List[str] = []
    interests: List[str] = []
    motivationStyle: MotivationStyle = "encouraging"
    experience: ExperienceLevel = "beginner"
    availableTime: str = ""
    preferredDifficulty: PreferredDifficulty = "medium"
