"""
Learning path entities: an ordered list of milestones, each owning tasks,
plus the tools suggested for the goal.
"""

from typing import List

from pydantic import BaseModel, Field, model_validator

from forge.models.tool import Tool


class Task(BaseModel):
    """Binary-completable unit of work inside a milestone."""
    id: str
    title: str
    description: str = ""
    completed: bool = False


class Milestone(BaseModel):
    """Ordered group of tasks."""
    id: str
    title: str
    description: str = ""
    order: int = Field(..., ge=1)
    tasks: List[Task] = []


class LearningPath(BaseModel):
    """Goal decomposition produced by path generation."""
    goal: str
    milestones: List[Milestone] = []
    suggestedTools: List[Tool] = []

    @model_validator(mode="after")
    def _unique_milestone_order(self) -> "LearningPath":
        orders = [m.order for m in self.milestones]
        if len(orders) != len(set(orders)):
            raise ValueError("milestone order must be unique within a path")
        return self
