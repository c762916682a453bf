"""
Milestone and learning-path progress roll-up.

Toggling a task has no experience or achievement side effects.
Percentages are rounded to whole numbers; an empty milestone or path
reports 0.
"""

from typing import Any, Dict, List

from common.utils.exceptions import NotFoundException
from forge.models.learning_path import LearningPath, Milestone


def _percentage(completed: int, total: int) -> int:
    if total == 0:
        return 0
    # Round half up
    return int(completed * 100 / total + 0.5)


def milestone_percentage(milestone: Milestone) -> int:
    """Completed tasks over all tasks of a milestone, as a whole percentage."""
    completed = sum(1 for task in milestone.tasks if task.completed)
    return _percentage(completed, len(milestone.tasks))


def path_percentage(milestones: List[Milestone]) -> int:
    """Completed tasks over all tasks of all milestones."""
    total = sum(len(m.tasks) for m in milestones)
    completed = sum(1 for m in milestones for task in m.tasks if task.completed)
    return _percentage(completed, total)


def toggle_task(milestone: Milestone, task_id: str) -> Milestone:
    """
    Flip one task's completed flag.

    Raises:
        NotFoundException: If the task is not part of the milestone
    """
    if not any(task.id == task_id for task in milestone.tasks):
        raise NotFoundException(message="Task not found", code="TASK_NOT_FOUND")

    tasks = [
        task.model_copy(update={"completed": not task.completed}) if task.id == task_id else task
        for task in milestone.tasks
    ]
    return milestone.model_copy(update={"tasks": tasks})


def toggle_path_task(path: LearningPath, milestone_id: str, task_id: str) -> LearningPath:
    """
    Toggle a task inside a path, leaving every other milestone untouched.

    Raises:
        NotFoundException: If the milestone or task does not exist
    """
    if not any(m.id == milestone_id for m in path.milestones):
        raise NotFoundException(message="Milestone not found", code="MILESTONE_NOT_FOUND")

    milestones = [
        toggle_task(m, task_id) if m.id == milestone_id else m
        for m in path.milestones
    ]
    return path.model_copy(update={"milestones": milestones})


def summarize_progress(path: LearningPath) -> Dict[str, Any]:
    """
    Build the dashboard progress summary.

    Returns:
        dict with overall percentage, task counts and one entry per
        milestone in display order
    """
    milestones = sorted(path.milestones, key=lambda m: m.order)

    return {
        "overall": path_percentage(milestones),
        "completedTasks": sum(1 for m in milestones for t in m.tasks if t.completed),
        "totalTasks": sum(len(m.tasks) for m in milestones),
        "milestones": [
            {
                "milestoneId": m.id,
                "title": m.title,
                "order": m.order,
                "completed": sum(1 for t in m.tasks if t.completed),
                "total": len(m.tasks),
                "percentage": milestone_percentage(m),
            }
            for m in milestones
        ],
    }
