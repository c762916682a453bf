"""
Normalization of path-generation payloads.

Both the hosted generation function and the client run payloads through
reshape_learning_path, so ids are always present whichever side
produced them.
"""

from typing import Any, Dict, List, Set

from forge.models.learning_path import LearningPath, Milestone, Task
from forge.models.tool import Tool


def _unique_id(raw: Any, synthesized: str, seen: Set[str]) -> str:
    """
    Pick the supplied id unless it is missing or already used, then the
    synthesized one, suffixed until free.
    """
    candidate = str(raw) if raw else synthesized
    if candidate in seen:
        candidate = synthesized
        suffix = 2
        while candidate in seen:
            candidate = f"{synthesized}-{suffix}"
            suffix += 1
    seen.add(candidate)
    return candidate


def _reshape_tasks(milestone_index: int, raw_tasks: List[Dict[str, Any]], seen: Set[str]) -> List[Task]:
    return [
        Task(
            id=_unique_id(task.get("id"), f"{milestone_index + 1}-{task_index + 1}", seen),
            title=task.get("title") or f"Task {task_index + 1}",
            description=task.get("description") or "",
            completed=False,
        )
        for task_index, task in enumerate(raw_tasks or [])
    ]


def reshape_learning_path(goal: str, data: Dict[str, Any]) -> LearningPath:
    """
    Convert a loosely-shaped generation payload into a LearningPath.

    Accepts tools under either "suggestedTools" or "tools". Missing or
    repeated ids are replaced by milestone-{n}, {milestone}-{task} and
    tool-{n}, so every milestone, task and tool id is unique within the
    path. Missing order falls back to position; every task starts
    incomplete.

    Args:
        goal: The goal the path was generated for
        data: Decoded JSON payload

    Returns:
        Validated LearningPath

    Raises:
        ValueError: If the payload has no usable milestones list
    """
    raw_milestones = data.get("milestones")
    if not isinstance(raw_milestones, list):
        raise ValueError("Payload has no milestones list")

    raw_tools = data.get("suggestedTools")
    if raw_tools is None:
        raw_tools = data.get("tools") or []

    milestone_ids: Set[str] = set()
    task_ids: Set[str] = set()
    milestones = [
        Milestone(
            id=_unique_id(milestone.get("id"), f"milestone-{index + 1}", milestone_ids),
            title=milestone.get("title") or f"Milestone {index + 1}",
            description=milestone.get("description") or "",
            order=milestone.get("order") or index + 1,
            tasks=_reshape_tasks(index, milestone.get("tasks"), task_ids),
        )
        for index, milestone in enumerate(raw_milestones)
    ]

    tool_ids: Set[str] = set()
    tools = [
        Tool(
            id=_unique_id(tool.get("id"), f"tool-{index + 1}", tool_ids),
            name=tool.get("name") or f"Tool {index + 1}",
            category=tool.get("category") or "General",
            description=tool.get("description") or "",
            url=tool.get("url"),
        )
        for index, tool in enumerate(raw_tools)
    ]

    return LearningPath(
        goal=data.get("goal") or goal,
        milestones=milestones,
        suggestedTools=tools,
    )
