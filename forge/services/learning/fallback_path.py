"""
Local learning path used when path generation is unavailable.

The output depends only on the goal text, so the same goal always
produces the same path.
"""

from forge.models.learning_path import LearningPath, Milestone, Task
from forge.models.tool import Tool

_MILESTONES = [
    (
        "Foundation",
        "Build the core knowledge behind {goal}.",
        [
            ("Define what success looks like", "Write down what achieving \"{goal}\" means for you and how you will measure it."),
            ("Learn the fundamentals", "Spend 30 minutes a day on an introductory course, book or tutorial about {goal}."),
            ("Gather your resources", "Collect the tools, materials and references you will need and bookmark them in one place."),
        ],
    ),
    (
        "Practice",
        "Turn knowledge into skill through regular, deliberate practice.",
        [
            ("Schedule practice sessions", "Block at least three focused sessions per week in your calendar for {goal}."),
            ("Complete guided exercises", "Work through exercises that stretch you slightly beyond what feels comfortable."),
            ("Reflect on your progress", "After each week, write a short reflection on what worked and what to change."),
        ],
    ),
    (
        "Apply & Showcase",
        "Use what you have learned on something real and share it.",
        [
            ("Build a small project", "Pick a concrete project that puts {goal} into practice and finish a first version."),
            ("Get feedback", "Share your work with a mentor, friend or community and note their suggestions."),
            ("Share your results", "Publish or present what you built and plan your next goal."),
        ],
    ),
]

_TOOLS = [
    ("Notion", "Organization", "Plan milestones, keep notes and track your tasks in one workspace.", "https://www.notion.so"),
    ("Coursera", "Learning", "Structured online courses from universities and companies.", "https://www.coursera.org"),
    ("Anki", "Learning", "Spaced-repetition flashcards to retain what you study.", "https://apps.ankiweb.net"),
]


def build_fallback_path(goal: str) -> LearningPath:
    """
    Build the three-milestone fallback path for a goal.

    Returns:
        LearningPath with milestones Foundation, Practice and
        Apply & Showcase (three tasks each) and three suggested tools
    """
    goal = goal.strip()

    milestones = []
    for index, (title, description, tasks) in enumerate(_MILESTONES):
        milestones.append(Milestone(
            id=f"milestone-{index + 1}",
            title=title,
            description=description.format(goal=goal),
            order=index + 1,
            tasks=[
                Task(
                    id=f"{index + 1}-{task_index + 1}",
                    title=task_title,
                    description=task_description.format(goal=goal),
                    completed=False,
                )
                for task_index, (task_title, task_description) in enumerate(tasks)
            ],
        ))

    tools = [
        Tool(id=f"tool-{index + 1}", name=name, category=category, description=description, url=url)
        for index, (name, category, description, url) in enumerate(_TOOLS)
    ]

    return LearningPath(goal=goal, milestones=milestones, suggestedTools=tools)
