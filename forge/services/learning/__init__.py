"""
Learning path services: generation, fallback, and progress roll-up.
"""

from forge.services.learning.path_progress import (
    milestone_percentage,
    path_percentage,
    toggle_task,
    toggle_path_task,
    summarize_progress,
)
from forge.services.learning.path_format import reshape_learning_path
from forge.services.learning.fallback_path import build_fallback_path
from forge.services.learning.path_generator import LearningPathGenerator
from forge.services.learning.path_client import PathGenerationClient
from forge.services.learning.request_tracker import PathRequestTracker

__all__ = [
    "milestone_percentage",
    "path_percentage",
    "toggle_task",
    "toggle_path_task",
    "summarize_progress",
    "reshape_learning_path",
    "build_fallback_path",
    "LearningPathGenerator",
    "PathGenerationClient",
    "PathRequestTracker",
]
