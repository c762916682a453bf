"""
Quest Forge API Routers.

All routers are imported here for easy access.
"""

from forge.routers.quests import router as quests_router
from forge.routers.progress import router as progress_router
from forge.routers.learning import router as learning_router
from forge.routers.tools import router as tools_router
from forge.routers.mentor import router as mentor_router
from forge.routers.profile import router as profile_router
from forge.routers.functions import router as functions_router

__all__ = [
    "quests_router",
    "progress_router",
    "learning_router",
    "tools_router",
    "mentor_router",
    "profile_router",
    "functions_router",
]
