"""
FastAPI dependencies for Quest Forge.

Provides dependency injection for all services.
"""

import logging
import random
from typing import Annotated, Optional

from fastapi import Depends, Header

from common.ai.base import AIProvider
from common.ai.claude import ClaudeProvider
from common.ai.openai import OpenAIProvider
from common.config import BaseAppSettings
from common.storage.base import KeyValueStore
from common.utils.exceptions import ValidationException

from forge.services.learning import (
    LearningPathGenerator,
    PathGenerationClient,
    PathRequestTracker,
)
from forge.services.mentor import KeywordMentorResponder, MentorResponder
from forge.services.session import SessionStateRepository

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────
# Global service instances
# ─────────────────────────────────────────────────────────────────

# Session state
_repository: Optional[SessionStateRepository] = None

# Learning
_path_client: Optional[PathGenerationClient] = None
_path_tracker: Optional[PathRequestTracker] = None
_path_generator: Optional[LearningPathGenerator] = None

# Mentor
_mentor_responder: Optional[MentorResponder] = None


# ─────────────────────────────────────────────────────────────────
# Initialization functions
# ─────────────────────────────────────────────────────────────────

def create_ai_provider(settings: BaseAppSettings) -> Optional[AIProvider]:
    """
    Build the configured AI provider.

    Returns None when the selected provider has no API key; the hosted
    generation function then answers with an error and clients fall back.
    """
    api_key = settings.ai_api_key()
    if not api_key:
        return None

    if settings.AI_PROVIDER == "openai":
        return OpenAIProvider(api_key=api_key, model=settings.OPENAI_MODEL)
    return ClaudeProvider(api_key=api_key, model=settings.CLAUDE_MODEL)


def init_session_services(store: KeyValueStore) -> None:
    """Initialize session state services."""
    global _repository

    _repository = SessionStateRepository(store=store)


def init_learning_services(
    endpoints: list,
    timeout: float = 60.0,
    ai_provider: Optional[AIProvider] = None,
    max_tokens: int = 2000,
) -> None:
    """Initialize learning path services."""
    global _path_client, _path_tracker, _path_generator

    _path_client = PathGenerationClient(endpoints=endpoints, timeout=timeout)
    _path_tracker = PathRequestTracker()

    if ai_provider is not None:
        _path_generator = LearningPathGenerator(ai_provider=ai_provider, max_tokens=max_tokens)
    else:
        _path_generator = None
        logger.warning("No AI provider configured; hosted path generation disabled")


def init_mentor_services(seed: Optional[int] = None) -> None:
    """Initialize mentor dialogue services."""
    global _mentor_responder

    _mentor_responder = KeywordMentorResponder(rng=random.Random(seed))


def init_all_services(store: KeyValueStore, settings) -> None:
    """
    Initialize all services.

    Args:
        store: Key-value backend for session state
        settings: Application settings (forge.config.Settings)
    """
    init_session_services(store)
    init_learning_services(
        endpoints=settings.get_path_generation_endpoints(),
        timeout=settings.PATH_GENERATION_TIMEOUT,
        ai_provider=create_ai_provider(settings),
        max_tokens=settings.PATH_GENERATION_MAX_TOKENS,
    )
    init_mentor_services(settings.MENTOR_RANDOM_SEED)


# ─────────────────────────────────────────────────────────────────
# Session
# ─────────────────────────────────────────────────────────────────

async def require_session(
    x_session_id: Annotated[Optional[str], Header(alias="X-Session-Id")] = None,
) -> str:
    """Dependency that requires the X-Session-Id header."""
    session_id = (x_session_id or "").strip()
    if not session_id:
        raise ValidationException(
            message="X-Session-Id header is required",
            code="SESSION_REQUIRED",
        )
    return session_id


def get_session_repository() -> SessionStateRepository:
    """Get session state repository."""
    if _repository is None:
        raise RuntimeError("Session services not initialized.")
    return _repository


# ─────────────────────────────────────────────────────────────────
# Learning getters
# ─────────────────────────────────────────────────────────────────

def get_path_client() -> PathGenerationClient:
    """Get path-generation client."""
    if _path_client is None:
        raise RuntimeError("Learning services not initialized.")
    return _path_client


def get_path_tracker() -> PathRequestTracker:
    """Get in-flight path request tracker."""
    if _path_tracker is None:
        raise RuntimeError("Learning services not initialized.")
    return _path_tracker


def get_path_generator() -> Optional[LearningPathGenerator]:
    """Get hosted path generator (None without an AI provider)."""
    if _path_tracker is None:
        raise RuntimeError("Learning services not initialized.")
    return _path_generator


# ─────────────────────────────────────────────────────────────────
# Mentor getters
# ─────────────────────────────────────────────────────────────────

def get_mentor_responder() -> MentorResponder:
    """Get mentor responder."""
    if _mentor_responder is None:
        raise RuntimeError("Mentor services not initialized.")
    return _mentor_responder
