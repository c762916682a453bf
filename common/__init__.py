"""
Common library for reusable infrastructure components.

- storage: Key-value persistence backends (memory, JSON files)
- ai: Completion providers (Claude, OpenAI) and JSON extraction
- utils: Response envelopes and HTTP exceptions
- config: Base settings class
"""

from common.storage import KeyValueStore, PersistenceError
from common.ai import AIProvider, AIProviderError, ClaudeProvider, OpenAIProvider
from common.utils import (
    success_response,
    error_response,
    APIException,
    NotFoundException,
    ValidationException,
)
from common.config import BaseAppSettings

__all__ = [
    # Storage
    "KeyValueStore",
    "PersistenceError",
    # AI
    "AIProvider",
    "AIProviderError",
    "ClaudeProvider",
    "OpenAIProvider",
    # Utils
    "success_response",
    "error_response",
    "APIException",
    "NotFoundException",
    "ValidationException",
    # Config
    "BaseAppSettings",
]
