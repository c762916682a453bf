"""
AI module - Pluggable completion providers (Claude, OpenAI) and helpers
for reading JSON out of model replies.
"""

from common.ai.base import AIProvider, AIProviderError
from common.ai.claude import ClaudeProvider
from common.ai.openai import OpenAIProvider
from common.ai.json_utils import extract_json_object

__all__ = [
    "AIProvider",
    "AIProviderError",
    "ClaudeProvider",
    "OpenAIProvider",
    "extract_json_object",
]
