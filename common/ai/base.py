"""
AI provider interface.

Providers turn a single prompt into text. Generation features in this
codebase are one-shot (no conversation state), so the contract is a
single completion call plus an optional JSON-output hint.

Example:
    from common.ai import AIProvider, ClaudeProvider, OpenAIProvider

    def get_ai_provider(settings) -> AIProvider:
        if settings.AI_PROVIDER == "openai":
            return OpenAIProvider(api_key=settings.OPENAI_API_KEY)
        return ClaudeProvider(api_key=settings.CLAUDE_API_KEY)
"""

from abc import ABC, abstractmethod
from typing import Optional


class AIProviderError(Exception):
    """Raised when the upstream model API fails or returns no usable text."""

    def __init__(self, message: str, provider: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.provider = provider


class AIProvider(ABC):
    """
    One-shot text completion backed by a hosted model.
    """

    name: str = "ai"

    @abstractmethod
    async def complete(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        max_tokens: int = 1024,
        temperature: float = 0.7,
        expect_json: bool = False,
    ) -> str:
        """
        Complete a prompt.

        Args:
            prompt: User prompt
            system_prompt: Optional system instructions
            max_tokens: Maximum tokens in the response
            temperature: Sampling temperature (0-1)
            expect_json: Ask the model to answer with a single JSON object

        Returns:
            The model's response text

        Raises:
            AIProviderError: If the API call fails
        """
        pass
