"""
Anthropic Claude provider.

Example:
    from common.ai import ClaudeProvider

    claude = ClaudeProvider(api_key="your-api-key")
    text = await claude.complete(
        prompt="Break my goal into milestones: learn piano",
        system_prompt="You are a mentor. Return only JSON.",
        max_tokens=2000,
        expect_json=True,
    )
"""

import logging
from typing import Any, Dict, Optional

from anthropic import AsyncAnthropic, APIError

from common.ai.base import AIProvider, AIProviderError

logger = logging.getLogger(__name__)

JSON_INSTRUCTION = "Respond with a single JSON object and no other text."


class ClaudeProvider(AIProvider):
    """
    Anthropic Claude provider using the async Messages API.

    Claude has no JSON response format; expect_json adds an output
    instruction to the system prompt instead.
    """

    name = "claude"

    def __init__(
        self,
        api_key: str,
        model: str = "claude-sonnet-4-5-20250929",
        max_retries: int = 3,
        timeout: float = 60.0,
    ):
        """
        Initialize Claude provider.

        Args:
            api_key: Anthropic API key
            model: Model to use
            max_retries: Number of retries for failed requests
            timeout: Request timeout in seconds
        """
        self.client = AsyncAnthropic(
            api_key=api_key,
            max_retries=max_retries,
            timeout=timeout,
        )
        self.model = model

    async def complete(
        self,
        prompt: str,
        system_prompt: Optional[str] = None,
        max_tokens: int = 1024,
        temperature: float = 0.7,
        expect_json: bool = False,
    ) -> str:
        if expect_json:
            system_prompt = f"{system_prompt}\n\n{JSON_INSTRUCTION}" if system_prompt else JSON_INSTRUCTION

        params: Dict[str, Any] = {
            "model": self.model,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "messages": [{"role": "user", "content": prompt}],
        }
        if system_prompt:
            params["system"] = system_prompt

        try:
            response = await self.client.messages.create(**params)
        except APIError as e:
            logger.error(f"Claude request failed: {e}")
            raise AIProviderError(f"Claude request failed: {e}", provider=self.name) from e

        # Tool or thinking blocks carry no text
        return "".join(
            block.text for block in response.content if getattr(block, "type", "") == "text"
        )
