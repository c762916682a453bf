"""
OpenAI chat-completions provider.

Example:
    from common.ai import OpenAIProvider

    openai = OpenAIProvider(api_key="your-api-key")
    text = await openai.complete(
        prompt="Break my goal into milestones: learn piano",
        system_prompt="You are a mentor. Return only JSON.",
        expect_json=True,
    )
"""

import logging
from typing import Any, Dict, List, Optional

from openai import AsyncOpenAI, OpenAIError

from common.ai.base import AIProvider, AIProviderError

logger = logging.getLogger(__name__)


class OpenAIProvider(AIProvider):
    """
    OpenAI provider. expect_json maps to the json_object response format.
    """

    name = "openai"

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o",
        max_retries: int = 3,
        timeout: float = 60.0,
        organization: Optional[str] = None,
    ):
        """
        Initialize OpenAI provider.

        Args:
            api_key: OpenAI API key
            model: Chat model to use
            max_retries: Number of retries for failed requests
            timeout: Request timeout in seconds
            organization: Optional OpenAI organization ID
        """
        self.client = AsyncOpenAI(
            api_key=api_key,
            max_retries=max_retries,
            timeout=timeout,
            organization=organization,
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
        messages: List[Dict[str, str]] = []
        if system_prompt:
            messages.append({"role": "system", "content": system_prompt})
        messages.append({"role": "user", "content": prompt})

        params: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "max_tokens": max_tokens,
            "temperature": temperature,
        }
        if expect_json:
            params["response_format"] = {"type": "json_object"}

        try:
            response = await self.client.chat.completions.create(**params)
        except OpenAIError as e:
            logger.error(f"OpenAI request failed: {e}")
            raise AIProviderError(f"OpenAI request failed: {e}", provider=self.name) from e

        if not response.choices:
            raise AIProviderError("OpenAI returned no choices", provider=self.name)
        return response.choices[0].message.content or ""
