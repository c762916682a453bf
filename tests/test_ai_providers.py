"""Unit tests for the Claude and OpenAI completion providers."""

import httpx
import pytest
from types import SimpleNamespace
from unittest.mock import AsyncMock

import anthropic
import openai

from common.ai import AIProviderError, ClaudeProvider, OpenAIProvider


def _claude_response(*blocks):
    return SimpleNamespace(content=[SimpleNamespace(type=kind, text=text) for kind, text in blocks])


def _openai_response(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


class TestClaudeProvider:
    @pytest.mark.asyncio
    async def test_joins_text_blocks(self):
        provider = ClaudeProvider(api_key="test-key", model="claude-test")
        provider.client.messages.create = AsyncMock(
            return_value=_claude_response(("text", '{"a": '), ("thinking", "ignored"), ("text", "1}"))
        )

        result = await provider.complete("Goal: piano", system_prompt="Be a mentor", max_tokens=50)

        assert result == '{"a": 1}'
        params = provider.client.messages.create.call_args.kwargs
        assert params["model"] == "claude-test"
        assert params["system"] == "Be a mentor"
        assert params["messages"] == [{"role": "user", "content": "Goal: piano"}]

    @pytest.mark.asyncio
    async def test_expect_json_extends_system_prompt(self):
        provider = ClaudeProvider(api_key="test-key")
        provider.client.messages.create = AsyncMock(return_value=_claude_response(("text", "{}")))

        await provider.complete("Goal", expect_json=True)

        assert "JSON" in provider.client.messages.create.call_args.kwargs["system"]

    @pytest.mark.asyncio
    async def test_api_error_wrapped(self):
        provider = ClaudeProvider(api_key="test-key")
        request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")
        provider.client.messages.create = AsyncMock(side_effect=anthropic.APIConnectionError(request=request))

        with pytest.raises(AIProviderError) as exc_info:
            await provider.complete("Goal")
        assert exc_info.value.provider == "claude"


class TestOpenAIProvider:
    @pytest.mark.asyncio
    async def test_json_response_format(self):
        provider = OpenAIProvider(api_key="test-key", model="gpt-test")
        provider.client.chat.completions.create = AsyncMock(return_value=_openai_response('{"ok": true}'))

        result = await provider.complete("Goal", system_prompt="Mentor", expect_json=True)

        assert result == '{"ok": true}'
        params = provider.client.chat.completions.create.call_args.kwargs
        assert params["response_format"] == {"type": "json_object"}
        assert params["messages"][0] == {"role": "system", "content": "Mentor"}

    @pytest.mark.asyncio
    async def test_empty_content_is_empty_string(self):
        provider = OpenAIProvider(api_key="test-key")
        provider.client.chat.completions.create = AsyncMock(return_value=_openai_response(None))

        assert await provider.complete("Goal") == ""

    @pytest.mark.asyncio
    async def test_api_error_wrapped(self):
        provider = OpenAIProvider(api_key="test-key")
        request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
        provider.client.chat.completions.create = AsyncMock(side_effect=openai.APIConnectionError(request=request))

        with pytest.raises(AIProviderError) as exc_info:
            await provider.complete("Goal")
        assert exc_info.value.provider == "openai"
