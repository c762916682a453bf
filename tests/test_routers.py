"""Tests for route handlers and dependencies, called directly."""

import json
import pytest
from unittest.mock import AsyncMock, MagicMock

from common.utils.exceptions import ExternalServiceException, InvalidStateException, ValidationException
from forge import dependencies
from forge.config import Settings
from forge.routers import functions, quests
from forge.schemas.learning import HostedGenerationRequest


# ---------------------------------------------------------------------------
# Session header
# ---------------------------------------------------------------------------

class TestRequireSession:
    @pytest.mark.asyncio
    async def test_returns_trimmed_id(self):
        assert await dependencies.require_session(" abc ") == "abc"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("value", [None, "", "   "])
    async def test_missing_header_rejected(self, value):
        with pytest.raises(ValidationException) as exc_info:
            await dependencies.require_session(value)
        assert exc_info.value.code == "SESSION_REQUIRED"


# ---------------------------------------------------------------------------
# Service wiring
# ---------------------------------------------------------------------------

class TestServiceWiring:
    def test_init_without_ai_key_disables_hosted_generation(self, store):
        settings = Settings(CLAUDE_API_KEY=None, AI_PROVIDER="claude", MENTOR_RANDOM_SEED=1)

        dependencies.init_all_services(store=store, settings=settings)

        assert dependencies.get_path_generator() is None
        assert dependencies.get_path_client().endpoints == settings.get_path_generation_endpoints()
        assert dependencies.get_session_repository() is not None
        assert dependencies.get_mentor_responder() is not None

    def test_endpoints_resolved_against_base_url(self):
        settings = Settings(
            PATH_GENERATION_BASE_URL="https://forge.example/",
            PATH_GENERATION_ENDPOINTS="/api/fn, https://other.example/fn ,",
        )
        assert settings.get_path_generation_endpoints() == [
            "https://forge.example/api/fn",
            "https://other.example/fn",
        ]


# ---------------------------------------------------------------------------
# Hosted generation function
# ---------------------------------------------------------------------------

class TestGenerateLearningPathFunction:
    @pytest.mark.asyncio
    async def test_success_returns_bare_path(self, sample_path):
        generator = MagicMock()
        generator.generate = AsyncMock(return_value=sample_path)

        result = await functions.generate_learning_path(
            body=HostedGenerationRequest(goal="learn piano"),
            generator=generator,
        )

        assert result["goal"] == "learn piano"
        assert len(result["milestones"]) == 2

    @pytest.mark.asyncio
    async def test_missing_goal_is_400(self):
        generator = MagicMock()
        generator.generate = AsyncMock(
            side_effect=ValidationException(message="Goal is required", code="GOAL_REQUIRED")
        )

        response = await functions.generate_learning_path(
            body=HostedGenerationRequest(),
            generator=generator,
        )

        assert response.status_code == 400
        assert json.loads(response.body) == {"error": "Goal is required"}
        generator.generate.assert_called_once_with("")

    @pytest.mark.asyncio
    async def test_parse_failure_is_400(self):
        generator = MagicMock()
        generator.generate = AsyncMock(
            side_effect=ExternalServiceException(message="Failed to parse LLM response as JSON")
        )

        response = await functions.generate_learning_path(
            body=HostedGenerationRequest(goal="learn piano"),
            generator=generator,
        )

        assert response.status_code == 400
        assert json.loads(response.body)["error"] == "Failed to parse LLM response as JSON"

    @pytest.mark.asyncio
    async def test_no_provider_is_400(self):
        response = await functions.generate_learning_path(
            body=HostedGenerationRequest(goal="learn piano"),
            generator=None,
        )
        assert response.status_code == 400


# ---------------------------------------------------------------------------
# Quest routes
# ---------------------------------------------------------------------------

class TestQuestRoutes:
    @pytest.mark.asyncio
    async def test_complete_returns_toast_message(self, repository, session_id, active_quest):
        await repository.save_quests(session_id, [active_quest])

        response = await quests.complete_quest(
            quest_id=active_quest.id,
            session_id=session_id,
            repository=repository,
        )

        assert response["success"] is True
        assert response["message"] == 'You earned 150 XP for completing "Read for 30 minutes"'
        assert response["data"]["stats"]["level"] == 2


# ---------------------------------------------------------------------------
# Settings and error envelope
# ---------------------------------------------------------------------------

class TestSettings:
    def test_validate_required_reports_missing_key(self):
        settings = Settings(AI_PROVIDER="OpenAI", OPENAI_API_KEY=None)
        assert settings.AI_PROVIDER == "openai"
        with pytest.raises(ValueError) as exc_info:
            settings.validate_required()
        assert "OPENAI_API_KEY" in str(exc_info.value)

    def test_create_ai_provider_without_key(self):
        settings = Settings(AI_PROVIDER="claude", CLAUDE_API_KEY=None)
        assert dependencies.create_ai_provider(settings) is None

    def test_create_ai_provider_openai(self):
        settings = Settings(AI_PROVIDER="openai", OPENAI_API_KEY="sk-test", OPENAI_MODEL="gpt-test")
        provider = dependencies.create_ai_provider(settings)
        assert provider.name == "openai"
        assert provider.model == "gpt-test"


class TestErrorEnvelope:
    @pytest.mark.asyncio
    async def test_invalid_state_rendered_with_code(self):
        import api

        request = MagicMock()
        exc = InvalidStateException(
            message="Cannot complete a quest that is completed",
            code="INVALID_QUEST_STATE",
            current_state="completed",
        )

        response = await api.api_exception_handler(request, exc)

        assert response.status_code == 422
        assert json.loads(response.body) == {
            "success": False,
            "error": {
                "message": "Cannot complete a quest that is completed",
                "code": "INVALID_QUEST_STATE",
                "details": {"currentState": "completed"},
            },
        }
