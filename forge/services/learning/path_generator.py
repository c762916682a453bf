"""
Learning path generation using an AI provider.

Backs the hosted generate-learning-path function: the goal is sent to
the LLM with a mentor prompt and the JSON reply is reshaped into a
LearningPath.
"""

import logging

from pydantic import ValidationError

from common.ai.base import AIProvider, AIProviderError
from common.ai.json_utils import extract_json_object
from common.utils.exceptions import ExternalServiceException, ValidationException
from forge.models.learning_path import LearningPath
from forge.services.learning.path_format import reshape_learning_path

logger = logging.getLogger(__name__)


class LearningPathGenerator:
    """
    Decomposes a goal into milestones, tasks and tools via an LLM.
    """

    SYSTEM_PROMPT = "You are a mentor who designs practical learning plans. Return only valid JSON."

    PROMPT_TEMPLATE = """You are a mentor. A student will give you a goal.
Break this goal into 3-5 milestones.
For each milestone, generate 3-6 concrete step-by-step tasks with clear instructions.
Tasks should include things like reading specific books or articles, taking online classes, doing exercises, writing reflections, or practicing skills.
Always include enough detail for the student to know *exactly what to do next*.
Also suggest 3-5 relevant tools, apps, or resources they can use.
Return everything in JSON with fields: milestones, tools.

Each milestone should have: id, title, description, order, tasks
Each task should have: id, title, description, completed (always false)
Each tool should have: id, name, category, description, url (optional)

Student's goal: {goal}"""

    def __init__(self, ai_provider: AIProvider, max_tokens: int = 2000):
        """
        Initialize LearningPathGenerator.

        Args:
            ai_provider: LLM provider used for generation
            max_tokens: Response token budget
        """
        self._ai = ai_provider
        self._max_tokens = max_tokens

    async def generate(self, goal: str) -> LearningPath:
        """
        Generate a learning path for a goal.

        Args:
            goal: Free-text goal

        Returns:
            LearningPath with ids assigned and all tasks incomplete

        Raises:
            ValidationException: If the goal is empty
            ExternalServiceException: If the provider fails or replies
                with something that cannot be parsed
        """
        goal = (goal or "").strip()
        if not goal:
            raise ValidationException(message="Goal is required", code="GOAL_REQUIRED")

        try:
            response = await self._ai.complete(
                prompt=self.PROMPT_TEMPLATE.format(goal=goal),
                system_prompt=self.SYSTEM_PROMPT,
                max_tokens=self._max_tokens,
                expect_json=True,
            )
        except AIProviderError as e:
            logger.error(f"AI provider error during path generation: {e}")
            raise ExternalServiceException(
                message="AI provider request failed",
                code="AI_PROVIDER_ERROR",
            )

        try:
            data = extract_json_object(response)
            path = reshape_learning_path(goal, data)
        except (ValueError, ValidationError, TypeError, AttributeError) as e:
            logger.warning(f"Failed to parse learning path response: {e}")
            raise ExternalServiceException(
                message="Failed to parse LLM response as JSON",
                code="AI_RESPONSE_INVALID",
            )

        logger.info(
            f"Generated learning path with {len(path.milestones)} milestones "
            f"and {len(path.suggestedTools)} tools"
        )
        return path
