"""
Client for the path-generation function.

Candidate endpoints are tried in priority order; the first success
short-circuits the rest. Any failure of every candidate surfaces as a
single ExternalServiceException for the caller to recover from.
"""

import logging
from typing import List, Optional

import httpx
from pydantic import ValidationError

from common.utils.exceptions import ExternalServiceException
from forge.models.learning_path import LearningPath
from forge.services.learning.path_format import reshape_learning_path

logger = logging.getLogger(__name__)


class PathGenerationClient:
    """
    Posts goals to the first reachable path-generation endpoint.
    """

    def __init__(
        self,
        endpoints: List[str],
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize PathGenerationClient.

        Args:
            endpoints: Candidate URLs in priority order
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport (tests use MockTransport)
        """
        if not endpoints:
            raise ValueError("At least one path-generation endpoint is required")
        self._endpoints = list(endpoints)
        self._timeout = timeout
        self._transport = transport

    @property
    def endpoints(self) -> List[str]:
        return list(self._endpoints)

    async def fetch_path(self, goal: str) -> LearningPath:
        """
        Request a learning path for a goal.

        Args:
            goal: Non-empty goal text

        Returns:
            LearningPath from the first candidate that succeeds

        Raises:
            ExternalServiceException: If every candidate fails
        """
        failures = []

        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            for endpoint in self._endpoints:
                try:
                    response = await client.post(
                        endpoint,
                        headers={"Content-Type": "application/json"},
                        json={"goal": goal},
                    )
                except httpx.HTTPError as e:
                    logger.warning(f"Path generation request to {endpoint} failed: {e}")
                    failures.append({"endpoint": endpoint, "error": str(e)})
                    continue

                if not response.is_success:
                    logger.warning(
                        f"Path generation endpoint {endpoint} returned {response.status_code}"
                    )
                    failures.append({"endpoint": endpoint, "error": f"HTTP {response.status_code}"})
                    continue

                try:
                    data = response.json()
                    if not isinstance(data, dict):
                        raise ValueError("Response body is not a JSON object")
                    path = reshape_learning_path(goal, data)
                except (ValueError, ValidationError, TypeError, AttributeError) as e:
                    logger.warning(f"Path generation endpoint {endpoint} returned an invalid body: {e}")
                    failures.append({"endpoint": endpoint, "error": "invalid response body"})
                    continue

                logger.info(f"Learning path received from {endpoint}")
                return path

        raise ExternalServiceException(
            message="Learning path generation is unavailable",
            code="PATH_GENERATION_FAILED",
            details={"attempts": failures},
        )
