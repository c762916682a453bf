"""
Hosted path-generation function.

Unlike the other routers this endpoint answers with the bare learning
path on success and {"error": message} with status 400 on any failure,
matching what PathGenerationClient expects.
"""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from common.utils.exceptions import APIException
from forge.dependencies import get_path_generator
from forge.services.learning import LearningPathGenerator
from forge.schemas.learning import HostedGenerationRequest
from forge.pipelines import learning as pipelines

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/functions/v1", tags=["functions"])


@router.post("/generate-learning-path")
async def generate_learning_path(
    body: HostedGenerationRequest,
    generator: Annotated[Optional[LearningPathGenerator], Depends(get_path_generator)],
):
    """Decompose a goal into milestones, tasks and tools with the configured model."""
    if generator is None:
        return JSONResponse(status_code=400, content={"error": "AI provider is not configured"})

    try:
        path = await pipelines.hosted_generation_pipeline(generator=generator, goal=body.goal)
    except APIException as e:
        logger.warning(f"Hosted path generation failed: {e.message}")
        return JSONResponse(status_code=400, content={"error": e.message})

    return path
