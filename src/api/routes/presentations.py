"""Presentation generation API endpoints."""
import logging
from typing import Any

from fastapi import APIRouter, Request

from src.core import generate_rate_limit, limiter
from src.models.presentation import GenerateRequest
from src.services import get_presentation_generator

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["presentations"])


@router.post("/generate")
@limiter.limit(generate_rate_limit)
async def generate_presentation(request: Request, body: GenerateRequest) -> dict[str, Any]:
    """
    Generate a presentation for a topic.

    Rate limited per client address (RATE_LIMIT_REQUESTS per
    RATE_LIMIT_PERIOD_SECONDS). Runs the structure stage and the best-effort
    enhancement stage, then returns the combined document with its id,
    createdAt and topic set. Failures are returned as {"error": "..."} by the
    exception handlers.
    """
    generator = get_presentation_generator()
    document = await generator.generate(body.topic)
    return document.to_wire()
