"""
Presentation Generator - two-stage slide generation.

Stage 1 (structure) asks the model for the full slide-by-slide JSON
document; any failure here fails the request. Stage 2 (enhancement) asks for
richer speaker notes, transitions and key takeaways for the leading slides;
it is best-effort and its failure leaves the stage-1 document untouched.
"""

import json
import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from pydantic import ValidationError

from src.core.exceptions import (
    DeckSmithError,
    EnhancementError,
    StructureParseError,
    TopicRequiredError,
)
from src.models.presentation import (
    ChatMessage,
    EnhancementResult,
    PresentationDocument,
)
from src.services.llm_client import LLMClient, get_llm_client
from .parsing import parse_json_payload
from .prompts import (
    ENHANCEMENT_SYSTEM_PROMPT,
    STRUCTURE_SYSTEM_PROMPT,
    build_enhancement_prompt,
    build_structure_prompt,
)

logger = logging.getLogger(__name__)

STRUCTURE_MAX_TOKENS = 8000
ENHANCEMENT_MAX_TOKENS = 4000


@dataclass(frozen=True)
class EnhancementOutcome:
    """Either an enhancement result or the error that prevented one."""

    result: Optional[EnhancementResult] = None
    error: Optional[EnhancementError] = None

    @property
    def succeeded(self) -> bool:
        return self.result is not None

    @classmethod
    def success(cls, result: EnhancementResult) -> "EnhancementOutcome":
        return cls(result=result)

    @classmethod
    def failure(cls, error: EnhancementError) -> "EnhancementOutcome":
        return cls(error=error)


def apply_enhancements(document: PresentationDocument, outcome: EnhancementOutcome) -> PresentationDocument:
    """
    Merge an enhancement outcome into the document in place.

    Entries whose slide index falls outside the slide list (negative
    included) are ignored, as are entries that do not parse. Only the fields
    an entry actually carries are copied. A failed outcome leaves the
    document unchanged.
    """
    if not outcome.succeeded:
        return document

    result = outcome.result
    slides = document.slide_list
    for entry in result.valid_entries():
        if 0 <= entry.slide_index < len(slides):
            slide = slides[entry.slide_index]
            if "enhanced_notes" in entry.model_fields_set:
                slide.enhanced_notes = entry.enhanced_notes
            if "transition" in entry.model_fields_set:
                slide.transition = entry.transition

    if result.key_takeaways is not None:
        document.key_takeaways = result.key_takeaways

    return document


class PresentationGenerator:
    """Turns a topic into a presentation document via two LLM calls."""

    def __init__(self, llm_client: Optional[LLMClient] = None):
        self._llm = llm_client or get_llm_client()

    async def generate(self, topic: Optional[str]) -> PresentationDocument:
        """
        Generate a presentation for a topic.

        Raises:
            TopicRequiredError: Topic is missing or blank
            ConfigurationError: No API key configured
            UpstreamError: The structure stage call failed
            StructureParseError: The structure stage returned unusable JSON
        """
        if not topic or not topic.strip():
            raise TopicRequiredError()

        logger.info(f"Generating presentation for: {topic}")

        document = await self.generate_structure(topic)
        outcome = await self.enhance(document)
        apply_enhancements(document, outcome)

        return self._finalize(document, topic)

    async def generate_structure(self, topic: str) -> PresentationDocument:
        """Run the structure stage."""
        text = await self._llm.complete(
            [
                ChatMessage(role="system", content=STRUCTURE_SYSTEM_PROMPT),
                ChatMessage(role="user", content=build_structure_prompt(topic)),
            ],
            max_tokens=STRUCTURE_MAX_TOKENS,
        )

        try:
            data = parse_json_payload(text)
        except json.JSONDecodeError as e:
            raise StructureParseError(f"invalid JSON ({e.msg} at line {e.lineno} column {e.colno})")

        if not isinstance(data, dict):
            raise StructureParseError(f"expected a JSON object, got {type(data).__name__}")

        try:
            return PresentationDocument.model_validate(data)
        except ValidationError as e:
            raise StructureParseError(f"unexpected structure ({e.error_count()} validation errors)")

    async def enhance(self, document: PresentationDocument) -> EnhancementOutcome:
        """Run the enhancement stage. Never raises for upstream or parse failures."""
        try:
            text = await self._llm.complete(
                [
                    ChatMessage(role="system", content=ENHANCEMENT_SYSTEM_PROMPT),
                    ChatMessage(role="user", content=build_enhancement_prompt(document.slide_list)),
                ],
                max_tokens=ENHANCEMENT_MAX_TOKENS,
            )
            result = EnhancementResult.model_validate(parse_json_payload(text))
        except DeckSmithError as e:
            return self._skip(EnhancementError(e.message))
        except json.JSONDecodeError as e:
            return self._skip(EnhancementError(f"invalid JSON ({e.msg})"))
        except ValidationError as e:
            return self._skip(EnhancementError(f"unexpected structure ({e.error_count()} validation errors)"))
        except Exception as e:
            logger.exception("Unexpected enhancement failure")
            return self._skip(EnhancementError(f"{type(e).__name__}: {e}"))

        return EnhancementOutcome.success(result)

    @staticmethod
    def _skip(error: EnhancementError) -> EnhancementOutcome:
        logger.warning(error.message)
        return EnhancementOutcome.failure(error)

    @staticmethod
    def _finalize(document: PresentationDocument, topic: str) -> PresentationDocument:
        document.id = str(uuid.uuid4())
        document.created_at = datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
        document.topic = topic
        return document


# Singleton instance
_generator: Optional[PresentationGenerator] = None


def get_presentation_generator() -> PresentationGenerator:
    """Get the singleton presentation generator instance."""
    global _generator
    if _generator is None:
        _generator = PresentationGenerator()
    return _generator
