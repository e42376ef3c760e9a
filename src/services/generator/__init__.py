"""Two-stage presentation generation pipeline."""

from .parsing import parse_json_payload, strip_code_fence
from .service import (
    EnhancementOutcome,
    PresentationGenerator,
    apply_enhancements,
    get_presentation_generator,
)

__all__ = [
    "EnhancementOutcome",
    "PresentationGenerator",
    "apply_enhancements",
    "get_presentation_generator",
    "parse_json_payload",
    "strip_code_fence",
]
