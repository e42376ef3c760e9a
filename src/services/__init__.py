"""Service layer for DeckSmith."""

from .llm_client import LLMClient, get_llm_client
from .generator import PresentationGenerator, get_presentation_generator

__all__ = [
    "LLMClient",
    "get_llm_client",
    "PresentationGenerator",
    "get_presentation_generator",
]
