"""Upstream wire format selection."""
from enum import Enum
from urllib.parse import urlparse

ANTHROPIC_HOST = "api.anthropic.com"


class ApiFormat(str, Enum):
    """The two upstream wire protocols the LLM client speaks."""

    ANTHROPIC = "anthropic"
    OPENAI = "openai"


def select_api_format(api_url: str) -> ApiFormat:
    """
    Pick the wire format for an endpoint URL.

    Only the hostname is inspected: the Anthropic host gets the Anthropic
    Messages format, every other host gets the OpenAI-compatible format.
    """
    hostname = (urlparse(api_url).hostname or "").lower()
    if hostname == ANTHROPIC_HOST:
        return ApiFormat.ANTHROPIC
    return ApiFormat.OPENAI
