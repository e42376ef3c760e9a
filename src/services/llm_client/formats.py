"""
Request builders and response decoders for the two upstream wire formats.

Anthropic Messages API (format A):
  - system prompt travels in a top-level ``system`` field
  - ``x-api-key`` and ``anthropic-version`` headers
  - completion text at ``content[0].text``

OpenAI-compatible chat completions (format B):
  - messages are sent unchanged, temperature fixed at 0.7
  - bearer token authorization
  - completion text at ``choices[0].message.content``
"""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ValidationError

from src.core.api_format import ApiFormat
from src.core.exceptions import UpstreamError
from src.models.presentation import ChatMessage

ANTHROPIC_VERSION = "2023-06-01"
OPENAI_TEMPERATURE = 0.7


@dataclass(frozen=True)
class UpstreamRequest:
    """A fully built upstream call, ready to be posted."""

    url: str
    headers: dict[str, str]
    body: dict[str, Any]


# =============================================================================
# Request Builders
# =============================================================================

def build_anthropic_request(
    url: str,
    api_key: str,
    model: str,
    messages: list[ChatMessage],
    max_tokens: int,
) -> UpstreamRequest:
    system_prompt = next((m.content for m in messages if m.role == "system"), "")
    conversation = [
        {"role": m.role, "content": m.content}
        for m in messages
        if m.role != "system"
    ]

    return UpstreamRequest(
        url=url,
        headers={
            "x-api-key": api_key,
            "Content-Type": "application/json",
            "anthropic-version": ANTHROPIC_VERSION,
        },
        body={
            "model": model,
            "max_tokens": max_tokens,
            "system": system_prompt,
            "messages": conversation,
        },
    )


def build_openai_request(
    url: str,
    api_key: str,
    model: str,
    messages: list[ChatMessage],
    max_tokens: int,
) -> UpstreamRequest:
    return UpstreamRequest(
        url=url,
        headers={
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        },
        body={
            "model": model,
            "messages": [{"role": m.role, "content": m.content} for m in messages],
            "max_tokens": max_tokens,
            "temperature": OPENAI_TEMPERATURE,
        },
    )


def build_request(
    api_format: ApiFormat,
    url: str,
    api_key: str,
    model: str,
    messages: list[ChatMessage],
    max_tokens: int,
) -> UpstreamRequest:
    """Build the upstream request for the given wire format."""
    if api_format is ApiFormat.ANTHROPIC:
        return build_anthropic_request(url, api_key, model, messages, max_tokens)
    return build_openai_request(url, api_key, model, messages, max_tokens)


# =============================================================================
# Response Decoders
# =============================================================================

class _AnthropicContentBlock(BaseModel):
    text: str


class _AnthropicResponse(BaseModel):
    content: list[_AnthropicContentBlock]


class _OpenAIMessage(BaseModel):
    content: str


class _OpenAIChoice(BaseModel):
    message: _OpenAIMessage


class _OpenAIResponse(BaseModel):
    choices: list[_OpenAIChoice]


def decode_anthropic_response(data: Any) -> str:
    try:
        response = _AnthropicResponse.model_validate(data)
    except ValidationError as e:
        raise UpstreamError(f"API Error: malformed response from model provider ({e.error_count()} issues)")
    if not response.content:
        raise UpstreamError("API Error: model provider returned no content")
    return response.content[0].text


def decode_openai_response(data: Any) -> str:
    try:
        response = _OpenAIResponse.model_validate(data)
    except ValidationError as e:
        raise UpstreamError(f"API Error: malformed response from model provider ({e.error_count()} issues)")
    if not response.choices:
        raise UpstreamError("API Error: model provider returned no choices")
    return response.choices[0].message.content


def decode_response(api_format: ApiFormat, data: Any) -> str:
    """Extract the completion text from a decoded JSON body."""
    if api_format is ApiFormat.ANTHROPIC:
        return decode_anthropic_response(data)
    return decode_openai_response(data)
