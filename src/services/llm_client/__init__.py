"""LLM client for the configured chat completion endpoint."""

from .client import LLMClient, get_llm_client
from .formats import UpstreamRequest, build_request, decode_response

__all__ = [
    "LLMClient",
    "get_llm_client",
    "UpstreamRequest",
    "build_request",
    "decode_response",
]
