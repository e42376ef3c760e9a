"""
LLM Client - one chat completion call over either upstream wire format.

The wire format is fixed at construction from the configured endpoint host.
Every call is a single attempt: failures are mapped to a specific
UpstreamError subclass and raised, never retried.
"""

import asyncio
import json
import logging
from typing import Any, Optional

import aiohttp

from src.core import ApiFormat, HealthMonitor, Settings, get_health_monitor, get_settings
from src.core.exceptions import (
    ConfigurationError,
    DeckSmithError,
    UpstreamAuthenticationError,
    UpstreamConnectionError,
    UpstreamError,
    UpstreamRateLimitError,
    UpstreamTimeoutError,
    UpstreamUnavailableError,
)
from src.models.presentation import ChatMessage
from .formats import UpstreamRequest, build_request, decode_response

logger = logging.getLogger(__name__)


class LLMClient:
    """Async client for the configured completion endpoint."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        health_monitor: Optional[HealthMonitor] = None,
    ):
        self._settings = settings or get_settings()
        self._health = health_monitor or get_health_monitor()
        self._api_format = self._settings.api_format

    @property
    def api_format(self) -> ApiFormat:
        return self._api_format

    @property
    def model(self) -> str:
        return self._settings.megallm_model

    @property
    def is_available(self) -> bool:
        return self._settings.is_configured

    def build_request(self, messages: list[ChatMessage], max_tokens: int) -> UpstreamRequest:
        """Build the upstream request without sending it."""
        return build_request(
            self._api_format,
            url=self._settings.megallm_api_url,
            api_key=self._settings.megallm_api_key or "",
            model=self._settings.megallm_model,
            messages=messages,
            max_tokens=max_tokens,
        )

    async def complete(self, messages: list[ChatMessage], max_tokens: int = 8000) -> str:
        """
        Send chat messages upstream and return the completion text.

        Args:
            messages: Ordered prompt messages (must not be empty)
            max_tokens: Completion token budget (must be positive)

        Returns:
            Text of the first returned content block / choice

        Raises:
            ConfigurationError: No API key configured
            UpstreamError: Network failure, timeout, non-2xx status or malformed body
        """
        if not messages:
            raise ValueError("messages must not be empty")
        if max_tokens <= 0:
            raise ValueError("max_tokens must be positive")

        try:
            text = await self._complete(messages, max_tokens)
        except DeckSmithError as e:
            logger.error(f"Upstream API error: {e.message}")
            self._health.record_failure(e.message)
            raise

        self._health.record_success()
        return text

    async def _complete(self, messages: list[ChatMessage], max_tokens: int) -> str:
        if not self._settings.is_configured:
            raise ConfigurationError()

        request = self.build_request(messages, max_tokens)
        timeout_seconds = self._settings.request_timeout_seconds

        try:
            status, payload = await self._post(request, timeout_seconds)
        except asyncio.TimeoutError:
            raise UpstreamTimeoutError(timeout_seconds)
        except aiohttp.ClientConnectionError as e:
            raise UpstreamConnectionError(str(e) or type(e).__name__)
        except aiohttp.ClientError as e:
            raise UpstreamError(f"API Error: {e}")

        self._raise_for_status(status, payload)

        if payload is None:
            raise UpstreamError("API Error: model provider returned an undecodable or non-JSON body", status_code=status)

        return decode_response(self._api_format, payload)

    async def _post(self, request: UpstreamRequest, timeout_seconds: int) -> tuple[int, Any]:
        """POST the request and return the status and decoded JSON body (None if not JSON)."""
        timeout = aiohttp.ClientTimeout(total=timeout_seconds)
        async with aiohttp.ClientSession(timeout=timeout) as http_session:
            async with http_session.post(request.url, json=request.body, headers=request.headers) as resp:
                raw = await resp.read()
                try:
                    payload = json.loads(raw)
                except (UnicodeDecodeError, json.JSONDecodeError):
                    payload = None
                return resp.status, payload

    @staticmethod
    def _raise_for_status(status: int, payload: Any) -> None:
        if 200 <= status < 300:
            return
        if status == 401:
            raise UpstreamAuthenticationError()
        if status == 429:
            raise UpstreamRateLimitError()
        if status >= 500:
            raise UpstreamUnavailableError(status)

        detail = _error_message(payload) or f"HTTP {status}"
        raise UpstreamError(f"API Error: {detail}", status_code=status)


def _error_message(payload: Any) -> Optional[str]:
    """Pull ``error.message`` out of an upstream error body, if present."""
    if not isinstance(payload, dict):
        return None
    error = payload.get("error")
    if isinstance(error, dict) and isinstance(error.get("message"), str):
        return error["message"]
    if isinstance(error, str):
        return error
    return None


# Singleton instance
_llm_client: Optional[LLMClient] = None


def get_llm_client() -> LLMClient:
    """Get the singleton LLM client instance."""
    global _llm_client
    if _llm_client is None:
        _llm_client = LLMClient()
    return _llm_client
