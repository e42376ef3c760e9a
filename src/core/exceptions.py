"""
Exception hierarchy for DeckSmith.
All service errors inherit from DeckSmithError so the API layer can
translate them into a single error message and status code.
"""

from typing import Optional


class DeckSmithError(Exception):
    """Base exception for all DeckSmith errors."""

    http_status: int = 500

    def __init__(
        self,
        message: str,
        error_code: str = "DECKSMITH_ERROR",
        details: Optional[dict] = None,
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


# ===========================================
# Request Exceptions
# ===========================================


class TopicRequiredError(DeckSmithError):
    """The generate request carried no usable topic."""

    http_status = 400

    def __init__(self):
        super().__init__(
            message="Please provide a topic",
            error_code="TOPIC_REQUIRED",
        )


class ConfigurationError(DeckSmithError):
    """No upstream API key is configured."""

    http_status = 503

    def __init__(self):
        super().__init__(
            message="API key not configured. Set MEGALLM_API_KEY environment variable.",
            error_code="CONFIGURATION_ERROR",
        )


# ===========================================
# Upstream Exceptions
# ===========================================


class UpstreamError(DeckSmithError):
    """The completion endpoint failed or returned an unusable body."""

    http_status = 502

    def __init__(
        self,
        message: str,
        error_code: str = "UPSTREAM_ERROR",
        status_code: Optional[int] = None,
    ):
        self.status_code = status_code
        super().__init__(
            message=message,
            error_code=error_code,
            details={"status_code": status_code} if status_code is not None else None,
        )


class UpstreamAuthenticationError(UpstreamError):
    """The completion endpoint rejected the API key (HTTP 401)."""

    def __init__(self):
        super().__init__(
            message="API Error: authentication failed. Check MEGALLM_API_KEY.",
            error_code="UPSTREAM_AUTH_REJECTED",
            status_code=401,
        )


class UpstreamRateLimitError(UpstreamError):
    """The completion endpoint is throttling us (HTTP 429)."""

    def __init__(self):
        super().__init__(
            message="API Error: rate limit reached at the model provider. Please wait and try again.",
            error_code="UPSTREAM_RATE_LIMITED",
            status_code=429,
        )


class UpstreamUnavailableError(UpstreamError):
    """The completion endpoint answered with a 5xx status."""

    def __init__(self, status_code: int):
        super().__init__(
            message=f"API Error: the model provider is unavailable (HTTP {status_code}). Please try again later.",
            error_code="UPSTREAM_UNAVAILABLE",
            status_code=status_code,
        )


class UpstreamTimeoutError(UpstreamError):
    """The completion call exceeded its time budget."""

    http_status = 504

    def __init__(self, timeout_seconds: int):
        self.timeout_seconds = timeout_seconds
        super().__init__(
            message=f"API Error: the model provider did not respond within {timeout_seconds} seconds.",
            error_code="UPSTREAM_TIMEOUT",
        )


class UpstreamConnectionError(UpstreamError):
    """The completion endpoint could not be reached."""

    def __init__(self, reason: str):
        super().__init__(
            message=f"API Error: could not reach the model provider ({reason}).",
            error_code="UPSTREAM_UNREACHABLE",
        )


# ===========================================
# Pipeline Exceptions
# ===========================================


class StructureParseError(DeckSmithError):
    """The structure stage response was not a valid presentation JSON object."""

    http_status = 502

    def __init__(self, reason: str):
        super().__init__(
            message=f"Failed to parse presentation structure: {reason}",
            error_code="STRUCTURE_PARSE_ERROR",
        )


class EnhancementError(DeckSmithError):
    """The enhancement stage failed. Absorbed by the pipeline."""

    def __init__(self, reason: str):
        super().__init__(
            message=f"Enhancement skipped: {reason}",
            error_code="ENHANCEMENT_ERROR",
        )
