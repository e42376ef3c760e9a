"""
Application settings using Pydantic for validation and type safety.
Security: The upstream API key is loaded from the environment only.
"""
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .api_format import ApiFormat, select_api_format


class Settings(BaseSettings):
    """Application configuration, read once at startup."""

    # Application
    app_name: str = Field(default="DeckSmith", description="Application name")
    debug: bool = Field(default=False, description="Debug mode flag")

    # Server
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=6767, ge=1, le=65535, description="Server port")

    # Upstream LLM Configuration
    megallm_api_key: Optional[str] = Field(
        default=None,
        description="API key for the completion endpoint (sensitive)"
    )
    megallm_model: str = Field(
        default="claude-opus-4-5-20251101",
        description="Model identifier sent with every completion request"
    )
    megallm_api_url: str = Field(
        default="https://api.anthropic.com/v1/messages",
        description="Completion endpoint URL; its host selects the wire format"
    )
    request_timeout_seconds: int = Field(
        default=120,
        ge=1,
        le=600,
        description="Total timeout for a single upstream call in seconds"
    )

    # Inbound rate limiting
    rate_limit_requests: int = Field(
        default=10,
        ge=1,
        description="Generate requests allowed per client within the period"
    )
    rate_limit_period_seconds: int = Field(
        default=60,
        ge=1,
        description="Rate limit window in seconds"
    )

    # CORS Configuration
    cors_origins: list[str] = Field(
        default=["*"],
        description="Allowed CORS origins"
    )

    @property
    def is_configured(self) -> bool:
        """Check if an upstream API key is set."""
        return bool(self.megallm_api_key)

    @property
    def api_format(self) -> ApiFormat:
        """Get the upstream wire format for the configured endpoint."""
        return select_api_format(self.megallm_api_url)

    @field_validator("megallm_api_key")
    @classmethod
    def validate_api_key(cls, v: Optional[str]) -> Optional[str]:
        """Treat a blank key the same as a missing one."""
        if v is None or not v.strip():
            return None
        return v.strip()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="",
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings.

    Using lru_cache ensures settings are loaded once and reused.
    """
    return Settings()
