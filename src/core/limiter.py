"""
Rate limiter configuration module.
Separated to avoid circular imports.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from .config import get_settings

# Rate limiter configuration - uses IP address as key
limiter = Limiter(key_func=get_remote_address)


def generate_rate_limit() -> str:
    """Limit string for the generate route, read from settings on each request."""
    settings = get_settings()
    return f"{settings.rate_limit_requests}/{settings.rate_limit_period_seconds} seconds"
