"""Core configuration module for DeckSmith."""

from .api_format import ApiFormat, select_api_format
from .config import Settings, get_settings
from .health import HealthMonitor, HealthSnapshot, get_health_monitor
from .limiter import limiter, generate_rate_limit
from .logging import setup_logging, get_logger

__all__ = [
    "ApiFormat",
    "select_api_format",
    "Settings",
    "get_settings",
    "HealthMonitor",
    "HealthSnapshot",
    "get_health_monitor",
    "limiter",
    "generate_rate_limit",
    "setup_logging",
    "get_logger",
]
