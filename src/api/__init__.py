"""API routes for DeckSmith."""

from .routes import health, presentations

__all__ = [
    "health",
    "presentations",
]
