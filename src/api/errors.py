"""Translate service exceptions into JSON error responses."""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from src.core import limiter
from src.core.exceptions import DeckSmithError

logger = logging.getLogger(__name__)

RATE_LIMIT_MESSAGE = "Too many requests, please try again later."


async def decksmith_error_handler(request: Request, exc: DeckSmithError) -> JSONResponse:
    """Report a service error as a single message plus a non-success status."""
    log = logger.warning if exc.http_status < 500 else logger.error
    log(f"Request to {request.url.path} failed [{exc.error_code}]: {exc.message}")

    return JSONResponse(
        status_code=exc.http_status,
        content={"error": exc.message or "Failed to generate presentation"},
    )


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Answer throttled clients with the same error body as every other failure."""
    client = request.client.host if request.client else "unknown"
    logger.warning(f"Rate limit exceeded for {client} on {request.url.path}: {exc.detail}")

    return JSONResponse(status_code=429, content={"error": RATE_LIMIT_MESSAGE})


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the limiter and the error handlers to an application."""
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_exception_handler(DeckSmithError, decksmith_error_handler)
