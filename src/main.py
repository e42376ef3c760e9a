"""
DeckSmith - Main Application Entry Point

Turns a topic into a structured slideshow document by relaying two prompts
to a configured LLM completion endpoint.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.core import get_settings, setup_logging
from src.api.errors import register_exception_handlers
from src.api.routes import health, presentations

setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown."""
    settings = get_settings()

    # Startup
    logger.info(f"🚀 Starting {settings.app_name}...")
    logger.info(f"🤖 Using model: \033[96m{settings.megallm_model}\033[0m")
    logger.info(f"🔌 API format: \033[93m{settings.api_format.value}\033[0m")

    if not settings.is_configured:
        logger.warning("⚠️  MEGALLM_API_KEY environment variable is not set.")
        logger.warning("   Set it using: export MEGALLM_API_KEY=your-api-key")

    yield

    # Shutdown
    logger.info(f"👋 Shutting down {settings.app_name}...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="AI slideshow generator backed by an LLM completion endpoint",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include API routers
    app.include_router(presentations.router, tags=["presentations"])
    app.include_router(health.router, tags=["health"])

    return app


# Create the application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "src.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
