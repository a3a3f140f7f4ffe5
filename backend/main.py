"""FastAPI application for Lyrics Link."""

import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.api.routes import router
from backend.config import get_backend_settings
from backend.services.track_service import close_track_service

logging.basicConfig(
    level=get_backend_settings().log_level.upper(),
    format="%(levelname)s:%(name)s:%(message)s",
    stream=sys.stdout,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    settings = get_backend_settings()
    logger.info(f"Starting Lyrics Link API ({settings.environment})")
    if not settings.has_genius_token:
        logger.warning("GENIUS_ACCESS_TOKEN is not set; lyrics lookups will return no match")

    yield

    await close_track_service()
    logger.info("Shutting down Lyrics Link API")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_backend_settings()

    app = FastAPI(
        title="Lyrics Link API",
        description="Find the Genius lyrics page for the song in a YouTube music video",
        version="0.1.0",
        lifespan=lifespan,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
    )

    # CORS configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(router)

    return app


app = create_app()
