"""API routes for Lyrics Link."""

from fastapi import APIRouter

from backend.api.routes.health import router as health_router
from backend.api.routes.track import router as track_router

router = APIRouter()

# Include all route modules
router.include_router(health_router, tags=["health"])
router.include_router(track_router, tags=["track"])
