"""Health check endpoints."""

import logging
from datetime import datetime, UTC

from fastapi import APIRouter
from pydantic import BaseModel

from dot1x_app import __version__
from dot1x_app.core.renderers.registry import get_registry
from dot1x_app.core.session_store import get_session_store

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    timestamp: str
    version: str
    registered_renderers: int
    active_sessions: int


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Check generator health.

    Returns:
        Health status including renderer and session counts
    """
    registered = len(get_registry().list_registered())
    return HealthResponse(
        status="healthy" if registered else "degraded",
        timestamp=datetime.now(UTC).isoformat(),
        version=__version__,
        registered_renderers=registered,
        active_sessions=len(get_session_store()),
    )
