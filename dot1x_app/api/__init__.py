"""API endpoints."""

from .health import router as health_router
from .vendors import router as vendors_router
from .generate import router as generate_router
from .sessions import router as sessions_router

__all__ = [
    "health_router",
    "vendors_router",
    "generate_router",
    "sessions_router",
]
