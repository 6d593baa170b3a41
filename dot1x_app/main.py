"""802.1X Configuration Generator API - Main Application."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from dot1x_app import __version__
from dot1x_app.api import (
    generate_router,
    health_router,
    sessions_router,
    vendors_router,
)
from dot1x_app.config import get_settings
from dot1x_app.core.renderers.registry import get_registry

# Configure logging
logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("=" * 60)
    logger.info("🚀 Starting 802.1X Configuration Generator API...")
    logger.info("=" * 60)

    settings = get_settings()
    logger.info(f"Generator: {settings.generator_name}")
    logger.info(f"Cloud NAC: {'configured' if settings.cloud_nac_api_url else 'not configured'}")

    registry = get_registry()
    for target in registry.list_registered():
        logger.info(f"Renderer registered: {target}")

    logger.info("✅ 802.1X Configuration Generator API is ready!")

    yield

    logger.info("Shutdown complete")


app = FastAPI(
    title="802.1X Configuration Generator API",
    description="""
    # 802.1X Configuration Generator API

    Renders vendor-specific 802.1X / MAB network access control configuration
    from RADIUS, RadSec and TACACS+ server pools and deployment parameters.

    ## Authentication

    All API endpoints (except `/health` and `/`) require Bearer token authentication:

    ```
    Authorization: Bearer YOUR_TOKEN_HERE
    ```
    """,
    version=__version__,
    openapi_tags=[
        {
            "name": "Health",
            "description": "Health check and status endpoints (no authentication required)",
        },
        {
            "name": "Vendors",
            "description": "Vendor and platform catalog and the targets with dedicated renderers",
        },
        {
            "name": "Configuration",
            "description": "Stateless rendering, review and download of configuration text",
        },
        {
            "name": "Sessions",
            "description": "Stateful sessions holding server pools, parameters and multi-vendor targets",
        },
    ],
    lifespan=lifespan,
    swagger_ui_parameters={
        "persistAuthorization": True,
        "displayRequestDuration": True,
    },
)


# Include routers with tags
app.include_router(health_router, tags=["Health"])
app.include_router(vendors_router, tags=["Vendors"])
app.include_router(generate_router, tags=["Configuration"])
app.include_router(sessions_router, tags=["Sessions"])


@app.get("/", tags=["Health"])
async def root():
    """Root endpoint."""
    return {
        "service": "802.1X Configuration Generator API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"detail": "An internal error occurred. Please check logs."},
    )


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "dot1x_app.main:app",
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.log_level.lower(),
    )
