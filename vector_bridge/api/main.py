"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, vector_bridge.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from vector_bridge import __version__
from vector_bridge.api.deps.dependencies import get_service_cache
from vector_bridge.configs import get_settings
from vector_bridge.observability.logger import configure_logging

from .routers import health_router, indexing_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Configures logging on startup and closes cached clients on shutdown.
    """
    configure_logging(get_settings().log_level)
    logger.info("Application startup: logging configured")

    yield

    get_service_cache().clear()
    logger.info("Application shutdown: service cache cleared")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    app = FastAPI(
        title="Vector Bridge Indexer API",
        description="Chunking, preview and background indexing into the MVDB vector store",
        version=__version__,
        lifespan=lifespan,
    )

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(indexing_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "vector_bridge.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
