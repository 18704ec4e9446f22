"""API routers."""

from .health import router as health_router
from .indexing import router as indexing_router

__all__ = ["health_router", "indexing_router"]
