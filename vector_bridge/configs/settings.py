"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI and the worker edge.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from vector_bridge.configs.base import AppSettings
from vector_bridge.configs.celery_config import CelerySettings
from vector_bridge.configs.indexing import IndexingSettings
from vector_bridge.configs.vector_store import VectorStoreSettings


class Settings(AppSettings):
    """Unified application settings aggregating all config modules."""

    indexing: IndexingSettings = Field(default_factory=IndexingSettings)
    vector_store: VectorStoreSettings = Field(default_factory=VectorStoreSettings)
    celery: CelerySettings = Field(default_factory=CelerySettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Only the process edges (API dependencies, Celery tasks) call this;
    pipeline components receive the snapshot through their constructors.

    Returns:
        Settings: Application settings instance

    Usage:
        from vector_bridge.configs import get_settings
        settings = get_settings()
    """
    return Settings()
