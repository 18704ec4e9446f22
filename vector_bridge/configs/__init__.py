"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from vector_bridge.configs.celery_config import CelerySettings
from vector_bridge.configs.indexing import IndexingSettings
from vector_bridge.configs.settings import Settings, get_settings
from vector_bridge.configs.vector_store import VectorStoreSettings

__all__ = [
    "CelerySettings",
    "IndexingSettings",
    "Settings",
    "VectorStoreSettings",
    "get_settings",
]
