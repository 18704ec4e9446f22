"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: vector_bridge.configs, vector_bridge.boundary, vector_bridge.workers
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends

from vector_bridge.boundary.vdb import MVDBClient, VectorStoreClient
from vector_bridge.configs import Settings, get_settings
from vector_bridge.core.document_processing import IndexingPipeline
from vector_bridge.workers import celery_app
from vector_bridge.workers.job_submitter import CeleryJobSubmitter, JobSubmitter


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self) -> None:
        self._vector_store_client: MVDBClient | None = None
        self._job_submitter: CeleryJobSubmitter | None = None

    @property
    def vector_store_client(self) -> MVDBClient:
        """Get cached vector store client."""
        if self._vector_store_client is None:
            settings = get_settings()
            self._vector_store_client = MVDBClient.from_settings(
                settings.vector_store,
                settings.indexing,
            )
        return self._vector_store_client

    @property
    def job_submitter(self) -> CeleryJobSubmitter:
        """Get cached Celery job submitter."""
        if self._job_submitter is None:
            settings = get_settings()
            self._job_submitter = CeleryJobSubmitter(
                celery_app,
                queue=settings.celery.indexing_queue,
            )
        return self._job_submitter

    def clear(self) -> None:
        """Close and drop all cached instances."""
        if self._vector_store_client is not None:
            self._vector_store_client.close()
        self._vector_store_client = None
        self._job_submitter = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_vector_store_client() -> VectorStoreClient:
    """Get the shared vector store client."""
    return get_service_cache().vector_store_client


def get_job_submitter() -> JobSubmitter:
    """Get the shared job submitter."""
    return get_service_cache().job_submitter


def get_preview_pipeline(
    settings: Settings = Depends(get_settings_dependency),
) -> IndexingPipeline:
    """
    Get a pipeline for dry runs.

    Built without a store client, so it can chunk and build but never submit.

    Args:
        settings: Application settings (injected via Depends)

    Returns:
        IndexingPipeline: Pipeline bound to the indexing settings
    """
    return IndexingPipeline(settings.indexing)
