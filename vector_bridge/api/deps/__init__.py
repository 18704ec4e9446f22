"""API-specific dependencies."""

from .dependencies import (
    get_job_submitter,
    get_preview_pipeline,
    get_service_cache,
    get_settings_dependency,
    get_vector_store_client,
)

__all__ = [
    "get_job_submitter",
    "get_preview_pipeline",
    "get_service_cache",
    "get_settings_dependency",
    "get_vector_store_client",
]
