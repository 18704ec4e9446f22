"""
Content ingestion Celery task.

Async task: process_content(job)
Flow: validate job -> chunk -> build records -> submit batches

Settings are loaded here, at the worker edge, and handed to the pipeline.
The task is never retried automatically; a failed job is reported once.

Dependencies: celery, vector_bridge.core, vector_bridge.boundary
System role: Async content indexing task
"""

import logging

from vector_bridge.boundary.vdb import MVDBClient
from vector_bridge.configs import get_settings
from vector_bridge.core.document_processing import IndexingPipeline
from vector_bridge.core.document_processing.models import IndexingJob, RawContent
from vector_bridge.observability.log_utils import log_exception_with_context
from vector_bridge.workers import celery_app
from vector_bridge.workers.job_submitter import PROCESS_CONTENT_TASK

logger = logging.getLogger(__name__)


@celery_app.task(bind=True, name=PROCESS_CONTENT_TASK, max_retries=0)
def process_content(self, job: dict) -> dict:
    """
    Index one source.

    Args:
        job: Serialized IndexingJob

    Returns:
        dict: Serialized PipelineResult
    """
    indexing_job = IndexingJob.model_validate(job)
    settings = get_settings()
    kind = IndexingPipeline.resolve_kind(
        indexing_job.source, indexing_job.text, indexing_job.content_kind
    )
    content = RawContent(text=indexing_job.text, source=indexing_job.source, content_kind=kind)

    try:
        with MVDBClient.from_settings(settings.vector_store, settings.indexing) as client:
            pipeline = IndexingPipeline(settings.indexing, client)
            result = pipeline.process(content, indexing_job.collection, indexing_job.metadata)
    except Exception as e:
        log_exception_with_context(
            logger,
            f"{__name__}:process_content - Indexing job failed",
            e,
            task_id=self.request.id,
            source=indexing_job.source,
            collection=indexing_job.collection,
        )
        raise

    return result.model_dump(mode="json")
