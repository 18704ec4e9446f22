"""
Job submission interface.

Callers hand sources to the background worker through JobSubmitter; the
Celery implementation sends an IndexingJob to the process_content task.

Dependencies: celery, vector_bridge.core.document_processing.models
System role: Seam between request handlers and the job queue
"""

import logging
from typing import Any, Protocol

from celery import Celery

from vector_bridge.core.document_processing.models import ContentKind, IndexingJob

logger = logging.getLogger(__name__)

PROCESS_CONTENT_TASK = "vector_bridge.process_content"


class JobSubmitter(Protocol):
    """Enqueue a source for background indexing."""

    def enqueue(
        self,
        source: str,
        collection: str,
        kind: ContentKind | None,
        metadata: dict[str, Any],
        text: str,
    ) -> str:
        """Return the id of the queued job."""
        ...


class CeleryJobSubmitter:
    """JobSubmitter backed by the process_content Celery task."""

    def __init__(self, app: Celery, queue: str = "indexing") -> None:
        self._app = app
        self.queue = queue

    def enqueue(
        self,
        source: str,
        collection: str,
        kind: ContentKind | None,
        metadata: dict[str, Any],
        text: str,
    ) -> str:
        """
        Send an indexing job to the worker.

        Args:
            source: URL or path of the content
            collection: Collection to file records under
            kind: Content kind, or None to detect it in the worker
            metadata: Variant metadata fields
            text: Extracted text or raw WebVTT

        Returns:
            str: Celery task id

        Raises:
            pydantic.ValidationError: When source or collection is empty
        """
        job = IndexingJob(
            text=text,
            source=source,
            collection=collection,
            content_kind=kind,
            metadata=metadata,
        )
        async_result = self._app.send_task(
            PROCESS_CONTENT_TASK,
            args=[job.model_dump(mode="json")],
            queue=self.queue,
        )
        logger.info(
            f"{__name__}:enqueue - Queued indexing job {async_result.id}",
            extra={"source": source, "collection": collection, "queue": self.queue},
        )
        return async_result.id
