"""Tests for Celery job submission."""

from unittest.mock import MagicMock

import pydantic
import pytest

from vector_bridge.core.document_processing.models import ContentKind
from vector_bridge.workers.job_submitter import PROCESS_CONTENT_TASK, CeleryJobSubmitter


@pytest.fixture
def celery_app() -> MagicMock:
    app = MagicMock()
    app.send_task.return_value = MagicMock(id="task-1")
    return app


class TestCeleryJobSubmitter:
    """Test CeleryJobSubmitter.enqueue."""

    def test_sends_serialized_job(self, celery_app) -> None:
        """Should send the job as JSON-ready args to the indexing queue."""
        submitter = CeleryJobSubmitter(celery_app, queue="indexing")

        job_id = submitter.enqueue(
            source="captions/talk.vtt",
            collection="videos",
            kind=ContentKind.VIDEO,
            metadata={"video_url": "https://vimeo.com/1"},
            text="WEBVTT",
        )

        assert job_id == "task-1"
        celery_app.send_task.assert_called_once_with(
            PROCESS_CONTENT_TASK,
            args=[
                {
                    "text": "WEBVTT",
                    "source": "captions/talk.vtt",
                    "collection": "videos",
                    "content_kind": "video",
                    "metadata": {"video_url": "https://vimeo.com/1"},
                }
            ],
            queue="indexing",
        )

    def test_rejects_empty_collection(self, celery_app) -> None:
        """Should fail validation before sending."""
        submitter = CeleryJobSubmitter(celery_app)

        with pytest.raises(pydantic.ValidationError):
            submitter.enqueue(source="post-1", collection="", kind=None, metadata={}, text="x")

        celery_app.send_task.assert_not_called()
