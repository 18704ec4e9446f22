"""API test fixtures: app with overridden dependencies."""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from vector_bridge.api.deps import get_job_submitter, get_preview_pipeline, get_vector_store_client
from vector_bridge.api.main import app
from vector_bridge.core.document_processing import IndexingPipeline


@pytest.fixture
def job_submitter() -> MagicMock:
    submitter = MagicMock()
    submitter.enqueue.return_value = "job-123"
    return submitter


@pytest.fixture
def client(indexing_settings, mock_vector_store_client, job_submitter):
    """
    TestClient with every external dependency replaced.

    Yields:
        TestClient: Client bound to the application
    """
    app.dependency_overrides[get_vector_store_client] = lambda: mock_vector_store_client
    app.dependency_overrides[get_job_submitter] = lambda: job_submitter
    app.dependency_overrides[get_preview_pipeline] = lambda: IndexingPipeline(indexing_settings)
    yield TestClient(app)
    app.dependency_overrides.clear()
