"""
Shared test fixtures and configuration for entire test suite.

Provides: settings snapshots, a fixed build context, sample WebVTT content,
and a mock vector store client
Dependencies: pytest
System role: Test infrastructure and fixture management
"""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

from vector_bridge.boundary.vdb import ConnectionStatus, VectorStoreClient
from vector_bridge.configs import IndexingSettings
from vector_bridge.core.document_processing.models import BuildContext

SAMPLE_VTT = """WEBVTT

NOTE This transcript was generated automatically

1
00:00:01.000 --> 00:00:04.000 align:start position:10%
<v Alice>Welcome to the course on vector search.

2
00:00:05.000 --> 00:00:08.000
Bob: Today we cover chunking strategies.

00:00:09.000 --> 00:00:12.500
<b>Overlap</b> keeps context between chunks.
"""


@pytest.fixture
def indexing_settings() -> IndexingSettings:
    """
    Settings snapshot with small chunks and a fast limiter.

    Returns:
        IndexingSettings: 100-token chunks (400 chars) with 20% overlap
    """
    return IndexingSettings(
        chunk_size_tokens=100,
        overlap_percent=20,
        batch_size=2,
        qps=100,
        tenant="acme",
        site_identity="https://site.example",
    )


@pytest.fixture
def fixed_time() -> datetime:
    return datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def build_context(fixed_time) -> BuildContext:
    """Build context with a fixed timestamp."""
    return BuildContext(
        site_identity="https://site.example",
        tenant="acme",
        indexed_by="vector-bridge",
        indexed_at=fixed_time,
    )


@pytest.fixture
def sample_vtt() -> str:
    return SAMPLE_VTT


@pytest.fixture
def mock_vector_store_client(fixed_time) -> MagicMock:
    """
    Create mock vector store client.

    Returns:
        MagicMock: Client accepting every batch
    """
    client = MagicMock(spec=VectorStoreClient)
    client.bulk_index.side_effect = lambda documents: len(documents)
    client.validate_connection.return_value = ConnectionStatus(
        reachable=True,
        endpoint_masked="https://api***.example.com/graphql",
        schema_available=True,
        checked_at=fixed_time,
    )
    return client
