"""Tests for batched submission."""

from unittest.mock import MagicMock

import pytest

from vector_bridge.core.document_processing.content_types import DefaultContentBuilder
from vector_bridge.core.document_processing.document_id import generate_document_id
from vector_bridge.core.document_processing.models import Chunk
from vector_bridge.core.document_processing.tasks import VectorStoreTask
from vector_bridge.core.exceptions import VectorStoreError


@pytest.fixture
def records(build_context):
    builder = DefaultContentBuilder(build_context)
    chunks = [
        Chunk(
            content=f"Chunk body {i}",
            source="post-1",
            chunk_index=i,
            character_count=12,
            estimated_token_count=3,
        )
        for i in range(5)
    ]
    return [builder.build(chunk, "articles") for chunk in chunks]


@pytest.fixture
def limiter():
    return MagicMock()


class TestVectorStoreTaskInit:
    """Test submission configuration."""

    @pytest.mark.parametrize("batch_size", [0, 1001])
    def test_rejects_batch_size_out_of_range(self, mock_vector_store_client, batch_size) -> None:
        """Should raise ValueError outside 1-1000."""
        with pytest.raises(ValueError):
            VectorStoreTask(mock_vector_store_client, "tag", "https://site", batch_size=batch_size)

    def test_from_settings(self, mock_vector_store_client, indexing_settings) -> None:
        """Should take batching and identity from settings."""
        task = VectorStoreTask.from_settings(mock_vector_store_client, indexing_settings)

        assert task.batch_size == 2
        assert task.site_identity == "https://site.example"
        assert task.system_tag == "Vector Bridge MVDB Indexer v1.0.0"


class TestBuildDocuments:
    """Test bulk document wrapping."""

    def test_wraps_records(self, mock_vector_store_client, records, limiter) -> None:
        """Should attach deterministic ids and submission meta."""
        task = VectorStoreTask(mock_vector_store_client, "tag", "https://site", rate_limiter=limiter)

        documents = task.build_documents(records, "articles")

        assert [doc.id for doc in documents] == [
            generate_document_id("post-1", "articles", i) for i in range(5)
        ]
        assert documents[0].data == records[0].to_data()
        assert documents[0].meta.action == "bulk-index"
        assert documents[0].meta.source == "https://site"


class TestIndexRecords:
    """Test batch submission and failure isolation."""

    def test_empty_records_submit_nothing(self, mock_vector_store_client, limiter) -> None:
        """Should not call the store for no records."""
        task = VectorStoreTask(mock_vector_store_client, "tag", "https://site", rate_limiter=limiter)

        result = task.index_records([], "articles")

        assert result.indexed_count == 0
        assert result.success
        mock_vector_store_client.bulk_index.assert_not_called()

    def test_submits_in_batches(self, mock_vector_store_client, records, limiter) -> None:
        """Should split records into batch_size chunks and wait before each."""
        task = VectorStoreTask(
            mock_vector_store_client, "tag", "https://site", batch_size=2, rate_limiter=limiter
        )

        result = task.index_records(records, "articles")

        assert result.indexed_count == 5
        assert result.errors == []
        sizes = [len(call.args[0]) for call in mock_vector_store_client.bulk_index.call_args_list]
        assert sizes == [2, 2, 1]
        assert limiter.wait.call_count == 3

    def test_failed_batch_does_not_stop_the_run(self, mock_vector_store_client, records, limiter) -> None:
        """Should record batch 2's failure and still submit batch 3."""
        mock_vector_store_client.bulk_index.side_effect = [
            2,
            VectorStoreError("GraphQL errors: boom", operation="bulk_index"),
            1,
        ]
        task = VectorStoreTask(
            mock_vector_store_client, "tag", "https://site", batch_size=2, rate_limiter=limiter
        )

        result = task.index_records(records, "articles")

        assert result.indexed_count == 3
        assert result.errors == ["Batch 2 failed: GraphQL errors: boom"]
        assert not result.success
        assert mock_vector_store_client.bulk_index.call_count == 3

    def test_unexpected_errors_propagate(self, mock_vector_store_client, records, limiter) -> None:
        """Should not swallow errors that are not vector store failures."""
        mock_vector_store_client.bulk_index.side_effect = RuntimeError("bug")
        task = VectorStoreTask(mock_vector_store_client, "tag", "https://site", rate_limiter=limiter)

        with pytest.raises(RuntimeError):
            task.index_records(records, "articles")
