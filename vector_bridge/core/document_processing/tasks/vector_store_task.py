"""
Batched submission of records to the vector store.

Splits records into fixed-size batches, spaces the requests with a
fixed-interval limiter and keeps going when a batch fails. Failures are
reported once, never retried.

Dependencies: vector_bridge.boundary.vdb
System role: Final stage of the indexing pipeline
"""

import logging

from vector_bridge.boundary.vdb import BulkIndexDocument, DocumentMeta, VectorStoreClient
from vector_bridge.configs.indexing import IndexingSettings
from vector_bridge.core.exceptions import SubmissionError, VectorStoreError
from vector_bridge.observability.log_utils import log_exception_with_context

from ..document_id import generate_document_id
from ..models import BatchResult, ContentRecord
from ..rate_limiter import RateLimiter

logger = logging.getLogger(__name__)


class VectorStoreTask:
    """Submit content records to a vector store in rate-limited batches."""

    def __init__(
        self,
        client: VectorStoreClient,
        system_tag: str,
        site_identity: str,
        batch_size: int = 100,
        rate_limiter: RateLimiter | None = None,
        qps: float = 2.0,
    ) -> None:
        """
        Initialize the submission task.

        Args:
            client: Vector store client
            system_tag: Indexer name sent as meta.system
            site_identity: Origin site sent as meta.source
            batch_size: Records per request (1-1000)
            rate_limiter: Limiter shared across batches (built from qps if None)
            qps: Requests per second when no limiter is given

        Raises:
            ValueError: When batch_size is outside 1-1000
        """
        if not 1 <= batch_size <= 1000:
            raise ValueError("batch_size must be between 1 and 1000")

        self._client = client
        self.system_tag = system_tag
        self.site_identity = site_identity
        self.batch_size = batch_size
        self._rate_limiter = rate_limiter or RateLimiter(qps)

    @classmethod
    def from_settings(cls, client: VectorStoreClient, settings: IndexingSettings) -> "VectorStoreTask":
        return cls(
            client=client,
            system_tag=settings.system_tag,
            site_identity=settings.site_identity,
            batch_size=settings.batch_size,
            qps=settings.qps,
        )

    def build_documents(self, records: list[ContentRecord], collection: str) -> list[BulkIndexDocument]:
        """
        Wrap records into bulk-index documents with deterministic ids.

        Args:
            records: Built content records
            collection: Collection the records are filed under

        Returns:
            list[BulkIndexDocument]: One document per record, same order
        """
        meta = DocumentMeta(system=self.system_tag, source=self.site_identity)
        return [
            BulkIndexDocument(
                id=generate_document_id(record.source_origin, collection, record.chunk_index),
                data=record.to_data(),
                meta=meta,
            )
            for record in records
        ]

    def index_records(self, records: list[ContentRecord], collection: str) -> BatchResult:
        """
        Submit records batch by batch.

        A failed batch adds "Batch N failed: <message>" (N is 1-based) to the
        result and the remaining batches are still submitted.

        Args:
            records: Built content records
            collection: Collection the records are filed under

        Returns:
            BatchResult: Indexed count across successful batches and batch errors
        """
        if not records:
            return BatchResult()

        documents = self.build_documents(records, collection)
        indexed = 0
        errors: list[str] = []

        for start in range(0, len(documents), self.batch_size):
            batch_number = start // self.batch_size + 1
            batch = documents[start:start + self.batch_size]

            self._rate_limiter.wait()
            try:
                indexed += self._client.bulk_index(batch)
            except VectorStoreError as e:
                failure = SubmissionError(
                    batch_number,
                    e.message,
                    details={"collection": collection, "batch_size": len(batch)},
                )
                log_exception_with_context(
                    logger,
                    f"{__name__}:index_records - Batch submission failed",
                    failure,
                )
                errors.append(failure.message)

        logger.info(
            f"{__name__}:index_records - Submitted {len(documents)} records",
            extra={"collection": collection, "indexed": indexed, "failed_batches": len(errors)},
        )
        return BatchResult(indexed_count=indexed, errors=errors)
