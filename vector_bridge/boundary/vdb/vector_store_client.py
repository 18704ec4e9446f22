"""
Vector store client protocol.

The submission batcher and the API depend on this interface only; the
GraphQL adapter is one implementation.

Dependencies: typing (stdlib)
System role: Seam between the indexing core and the remote store
"""

from typing import Protocol, runtime_checkable

from vector_bridge.boundary.vdb.vector_schemas import BulkIndexDocument, ConnectionStatus


@runtime_checkable
class VectorStoreClient(Protocol):
    """Operations the indexer needs from a vector store."""

    def bulk_index(self, documents: list[BulkIndexDocument]) -> int:
        """
        Index a batch of documents, upserting by id.

        Returns:
            int: Number of documents accepted

        Raises:
            VectorStoreError: When the store rejects the batch
        """
        ...

    def validate_connection(self) -> ConnectionStatus:
        """
        Probe the store.

        Raises:
            ConnectivityError: When the store is unreachable or misconfigured
        """
        ...

    def delete_document(self, document_id: str) -> None:
        """
        Delete one document by id.

        Raises:
            VectorStoreError: When the store rejects the deletion
        """
        ...
