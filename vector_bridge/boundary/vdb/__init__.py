"""
Vector store adapters.

Exports: client protocol, GraphQL client and wire schemas
"""

from vector_bridge.boundary.vdb.mvdb_client import MVDBClient, mask_endpoint
from vector_bridge.boundary.vdb.vector_schemas import (
    BulkIndexDocument,
    ConnectionStatus,
    DocumentMeta,
)
from vector_bridge.boundary.vdb.vector_store_client import VectorStoreClient

__all__ = [
    "BulkIndexDocument",
    "ConnectionStatus",
    "DocumentMeta",
    "MVDBClient",
    "VectorStoreClient",
    "mask_endpoint",
]
