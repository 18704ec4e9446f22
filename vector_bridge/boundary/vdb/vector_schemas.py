"""
Vector store schemas.

Pydantic models for the bulk-index wire shape and the connectivity probe.

Dependencies: pydantic
System role: Type definitions for vector store operations
"""

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class DocumentMeta(BaseModel):
    """Submission metadata sent alongside every document."""

    model_config = ConfigDict(frozen=True)

    system: str = Field(description="Indexer name and version")
    action: Literal["bulk-index", "delete"] = "bulk-index"
    source: str = Field(description="Origin site of the indexer")


class BulkIndexDocument(BaseModel):
    """One document of a bulkIndex mutation."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Deterministic document id")
    data: dict[str, Any] = Field(description="Flattened content record")
    meta: DocumentMeta


class ConnectionStatus(BaseModel):
    """Result of the vector store connectivity probe."""

    model_config = ConfigDict(frozen=True)

    reachable: bool
    endpoint_masked: str = Field(description="Endpoint with the host partially hidden")
    schema_available: bool = Field(description="Whether introspection returned a schema")
    checked_at: datetime
