"""
Indexing job payload carried by the job queue.

Dependencies: pydantic
System role: Contract between job submitters and the ingestion worker
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .raw_content import ContentKind


class IndexingJob(BaseModel):
    """Everything a worker needs to run the pipeline for one source."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(description="Extracted text, or raw WebVTT for video")
    source: str = Field(min_length=1, description="URL or path of the content")
    collection: str = Field(min_length=1, description="Collection to file records under")
    content_kind: ContentKind | None = Field(
        default=None,
        description="Record schema; detected from the source when omitted",
    )
    metadata: dict[str, Any] = Field(
        default_factory=dict,
        description="Variant metadata fields, validated against the kind's metadata model",
    )
