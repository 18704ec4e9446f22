"""
Result models for chunking, submission and whole pipeline runs.

Dependencies: pydantic
System role: Data structures returned to callers of the pipeline
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .chunk import Chunk, VideoChunk
from .raw_content import ContentKind
from .vtt_segment import VttStatistics


class ChunkingStats(BaseModel):
    """Size estimate for a text before it is chunked."""

    model_config = ConfigDict(frozen=True)

    total_characters: int
    estimated_tokens: int
    estimated_chunks: int
    chunk_size_tokens: int
    overlap_percent: int
    target_chars_per_chunk: int


class BatchResult(BaseModel):
    """Outcome of one submission run across all batches."""

    model_config = ConfigDict(frozen=True)

    indexed_count: int = Field(default=0, ge=0, description="Records accepted by the store")
    errors: list[str] = Field(default_factory=list, description="'Batch N failed: ...' per failed batch")

    @property
    def success(self) -> bool:
        return not self.errors


class PipelineResult(BaseModel):
    """Result of processing one source through the indexing pipeline."""

    model_config = ConfigDict(frozen=True)

    source: str = Field(description="Source that was processed")
    collection: str = Field(description="Collection the records were filed under")
    content_kind: ContentKind
    chunk_count: int = Field(description="Chunks produced by chunking")
    record_count: int = Field(description="Chunks that passed builder validation")
    indexed_count: int = Field(description="Records accepted by the vector store")
    validation_errors: list[str] = Field(default_factory=list)
    submission_errors: list[str] = Field(default_factory=list)
    processing_time_ms: float = Field(description="Wall-clock processing time in milliseconds")


class IndexingPreview(BaseModel):
    """What a run would submit, computed without touching the store."""

    model_config = ConfigDict(frozen=True)

    source: str
    collection: str
    content_kind: ContentKind
    chunks: list[VideoChunk | Chunk] = Field(default_factory=list)
    records: list[dict[str, Any]] = Field(
        default_factory=list,
        description="Flattened records as they would be sent in `data`",
    )
    validation_errors: list[str] = Field(default_factory=list)
    chunking_stats: ChunkingStats | None = None
    transcript_stats: VttStatistics | None = None
    warnings: list[str] = Field(default_factory=list)
