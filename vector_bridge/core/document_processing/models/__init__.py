"""
Models for the chunking and indexing pipeline.

Exports: raw content, chunks, transcript segments, metadata, records and results
"""

from .chunk import Chunk, VideoChunk
from .content_record import (
    ContentRecord,
    DocumentRecord,
    GenericRecord,
    VideoRecord,
    WebpageRecord,
)
from .indexing_job import IndexingJob
from .metadata import (
    BuildContext,
    ContentMetadata,
    DocumentMetadata,
    GenericMetadata,
    VideoMetadata,
    WebpageMetadata,
)
from .pipeline_result import BatchResult, ChunkingStats, IndexingPreview, PipelineResult
from .raw_content import ContentKind, RawContent
from .vtt_segment import VttSegment, VttStatistics, VttTimestamp

__all__ = [
    "BatchResult",
    "BuildContext",
    "Chunk",
    "ChunkingStats",
    "ContentKind",
    "ContentMetadata",
    "ContentRecord",
    "DocumentMetadata",
    "DocumentRecord",
    "GenericMetadata",
    "GenericRecord",
    "IndexingJob",
    "IndexingPreview",
    "PipelineResult",
    "RawContent",
    "VideoChunk",
    "VideoMetadata",
    "VideoRecord",
    "VttSegment",
    "VttStatistics",
    "VttTimestamp",
    "WebpageMetadata",
    "WebpageRecord",
]
