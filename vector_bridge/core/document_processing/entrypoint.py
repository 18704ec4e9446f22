"""
Indexing pipeline orchestrator.

Coordinates chunking (text or transcript), content building and batched
submission for one source. All configuration comes from the injected
settings snapshot.

Dependencies: All task modules, content builders, vector_bridge.configs
System role: Pipeline orchestration (coordinates only)
"""

import logging
import time
from datetime import datetime, timezone
from typing import Any

from vector_bridge.boundary.vdb import VectorStoreClient
from vector_bridge.configs.indexing import IndexingSettings
from vector_bridge.core.exceptions import ChunkValidationError, MalformedFormatError

from .content_types import detect_content_kind, get_builder
from .models import (
    BuildContext,
    Chunk,
    ContentKind,
    ContentMetadata,
    ContentRecord,
    IndexingPreview,
    PipelineResult,
    RawContent,
    VttSegment,
)
from .tasks import ChunkingTask, TimeChunkingTask, VectorStoreTask, VttParsingTask

logger = logging.getLogger(__name__)

Metadata = ContentMetadata | dict[str, Any] | None


class IndexingPipeline:
    """Orchestrate indexing: chunk -> build records -> submit in batches."""

    def __init__(
        self,
        settings: IndexingSettings,
        client: VectorStoreClient | None = None,
    ) -> None:
        """
        Initialize pipeline with a settings snapshot.

        Args:
            settings: Indexing settings for every run of this pipeline
            client: Vector store client; required only for process()
        """
        self._settings = settings
        self._chunking_task = ChunkingTask.from_settings(settings)
        self._vtt_parsing_task = VttParsingTask()
        self._time_chunking_task = TimeChunkingTask.from_settings(settings)
        self._vector_store_task = (
            VectorStoreTask.from_settings(client, settings) if client is not None else None
        )

    @staticmethod
    def resolve_kind(source: str, text: str, kind: ContentKind | None = None) -> ContentKind:
        """Use the given kind, or detect one from the source and text."""
        if kind is not None:
            return ContentKind(kind)
        has_transcript = text.lstrip("\ufeff \t\r\n").upper().startswith("WEBVTT")
        return detect_content_kind(source, has_transcript=has_transcript)

    def build_context(self, indexed_at: datetime | None = None) -> BuildContext:
        return BuildContext(
            site_identity=self._settings.site_identity,
            tenant=self._settings.tenant,
            indexed_by=self._settings.indexed_by,
            indexed_at=indexed_at or datetime.now(timezone.utc),
        )

    def chunk(self, content: RawContent) -> list[Chunk]:
        """
        Chunk raw content according to its kind.

        Video content is parsed as WebVTT and chunked by time; everything
        else is normalized text chunked by size.

        Args:
            content: Raw content

        Returns:
            list[Chunk]: Chunks in emission order (empty for empty text)

        Raises:
            MalformedFormatError: Video content that is not usable WebVTT
        """
        if content.content_kind is not ContentKind.VIDEO:
            return self._chunking_task.chunk(content.text, content.source)

        return self._time_chunking_task.chunk(self._parse_transcript(content), source=content.source)

    def _parse_transcript(self, content: RawContent) -> list[VttSegment]:
        segments = self._vtt_parsing_task.parse(content.text, source=content.source)
        if not segments:
            raise MalformedFormatError("VTT content contains no usable cues", source=content.source)
        return segments

    def build_records(
        self,
        chunks: list[Chunk],
        collection: str,
        kind: ContentKind,
        metadata: Metadata = None,
        context: BuildContext | None = None,
    ) -> tuple[list[ContentRecord], list[str]]:
        """
        Build a record for every chunk that passes validation.

        A rejected chunk is skipped and reported; its siblings are still built.

        Returns:
            tuple: Built records and "Chunk N: reason" messages for rejected chunks
        """
        builder = get_builder(kind, context or self.build_context())
        typed_metadata = builder.coerce_metadata(metadata)

        records: list[ContentRecord] = []
        errors: list[str] = []
        for chunk in chunks:
            try:
                records.append(builder.build(chunk, collection, typed_metadata))
            except ChunkValidationError as e:
                logger.warning(
                    f"{__name__}:build_records - Chunk rejected: {e.reason}",
                    extra={"source": chunk.source, "collection": collection, "chunk_index": chunk.chunk_index},
                )
                errors.append(f"Chunk {chunk.chunk_index}: {e.reason}")
        return records, errors

    def preview(self, content: RawContent, collection: str, metadata: Metadata = None) -> IndexingPreview:
        """
        Compute chunks and records without submitting anything.

        Raises:
            MalformedFormatError: Video content that is not usable WebVTT
        """
        chunking_stats = None
        transcript_stats = None
        if content.content_kind is ContentKind.VIDEO:
            segments = self._parse_transcript(content)
            chunks = self._time_chunking_task.chunk(segments, source=content.source)
            transcript_stats = self._vtt_parsing_task.get_statistics(segments)
        else:
            chunks = self._chunking_task.chunk(content.text, content.source)
            chunking_stats = self._chunking_task.get_chunking_stats(content.text)
        records, errors = self.build_records(chunks, collection, content.content_kind, metadata)
        warnings = self._chunking_task.configuration_warnings()

        return IndexingPreview(
            source=content.source,
            collection=collection,
            content_kind=content.content_kind,
            chunks=chunks,
            records=[record.to_data() for record in records],
            validation_errors=errors,
            chunking_stats=chunking_stats,
            transcript_stats=transcript_stats,
            warnings=warnings,
        )

    def process(self, content: RawContent, collection: str, metadata: Metadata = None) -> PipelineResult:
        """
        Process one source through the full pipeline.

        Args:
            content: Raw content with its source and kind
            collection: Collection to file records under
            metadata: Variant metadata for the content kind

        Returns:
            PipelineResult: Counts, validation errors and batch errors

        Raises:
            ValueError: When the pipeline was built without a vector store client
            MalformedFormatError: Video content that is not usable WebVTT
        """
        if self._vector_store_task is None:
            raise ValueError("A vector store client is required to submit records")
        if not collection:
            raise ValueError("collection cannot be empty")

        start_time = time.perf_counter()

        chunks = self.chunk(content)
        records, validation_errors = self.build_records(
            chunks, collection, content.content_kind, metadata
        )
        batch_result = self._vector_store_task.index_records(records, collection)

        elapsed_ms = (time.perf_counter() - start_time) * 1000

        logger.info(
            f"{__name__}:process - Indexed {batch_result.indexed_count}/{len(records)} records",
            extra={
                "source": content.source,
                "collection": collection,
                "content_kind": content.content_kind.value,
                "chunks": len(chunks),
                "elapsed_ms": round(elapsed_ms, 1),
            },
        )

        return PipelineResult(
            source=content.source,
            collection=collection,
            content_kind=content.content_kind,
            chunk_count=len(chunks),
            record_count=len(records),
            indexed_count=batch_result.indexed_count,
            validation_errors=validation_errors,
            submission_errors=batch_result.errors,
            processing_time_ms=elapsed_ms,
        )
