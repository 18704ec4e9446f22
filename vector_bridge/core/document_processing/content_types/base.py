"""
Content builder contract.

A builder validates a chunk against its variant's rules, derives a title
and shapes the chunk into a typed record. Builders are pure given the
chunk, the collection, the metadata and the run's build context.

Dependencies: pydantic
System role: Base class for the four content-type builders
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from vector_bridge.core.exceptions import ChunkValidationError

from ..models import BuildContext, Chunk, ContentKind, ContentMetadata, ContentRecord
from .titles import clean_optional


class ContentBuilder(ABC):
    """Shape chunks of one content kind into records."""

    kind: ClassVar[ContentKind]
    record_class: ClassVar[type[ContentRecord]]
    metadata_class: ClassVar[type[ContentMetadata]]

    def __init__(self, context: BuildContext) -> None:
        self._context = context

    @property
    def context(self) -> BuildContext:
        return self._context

    def required_fields(self) -> frozenset[str]:
        return self.record_class.required_fields

    def optional_fields(self) -> frozenset[str]:
        return self.record_class.optional_fields

    def coerce_metadata(self, metadata: ContentMetadata | dict[str, Any] | None) -> ContentMetadata:
        """
        Convert metadata into this builder's metadata model.

        Args:
            metadata: Typed metadata, a plain mapping, or None

        Returns:
            ContentMetadata: Instance of metadata_class
        """
        if metadata is None:
            return self.metadata_class()
        if isinstance(metadata, self.metadata_class):
            return metadata
        if isinstance(metadata, ContentMetadata):
            metadata = metadata.model_dump(exclude_none=True)
        return self.metadata_class.model_validate(metadata)

    def build(
        self,
        chunk: Chunk,
        collection: str,
        metadata: ContentMetadata | dict[str, Any] | None = None,
    ) -> ContentRecord:
        """
        Validate a chunk and build its record.

        Args:
            chunk: Chunk to shape
            collection: Collection the record is filed under
            metadata: Variant metadata

        Returns:
            ContentRecord: Record of this builder's variant

        Raises:
            ChunkValidationError: When the chunk fails this variant's rules
        """
        typed = self.coerce_metadata(metadata)
        self.validate(chunk, typed)
        return self._build(chunk, collection, typed)

    @abstractmethod
    def validate(self, chunk: Chunk, metadata: ContentMetadata | None = None) -> None:
        """Raise ChunkValidationError when the chunk cannot be built."""

    @abstractmethod
    def extract_title(self, chunk: Chunk, metadata: ContentMetadata | None = None) -> str:
        """Derive the record title."""

    @abstractmethod
    def _build(self, chunk: Chunk, collection: str, metadata: ContentMetadata) -> ContentRecord:
        ...

    def _url_source(self, chunk: Chunk, metadata: ContentMetadata) -> str:
        return clean_optional(metadata.url_source) or chunk.source

    def _envelope(self, chunk: Chunk, url_source: str | None) -> dict[str, Any]:
        return {
            "url_source": url_source,
            "source_origin": chunk.source,
            "chunk_index": chunk.chunk_index,
            "indexed_by": self._context.indexed_by,
            "site_identity": self._context.site_identity,
            "tenant": self._context.tenant,
            "indexed_at": self._context.indexed_at,
        }

    def _invalid(self, chunk: Chunk, field: str, reason: str) -> ChunkValidationError:
        return ChunkValidationError(
            field=field,
            reason=reason,
            source=chunk.source or None,
            chunk_index=chunk.chunk_index,
            details={"content_kind": self.kind.value},
        )
