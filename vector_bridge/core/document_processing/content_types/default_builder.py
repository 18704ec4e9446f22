"""
Generic content builder.

Emits the legacy flat post schema so records indexed before typed schemas
existed keep their shape.

Dependencies: pydantic
System role: Fallback builder for content of no specific kind
"""

from ..models import Chunk, ContentKind, ContentMetadata, GenericMetadata, GenericRecord
from .base import ContentBuilder
from .titles import clean_optional

MAX_FIRST_LINE_TITLE = 100
EXCERPT_TITLE_CHARS = 50


class DefaultContentBuilder(ContentBuilder):
    """Builder for the generic post schema."""

    kind = ContentKind.GENERIC
    record_class = GenericRecord
    metadata_class = GenericMetadata

    def validate(self, chunk: Chunk, metadata: ContentMetadata | None = None) -> None:
        if not chunk.content.strip():
            raise self._invalid(chunk, "post_content", "Content is required")

    def extract_title(self, chunk: Chunk, metadata: ContentMetadata | None = None) -> str:
        metadata = self.coerce_metadata(metadata)
        title = clean_optional(metadata.title)
        if title:
            return title

        first_line = chunk.content.strip().split("\n")[0].strip()
        if first_line and len(first_line) < MAX_FIRST_LINE_TITLE:
            return first_line
        return chunk.content[:EXCERPT_TITLE_CHARS] + "..."

    def _build(self, chunk: Chunk, collection: str, metadata: GenericMetadata) -> GenericRecord:
        tags = [tag.strip() for tag in metadata.post_tags if tag.strip()]
        return GenericRecord(
            **self._envelope(chunk, self._url_source(chunk, metadata) or None),
            post_title=self.extract_title(chunk, metadata),
            post_content=chunk.content,
            post_type=collection,
            post_date=self.context.indexed_at,
            post_excerpt=clean_optional(metadata.post_excerpt),
            post_author=clean_optional(metadata.post_author),
            post_category=clean_optional(metadata.post_category),
            post_tags=tags or None,
        )
