"""
Document content builder.

Dependencies: pydantic
System role: Shapes chunks of extracted documents into document records
"""

import re
from pathlib import PurePosixPath
from urllib.parse import urlparse

from ..models import Chunk, ContentKind, ContentMetadata, DocumentMetadata, DocumentRecord
from .base import ContentBuilder
from .titles import clean_optional, filename_stem, first_meaningful_line, markdown_heading, ucwords

# Numbered list items, bare dates/numbers, page markers
NOISE_LINE = re.compile(r"^\d+[.)]\s|^[\d\-/\s:]+$|^page\s+\d+", re.IGNORECASE)


class DocumentContentBuilder(ContentBuilder):
    """Builder for chunks of PDF, Word, text and markdown documents."""

    kind = ContentKind.DOCUMENT
    record_class = DocumentRecord
    metadata_class = DocumentMetadata

    def validate(self, chunk: Chunk, metadata: ContentMetadata | None = None) -> None:
        metadata = self.coerce_metadata(metadata)
        if not chunk.content.strip():
            raise self._invalid(chunk, "document_content", "Document content is required")
        if not self._url_source(chunk, metadata):
            raise self._invalid(chunk, "url_source", "Document URL source is required")

        if isinstance(metadata, DocumentMetadata):
            if metadata.file_size is not None and metadata.file_size < 0:
                raise self._invalid(chunk, "file_size", "Invalid file size")
            if metadata.page_count is not None and metadata.page_count < 0:
                raise self._invalid(chunk, "page_count", "Invalid page count")

    def extract_title(self, chunk: Chunk, metadata: ContentMetadata | None = None) -> str:
        metadata = self.coerce_metadata(metadata)
        title = (
            clean_optional(metadata.title)
            or markdown_heading(chunk.content)
            or first_meaningful_line(chunk.content, skip=NOISE_LINE)
        )
        if title:
            return title

        url_source = self._url_source(chunk, metadata)
        stem = filename_stem(url_source) if url_source else None
        if stem:
            return ucwords(stem.replace("_", " ").replace("-", " "))

        return f"Document (Part {chunk.chunk_index + 1})"

    @staticmethod
    def file_extension(source: str) -> str | None:
        """Lowercased suffix of the source path without the dot."""
        if not source:
            return None
        suffix = PurePosixPath(urlparse(source).path or source).suffix
        return suffix[1:].lower() or None

    def _build(self, chunk: Chunk, collection: str, metadata: DocumentMetadata) -> DocumentRecord:
        return DocumentRecord(
            **self._envelope(chunk, self._url_source(chunk, metadata)),
            document_title=self.extract_title(chunk, metadata),
            document_content=chunk.content,
            file_size=metadata.file_size,
            page_count=metadata.page_count,
            author=clean_optional(metadata.author),
            creation_date=clean_optional(metadata.creation_date),
            file_type=clean_optional(metadata.file_type),
            description=clean_optional(metadata.description),
            file_extension=self.file_extension(chunk.source),
        )
