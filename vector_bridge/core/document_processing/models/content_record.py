"""
Schema-shaped records produced by the content-type builders.

Each variant carries its own required field set on top of a shared
envelope. Records are flattened into the `data` object of a bulk-index
document; absent optional fields are omitted, never sent as null.

Dependencies: pydantic
System role: Output of content builders, input to submission
"""

from datetime import datetime
from typing import Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field

from .raw_content import ContentKind


class ContentRecord(BaseModel):
    """Envelope shared by every record variant."""

    model_config = ConfigDict(frozen=True)

    required_fields: ClassVar[frozenset[str]] = frozenset()
    optional_fields: ClassVar[frozenset[str]] = frozenset()

    content_kind: ContentKind
    url_source: str | None = None
    source_origin: str = Field(description="Source the chunk was cut from (document id input)")
    chunk_index: int = Field(ge=0)
    indexed_by: str
    site_identity: str
    tenant: str = ""
    indexed_at: datetime

    def to_data(self) -> dict[str, Any]:
        """Flatten into the JSON object sent as a document's `data`."""
        return self.model_dump(mode="json", exclude_none=True)


class VideoRecord(ContentRecord):
    """Transcript chunk of a video."""

    required_fields: ClassVar[frozenset[str]] = frozenset(
        {"video_title", "transcript_content", "url_source"}
    )
    optional_fields: ClassVar[frozenset[str]] = frozenset(
        {"video_cue", "duration", "speaker", "video_file_url", "description"}
    )

    content_kind: Literal[ContentKind.VIDEO] = ContentKind.VIDEO
    url_source: str
    video_title: str
    transcript_content: str
    video_cue: str | None = None
    duration: int | None = None
    speaker: str | None = None
    video_file_url: str | None = None
    description: str | None = None


class DocumentRecord(ContentRecord):
    """Chunk of an uploaded or linked document."""

    required_fields: ClassVar[frozenset[str]] = frozenset(
        {"document_title", "document_content", "url_source"}
    )
    optional_fields: ClassVar[frozenset[str]] = frozenset(
        {
            "file_size",
            "page_count",
            "author",
            "creation_date",
            "file_type",
            "description",
            "file_extension",
        }
    )

    content_kind: Literal[ContentKind.DOCUMENT] = ContentKind.DOCUMENT
    url_source: str
    document_title: str
    document_content: str
    file_size: int | None = None
    page_count: int | None = None
    author: str | None = None
    creation_date: str | None = None
    file_type: str | None = None
    description: str | None = None
    file_extension: str | None = None


class WebpageRecord(ContentRecord):
    """Chunk of a fetched web page."""

    required_fields: ClassVar[frozenset[str]] = frozenset(
        {"post_title", "post_content", "url_source"}
    )
    optional_fields: ClassVar[frozenset[str]] = frozenset(
        {"meta_description", "publish_date", "author", "site_name", "language", "domain"}
    )

    content_kind: Literal[ContentKind.WEBPAGE] = ContentKind.WEBPAGE
    url_source: str
    post_title: str
    post_content: str
    meta_description: str | None = None
    publish_date: str | None = None
    author: str | None = None
    site_name: str | None = None
    language: str | None = None
    domain: str | None = None


class GenericRecord(ContentRecord):
    """Legacy flat post schema kept for records indexed before typed schemas."""

    required_fields: ClassVar[frozenset[str]] = frozenset({"post_title", "post_content"})
    optional_fields: ClassVar[frozenset[str]] = frozenset(
        {
            "post_status",
            "post_date",
            "post_excerpt",
            "post_author",
            "post_category",
            "post_tags",
            "url_source",
        }
    )

    content_kind: Literal[ContentKind.GENERIC] = ContentKind.GENERIC
    post_title: str
    post_content: str
    post_type: str = Field(description="Collection name the post is filed under")
    post_status: str = "publish"
    post_date: datetime
    post_excerpt: str | None = None
    post_author: str | None = None
    post_category: str | None = None
    post_tags: list[str] | None = None
