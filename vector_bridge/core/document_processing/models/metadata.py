"""
Typed per-variant metadata and the build context.

Metadata arrives from the extraction collaborator alongside the text.
Every optional field is explicit; builders never look up free-form keys.

Dependencies: pydantic
System role: Inputs to content-type builders
"""

from datetime import datetime, timezone

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ContentMetadata(BaseModel):
    """Fields shared by every content kind."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    title: str | None = Field(
        default=None,
        validation_alias=AliasChoices("title", "video_title", "document_title", "post_title"),
        description="Explicit title, wins over derivation",
    )
    url_source: str | None = Field(
        default=None,
        description="Canonical URL of the content (defaults to the chunk source)",
    )
    description: str | None = None


class VideoMetadata(ContentMetadata):
    """Metadata accompanying a WebVTT transcript."""

    video_url: str | None = Field(default=None, description="Page URL of the video")
    video_file_url: str | None = Field(default=None, description="Direct media file URL")
    speaker: str | None = None
    duration: int | None = Field(default=None, description="Video length in seconds")

    @property
    def source_url(self) -> str | None:
        return self.url_source or self.video_url


class DocumentMetadata(ContentMetadata):
    """Metadata accompanying an extracted document."""

    file_size: int | None = Field(default=None, description="File size in bytes")
    page_count: int | None = None
    author: str | None = None
    creation_date: str | None = None
    file_type: str | None = Field(default=None, description="MIME type or format name")


class WebpageMetadata(ContentMetadata):
    """Metadata accompanying a fetched web page."""

    meta_description: str | None = None
    publish_date: str | None = None
    author: str | None = None
    site_name: str | None = None
    language: str | None = None


class GenericMetadata(ContentMetadata):
    """Metadata for the legacy flat post schema."""

    post_excerpt: str | None = None
    post_author: str | None = None
    post_category: str | None = None
    post_tags: list[str] = Field(default_factory=list)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class BuildContext(BaseModel):
    """Read-only run context stamped into every record envelope."""

    model_config = ConfigDict(frozen=True)

    site_identity: str = Field(description="Origin site of the indexer")
    tenant: str = Field(default="", description="Opaque tenant tag")
    indexed_by: str = Field(default="vector-bridge", description="Indexer tag")
    indexed_at: datetime = Field(default_factory=_utc_now, description="Run timestamp (UTC)")
