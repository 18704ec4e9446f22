"""
Raw content model and content-kind enumeration.

Dependencies: pydantic
System role: Input handed over by the extraction collaborator
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ContentKind(str, Enum):
    """Closed set of record schemas a chunk can be shaped into."""

    VIDEO = "video"
    DOCUMENT = "document"
    WEBPAGE = "webpage"
    GENERIC = "generic"


class RawContent(BaseModel):
    """Extracted text plus the source it came from."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(description="Extracted text, or raw WebVTT for video content")
    source: str = Field(description="URL or path the text was extracted from")
    content_kind: ContentKind = Field(
        default=ContentKind.GENERIC,
        description="Schema variant the chunks are built into",
    )
