"""
Chunk domain models for the chunking pipeline.

Represents a contiguous slice of normalized content sized for embedding,
and its transcript variant carrying a time range.

Dependencies: pydantic
System role: Data structure passed from chunking to content builders
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Chunk(BaseModel):
    """Text chunk with its position in the source."""

    model_config = ConfigDict(frozen=True)

    content: str = Field(description="Chunk text content")
    source: str = Field(default="", description="Source identifier the chunk was cut from")
    chunk_index: int = Field(ge=0, description="0-based position in emission order")
    character_count: int = Field(ge=0, description="Length of content in characters")
    estimated_token_count: int = Field(ge=0, description="Token estimate at 0.25 tokens per character")
    created_at: datetime = Field(default_factory=_utc_now, description="Creation timestamp (UTC)")


class VideoChunk(Chunk):
    """Transcript chunk spanning a range of WebVTT cues."""

    start_time: float = Field(ge=0, description="Start of the first cue in seconds")
    end_time: float = Field(ge=0, description="End of the last cue in seconds")
    video_cue: str = Field(description="Time range as '<start> --> <end>' WebVTT timestamps")
    segment_count: int = Field(ge=1, description="Number of cues merged into the chunk")

    @property
    def duration(self) -> float:
        """Seconds covered by the chunk."""
        return self.end_time - self.start_time
