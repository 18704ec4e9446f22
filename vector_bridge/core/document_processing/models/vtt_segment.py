"""
WebVTT segment models.

Dependencies: pydantic
System role: Output of transcript parsing, input to time-based chunking
"""

from pydantic import BaseModel, ConfigDict, Field


class VttSegment(BaseModel):
    """One parsed cue with cleaned text."""

    model_config = ConfigDict(frozen=True)

    cue_id: str | None = Field(default=None, description="Optional cue identifier line")
    start_time: float = Field(ge=0, description="Cue start in seconds")
    end_time: float = Field(ge=0, description="Cue end in seconds")
    start_formatted: str = Field(description="Cue start as HH:MM:SS.mmm")
    end_formatted: str = Field(description="Cue end as HH:MM:SS.mmm")
    text: str = Field(description="Cue text with settings, tags and speaker label stripped")
    speaker: str | None = Field(default=None, description="Speaker from a voice tag or label")

    @property
    def duration(self) -> float:
        return self.end_time - self.start_time


class VttTimestamp(BaseModel):
    """A timestamp line found anywhere in WebVTT content."""

    model_config = ConfigDict(frozen=True)

    start: float
    end: float
    start_formatted: str
    end_formatted: str
    cue: str


class VttStatistics(BaseModel):
    """Aggregate figures for a parsed transcript."""

    model_config = ConfigDict(frozen=True)

    total_segments: int = 0
    total_duration: float = 0.0
    total_words: int = 0
    average_segment_duration: float = 0.0
    words_per_minute: float = 0.0
    speakers: list[str] = Field(default_factory=list)
