"""
Time-based transcript chunking task.

Groups consecutive WebVTT segments into chunks bounded by elapsed time
and text length, seeding each chunk with the trailing segments of the
previous one for temporal overlap.

Dependencies: vector_bridge.configs
System role: Second stage of the video transcript pipeline
"""

from vector_bridge.configs.indexing import TOKENS_PER_CHAR, IndexingSettings

from ..models import VideoChunk, VttSegment


class TimeChunkingTask:
    """Assemble transcript segments into duration- and size-bounded chunks."""

    def __init__(
        self,
        chunk_duration_seconds: float = 60.0,
        max_chunk_chars: int = 1000,
        overlap_duration_seconds: float = 5.0,
    ) -> None:
        """
        Initialize time chunking with its bounds.

        Args:
            chunk_duration_seconds: Start-to-start span that closes a chunk
            max_chunk_chars: Text length that closes a chunk
            overlap_duration_seconds: Trailing time carried into the next chunk

        Raises:
            ValueError: When a bound is not positive or the overlap is negative
        """
        if chunk_duration_seconds <= 0:
            raise ValueError("chunk_duration_seconds must be positive")
        if max_chunk_chars <= 0:
            raise ValueError("max_chunk_chars must be positive")
        if overlap_duration_seconds < 0:
            raise ValueError("overlap_duration_seconds cannot be negative")

        self.chunk_duration_seconds = chunk_duration_seconds
        self.max_chunk_chars = max_chunk_chars
        self.overlap_duration_seconds = overlap_duration_seconds

    @classmethod
    def from_settings(cls, settings: IndexingSettings) -> "TimeChunkingTask":
        return cls(
            chunk_duration_seconds=settings.chunk_duration_seconds,
            max_chunk_chars=settings.max_chunk_chars,
            overlap_duration_seconds=settings.overlap_duration_seconds,
        )

    def chunk(self, segments: list[VttSegment], source: str = "") -> list[VideoChunk]:
        """
        Group segments into video chunks.

        A chunk closes before a segment whose start is at least
        chunk_duration_seconds after the chunk start, or whose text would
        take the chunk to max_chunk_chars or more.

        Args:
            segments: Parsed segments in order of appearance
            source: Source identifier copied onto every chunk

        Returns:
            list[VideoChunk]: Chunks in emission order
        """
        groups: list[list[VttSegment]] = []
        current: list[VttSegment] = []
        current_start: float | None = None

        for segment in segments:
            if current_start is None:
                current_start = segment.start_time

            elapsed = segment.start_time - current_start
            projected = len(self._join(current + [segment]))
            if current and (
                elapsed >= self.chunk_duration_seconds or projected >= self.max_chunk_chars
            ):
                groups.append(current)
                current = self._overlap_segments(current)
                current_start = segment.start_time

            current = current + [segment]

        if current:
            groups.append(current)

        return [self._build_chunk(group, source, index) for index, group in enumerate(groups)]

    def _overlap_segments(self, segments: list[VttSegment]) -> list[VttSegment]:
        if not segments or self.overlap_duration_seconds <= 0:
            return []

        cutoff = segments[-1].end_time - self.overlap_duration_seconds
        overlap: list[VttSegment] = []
        for segment in reversed(segments):
            if segment.start_time < cutoff:
                break
            overlap.insert(0, segment)
        return overlap

    @staticmethod
    def _join(segments: list[VttSegment]) -> str:
        return " ".join(segment.text for segment in segments)

    def _build_chunk(self, segments: list[VttSegment], source: str, index: int) -> VideoChunk:
        first, last = segments[0], segments[-1]
        content = self._join(segments).strip()
        return VideoChunk(
            content=content,
            source=source,
            chunk_index=index,
            character_count=len(content),
            estimated_token_count=int(len(content) * TOKENS_PER_CHAR),
            start_time=first.start_time,
            end_time=last.end_time,
            video_cue=f"{first.start_formatted} --> {last.end_formatted}",
            segment_count=len(segments),
        )
