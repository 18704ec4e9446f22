"""Tests for time-based transcript chunking."""

import pytest

from vector_bridge.core.document_processing.models import VttSegment
from vector_bridge.core.document_processing.tasks import TimeChunkingTask, format_timestamp


def _segment(start: float, end: float, text: str) -> VttSegment:
    return VttSegment(
        start_time=start,
        end_time=end,
        start_formatted=format_timestamp(start),
        end_formatted=format_timestamp(end),
        text=text,
    )


class TestTimeChunkingTaskInit:
    """Test time chunking bounds."""

    @pytest.mark.parametrize(
        ("duration", "max_chars", "overlap"),
        [(0, 1000, 5), (60, 0, 5), (60, 1000, -1)],
    )
    def test_rejects_invalid_bounds(self, duration, max_chars, overlap) -> None:
        """Should raise ValueError for non-positive bounds or negative overlap."""
        with pytest.raises(ValueError):
            TimeChunkingTask(duration, max_chars, overlap)

    def test_from_settings(self, indexing_settings) -> None:
        """Should copy transcript bounds from settings."""
        task = TimeChunkingTask.from_settings(indexing_settings)
        assert task.chunk_duration_seconds == 60.0
        assert task.max_chunk_chars == 1000
        assert task.overlap_duration_seconds == 5.0


class TestTimeChunk:
    """Test segment grouping."""

    def test_no_segments_returns_no_chunks(self) -> None:
        """Should return an empty list for no segments."""
        assert TimeChunkingTask().chunk([]) == []

    def test_closes_chunk_on_duration_and_seeds_overlap(self) -> None:
        """Should close at the duration bound and carry trailing segments."""
        segments = [_segment(start, start + 4, f"s{i}") for i, start in enumerate([0, 4, 8, 12, 16])]
        chunks = TimeChunkingTask(10, 1000, 4).chunk(segments, source="talk.vtt")

        assert len(chunks) == 2
        assert chunks[0].content == "s0 s1 s2"
        assert chunks[0].video_cue == "00:00:00.000 --> 00:00:12.000"
        assert chunks[0].segment_count == 3
        assert chunks[1].content == "s2 s3 s4"
        assert chunks[1].start_time == 8
        assert chunks[1].end_time == 20
        assert chunks[1].chunk_index == 1
        assert chunks[1].source == "talk.vtt"

    def test_closes_chunk_on_length(self) -> None:
        """Should close before a segment that would reach max_chunk_chars."""
        segments = [_segment(i * 2, i * 2 + 1, "abcdefghi") for i in range(4)]
        chunks = TimeChunkingTask(600, 20, 0).chunk(segments)

        assert [chunk.segment_count for chunk in chunks] == [2, 2]
        assert all(chunk.character_count < 20 for chunk in chunks)

    def test_zero_overlap_uses_each_segment_once(self) -> None:
        """Should not repeat segments when overlap is zero."""
        segments = [_segment(i * 10, i * 10 + 9, f"cue {i}") for i in range(12)]
        chunks = TimeChunkingTask(30, 1000, 0).chunk(segments)

        assert sum(chunk.segment_count for chunk in chunks) == len(segments)
        assert all(chunk.end_time > chunk.start_time for chunk in chunks)

    def test_single_segment_is_one_chunk(self) -> None:
        """Should emit one chunk for one segment."""
        chunks = TimeChunkingTask().chunk([_segment(1.5, 3.25, "only cue")])

        assert len(chunks) == 1
        assert chunks[0].video_cue == "00:00:01.500 --> 00:00:03.250"
        assert chunks[0].duration == pytest.approx(1.75)
