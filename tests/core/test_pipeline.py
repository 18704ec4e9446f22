"""Tests for the indexing pipeline orchestrator."""

from unittest.mock import patch

import pytest

from vector_bridge.core.document_processing import IndexingPipeline, generate_document_id
from vector_bridge.core.document_processing.models import ContentKind, RawContent
from vector_bridge.core.document_processing.tasks import VttParsingTask
from vector_bridge.core.exceptions import MalformedFormatError

BOM_TRANSCRIPT = "\ufeffWEBVTT\n\n00:00:01.000 --> 00:00:04.000\nHello world.\n"
PLAIN_NOTES = "Plain extracted notes about the lecture. Nothing timed here."


def _article(sentences: int) -> str:
    return " ".join(f"Paragraph {i} explains how chunks reach the index." for i in range(sentences))


@pytest.fixture
def pipeline(indexing_settings, mock_vector_store_client) -> IndexingPipeline:
    return IndexingPipeline(indexing_settings, client=mock_vector_store_client)


class TestResolveKind:
    """Test content kind resolution."""

    def test_explicit_kind_wins(self) -> None:
        """Should keep an explicitly requested kind."""
        kind = IndexingPipeline.resolve_kind("https://x.com/a.pdf", "text", ContentKind.GENERIC)
        assert kind is ContentKind.GENERIC

    def test_transcript_text_means_video(self) -> None:
        """Should detect WebVTT text even behind a BOM."""
        kind = IndexingPipeline.resolve_kind("https://x.com/page", "\ufeff\nWEBVTT\n\n...")
        assert kind is ContentKind.VIDEO

    def test_detects_from_source(self) -> None:
        """Should fall back to source-based detection."""
        assert IndexingPipeline.resolve_kind("https://x.com/page", "hello") is ContentKind.WEBPAGE


class TestProcess:
    """Test full pipeline runs."""

    def test_indexes_generic_text(self, pipeline, mock_vector_store_client) -> None:
        """Should chunk, build and submit every chunk."""
        result = pipeline.process(RawContent(text=_article(30), source="post-7"), "articles")

        assert result.chunk_count > 1
        assert result.record_count == result.chunk_count
        assert result.indexed_count == result.chunk_count
        assert result.validation_errors == []
        assert result.submission_errors == []
        assert result.processing_time_ms >= 0

        submitted = [doc for call in mock_vector_store_client.bulk_index.call_args_list for doc in call.args[0]]
        assert [doc.id for doc in submitted] == [
            generate_document_id("post-7", "articles", i) for i in range(result.chunk_count)
        ]
        assert submitted[0].data["site_identity"] == "https://site.example"
        assert submitted[0].data["tenant"] == "acme"

    def test_empty_text_indexes_nothing(self, pipeline, mock_vector_store_client) -> None:
        """Should finish with zero chunks for empty input."""
        result = pipeline.process(RawContent(text="   ", source="post-8"), "articles")

        assert result.chunk_count == 0
        assert result.indexed_count == 0
        mock_vector_store_client.bulk_index.assert_not_called()

    def test_rejected_chunks_are_reported(self, pipeline, mock_vector_store_client) -> None:
        """Should skip chunks failing validation and report each one."""
        content = RawContent(text="Short page body text.", source="not-a-url", content_kind=ContentKind.WEBPAGE)

        result = pipeline.process(content, "pages")

        assert result.chunk_count == 1
        assert result.record_count == 0
        assert result.validation_errors == ["Chunk 0: Invalid webpage URL format"]
        mock_vector_store_client.bulk_index.assert_not_called()

    def test_indexes_video_transcript(self, pipeline, sample_vtt, mock_vector_store_client) -> None:
        """Should parse and time-chunk transcripts."""
        content = RawContent(text=sample_vtt, source="captions/talk.vtt", content_kind=ContentKind.VIDEO)

        result = pipeline.process(
            content,
            "videos",
            {"video_url": "https://www.youtube.com/watch?v=abc123", "video_title": "Intro"},
        )

        assert result.content_kind is ContentKind.VIDEO
        assert result.chunk_count == 1
        assert result.indexed_count == 1
        document = mock_vector_store_client.bulk_index.call_args.args[0][0]
        assert document.data["video_title"] == "Intro"
        assert document.data["video_cue"] == "00:00:01.000 --> 00:00:12.500"
        assert document.data["source_origin"] == "captions/talk.vtt"

    def test_transcript_without_usable_cues_fails(self, pipeline) -> None:
        """Should fail the run when a transcript yields no segments."""
        content = RawContent(
            text="WEBVTT\n\n00:00:05.000 --> 00:00:01.000\nbackwards\n",
            source="talk.vtt",
            content_kind=ContentKind.VIDEO,
        )

        with pytest.raises(MalformedFormatError, match="VTT content contains no usable cues"):
            pipeline.process(content, "videos")

    def test_malformed_transcript_fails(self, pipeline) -> None:
        """Should propagate parse failures."""
        content = RawContent(text="not a transcript", source="talk.vtt", content_kind=ContentKind.VIDEO)

        with pytest.raises(MalformedFormatError):
            pipeline.process(content, "videos")

    def test_detected_transcript_behind_bom_is_indexed(self, pipeline) -> None:
        """Should index WebVTT text that was detected as video despite a BOM."""
        source = "https://x.com/v"
        kind = IndexingPipeline.resolve_kind(source, BOM_TRANSCRIPT)

        result = pipeline.process(RawContent(text=BOM_TRANSCRIPT, source=source, content_kind=kind), "videos")

        assert result.content_kind is ContentKind.VIDEO
        assert result.chunk_count == 1
        assert result.indexed_count == 1

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("https://cdn.example.com/lecture.mp4", ContentKind.WEBPAGE),
            ("talk.srt", ContentKind.GENERIC),
            ("talk.vtt", ContentKind.GENERIC),
        ],
    )
    def test_plain_text_from_media_sources_is_indexed_as_text(self, pipeline, source, expected) -> None:
        """Should index non-WebVTT text as text whatever the source suffix."""
        kind = IndexingPipeline.resolve_kind(source, PLAIN_NOTES)

        result = pipeline.process(RawContent(text=PLAIN_NOTES, source=source, content_kind=kind), "notes")

        assert kind is expected
        assert result.chunk_count == 1
        assert result.indexed_count == 1
        assert result.validation_errors == []

    def test_requires_client(self, indexing_settings) -> None:
        """Should refuse to submit without a client."""
        with pytest.raises(ValueError):
            IndexingPipeline(indexing_settings).process(RawContent(text="x", source="s"), "c")

    def test_requires_collection(self, pipeline) -> None:
        """Should refuse an empty collection."""
        with pytest.raises(ValueError):
            pipeline.process(RawContent(text="x", source="s"), "")


class TestPreview:
    """Test dry runs."""

    def test_text_preview(self, indexing_settings) -> None:
        """Should return chunks, records and size estimates without a client."""
        preview = IndexingPipeline(indexing_settings).preview(
            RawContent(text=_article(30), source="post-9"), "articles"
        )

        assert len(preview.chunks) == len(preview.records) > 1
        assert preview.records[0]["post_type"] == "articles"
        assert preview.chunking_stats is not None
        assert preview.chunking_stats.target_chars_per_chunk == 400
        assert preview.transcript_stats is None

    def test_transcript_preview(self, indexing_settings, sample_vtt) -> None:
        """Should include transcript statistics for video content."""
        preview = IndexingPipeline(indexing_settings).preview(
            RawContent(text=sample_vtt, source="https://vimeo.com/42", content_kind=ContentKind.VIDEO),
            "videos",
        )

        assert preview.transcript_stats is not None
        assert preview.transcript_stats.speakers == ["Alice", "Bob"]
        assert preview.chunking_stats is None
        assert preview.records[0]["url_source"] == "https://vimeo.com/42"

    def test_transcript_preview_parses_once(self, indexing_settings, sample_vtt) -> None:
        """Should reuse the parsed segments for chunks and statistics."""
        content = RawContent(text=sample_vtt, source="https://vimeo.com/42", content_kind=ContentKind.VIDEO)

        with patch.object(
            VttParsingTask, "parse", autospec=True, side_effect=VttParsingTask.parse
        ) as mock_parse:
            preview = IndexingPipeline(indexing_settings).preview(content, "videos")

        assert mock_parse.call_count == 1
        assert len(preview.chunks) == 1
        assert preview.transcript_stats.total_segments == 3
