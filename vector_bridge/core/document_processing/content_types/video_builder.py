"""
Video transcript content builder.

Dependencies: vector_bridge.core.document_processing.tasks
System role: Shapes transcript chunks into video records
"""

import re

from ..models import (
    Chunk,
    ContentKind,
    ContentMetadata,
    VideoChunk,
    VideoMetadata,
    VideoRecord,
)
from ..tasks.vtt_parsing_task import format_timestamp
from .base import ContentBuilder
from .titles import clean_optional, filename_stem, first_meaningful_line, is_valid_url

VIDEO_CUE_PATTERN = re.compile(r"^\d{2}:\d{2}:\d{2}\.\d{3}\s*-->\s*\d{2}:\d{2}:\d{2}\.\d{3}$")
YOUTUBE_ID = re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/)([a-zA-Z0-9_-]+)")
VIMEO_ID = re.compile(r"vimeo\.com/(\d+)")


class VideoContentBuilder(ContentBuilder):
    """Builder for transcript chunks of a video."""

    kind = ContentKind.VIDEO
    record_class = VideoRecord
    metadata_class = VideoMetadata

    def _url_source(self, chunk: Chunk, metadata: ContentMetadata) -> str:
        if isinstance(metadata, VideoMetadata):
            return clean_optional(metadata.source_url) or chunk.source
        return super()._url_source(chunk, metadata)

    def validate(self, chunk: Chunk, metadata: ContentMetadata | None = None) -> None:
        metadata = self.coerce_metadata(metadata)
        if not chunk.content.strip():
            raise self._invalid(chunk, "transcript_content", "Video transcript content is required")

        url_source = self._url_source(chunk, metadata)
        if not url_source:
            raise self._invalid(chunk, "url_source", "Video URL source is required")
        if not is_valid_url(url_source):
            raise self._invalid(chunk, "url_source", "Invalid video URL format")

        if isinstance(chunk, VideoChunk) and not VIDEO_CUE_PATTERN.match(chunk.video_cue):
            raise self._invalid(chunk, "video_cue", "Invalid video cue timestamp format")

    def extract_title(self, chunk: Chunk, metadata: ContentMetadata | None = None) -> str:
        """
        Derive the video title.

        Order: explicit title, first content line of 10-100 chars, YouTube or
        Vimeo id from the URL, file name from the URL path, then a generic
        title carrying the cue.
        """
        metadata = self.coerce_metadata(metadata)
        title = clean_optional(metadata.title) or first_meaningful_line(chunk.content)
        if title:
            return title

        url_source = self._url_source(chunk, metadata)
        if url_source:
            youtube = YOUTUBE_ID.search(url_source)
            if youtube:
                return f"YouTube Video: {youtube.group(1)}"
            vimeo = VIMEO_ID.search(url_source)
            if vimeo:
                return f"Vimeo Video: {vimeo.group(1)}"
            stem = filename_stem(url_source)
            if stem:
                return stem

        cue = self._video_cue(chunk)
        return f"Video Transcript ({cue})" if cue else "Video Transcript"

    def _video_cue(self, chunk: Chunk) -> str | None:
        if not isinstance(chunk, VideoChunk):
            return None
        return chunk.video_cue or (
            f"{format_timestamp(chunk.start_time)} --> {format_timestamp(chunk.end_time)}"
        )

    def _build(self, chunk: Chunk, collection: str, metadata: VideoMetadata) -> VideoRecord:
        return VideoRecord(
            **self._envelope(chunk, self._url_source(chunk, metadata)),
            video_title=self.extract_title(chunk, metadata),
            transcript_content=chunk.content,
            video_cue=self._video_cue(chunk),
            duration=metadata.duration,
            speaker=clean_optional(metadata.speaker),
            video_file_url=clean_optional(metadata.video_file_url),
            description=clean_optional(metadata.description),
        )
