"""
WebVTT transcript parsing task.

Validates WebVTT structure and turns cue blocks into timestamped segments
with cleaned text. Malformed cue blocks are skipped; only content that is
not WebVTT at all fails the parse.

Dependencies: vector_bridge.core.exceptions
System role: First stage of the video transcript pipeline
"""

import logging
import re
from pathlib import Path

from vector_bridge.core.exceptions import MalformedFormatError

from ..models import VttSegment, VttStatistics, VttTimestamp

logger = logging.getLogger(__name__)

TIMESTAMP_PATTERN = re.compile(r"(\d{2}:\d{2}:\d{2}\.\d{3})\s*-->\s*(\d{2}:\d{2}:\d{2}\.\d{3})")
_TIMESTAMP_PARTS = re.compile(r"(\d{2}):(\d{2}):(\d{2})\.(\d{3})")

_HEADER = re.compile(r"^WEBVTT", re.IGNORECASE)
_SKIPPED_BLOCK = re.compile(r"^(WEBVTT|NOTE)", re.IGNORECASE)
_LINE_ENDINGS = re.compile(r"\r\n?")
_BLOCK_SEPARATOR = re.compile(r"\n\s*\n")

_CUE_SETTINGS = re.compile(r"\s+align:\w+|\s+position:\d+%|\s+size:\d+%")
_VOICE_TAG = re.compile(r"<v(?:\.[\w.-]+)?\s+([^>]+)>")
_TAGS = re.compile(r"<[^>]+>")
_SPEAKER_LABEL = re.compile(r"^([A-Za-z\s]+):\s*")
_WHITESPACE = re.compile(r"\s+")


def parse_timestamp(timestamp: str) -> float:
    """
    Convert an HH:MM:SS.mmm timestamp to seconds.

    Args:
        timestamp: WebVTT timestamp

    Returns:
        float: Seconds, 0.0 when the timestamp does not match
    """
    match = _TIMESTAMP_PARTS.search(timestamp)
    if match is None:
        return 0.0
    hours, minutes, seconds, millis = (int(part) for part in match.groups())
    return hours * 3600 + minutes * 60 + seconds + millis / 1000


def format_timestamp(seconds: float) -> str:
    """Format seconds as an HH:MM:SS.mmm WebVTT timestamp."""
    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    secs = seconds % 60
    return f"{hours:02d}:{minutes:02d}:{secs:06.3f}"


class VttParsingTask:
    """Parse WebVTT content into ordered transcript segments."""

    def validate_format(self, content: str) -> bool:
        """Whether content starts with WEBVTT and has at least one timestamp line."""
        if not _HEADER.match(content.lstrip("\ufeff").strip()):
            return False
        return TIMESTAMP_PATTERN.search(content) is not None

    def parse(self, content: str, source: str | None = None) -> list[VttSegment]:
        """
        Parse WebVTT content into segments.

        Args:
            content: Raw WebVTT text
            source: Source identifier used for error context

        Returns:
            list[VttSegment]: Segments in order of appearance

        Raises:
            MalformedFormatError: When content is empty or not WebVTT
        """
        if not content or not content.strip():
            raise MalformedFormatError("VTT content is empty", source=source)
        content = content.lstrip("\ufeff")
        if not self.validate_format(content):
            raise MalformedFormatError("Invalid VTT format", source=source)

        content = _LINE_ENDINGS.sub("\n", content)

        segments: list[VttSegment] = []
        skipped = 0
        for block in _BLOCK_SEPARATOR.split(content):
            block = block.strip()
            if not block or _SKIPPED_BLOCK.match(block):
                continue

            segment = self._parse_block(block)
            if segment is None:
                skipped += 1
                continue
            segments.append(segment)

        if skipped:
            logger.warning(
                f"{__name__}:parse - Skipped {skipped} malformed cue blocks",
                extra={"source": source, "segments": len(segments)},
            )
        return segments

    def parse_file(self, path: str | Path) -> list[VttSegment]:
        """
        Read and parse a WebVTT file.

        Args:
            path: Path to a .vtt file

        Returns:
            list[VttSegment]: Parsed segments

        Raises:
            MalformedFormatError: When the file is missing, unreadable or not WebVTT
        """
        file_path = Path(path)
        if not file_path.is_file():
            raise MalformedFormatError("VTT file not found", source=str(file_path))
        try:
            content = file_path.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            raise MalformedFormatError(f"Failed to read VTT file: {e}", source=str(file_path)) from e

        return self.parse(content, source=str(file_path))

    def _parse_block(self, block: str) -> VttSegment | None:
        lines = [line.strip() for line in block.split("\n")]
        lines = [line for line in lines if line]
        if len(lines) < 2:
            return None

        cue_id = None
        if not TIMESTAMP_PATTERN.search(lines[0]):
            cue_id = lines.pop(0)

        match = TIMESTAMP_PATTERN.search(lines[0]) if lines else None
        if match is None:
            return None

        start_time = parse_timestamp(match.group(1))
        end_time = parse_timestamp(match.group(2))
        if end_time <= start_time:
            return None

        text, speaker = self._clean_text(" ".join(lines[1:]))
        if not text:
            return None

        return VttSegment(
            cue_id=cue_id,
            start_time=start_time,
            end_time=end_time,
            start_formatted=match.group(1),
            end_formatted=match.group(2),
            text=text,
            speaker=speaker,
        )

    def _clean_text(self, text: str) -> tuple[str, str | None]:
        """Strip cue settings, tags and a speaker label; return text and speaker."""
        speaker = None
        voice = _VOICE_TAG.search(text)
        if voice:
            speaker = voice.group(1).strip()

        text = _CUE_SETTINGS.sub("", text)
        text = _TAGS.sub("", text)

        label = _SPEAKER_LABEL.match(text)
        if label:
            speaker = speaker or label.group(1).strip() or None
            text = text[label.end():]

        return _WHITESPACE.sub(" ", text).strip(), speaker

    def extract_timestamps(self, content: str) -> list[VttTimestamp]:
        """Return every timestamp line in content, in order."""
        return [
            VttTimestamp(
                start=parse_timestamp(match.group(1)),
                end=parse_timestamp(match.group(2)),
                start_formatted=match.group(1),
                end_formatted=match.group(2),
                cue=match.group(0),
            )
            for match in TIMESTAMP_PATTERN.finditer(content)
        ]

    def extract_speakers(self, segments: list[VttSegment]) -> list[str]:
        """Distinct speakers in order of first appearance."""
        speakers: list[str] = []
        for segment in segments:
            if segment.speaker and segment.speaker not in speakers:
                speakers.append(segment.speaker)
        return speakers

    def get_statistics(self, segments: list[VttSegment]) -> VttStatistics:
        """
        Summarize a parsed transcript.

        Args:
            segments: Parsed segments

        Returns:
            VttStatistics: Totals, averages and speakers
        """
        if not segments:
            return VttStatistics()

        total_duration = sum(segment.duration for segment in segments)
        total_words = sum(len(segment.text.split()) for segment in segments)
        return VttStatistics(
            total_segments=len(segments),
            total_duration=total_duration,
            total_words=total_words,
            average_segment_duration=total_duration / len(segments),
            words_per_minute=total_words / (total_duration / 60) if total_duration > 0 else 0.0,
            speakers=self.extract_speakers(segments),
        )
