"""
Text chunking task.

Splits normalized text into target-sized chunks on sentence boundaries
with trailing overlap, falling back to word boundaries when a sentence
chunk comes out oversized.

Dependencies: vector_bridge.configs
System role: Second stage of the text indexing pipeline
"""

import logging
import math
from collections import deque

from vector_bridge.configs.indexing import TOKENS_PER_CHAR, IndexingSettings

from ..models import Chunk, ChunkingStats
from .boundary_splitter import split_sentences, split_words
from .normalization import normalize_text

logger = logging.getLogger(__name__)

# Trailing units kept for overlap seeding
SENTENCE_TRAIL = 3
WORD_TRAIL = 20

# A sentence chunk longer than this multiple of the target triggers word mode
OVERSIZE_FACTOR = 1.5

LARGE_CHUNK_WARNING_TOKENS = 2000
HIGH_OVERLAP_WARNING_PERCENT = 25


class ChunkingTask:
    """Split text into overlapping chunks sized for embedding."""

    def __init__(
        self,
        chunk_size_tokens: int = 1000,
        overlap_percent: int = 15,
    ) -> None:
        """
        Initialize chunking task with size configuration.

        Args:
            chunk_size_tokens: Target chunk size in estimated tokens (100-5000)
            overlap_percent: Share of the target carried into the next chunk (0-50)

        Raises:
            ValueError: When a parameter is outside its supported range
        """
        if not 100 <= chunk_size_tokens <= 5000:
            raise ValueError("chunk_size_tokens must be between 100 and 5000")
        if not 0 <= overlap_percent <= 50:
            raise ValueError("overlap_percent must be between 0 and 50")

        self.chunk_size_tokens = chunk_size_tokens
        self.overlap_percent = overlap_percent

    @classmethod
    def from_settings(cls, settings: IndexingSettings) -> "ChunkingTask":
        return cls(
            chunk_size_tokens=settings.chunk_size_tokens,
            overlap_percent=settings.overlap_percent,
        )

    @property
    def target_chars(self) -> int:
        return int(self.chunk_size_tokens / TOKENS_PER_CHAR)

    @property
    def overlap_chars(self) -> int:
        return int(self.target_chars * self.overlap_percent / 100)

    def chunk(self, text: str, source: str = "") -> list[Chunk]:
        """
        Normalize and split text into chunks.

        Args:
            text: Raw extracted text
            source: Source identifier copied onto every chunk

        Returns:
            list[Chunk]: Chunks in emission order, empty for empty input
        """
        text = normalize_text(text)
        if not text:
            return []

        pieces = self._assemble(split_sentences(text), word_mode=False)

        max_chars = int(self.target_chars * OVERSIZE_FACTOR)
        if any(len(piece) > max_chars for piece in pieces):
            logger.info(
                f"{__name__}:chunk - Sentence chunk exceeds {max_chars} chars, re-chunking by words",
                extra={"source": source},
            )
            pieces = self._assemble(split_words(text), word_mode=True)

        return [
            Chunk(
                content=piece,
                source=source,
                chunk_index=index,
                character_count=len(piece),
                estimated_token_count=int(len(piece) * TOKENS_PER_CHAR),
            )
            for index, piece in enumerate(pieces)
        ]

    def _assemble(self, units: list[str], word_mode: bool) -> list[str]:
        target = self.target_chars
        trailing: deque[str] = deque(maxlen=WORD_TRAIL if word_mode else SENTENCE_TRAIL)
        pieces: list[str] = []
        current = ""
        current_len = 0

        for unit in units:
            # Words are measured with their separator
            unit_len = len(unit) + 1 if word_mode else len(unit)
            if current_len > 0 and current_len + unit_len > target:
                pieces.append(current.strip())
                current = self._overlap(trailing, word_mode)
                current_len = len(current)

            if current_len > 0:
                current += " "
                current_len += 1
            current += unit
            current_len += len(unit)
            trailing.append(unit)

        if current_len > 0:
            pieces.append(current.strip())
        return pieces

    def _overlap(self, trailing: deque[str], word_mode: bool) -> str:
        """
        Build the seed for the next chunk from the most recent units.

        Walks backward prepending whole units while the overlap stays within
        overlap_chars. The most recent unit is always taken, so the overlap
        can exceed the limit by at most that one unit.
        """
        limit = self.overlap_chars
        if not trailing or limit <= 0:
            return ""

        picked: list[str] = []
        length = 0
        for unit in reversed(trailing):
            unit_len = len(unit) + 1 if word_mode else len(unit)
            if length > 0 and length + unit_len > limit:
                break
            if length > 0 and not word_mode:
                length += 1
            picked.append(unit)
            length += unit_len

        return " ".join(reversed(picked))

    def get_chunking_stats(self, text: str) -> ChunkingStats:
        """
        Estimate chunk figures for text without chunking it.

        Args:
            text: Raw extracted text

        Returns:
            ChunkingStats: Character, token and chunk estimates
        """
        text = normalize_text(text)
        total_chars = len(text)
        return ChunkingStats(
            total_characters=total_chars,
            estimated_tokens=int(total_chars * TOKENS_PER_CHAR),
            estimated_chunks=max(1, math.ceil(total_chars / self.target_chars)) if total_chars else 0,
            chunk_size_tokens=self.chunk_size_tokens,
            overlap_percent=self.overlap_percent,
            target_chars_per_chunk=self.target_chars,
        )

    def configuration_warnings(self) -> list[str]:
        """Return advisory warnings for valid but unusual settings."""
        warnings = []
        if self.chunk_size_tokens > LARGE_CHUNK_WARNING_TOKENS:
            warnings.append("Large chunk sizes may exceed some model context limits")
        if self.overlap_percent > HIGH_OVERLAP_WARNING_PERCENT:
            warnings.append("High overlap percentages increase storage requirements")
        return warnings
