"""
Boundary detection for chunk assembly.

Sentence mode tries every boundary pattern against the whole text and
keeps the split with the most segments. Word mode splits on whitespace.

Dependencies: re (stdlib)
System role: Unit source for the chunk assembler
"""

import re

# Declaration order breaks ties between patterns
SENTENCE_BOUNDARIES: tuple[re.Pattern[str], ...] = (
    re.compile(r"(?<=[.!?])\s+(?=[A-Z])"),  # terminal punctuation then a capital
    re.compile(r"(?<=\.)\s+(?=\d)"),  # period then a digit (numbered lists)
    re.compile(r"\n\s*\n"),  # paragraph break
)
WORD_BOUNDARY = re.compile(r"\s+")


def split_sentences(text: str) -> list[str]:
    """
    Split text into sentence-like units.

    Args:
        text: Normalized text

    Returns:
        list[str]: Trimmed non-empty units; the whole text as a single unit
            when no pattern splits it
    """
    best: list[str] = []
    for pattern in SENTENCE_BOUNDARIES:
        parts = [part for part in pattern.split(text) if part]
        if len(parts) > 1 and len(parts) > len(best):
            best = parts

    if not best:
        best = [text]

    return [part.strip() for part in best if part.strip()]


def split_words(text: str) -> list[str]:
    """Split text on any whitespace run."""
    return [word for word in WORD_BOUNDARY.split(text) if word]
