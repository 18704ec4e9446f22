"""
Text normalization.

Cleans extracted text before boundary detection: line endings, control
characters and whitespace runs. Paragraph breaks survive so the
blank-line boundary pattern can still see them.

Dependencies: re (stdlib)
System role: First stage of text chunking
"""

import re

_LINE_ENDINGS = re.compile(r"\r\n?")
# C0/C1 control characters except tab and newline
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b-\x1f\x7f-\x9f]")
_HORIZONTAL_WS = re.compile(r"[^\S\n]+")
_SPACE_AROUND_NEWLINE = re.compile(r" ?\n ?")
_EXCESS_NEWLINES = re.compile(r"\n{3,}")


def normalize_text(text: str) -> str:
    """
    Normalize whitespace, line endings and control characters.

    Args:
        text: Raw extracted text (may be empty)

    Returns:
        str: Trimmed text with single spaces and at most one blank line
            between paragraphs
    """
    if not text:
        return ""

    text = _LINE_ENDINGS.sub("\n", text)
    text = _CONTROL_CHARS.sub("", text)
    text = _HORIZONTAL_WS.sub(" ", text)
    text = _SPACE_AROUND_NEWLINE.sub("\n", text)
    text = _EXCESS_NEWLINES.sub("\n\n", text)
    return text.strip()
