"""
Title and URL helpers shared by the content builders.

Dependencies: pydantic
System role: Title derivation building blocks
"""

import re
from pathlib import PurePosixPath
from urllib.parse import urlparse

from pydantic import AnyUrl, TypeAdapter, ValidationError

_URL_ADAPTER = TypeAdapter(AnyUrl)
_MARKDOWN_HEADING = re.compile(r"^#\s+(.+)$", re.MULTILINE)


def is_valid_url(value: str | None) -> bool:
    """Whether value is an absolute URL with a scheme and a host."""
    if not value:
        return False
    try:
        url = _URL_ADAPTER.validate_python(value)
    except ValidationError:
        return False
    return bool(url.host)


def clean_optional(value: str | None) -> str | None:
    """Trim a string and map blank values to None."""
    if value is None:
        return None
    value = value.strip()
    return value or None


def ucwords(text: str) -> str:
    """Uppercase the first letter of every space-separated word."""
    return " ".join(word[:1].upper() + word[1:] for word in text.split(" "))


def markdown_heading(content: str, min_len: int = 5, max_len: int = 100) -> str | None:
    """First `# Heading` line whose text length is strictly between the bounds."""
    match = _MARKDOWN_HEADING.search(content)
    if match is None:
        return None
    title = match.group(1).strip()
    if min_len < len(title) < max_len:
        return title
    return None


def first_meaningful_line(
    content: str,
    min_len: int = 10,
    max_len: int = 100,
    skip: re.Pattern[str] | None = None,
) -> str | None:
    """
    First line whose length is strictly between the bounds.

    Args:
        content: Chunk text
        min_len: Exclusive lower bound on line length
        max_len: Exclusive upper bound on line length
        skip: Lines matching this pattern are passed over

    Returns:
        str | None: The line, trimmed, or None when no line qualifies
    """
    for line in content.strip().split("\n"):
        line = line.strip()
        if not min_len < len(line) < max_len:
            continue
        if skip is not None and skip.search(line):
            continue
        return line
    return None


def filename_stem(url: str) -> str | None:
    """File name without extension from the path of a URL or local path."""
    path = urlparse(url).path
    if not path or path.endswith("/"):
        return None
    stem = PurePosixPath(path).stem
    return stem or None
