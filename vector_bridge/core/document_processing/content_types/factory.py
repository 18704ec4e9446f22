"""
Content builder dispatch and content-kind detection.

Dispatch is a closed mapping from ContentKind to builder class; every
kind has exactly one builder.

Dependencies: vector_bridge.core.document_processing.models
System role: Builder selection for the indexing pipeline
"""

import logging
import re
from pathlib import PurePosixPath
from urllib.parse import urlparse

from ..models import BuildContext, ContentKind
from .base import ContentBuilder
from .default_builder import DefaultContentBuilder
from .document_builder import DocumentContentBuilder
from .titles import is_valid_url
from .video_builder import VideoContentBuilder
from .webpage_builder import WebpageContentBuilder

logger = logging.getLogger(__name__)

BUILDERS: dict[ContentKind, type[ContentBuilder]] = {
    ContentKind.VIDEO: VideoContentBuilder,
    ContentKind.DOCUMENT: DocumentContentBuilder,
    ContentKind.WEBPAGE: WebpageContentBuilder,
    ContentKind.GENERIC: DefaultContentBuilder,
}

DOCUMENT_EXTENSIONS = frozenset({"pdf", "docx", "doc", "txt", "md"})
VIDEO_PLATFORM = re.compile(r"youtube\.com|youtu\.be|vimeo\.com|drive\.google\.com", re.IGNORECASE)
VIDEO_FILE = re.compile(r"\.(mp4|avi|mov|wmv|flv|webm)$", re.IGNORECASE)
PDF_FILE = re.compile(r"\.pdf$", re.IGNORECASE)


def get_builder(kind: ContentKind, context: BuildContext) -> ContentBuilder:
    """
    Create the builder for a content kind.

    Args:
        kind: Content kind of the chunks to build
        context: Run context stamped into every record

    Returns:
        ContentBuilder: Builder instance for the kind
    """
    builder_class = BUILDERS[ContentKind(kind)]
    return builder_class(context)


def detect_content_kind(source: str, has_transcript: bool = False) -> ContentKind:
    """
    Guess the content kind from the source.

    Only a transcript means video, since the video path needs WebVTT text.
    URLs are classified by suffix and default to webpage; local paths are
    classified by extension and default to generic. The filesystem is never
    touched.

    Args:
        source: URL or path of the content
        has_transcript: Whether WebVTT transcript text accompanies the source

    Returns:
        ContentKind: Detected kind
    """
    if has_transcript:
        return ContentKind.VIDEO

    if is_valid_url(source):
        path = urlparse(source).path
        if VIDEO_PLATFORM.search(source) or VIDEO_FILE.search(path):
            # Video pages and media URLs without a transcript are indexed as pages
            return ContentKind.WEBPAGE
        if PDF_FILE.search(path):
            return ContentKind.DOCUMENT
        return ContentKind.WEBPAGE

    extension = PurePosixPath(source.replace("\\", "/")).suffix[1:].lower()
    if extension in DOCUMENT_EXTENSIONS:
        return ContentKind.DOCUMENT

    logger.debug(f"{__name__}:detect_content_kind - No kind detected for source, using generic")
    return ContentKind.GENERIC
