"""
Content-type builders.

Exports: builders, dispatch and kind detection
"""

from .base import ContentBuilder
from .default_builder import DefaultContentBuilder
from .document_builder import DocumentContentBuilder
from .factory import BUILDERS, detect_content_kind, get_builder
from .video_builder import VideoContentBuilder
from .webpage_builder import WebpageContentBuilder

__all__ = [
    "BUILDERS",
    "ContentBuilder",
    "DefaultContentBuilder",
    "DocumentContentBuilder",
    "VideoContentBuilder",
    "WebpageContentBuilder",
    "detect_content_kind",
    "get_builder",
]
