"""
Web page content builder.

Dependencies: pydantic
System role: Shapes chunks of fetched pages into webpage records
"""

import re
from urllib.parse import urlparse

from ..models import Chunk, ContentKind, ContentMetadata, WebpageMetadata, WebpageRecord
from .base import ContentBuilder
from .titles import (
    clean_optional,
    first_meaningful_line,
    is_valid_url,
    markdown_heading,
    ucwords,
)

NAVIGATION_LINE = re.compile(r"^(home|about|contact|menu|navigation|breadcrumb)", re.IGNORECASE)
_PATH_SEPARATORS = re.compile(r"[/\-_]")


class WebpageContentBuilder(ContentBuilder):
    """Builder for chunks of HTML pages."""

    kind = ContentKind.WEBPAGE
    record_class = WebpageRecord
    metadata_class = WebpageMetadata

    def validate(self, chunk: Chunk, metadata: ContentMetadata | None = None) -> None:
        metadata = self.coerce_metadata(metadata)
        if not chunk.content.strip():
            raise self._invalid(chunk, "post_content", "Webpage content is required")

        url_source = self._url_source(chunk, metadata)
        if not url_source:
            raise self._invalid(chunk, "url_source", "Webpage URL source is required")
        if not is_valid_url(url_source):
            raise self._invalid(chunk, "url_source", "Invalid webpage URL format")

    def extract_title(self, chunk: Chunk, metadata: ContentMetadata | None = None) -> str:
        """
        Derive the page title.

        Order: explicit title, markdown heading, first non-navigational line,
        URL path, URL host, then a part-numbered fallback.
        """
        metadata = self.coerce_metadata(metadata)
        title = (
            clean_optional(metadata.title)
            or markdown_heading(chunk.content)
            or first_meaningful_line(chunk.content, skip=NAVIGATION_LINE)
        )
        if title:
            return title

        url_source = self._url_source(chunk, metadata)
        if url_source:
            parsed = urlparse(url_source)
            if parsed.path and parsed.path != "/":
                path_title = ucwords(_PATH_SEPARATORS.sub(" ", parsed.path.strip("/")))
                if path_title.strip():
                    return path_title
            if parsed.hostname:
                host = re.sub(r"^www\.", "", parsed.hostname)
                return ucwords(host.replace(".", " "))

        return f"Web Page (Part {chunk.chunk_index + 1})"

    def _build(self, chunk: Chunk, collection: str, metadata: WebpageMetadata) -> WebpageRecord:
        url_source = self._url_source(chunk, metadata)
        return WebpageRecord(
            **self._envelope(chunk, url_source),
            post_title=self.extract_title(chunk, metadata),
            post_content=chunk.content,
            meta_description=clean_optional(metadata.meta_description),
            publish_date=clean_optional(metadata.publish_date),
            author=clean_optional(metadata.author),
            site_name=clean_optional(metadata.site_name),
            language=clean_optional(metadata.language),
            domain=urlparse(url_source).hostname,
        )
