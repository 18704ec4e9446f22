"""
Indexing configuration settings.

Chunk sizing, overlap, submission batching and rate limiting, plus the
identity stamped on every record. A single instance is the read-only
snapshot handed to one pipeline run.

Dependencies: pydantic, pydantic_settings
System role: Configuration surface of the chunking and submission engine
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from vector_bridge import __version__
from vector_bridge.configs.base import BaseSettings

# Empirical tokens-per-character ratio used for all size estimates
TOKENS_PER_CHAR = 0.25


class IndexingSettings(BaseSettings):
    """Chunking and submission settings (immutable once loaded)."""

    model_config = SettingsConfigDict(
        env_prefix="VECTOR_BRIDGE_",
        frozen=True,
    )

    # Text chunking
    chunk_size_tokens: int = Field(
        default=1000,
        ge=100,
        le=5000,
        description="Target chunk size in estimated tokens",
    )
    overlap_percent: int = Field(
        default=15,
        ge=0,
        le=50,
        description="Share of the target chunk size carried into the next chunk",
    )

    # Submission
    batch_size: int = Field(
        default=100,
        ge=1,
        le=1000,
        description="Records per bulk-index request",
    )
    qps: float = Field(
        default=2.0,
        ge=0.1,
        le=100,
        description="Maximum bulk-index requests per second",
    )

    # Record envelope
    tenant: str = Field(default="", description="Opaque tenant tag stamped on every record")
    site_identity: str = Field(
        default="http://localhost",
        description="Origin site stamped on records and submission meta",
    )
    indexed_by: str = Field(default="vector-bridge", description="Indexer tag stamped on records")

    # Transcript chunking
    chunk_duration_seconds: float = Field(
        default=60.0,
        gt=0,
        description="Maximum span of a transcript chunk in seconds",
    )
    max_chunk_chars: int = Field(
        default=1000,
        gt=0,
        description="Maximum characters in a transcript chunk",
    )
    overlap_duration_seconds: float = Field(
        default=5.0,
        ge=0,
        description="Trailing transcript time carried into the next chunk",
    )

    @property
    def target_chars(self) -> int:
        """Characters per chunk derived from the token budget."""
        return int(self.chunk_size_tokens / TOKENS_PER_CHAR)

    @property
    def overlap_chars(self) -> int:
        """Characters of trailing overlap derived from the overlap share."""
        return int(self.target_chars * self.overlap_percent / 100)

    @property
    def system_tag(self) -> str:
        """Identifier sent as `meta.system` with every submission."""
        return f"Vector Bridge MVDB Indexer v{__version__}"
