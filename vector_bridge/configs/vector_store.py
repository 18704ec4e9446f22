"""
Vector store configuration settings.

Manages the GraphQL endpoint and bearer token of the remote vector store.

Dependencies: pydantic, pydantic_settings
System role: Vector database connection configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from vector_bridge.configs.base import BaseSettings


class VectorStoreSettings(BaseSettings):
    """MVDB GraphQL endpoint configuration."""

    model_config = SettingsConfigDict(env_prefix="MVDB_")

    endpoint: str = Field(default="", description="GraphQL endpoint URL of the vector store")
    token: str = Field(default="", description="Bearer token for the vector store")
    timeout: float = Field(default=30.0, gt=0, description="HTTP request timeout in seconds")

    @property
    def is_configured(self) -> bool:
        """Whether both endpoint and token are present."""
        return bool(self.endpoint and self.token)
