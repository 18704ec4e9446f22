"""
MVDB GraphQL client.

Talks to the managed vector database over GraphQL-on-HTTP: bulk indexing,
single-document deletion and a schema introspection probe. Requests carry
a bearer token; the endpoint host is masked wherever it is logged.

Dependencies: httpx, vector_bridge.configs, vector_bridge.core.exceptions
System role: Vector store adapter implementing VectorStoreClient
"""

import json
import logging
import re
from datetime import datetime, timezone
from typing import Any
from urllib.parse import urlparse

import httpx

from vector_bridge import __version__
from vector_bridge.boundary.vdb.vector_schemas import (
    BulkIndexDocument,
    ConnectionStatus,
    DocumentMeta,
)
from vector_bridge.configs.indexing import IndexingSettings
from vector_bridge.configs.vector_store import VectorStoreSettings
from vector_bridge.core.exceptions import ConnectivityError, VectorStoreError
from vector_bridge.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)

BULK_INDEX_MUTATION = """
mutation CreateBulkIndexDocuments($input: BulkIndexInput!) {
  bulkIndex(input: $input) {
    code
    success
    message
    documents {
      id
    }
  }
}
"""

DELETE_MUTATION = """
mutation DeleteDocument($id: ID!, $meta: MetaInput) {
  delete(id: $id, meta: $meta) {
    code
    success
    message
    document {
      id
    }
  }
}
"""

INTROSPECTION_QUERY = """
query {
  __schema {
    queryType {
      name
    }
  }
}
"""

_OPERATION = re.compile(r"^\s*(query|mutation)\s*(\w*)")


def mask_endpoint(endpoint: str) -> str:
    """
    Hide the leading host label of an endpoint for logs and probe output.

    Args:
        endpoint: Endpoint URL

    Returns:
        str: e.g. "https://abc***.example.com/graphql", or "***" without a host
    """
    parsed = urlparse(endpoint)
    if not parsed.hostname:
        return "***"

    host_parts = parsed.hostname.split(".")
    if len(host_parts) > 2:
        host_parts[0] = host_parts[0][:3] + "***"
    return f"{parsed.scheme or 'https'}://{'.'.join(host_parts)}{parsed.path}"


def _operation_name(query: str) -> str:
    match = _OPERATION.match(query)
    if match is None:
        return "unknown"
    return match.group(2) or match.group(1)


class MVDBClient:
    """GraphQL client for the MVDB vector store."""

    def __init__(
        self,
        endpoint: str,
        token: str,
        system_tag: str,
        site_identity: str,
        timeout: float = 30.0,
        http_client: httpx.Client | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            endpoint: GraphQL endpoint URL
            token: Bearer token
            system_tag: Indexer name sent as meta.system
            site_identity: Origin site sent as meta.source
            timeout: Request timeout in seconds
            http_client: Preconfigured httpx client (tests inject a mock transport)
        """
        self.endpoint = endpoint
        self._token = token
        self.system_tag = system_tag
        self.site_identity = site_identity
        self._http = http_client or httpx.Client(timeout=timeout)
        self._http.headers.update(
            {
                "Content-Type": "application/json",
                "User-Agent": f"Vector-Bridge-MVDB-Indexer/{__version__}",
            }
        )

    @classmethod
    def from_settings(
        cls,
        store: VectorStoreSettings,
        indexing: IndexingSettings,
        http_client: httpx.Client | None = None,
    ) -> "MVDBClient":
        return cls(
            endpoint=store.endpoint,
            token=store.token,
            system_tag=indexing.system_tag,
            site_identity=indexing.site_identity,
            timeout=store.timeout,
            http_client=http_client,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self.endpoint and self._token)

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "MVDBClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def execute_query(
        self,
        query: str,
        variables: dict[str, Any] | None = None,
        operation: str = "query",
    ) -> dict[str, Any]:
        """
        POST a GraphQL request and return the decoded response body.

        Args:
            query: GraphQL query or mutation
            variables: Variables, omitted from the payload when empty
            operation: Operation name recorded on errors

        Returns:
            dict: Decoded JSON response (may contain "errors")

        Raises:
            VectorStoreError: On missing configuration, transport failure,
                HTTP error status or a non-JSON body
        """
        if not self.is_configured:
            raise VectorStoreError("MVDB endpoint and token must be configured", operation=operation)

        payload: dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = variables

        log_with_context(
            logger,
            logging.DEBUG,
            f"{__name__}:execute_query - Sending GraphQL request",
            endpoint=mask_endpoint(self.endpoint),
            graphql_operation=_operation_name(query),
        )

        try:
            response = self._http.post(
                self.endpoint,
                json=payload,
                headers={"Authorization": f"Bearer {self._token}"},
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            message = self._error_message(e.response) or str(e)
            logger.warning(
                f"{__name__}:execute_query - HTTP {e.response.status_code} from vector store",
                extra={"endpoint": mask_endpoint(self.endpoint), "graphql_operation": operation},
            )
            raise VectorStoreError(
                message,
                operation=operation,
                details={"status_code": e.response.status_code},
            ) from e
        except httpx.HTTPError as e:
            raise VectorStoreError(f"Request failed: {e}", operation=operation) from e

        try:
            data = response.json()
        except ValueError as e:
            raise VectorStoreError(f"Invalid JSON response: {e}", operation=operation) from e
        if not isinstance(data, dict):
            raise VectorStoreError("Invalid JSON response: expected an object", operation=operation)

        if data.get("errors"):
            logger.warning(
                f"{__name__}:execute_query - GraphQL response carries errors",
                extra={"graphql_operation": operation},
            )
        return data

    @staticmethod
    def _error_message(response: httpx.Response) -> str | None:
        try:
            body = response.json()
        except ValueError:
            return None
        if not isinstance(body, dict):
            return None
        if body.get("message"):
            return str(body["message"])
        if body.get("errors"):
            return "GraphQL errors: " + json.dumps(body["errors"])
        return None

    def bulk_index(self, documents: list[BulkIndexDocument]) -> int:
        """
        Index documents with one bulkIndex mutation.

        Args:
            documents: Documents of one batch

        Returns:
            int: Number of documents indexed

        Raises:
            VectorStoreError: On GraphQL errors or an unsuccessful result
        """
        if not documents:
            return 0

        variables = {"input": {"documents": [doc.model_dump(mode="json") for doc in documents]}}
        data = self.execute_query(BULK_INDEX_MUTATION, variables, operation="bulk_index")
        if data.get("errors"):
            raise VectorStoreError(
                "GraphQL errors: " + json.dumps(data["errors"]),
                operation="bulk_index",
            )

        result = (data.get("data") or {}).get("bulkIndex")
        if not result or not result.get("success"):
            message = (result or {}).get("message") or "Bulk indexing failed"
            raise VectorStoreError(message, operation="bulk_index")

        return len(documents)

    def delete_document(self, document_id: str) -> None:
        """
        Delete one document by id.

        Raises:
            VectorStoreError: On GraphQL errors or an unsuccessful result
        """
        meta = DocumentMeta(system=self.system_tag, action="delete", source=self.site_identity)
        variables = {"id": document_id, "meta": meta.model_dump()}
        data = self.execute_query(DELETE_MUTATION, variables, operation="delete")
        if data.get("errors"):
            raise VectorStoreError(
                "GraphQL errors: " + json.dumps(data["errors"]),
                operation="delete",
                details={"document_id": document_id},
            )

        result = (data.get("data") or {}).get("delete")
        if not result or not result.get("success"):
            message = (result or {}).get("message") or "Document deletion failed"
            raise VectorStoreError(message, operation="delete", details={"document_id": document_id})

        logger.info(
            f"{__name__}:delete_document - Deleted document",
            extra={"document_id": document_id},
        )

    def validate_connection(self) -> ConnectionStatus:
        """
        Probe the endpoint with a schema introspection query.

        Returns:
            ConnectionStatus: Reachability, masked endpoint and schema availability

        Raises:
            ConnectivityError: When unconfigured or the request fails
        """
        if not self.is_configured:
            raise ConnectivityError("MVDB endpoint and token are required")

        try:
            data = self.execute_query(INTROSPECTION_QUERY, operation="validate_connection")
        except VectorStoreError as e:
            raise ConnectivityError(
                f"Connection failed: {e.message}",
                details={"endpoint": mask_endpoint(self.endpoint)},
            ) from e

        return ConnectionStatus(
            reachable=True,
            endpoint_masked=mask_endpoint(self.endpoint),
            schema_available="__schema" in (data.get("data") or {}),
            checked_at=datetime.now(timezone.utc),
        )
