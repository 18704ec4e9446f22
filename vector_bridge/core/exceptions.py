"""
Exception hierarchy for the Vector Bridge indexer.

Provides layered exception structure for domain-specific errors.
All exceptions include context (source, collection, chunk index) for
observability and external retry decisions.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class VectorBridgeException(Exception):
    """Base exception for all indexer errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class MalformedFormatError(VectorBridgeException):
    """Raised when structured input (WebVTT) cannot be parsed at all."""

    def __init__(
        self,
        message: str,
        source: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize malformed format error.

        Args:
            message: Error message
            source: Source the content came from
            details: Additional context
        """
        details = details or {}
        if source:
            details["source"] = source
        super().__init__(message, details)


class ChunkValidationError(VectorBridgeException):
    """Raised when a content builder rejects a chunk before submission."""

    def __init__(
        self,
        field: str,
        reason: str,
        source: str | None = None,
        chunk_index: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize chunk validation error.

        Args:
            field: Field that failed validation
            reason: Human-readable reason, used as the error message
            source: Source of the rejected chunk
            chunk_index: Index of the rejected chunk
            details: Additional context
        """
        self.field = field
        self.reason = reason
        details = details or {}
        details["field"] = field
        if source:
            details["source"] = source
        if chunk_index is not None:
            details["chunk_index"] = chunk_index
        super().__init__(reason, details)


class SubmissionError(VectorBridgeException):
    """Raised when one submission batch is rejected by the vector store."""

    def __init__(
        self,
        batch_number: int,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize submission error.

        Args:
            batch_number: 1-based number of the failed batch
            message: Error reported for the batch
            details: Additional context
        """
        self.batch_number = batch_number
        details = details or {}
        details["batch_number"] = batch_number
        super().__init__(f"Batch {batch_number} failed: {message}", details)


class VectorStoreError(VectorBridgeException):
    """Raised when vector store operations fail."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize vector store error.

        Args:
            message: Error message
            operation: Operation that failed (bulk_index, delete, validate_connection)
            details: Additional context
        """
        self.operation = operation
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class ConnectivityError(VectorStoreError):
    """Raised by the connectivity probe; the message is surfaced verbatim."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, operation="validate_connection", details=details)
