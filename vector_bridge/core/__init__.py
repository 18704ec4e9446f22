"""
Core business logic module.

Contains the chunking and content-normalization engine and the exception
hierarchy shared by every layer.
"""

from vector_bridge.core.exceptions import (
    ChunkValidationError,
    ConnectivityError,
    MalformedFormatError,
    SubmissionError,
    VectorBridgeException,
    VectorStoreError,
)

__all__ = [
    "VectorBridgeException",
    "MalformedFormatError",
    "ChunkValidationError",
    "SubmissionError",
    "VectorStoreError",
    "ConnectivityError",
]
