"""
Chunking and content-normalization engine.

Exports: IndexingPipeline and the document id scheme
"""

from .document_id import generate_document_id
from .entrypoint import IndexingPipeline

__all__ = ["IndexingPipeline", "generate_document_id"]
