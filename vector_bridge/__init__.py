"""
Vector Bridge indexer.

Normalizes, chunks and schema-shapes long-form content (web pages,
documents, WebVTT transcripts) and submits it to a GraphQL vector store.
"""

__version__ = "1.0.0"
