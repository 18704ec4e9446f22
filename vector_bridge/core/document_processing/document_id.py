"""
Deterministic document identifiers.

The same (source, collection, chunk_index) always yields the same id, so
re-indexing a source upserts its records instead of duplicating them.

Dependencies: hashlib (stdlib)
System role: Document id scheme of the vector store
"""

import hashlib

DOCUMENT_ID_PREFIX = "vb_"


def generate_document_id(source: str, collection: str, chunk_index: int) -> str:
    """
    Build the store id of a chunk.

    Args:
        source: Source the chunk was cut from
        collection: Collection the record is filed under
        chunk_index: 0-based index of the chunk within the source

    Returns:
        str: "vb_" followed by the hex SHA-256 of "source|collection|chunk_index"
    """
    hash_input = f"{source}|{collection}|{chunk_index}"
    return DOCUMENT_ID_PREFIX + hashlib.sha256(hash_input.encode("utf-8")).hexdigest()
