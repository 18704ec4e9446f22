"""Tests for deterministic document ids."""

import hashlib

from vector_bridge.core.document_processing import generate_document_id


class TestGenerateDocumentId:
    """Test document id generation."""

    def test_is_deterministic(self) -> None:
        """Should return the same id for the same inputs."""
        assert generate_document_id("a.pdf", "docs", 3) == generate_document_id("a.pdf", "docs", 3)

    def test_format(self) -> None:
        """Should prefix the SHA-256 of source|collection|index."""
        expected = "vb_" + hashlib.sha256(b"a.pdf|docs|3").hexdigest()
        assert generate_document_id("a.pdf", "docs", 3) == expected

    def test_any_input_change_changes_id(self) -> None:
        """Should produce distinct ids when any input differs."""
        ids = {
            generate_document_id(source, collection, index)
            for source in ("a.pdf", "b.pdf")
            for collection in ("docs", "notes")
            for index in range(5)
        }
        assert len(ids) == 20
