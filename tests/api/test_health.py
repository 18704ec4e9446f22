"""Tests for health check endpoints."""

from vector_bridge.core.exceptions import ConnectivityError


class TestHealthCheck:
    """Test GET /api/v1/health."""

    def test_returns_healthy(self, client) -> None:
        """Should report the server as healthy."""
        response = client.get("/api/v1/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "message": "Server Healthy"}


class TestVectorStoreHealth:
    """Test GET /api/v1/health/vector-store."""

    def test_reachable_store(self, client) -> None:
        """Should return the probe result."""
        response = client.get("/api/v1/health/vector-store")

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Vector store accessible"
        assert body["connection"]["reachable"] is True
        assert body["connection"]["endpoint_masked"] == "https://api***.example.com/graphql"

    def test_unreachable_store(self, client, mock_vector_store_client) -> None:
        """Should return 503 with the probe message verbatim."""
        mock_vector_store_client.validate_connection.side_effect = ConnectivityError(
            "Connection failed: invalid token"
        )

        response = client.get("/api/v1/health/vector-store")

        assert response.status_code == 503
        assert response.json()["detail"] == "Connection failed: invalid token"
