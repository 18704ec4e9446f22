"""
Health check API endpoints.

Routes: GET /health, GET /health/vector-store

Dependencies: vector_bridge.boundary
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from vector_bridge.api.deps import get_vector_store_client
from vector_bridge.boundary.vdb import ConnectionStatus, VectorStoreClient
from vector_bridge.core.exceptions import ConnectivityError


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


class VectorStoreHealthResponse(HealthResponse):
    """Vector store probe response model."""

    connection: ConnectionStatus


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/vector-store", response_model=VectorStoreHealthResponse)
def health_check_vector_store(
    client: VectorStoreClient = Depends(get_vector_store_client),
) -> VectorStoreHealthResponse:
    """
    Probe the vector store.

    Returns 503 with the probe's message when the store is unreachable.
    """
    try:
        connection = client.validate_connection()
    except ConnectivityError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=e.message) from e

    return VectorStoreHealthResponse(
        status="healthy",
        message="Vector store accessible",
        connection=connection,
    )
