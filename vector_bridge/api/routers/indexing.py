"""
Indexing API endpoints.

Routes: POST /indexing/dry-run, POST /indexing/jobs,
DELETE /indexing/documents/{document_id}

Dependencies: vector_bridge.core, vector_bridge.workers
System role: Indexing HTTP API
"""

import pydantic
from fastapi import APIRouter, Depends, HTTPException, Response, status
from pydantic import BaseModel

from vector_bridge.api.deps import (
    get_job_submitter,
    get_preview_pipeline,
    get_vector_store_client,
)
from vector_bridge.boundary.vdb import VectorStoreClient
from vector_bridge.core.document_processing import IndexingPipeline
from vector_bridge.core.document_processing.models import IndexingJob, IndexingPreview, RawContent
from vector_bridge.core.exceptions import MalformedFormatError, VectorStoreError
from vector_bridge.workers.job_submitter import JobSubmitter


class JobAcceptedResponse(BaseModel):
    """Response for a queued indexing job."""

    job_id: str
    status: str = "queued"


router = APIRouter(prefix="/indexing", tags=["indexing"])


@router.post("/dry-run", response_model=IndexingPreview)
def dry_run(
    request: IndexingJob,
    pipeline: IndexingPipeline = Depends(get_preview_pipeline),
) -> IndexingPreview:
    """Chunk and build records for the content without submitting them."""
    kind = IndexingPipeline.resolve_kind(request.source, request.text, request.content_kind)
    content = RawContent(text=request.text, source=request.source, content_kind=kind)
    try:
        return pipeline.preview(content, request.collection, request.metadata)
    except MalformedFormatError as e:
        raise HTTPException(status_code=422, detail=e.message) from e
    except pydantic.ValidationError as e:
        raise HTTPException(
            status_code=422,
            detail=f"Invalid metadata: {e.error_count()} error(s)",
        ) from e


@router.post("/jobs", response_model=JobAcceptedResponse, status_code=status.HTTP_202_ACCEPTED)
def submit_job(
    request: IndexingJob,
    submitter: JobSubmitter = Depends(get_job_submitter),
) -> JobAcceptedResponse:
    """Queue the content for background indexing."""
    job_id = submitter.enqueue(
        source=request.source,
        collection=request.collection,
        kind=request.content_kind,
        metadata=request.metadata,
        text=request.text,
    )
    return JobAcceptedResponse(job_id=job_id)


@router.delete("/documents/{document_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_document(
    document_id: str,
    client: VectorStoreClient = Depends(get_vector_store_client),
) -> Response:
    """Delete one document from the vector store."""
    try:
        client.delete_document(document_id)
    except VectorStoreError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
