"""
Health check API endpoints.

Routes: GET /health, GET /ready, GET /db

Dependencies: docvault.application.services, docvault.boundary.aws, docvault.api.deps
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends

from docvault.api.deps import get_blob_store, get_diagnostics_service
from docvault.application.services import DiagnosticsService
from docvault.boundary.aws.s3_client import S3BlobStore
from docvault.models.health import DatabaseTimeResponse, HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/ready", response_model=HealthResponse)
async def readiness_check(
    diagnostics: DiagnosticsService = Depends(get_diagnostics_service),
    blob_store: S3BlobStore = Depends(get_blob_store),
) -> HealthResponse:
    """
    Readiness check: the database answers and the document bucket is reachable.

    Raises:
        DatabaseError: 500 if the database cannot be queried
        StorageError: 500 if the bucket cannot be reached
    """
    await diagnostics.database_time()
    await blob_store.ping()
    return HealthResponse(status="ready", message="Database and storage reachable")


@router.get("/db", response_model=DatabaseTimeResponse)
async def database_time(
    diagnostics: DiagnosticsService = Depends(get_diagnostics_service),
) -> DatabaseTimeResponse:
    """Database connectivity check returning the server's current time."""
    return DatabaseTimeResponse(now=await diagnostics.database_time())
