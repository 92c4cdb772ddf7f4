"""Health check endpoints."""
from fastapi import APIRouter, Depends, status
from portal.api.deps import get_document_library
from portal.schemas.health import HealthResponse, ReadinessResponse
from portal.services.library import DocumentLibrary
from portal.core.config import settings
from portal.core.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health check endpoint",
    description="Basic health check to verify the service is running",
)
async def health_check() -> HealthResponse:
    """Report that the process is up; dependencies are checked by /ready."""
    return HealthResponse(
        status="healthy",
        app_name=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
    )


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    status_code=status.HTTP_200_OK,
    summary="Readiness check endpoint",
    description="Readiness check including the document storage backend",
)
async def readiness_check(
    library: DocumentLibrary = Depends(get_document_library),
) -> ReadinessResponse:
    """Check that the document library backend answers."""
    backend = type(library.store).__name__
    try:
        healthy = await library.store.ping()
        services = {
            "document_storage": {
                "backend": backend,
                "status": "connected" if healthy else "disconnected",
                "healthy": healthy,
            }
        }
    except Exception as e:
        healthy = False
        services = {
            "document_storage": {
                "backend": backend,
                "status": "disconnected",
                "healthy": False,
                "error": str(e),
            }
        }
        logger.error(f"Document storage health check failed: {str(e)}")

    return ReadinessResponse(
        status="ready" if healthy else "not_ready",
        services=services,
        details={
            "version": settings.APP_VERSION,
            "environment": settings.ENVIRONMENT,
        },
    )
