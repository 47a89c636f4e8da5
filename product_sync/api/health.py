"""Health check endpoints.

`/health` reports liveness; `/ready` reports whether any store is
configured to build products for.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from product_sync.api.products import get_service
from product_sync.api.schemas import ErrorResponse
from product_sync.application.service import ProductSyncService
from product_sync.infrastructure.config import settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    service: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response schema."""

    status: str
    stores: int


@router.get("/health", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Check service health.

    Returns:
        Health status with service name and version.
    """
    return HealthResponse(
        status="healthy",
        service="product-sync",
        version=settings.api_version,
    )


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"model": ErrorResponse}},
)
def readiness_check(
    service: Annotated[ProductSyncService, Depends(get_service)],
) -> ReadinessResponse:
    """Check that at least one store is configured.

    Raises:
        HTTPException: 503 if the store registry is empty.
    """
    store_count = len(service.stores.list_stores())
    if store_count == 0:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={"error_code": "NOT_READY", "message": "No stores configured"},
        )
    return ReadinessResponse(status="ready", stores=store_count)
