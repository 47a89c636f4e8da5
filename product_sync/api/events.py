"""Catalog event endpoints.

Provides:
- POST /events/catalog-entry-saved - trigger re-index requests for a saved entry

The endpoint always answers 202: notification failures are reported in
the body, never as an error status, so the saving system is not affected.
"""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, status

from product_sync.api.products import get_service
from product_sync.api.schemas import EntrySavedRequest, NotificationReportSchema
from product_sync.application.service import ProductSyncService
from product_sync.domain.events import CatalogEntrySaved

logger = structlog.get_logger()

router = APIRouter(prefix="/events", tags=["Events"])


@router.post(
    "/catalog-entry-saved",
    response_model=NotificationReportSchema,
    status_code=status.HTTP_202_ACCEPTED,
    summary="Notify about a saved catalog entry",
)
def catalog_entry_saved(
    payload: EntrySavedRequest,
    service: Annotated[ProductSyncService, Depends(get_service)],
) -> NotificationReportSchema:
    """Send re-index requests for a saved catalog entry.

    Args:
        payload: Saved entry and store scope.
        service: Product sync service.

    Returns:
        Per-store notification outcomes.
    """
    event = CatalogEntrySaved(entry_id=payload.entry_id, store_id=payload.store_id)
    logger.info(
        "Received catalog entry saved event",
        event_id=str(event.event_id),
        entry_id=event.entry_id,
        store_id=event.store_id,
    )
    report = service.handle(event)
    return NotificationReportSchema.from_domain(report)
