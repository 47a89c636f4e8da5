"""Product preview endpoints.

Provides:
- GET /stores/{store_id}/products/{entry_id} - product as sent for a store
- GET /products/{entry_id} - product for the default store
"""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, HTTPException, status

from product_sync.api.schemas import ErrorResponse, ProductSchema
from product_sync.application.service import ProductSyncService, get_product_sync_service
from product_sync.domain.exceptions import EntryNotFoundError, StoreNotFoundError

logger = structlog.get_logger()

router = APIRouter(tags=["Products"])


def get_service() -> ProductSyncService:
    """Get product sync service."""
    return get_product_sync_service()


def _build(service: ProductSyncService, entry_id: str, store_id: int | None) -> ProductSchema:
    try:
        product = service.build_product(entry_id, store_id)
    except (EntryNotFoundError, StoreNotFoundError) as e:
        error_code = (
            "ENTRY_NOT_FOUND" if isinstance(e, EntryNotFoundError) else "STORE_NOT_FOUND"
        )
        logger.info(
            "Product lookup failed",
            entry_id=entry_id,
            store_id=store_id,
            error_code=error_code,
        )
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"error_code": error_code, "message": e.message},
        ) from e
    return ProductSchema.from_domain(product)


@router.get(
    "/stores/{store_id}/products/{entry_id}",
    response_model=ProductSchema,
    responses={404: {"model": ErrorResponse}},
    summary="Build product for a store",
)
def get_store_product(
    store_id: int,
    entry_id: str,
    service: Annotated[ProductSyncService, Depends(get_service)],
) -> ProductSchema:
    """Build the normalized product of an entry for a store.

    Args:
        store_id: Store ID.
        entry_id: Catalog entry ID.
        service: Product sync service.

    Returns:
        The product record.

    Raises:
        HTTPException: 404 if the store or entry does not exist.
    """
    return _build(service, entry_id, store_id)


@router.get(
    "/products/{entry_id}",
    response_model=ProductSchema,
    responses={404: {"model": ErrorResponse}},
    summary="Build product for the default store",
)
def get_default_store_product(
    entry_id: str,
    service: Annotated[ProductSyncService, Depends(get_service)],
) -> ProductSchema:
    """Build the normalized product of an entry for the default store."""
    return _build(service, entry_id, None)
