"""API schemas.

Pydantic models for request/response validation and serialization.
"""

from datetime import date

from pydantic import BaseModel, Field

from product_sync.application.change_notifier import NotificationReport
from product_sync.domain.product import PriceVariation, Product


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    request_id: str | None = Field(default=None, description="Request ID for correlation")


# ============================================================================
# Product Schemas
# ============================================================================


class PriceVariationSchema(BaseModel):
    """Price of a product in one non-base currency."""

    variation_id: str
    price: str = Field(..., description="Final price incl. tax as decimal string")
    list_price: str = Field(..., description="List price incl. tax as decimal string")
    currency: str
    availability: str

    @classmethod
    def from_domain(cls, variation: PriceVariation) -> "PriceVariationSchema":
        return cls(
            variation_id=variation.variation_id,
            price=str(variation.price.amount),
            list_price=str(variation.list_price.amount),
            currency=variation.currency,
            availability=variation.availability.value,
        )


class ProductSchema(BaseModel):
    """Normalized product as built for one store."""

    url: str
    product_id: str
    name: str
    image_url: str | None = None
    price: str
    list_price: str
    currency: str
    price_variation_id: str | None = None
    availability: str
    tags: dict[str, list[str]]
    categories: list[str]
    short_description: str | None = None
    description: str | None = None
    full_description: str
    brand: str | None = None
    date_published: date | None = None
    price_variations: list[PriceVariationSchema]

    @classmethod
    def from_domain(cls, product: Product) -> "ProductSchema":
        """Create schema from a domain Product.

        Args:
            product: Built product.

        Returns:
            ProductSchema instance.
        """
        return cls(
            url=product.url,
            product_id=product.product_id,
            name=product.name,
            image_url=product.image_url,
            price=str(product.price.amount),
            list_price=str(product.list_price.amount),
            currency=product.currency,
            price_variation_id=product.price_variation_id,
            availability=product.availability.value,
            tags={slot: list(tags) for slot, tags in product.tags.items()},
            categories=list(product.categories),
            short_description=product.short_description,
            description=product.description,
            full_description=product.full_description,
            brand=product.brand,
            date_published=product.date_published,
            price_variations=[
                PriceVariationSchema.from_domain(v) for v in product.price_variations
            ],
        )


# ============================================================================
# Event Schemas
# ============================================================================


class EntrySavedRequest(BaseModel):
    """Catalog-entry-saved notification from the commerce system."""

    entry_id: str = Field(..., min_length=1, description="Saved catalog entry ID")
    store_id: int = Field(default=0, ge=0, description="Store scope; 0 for all stores")


class StoreOutcomeSchema(BaseModel):
    """Outcome of notifying one store."""

    store_id: int
    status: str
    reason: str | None = None


class NotificationReportSchema(BaseModel):
    """Outcomes of an entry-saved notification."""

    entry_id: str
    sent: int
    skipped: int
    failed: int
    outcomes: list[StoreOutcomeSchema]

    @classmethod
    def from_domain(cls, report: NotificationReport) -> "NotificationReportSchema":
        return cls(
            entry_id=report.entry_id,
            sent=len(report.sent),
            skipped=len(report.skipped),
            failed=len(report.failed),
            outcomes=[
                StoreOutcomeSchema(
                    store_id=o.store_id, status=o.status.value, reason=o.reason
                )
                for o in report.outcomes
            ],
        )
