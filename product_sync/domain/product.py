"""Normalized product record sent to the personalization service.

A Product is built fresh for one (catalog entry, store) pair, serialized,
transmitted and discarded. Both records here are frozen and compare by
value.
"""

from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Any, Mapping

from product_sync.domain.base import ValueObject
from product_sync.domain.value_objects import Availability, Money

TAG_SLOTS = ("tag1", "tag2", "tag3")


def empty_tags() -> dict[str, tuple[str, ...]]:
    """Return the three tag slots, all empty."""
    return {slot: () for slot in TAG_SLOTS}


@dataclass(frozen=True)
class PriceVariation(ValueObject):
    """Product price in one non-base currency of a multi-currency store.

    Attributes:
        variation_id: Currency code identifying the variation.
        price: Final price including discounts and taxes.
        list_price: Price without discounts but including taxes.
        availability: Stock availability.
        currency: Currency the prices are expressed in.
    """

    variation_id: str
    price: Money
    list_price: Money
    availability: Availability
    currency: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary.

        Returns:
            JSON-ready representation.
        """
        return {
            "variation_id": self.variation_id,
            "price": str(self.price.amount),
            "list_price": str(self.list_price.amount),
            "price_currency_code": self.currency,
            "availability": self.availability.value,
        }


@dataclass(frozen=True)
class Product(ValueObject):
    """Platform-independent product representation.

    Attributes:
        url: Absolute, store-scoped product page URL.
        product_id: Catalog entry identifier.
        name: Product name.
        price: Final price including discounts and taxes.
        list_price: Price without discounts but including taxes.
        currency: Store base currency code.
        availability: Stock availability.
        image_url: Absolute image URL, if the entry has an image.
        price_variation_id: Base currency code for multi-currency stores.
        tags: Three tag slots ("tag1", "tag2", "tag3"), always present.
        categories: Full category paths, e.g. "/Electronics/Computers".
        short_description: Short description, if set on the entry.
        description: Description, if set on the entry.
        brand: Manufacturer display text, if set on the entry.
        date_published: Creation date, if parsable.
        price_variations: One entry per priced non-base currency.
    """

    url: str
    product_id: str
    name: str
    price: Money
    list_price: Money
    currency: str
    availability: Availability
    image_url: str | None = None
    price_variation_id: str | None = None
    tags: Mapping[str, tuple[str, ...]] = field(default_factory=empty_tags)
    categories: tuple[str, ...] = ()
    short_description: str | None = None
    description: str | None = None
    brand: str | None = None
    date_published: date | None = None
    price_variations: tuple[PriceVariation, ...] = ()

    # Holds a mapping, so equality only.
    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        """Normalize collections to immutable types."""
        unknown = set(self.tags) - set(TAG_SLOTS)
        if unknown:
            raise ValueError(f"Unknown tag slots: {sorted(unknown)}")
        tags = {slot: tuple(self.tags.get(slot, ())) for slot in TAG_SLOTS}
        object.__setattr__(self, "tags", MappingProxyType(tags))
        object.__setattr__(self, "categories", tuple(self.categories))
        object.__setattr__(self, "price_variations", tuple(self.price_variations))

    @property
    def full_description(self) -> str:
        """Short and normal descriptions joined by a space.

        Returns:
            The present descriptions, or an empty string if neither is set.
        """
        parts = [d for d in (self.short_description, self.description) if d]
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary.

        Returns:
            JSON-ready representation used as the re-index payload.
        """
        return {
            "url": self.url,
            "product_id": self.product_id,
            "name": self.name,
            "image_url": self.image_url,
            "price": str(self.price.amount),
            "list_price": str(self.list_price.amount),
            "price_currency_code": self.currency,
            "price_variation_id": self.price_variation_id,
            "availability": self.availability.value,
            "tag1": list(self.tags["tag1"]),
            "tag2": list(self.tags["tag2"]),
            "tag3": list(self.tags["tag3"]),
            "categories": list(self.categories),
            "description": self.full_description,
            "brand": self.brand,
            "date_published": (
                self.date_published.isoformat() if self.date_published else None
            ),
            "price_variations": [v.to_dict() for v in self.price_variations],
        }
