"""Domain layer - value objects, product records, events and exceptions.

Example usage:
    from decimal import Decimal

    from product_sync.domain import Availability, Money, Product

    product = Product(
        url="https://shop.example.com/shoe.html?___store=default",
        product_id="42",
        name="Shoe",
        price=Money(amount=Decimal("29.99")),
        list_price=Money(amount=Decimal("39.99")),
        currency="USD",
        availability=Availability.IN_STOCK,
    )
    print(product.tags["tag1"])  # ()
"""

from product_sync.domain.base import DomainEvent, ValueObject
from product_sync.domain.events import ALL_STORES, CatalogEntrySaved
from product_sync.domain.exceptions import (
    ConnectionLookupError,
    DomainError,
    EntryNotFoundError,
    ExportClientError,
    InvalidCurrencyCodeError,
    MoneyError,
    NegativeMoneyError,
    PricingUnavailableError,
    StoreNotFoundError,
)
from product_sync.domain.product import TAG_SLOTS, PriceVariation, Product, empty_tags
from product_sync.domain.value_objects import Availability, CurrencyCode, Money

__all__ = [
    # Base
    "DomainEvent",
    "ValueObject",
    # Value objects
    "Availability",
    "CurrencyCode",
    "Money",
    # Product records
    "TAG_SLOTS",
    "PriceVariation",
    "Product",
    "empty_tags",
    # Events
    "ALL_STORES",
    "CatalogEntrySaved",
    # Exceptions
    "ConnectionLookupError",
    "DomainError",
    "EntryNotFoundError",
    "ExportClientError",
    "InvalidCurrencyCodeError",
    "MoneyError",
    "NegativeMoneyError",
    "PricingUnavailableError",
    "StoreNotFoundError",
]
