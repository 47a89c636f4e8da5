"""Shared fixtures for product sync tests."""

from datetime import date
from decimal import Decimal

import pytest

from product_sync.application.media import MediaResolver
from product_sync.application.price_variations import PriceVariationBuilder
from product_sync.application.pricing import PricingResolver
from product_sync.application.product_exporter import ProductExporter
from product_sync.application.tags import AvailableTagging, TagAggregator
from product_sync.application.taxonomy import TaxonomyFlattener
from product_sync.catalog.models import CatalogEntry, Category, Store, Tag, TagStatus
from product_sync.infrastructure.environment import StoreEnvironment
from product_sync.infrastructure.media import StoreMediaService
from product_sync.infrastructure.memory import (
    InMemoryCatalog,
    InMemoryStoreRegistry,
    InMemoryTagSource,
)

TODAY = date(2024, 6, 15)


@pytest.fixture
def store() -> Store:
    """US store: prices stored excluding 10% tax, EUR rate only."""
    return Store(
        id=1,
        code="default",
        name="US Store",
        base_url="https://shop.example.com/",
        media_base_url="https://media.example.com/",
        base_currency="USD",
        currencies=("USD", "EUR", "GBP"),
        exchange_rates={"EUR": Decimal("0.9")},
        tax_rate=Decimal("10"),
        prices_include_tax=False,
        is_default=True,
    )


@pytest.fixture
def categories() -> list[Category]:
    """Category tree with a root, a store root and two storefront levels."""
    return [
        Category(id=1, name="Root Catalog", level=0),
        Category(id=2, name="Default Category", parent_id=1, level=1),
        Category(id=3, name="Electronics", parent_id=2, level=2),
        Category(id=4, name="Computers", parent_id=3, level=3),
        Category(id=5, name="Clearance", parent_id=2, level=2, is_active=False),
    ]


@pytest.fixture
def entry() -> CatalogEntry:
    """Simple product with a special price and a primary image."""
    return CatalogEntry(
        id="42",
        name="Trail Runner",
        url_key="trail-runner",
        price=Decimal("100.00"),
        special_price=Decimal("80.00"),
        short_description="Great shoe",
        description="Lasts forever",
        manufacturer="Acme",
        created_at="2015-03-01 10:15:00",
        images={"image": "/t/r/trail.jpg"},
        category_ids=(4,),
    )


@pytest.fixture
def catalog(entry: CatalogEntry, categories: list[Category]) -> InMemoryCatalog:
    """In-memory catalog holding the default entry."""
    return InMemoryCatalog(entries=[entry], categories=categories)


@pytest.fixture
def store_registry(store: Store) -> InMemoryStoreRegistry:
    """Registry with the US store."""
    return InMemoryStoreRegistry([store])


@pytest.fixture
def tag_source() -> InMemoryTagSource:
    """Tags for entry 42 in several states and stores."""
    return InMemoryTagSource(
        [
            Tag(name="summer", entry_ids=frozenset({"42"}), store_ids=frozenset({1})),
            Tag(name="winter", entry_ids=frozenset({"42"}), store_ids=frozenset({2})),
            Tag(
                name="spam",
                status=TagStatus.PENDING,
                entry_ids=frozenset({"42"}),
                store_ids=frozenset({1}),
            ),
            Tag(name="outdoor", entry_ids=frozenset({"42"}), store_ids=frozenset({1})),
        ]
    )


@pytest.fixture
def pricing() -> PricingResolver:
    """Pricing resolver with a fixed clock."""
    return PricingResolver(today=lambda: TODAY)


@pytest.fixture
def environment() -> StoreEnvironment:
    """Store environment starting in the admin scope."""
    return StoreEnvironment()


@pytest.fixture
def exporter(
    catalog: InMemoryCatalog,
    pricing: PricingResolver,
    store_registry: InMemoryStoreRegistry,
    environment: StoreEnvironment,
    tag_source: InMemoryTagSource,
) -> ProductExporter:
    """Exporter wired with in-memory collaborators."""
    return ProductExporter(
        catalog=catalog,
        pricing=pricing,
        media=MediaResolver(StoreMediaService(store_registry, environment), environment),
        taxonomy=TaxonomyFlattener(catalog),
        tags=TagAggregator(AvailableTagging(tag_source)),
        variations=PriceVariationBuilder(pricing),
    )
