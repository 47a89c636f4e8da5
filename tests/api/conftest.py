"""Shared fixtures for API tests."""

from collections.abc import Iterator
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from product_sync.api.products import get_service
from product_sync.application.pricing import PricingResolver
from product_sync.application.service import ProductSyncService
from product_sync.catalog.models import Connection
from product_sync.infrastructure.environment import StoreEnvironment
from product_sync.infrastructure.media import StoreMediaService
from product_sync.infrastructure.memory import (
    InMemoryCatalog,
    InMemoryConnectionRegistry,
    InMemoryStoreRegistry,
    InMemoryTagSource,
)
from product_sync.main import app


@pytest.fixture
def export_client() -> MagicMock:
    """Re-index client double."""
    return MagicMock()


@pytest.fixture
def service(
    catalog: InMemoryCatalog,
    store_registry: InMemoryStoreRegistry,
    tag_source: InMemoryTagSource,
    pricing: PricingResolver,
    export_client: MagicMock,
) -> ProductSyncService:
    """Service over the in-memory test catalog; store 1 is connected."""
    environment = StoreEnvironment()
    return ProductSyncService.create(
        catalog=catalog,
        stores=store_registry,
        connections=InMemoryConnectionRegistry(
            {1: Connection(account_name="shop-us", tokens={"sso": "s", "products": "p"})}
        ),
        client=export_client,
        media=StoreMediaService(store_registry, environment),
        emulator=environment,
        tag_source=tag_source,
        pricing=pricing,
    )


@pytest.fixture
def client(service: ProductSyncService) -> Iterator[TestClient]:
    """Create test client using the test service."""
    app.dependency_overrides[get_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()
