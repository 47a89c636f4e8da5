"""Tests for the product sync service."""

from decimal import Decimal
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from structlog.testing import capture_logs

from product_sync.application import service as service_module
from product_sync.application.pricing import PricingResolver
from product_sync.application.service import (
    ProductSyncService,
    create_service_from_settings,
    get_product_sync_service,
)
from product_sync.catalog.models import Connection
from product_sync.domain import CatalogEntrySaved
from product_sync.domain.exceptions import EntryNotFoundError, StoreNotFoundError
from product_sync.infrastructure.config import Settings
from product_sync.infrastructure.environment import StoreEnvironment
from product_sync.infrastructure.media import StoreMediaService
from product_sync.infrastructure.memory import (
    InMemoryCatalog,
    InMemoryConnectionRegistry,
    InMemoryStoreRegistry,
    InMemoryTagSource,
)

FIXTURE_PATH = Path(__file__).parents[2] / "fixtures" / "catalog.json"


@pytest.fixture
def client() -> MagicMock:
    """Re-index client double."""
    return MagicMock()


def make_service(
    catalog: InMemoryCatalog,
    stores: InMemoryStoreRegistry,
    tag_source: InMemoryTagSource,
    pricing: PricingResolver,
    client: MagicMock,
    **kwargs: bool,
) -> ProductSyncService:
    environment = StoreEnvironment()
    return ProductSyncService.create(
        catalog=catalog,
        stores=stores,
        connections=InMemoryConnectionRegistry(
            {1: Connection(account_name="shop", tokens={"sso": "s", "products": "p"})}
        ),
        client=client,
        media=StoreMediaService(stores, environment),
        emulator=environment,
        tag_source=tag_source,
        pricing=pricing,
        **kwargs,
    )


@pytest.fixture
def service(
    catalog: InMemoryCatalog,
    store_registry: InMemoryStoreRegistry,
    tag_source: InMemoryTagSource,
    pricing: PricingResolver,
    client: MagicMock,
) -> ProductSyncService:
    """Service wired with in-memory collaborators."""
    return make_service(catalog, store_registry, tag_source, pricing, client)


class TestBuildProduct:
    """Tests for build_product."""

    def test_default_store(self, service: ProductSyncService) -> None:
        """Without a store ID the default store is used."""
        product = service.build_product("42")
        assert product.url.endswith("?___store=default")
        assert product.price.amount == Decimal("88.00")

    def test_explicit_store(self, service: ProductSyncService) -> None:
        """A known store ID is used as given."""
        assert service.build_product("42", 1).product_id == "42"

    def test_unknown_store(self, service: ProductSyncService) -> None:
        """Unknown store IDs raise StoreNotFoundError."""
        with pytest.raises(StoreNotFoundError):
            service.build_product("42", 99)

    def test_unknown_entry(self, service: ProductSyncService) -> None:
        """Unknown entries raise EntryNotFoundError."""
        with pytest.raises(EntryNotFoundError):
            service.build_product("missing")

    def test_no_default_store(
        self,
        catalog: InMemoryCatalog,
        tag_source: InMemoryTagSource,
        pricing: PricingResolver,
        client: MagicMock,
    ) -> None:
        """An empty registry has no default store."""
        service = make_service(catalog, InMemoryStoreRegistry(), tag_source, pricing, client)
        with pytest.raises(StoreNotFoundError, match="No default store configured"):
            service.build_product("42")

    def test_tagging_disabled(
        self,
        catalog: InMemoryCatalog,
        store_registry: InMemoryStoreRegistry,
        tag_source: InMemoryTagSource,
        pricing: PricingResolver,
        client: MagicMock,
    ) -> None:
        """With tagging switched off only the capability tag is exported."""
        service = make_service(
            catalog, store_registry, tag_source, pricing, client, tagging_enabled=False
        )
        assert service.build_product("42").tags["tag1"] == ("add-to-cart",)


class TestNotifications:
    """Tests for the notification entry points."""

    def test_on_entry_saved(self, service: ProductSyncService, client: MagicMock) -> None:
        """Saved entries are sent to connected stores."""
        report = service.on_entry_saved("42", 0)
        assert [o.store_id for o in report.sent] == [1]
        client.send.assert_called_once()

    def test_handle_logs_event(self, service: ProductSyncService) -> None:
        """Events are logged before they are dispatched."""
        event = CatalogEntrySaved(entry_id="42", store_id=1)
        with capture_logs() as logs:
            report = service.handle(event)

        assert logs[0]["event"] == "Handling catalog event"
        assert logs[0]["event_id"] == str(event.event_id)
        assert logs[0]["event_type"] == "catalog.entry_saved"
        assert logs[0]["payload"] == {"entry_id": "42", "store_id": 1}
        assert len(report.sent) == 1

    def test_module_disabled(
        self,
        catalog: InMemoryCatalog,
        store_registry: InMemoryStoreRegistry,
        tag_source: InMemoryTagSource,
        pricing: PricingResolver,
        client: MagicMock,
    ) -> None:
        """A disabled module never sends."""
        service = make_service(
            catalog, store_registry, tag_source, pricing, client, enabled=False
        )
        assert service.on_entry_saved("42", 0).outcomes == []
        client.send.assert_not_called()


class TestCreateFromSettings:
    """Tests for settings-based wiring."""

    def test_fixture_catalog(self) -> None:
        """The shipped fixture yields a fully priced multi-currency product."""
        service = create_service_from_settings(
            Settings(catalog_fixture_path=str(FIXTURE_PATH))
        )

        product = service.build_product("42")

        assert product.url == "https://shop.example.com/trail-runner.html?___store=default"
        assert product.image_url == (
            "https://media.example.com/catalog/product/cache/1/image/300x300/t/r/trail.jpg"
        )
        assert product.price.amount == Decimal("88.00")
        assert product.list_price.amount == Decimal("110.00")
        assert product.tags["tag1"] == ("summer", "add-to-cart")
        assert product.categories == ("/Footwear/Running",)
        assert product.price_variation_id == "USD"
        assert [(v.variation_id, v.price.amount) for v in product.price_variations] == [
            ("EUR", Decimal("79.20")),
            ("GBP", Decimal("70.40")),
        ]

    def test_store_scoped_values(self) -> None:
        """Store-scoped entry values are used for that store."""
        service = create_service_from_settings(
            Settings(catalog_fixture_path=str(FIXTURE_PATH))
        )

        product = service.build_product("42", 2)

        assert product.name == "Chaussure de trail"
        assert product.url == "https://shop.example.com/fr/chaussure-trail.html?___store=fr"
        assert product.price.amount == Decimal("95.00")
        assert product.currency == "EUR"
        assert product.image_url == (
            "https://shop.example.com/fr/media/catalog/product/t/r/trail.jpg"
        )

    def test_without_fixture(self) -> None:
        """Without a fixture there are no stores."""
        service = create_service_from_settings(Settings(catalog_fixture_path=None))
        with pytest.raises(StoreNotFoundError):
            service.build_product("42")


class TestGlobalService:
    """Tests for the service singleton."""

    def test_singleton(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The service is created once and reused."""
        created = MagicMock(spec=ProductSyncService)
        factory = MagicMock(return_value=created)
        monkeypatch.setattr(service_module, "_product_sync_service", None)
        monkeypatch.setattr(service_module, "create_service_from_settings", factory)

        assert get_product_sync_service() is created
        assert get_product_sync_service() is created
        factory.assert_called_once_with()
