"""Product sync application service.

Entry point for callers: builds products on demand and forwards
catalog-entry-saved events to the change notifier.
"""

import structlog

from product_sync.application.change_notifier import ChangeNotifier, NotificationReport
from product_sync.application.media import MediaResolver
from product_sync.application.price_variations import PriceVariationBuilder
from product_sync.application.pricing import PricingResolver
from product_sync.application.product_exporter import ProductExporter
from product_sync.application.tags import TagAggregator, select_tagging_provider
from product_sync.application.taxonomy import TaxonomyFlattener
from product_sync.catalog.models import Store
from product_sync.catalog.providers import (
    CatalogEntryProvider,
    ConnectionRegistry,
    ExportClient,
    MediaService,
    StoreEmulator,
    StoreRegistry,
    TagSource,
)
from product_sync.domain.events import CatalogEntrySaved
from product_sync.domain.exceptions import StoreNotFoundError
from product_sync.domain.product import Product
from product_sync.infrastructure.config import Settings, settings
from product_sync.infrastructure.environment import StoreEnvironment
from product_sync.infrastructure.export_client import HttpReindexClient
from product_sync.infrastructure.media import StoreMediaService
from product_sync.infrastructure.memory import load_collaborators

logger = structlog.get_logger()


class ProductSyncService:
    """Facade over the product exporter and change notifier."""

    def __init__(
        self,
        exporter: ProductExporter,
        notifier: ChangeNotifier,
        stores: StoreRegistry,
    ) -> None:
        """Initialize service.

        Args:
            exporter: Product exporter.
            notifier: Change notifier.
            stores: Store registry.
        """
        self.exporter = exporter
        self.notifier = notifier
        self.stores = stores

    @classmethod
    def create(
        cls,
        catalog: CatalogEntryProvider,
        stores: StoreRegistry,
        connections: ConnectionRegistry,
        client: ExportClient,
        media: MediaService,
        emulator: StoreEmulator,
        tag_source: TagSource | None = None,
        pricing: PricingResolver | None = None,
        tagging_enabled: bool = True,
        enabled: bool = True,
    ) -> "ProductSyncService":
        """Wire the sync components from their collaborators.

        Args:
            catalog: Catalog entry provider.
            stores: Store registry.
            connections: Connection registry.
            client: Re-index transport.
            media: Media URL service.
            emulator: Store context switcher.
            tag_source: Tagging subsystem, if installed.
            pricing: Pricing resolver (a default one is created if omitted).
            tagging_enabled: Whether free-form tags are exported.
            enabled: Whether saved entries trigger re-index requests.

        Returns:
            Wired service.
        """
        pricing = pricing or PricingResolver()
        exporter = ProductExporter(
            catalog=catalog,
            pricing=pricing,
            media=MediaResolver(media, emulator),
            taxonomy=TaxonomyFlattener(catalog),
            tags=TagAggregator(select_tagging_provider(tagging_enabled, tag_source)),
            variations=PriceVariationBuilder(pricing),
        )
        notifier = ChangeNotifier(
            exporter=exporter,
            stores=stores,
            connections=connections,
            client=client,
            enabled=enabled,
        )
        return cls(exporter=exporter, notifier=notifier, stores=stores)

    def resolve_store(self, store_id: int | None = None) -> Store:
        """Resolve a store, falling back to the default store.

        Args:
            store_id: Store ID, or None for the default store.

        Returns:
            The store.

        Raises:
            StoreNotFoundError: If the store does not exist.
        """
        store = (
            self.stores.get_default_store()
            if store_id is None
            else self.stores.get_store(store_id)
        )
        if store is None:
            raise StoreNotFoundError(store_id)
        return store

    def build_product(self, entry_id: str, store_id: int | None = None) -> Product:
        """Build the Product of an entry for a store.

        Args:
            entry_id: Entry identifier.
            store_id: Store ID, or None for the default store.

        Returns:
            Product record.

        Raises:
            EntryNotFoundError: If the entry does not exist.
            StoreNotFoundError: If the store does not exist.
        """
        return self.exporter.export(entry_id, self.resolve_store(store_id))

    def on_entry_saved(self, entry_id: str, store_scope_id: int) -> NotificationReport:
        """Notify the personalization service about a saved entry.

        Args:
            entry_id: Saved entry.
            store_scope_id: Store scope of the save; 0 for all stores.

        Returns:
            Per-store outcomes. Never raises.
        """
        return self.notifier.on_entry_saved(entry_id, store_scope_id)

    def handle(self, event: CatalogEntrySaved) -> NotificationReport:
        """Handle a catalog-entry-saved event."""
        logger.info("Handling catalog event", **event.to_dict())
        return self.notifier.handle(event)


def create_service_from_settings(config: Settings | None = None) -> ProductSyncService:
    """Create a service backed by the in-memory collaborators.

    Args:
        config: Settings to use (defaults to the global settings).

    Returns:
        Wired service.
    """
    config = config or settings
    collaborators = load_collaborators(config.catalog_fixture_path)
    environment = StoreEnvironment()
    return ProductSyncService.create(
        catalog=collaborators.catalog,
        stores=collaborators.stores,
        connections=collaborators.connections,
        client=HttpReindexClient(
            base_url=config.personalization_api_url,
            timeout=config.personalization_api_timeout,
        ),
        media=StoreMediaService(collaborators.stores, environment),
        emulator=environment,
        tag_source=collaborators.tags,
        tagging_enabled=config.tagging_enabled,
        enabled=config.module_enabled,
    )


# Global service instance
_product_sync_service: ProductSyncService | None = None


def get_product_sync_service() -> ProductSyncService:
    """Get or create the product sync service instance.

    Returns:
        ProductSyncService instance.
    """
    global _product_sync_service
    if _product_sync_service is None:
        _product_sync_service = create_service_from_settings()
    return _product_sync_service
