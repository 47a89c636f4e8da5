"""Product exporter.

Assembles the normalized Product record for one (catalog entry, store)
pair from the pricing, media, taxonomy, tag and price-variation
components. Building has no side effects besides logging.
"""

from datetime import date, datetime

import httpx
import structlog

from product_sync.application.media import MediaResolver
from product_sync.application.price_variations import PriceVariationBuilder
from product_sync.application.pricing import PricingResolver
from product_sync.application.tags import TagAggregator
from product_sync.application.taxonomy import TaxonomyFlattener
from product_sync.catalog.models import CatalogEntry, Store
from product_sync.catalog.providers import CatalogEntryProvider
from product_sync.domain.exceptions import DomainError, EntryNotFoundError
from product_sync.domain.product import PriceVariation, Product, empty_tags
from product_sync.domain.value_objects import Availability, CurrencyCode

logger = structlog.get_logger()

STORE_PARAM = "___store"


def build_product_url(entry: CatalogEntry, store: Store) -> str:
    """Build the absolute storefront URL of a product page.

    The URL always names the store in the `___store` query parameter so
    stores sharing one domain stay distinguishable. It never carries a
    session ID or a category path.

    Args:
        entry: Catalog entry.
        store: Store the URL is for.

    Returns:
        Absolute product page URL.
    """
    base = httpx.URL(store.base_url.rstrip("/") + "/")
    path = f"{entry.url_key}.html" if entry.url_key else f"catalog/product/view/id/{entry.id}"
    return str(base.join(path).copy_merge_params({STORE_PARAM: store.code}))


def parse_date_published(created_at: str | None) -> date | None:
    """Parse a catalog creation timestamp.

    Args:
        created_at: Timestamp such as "2015-03-01 10:15:00" or ISO 8601.

    Returns:
        The date part, or None if missing or unparsable.
    """
    if not created_at:
        return None
    try:
        return datetime.fromisoformat(created_at.strip()).date()
    except ValueError:
        return None


class ProductExporter:
    """Builds Product records from catalog entries.

    Example usage:
        exporter = ProductExporter(catalog, pricing, media, taxonomy, tags, variations)
        product = exporter.export("42", store)
    """

    def __init__(
        self,
        catalog: CatalogEntryProvider,
        pricing: PricingResolver,
        media: MediaResolver,
        taxonomy: TaxonomyFlattener,
        tags: TagAggregator,
        variations: PriceVariationBuilder,
    ) -> None:
        """Initialize exporter.

        Args:
            catalog: Catalog entry provider.
            pricing: Pricing resolver.
            media: Media resolver.
            taxonomy: Taxonomy flattener.
            tags: Tag aggregator.
            variations: Price variation builder.
        """
        self.catalog = catalog
        self.pricing = pricing
        self.media = media
        self.taxonomy = taxonomy
        self.tags = tags
        self.variations = variations

    def export(self, entry_id: str, store: Store) -> Product:
        """Load an entry in a store scope and build its Product.

        Args:
            entry_id: Entry identifier.
            store: Target store.

        Returns:
            Product for the store.

        Raises:
            EntryNotFoundError: If the entry does not exist.
        """
        entry = self.catalog.get_entry(entry_id, store.id)
        if entry is None:
            raise EntryNotFoundError(entry_id)
        return self.build(entry, store)

    def build(self, entry: CatalogEntry, store: Store) -> Product:
        """Build the Product of an entry for a store.

        Args:
            entry: Catalog entry with the store's attribute values.
            store: Target store.

        Returns:
            Product record.
        """
        base_currency = str(CurrencyCode(store.base_currency))
        quote = self.pricing.resolve(entry, store, base_currency)

        tags = empty_tags()
        tag1 = self.tags.aggregate(entry, store)
        if tag1:
            tags["tag1"] = tuple(tag1)

        price_variation_id: str | None = None
        price_variations: list[PriceVariation] = []
        if store.multi_currency:
            # The base currency code doubles as the variation ID.
            price_variation_id = base_currency
            if store.variant_pricing:
                price_variations = self.variations.build(entry, store).variations

        product = Product(
            url=build_product_url(entry, store),
            product_id=entry.id,
            name=entry.name,
            image_url=self._image_url(entry, store),
            price=quote.price,
            list_price=quote.list_price,
            currency=base_currency,
            availability=Availability.from_salable(entry.is_salable),
            price_variation_id=price_variation_id,
            tags=tags,
            categories=tuple(self.taxonomy.flatten(entry)),
            short_description=entry.short_description,
            description=entry.description,
            brand=entry.manufacturer,
            date_published=parse_date_published(entry.created_at),
            price_variations=tuple(price_variations),
        )

        logger.debug(
            "Built product",
            entry_id=entry.id,
            store_id=store.id,
            variations=len(product.price_variations),
        )
        return product

    def _image_url(self, entry: CatalogEntry, store: Store) -> str | None:
        try:
            return self.media.resolve(entry, store)
        except DomainError as e:
            logger.warning(
                "Image URL unavailable",
                entry_id=entry.id,
                store_id=store.id,
                error=e.message,
            )
            return None
