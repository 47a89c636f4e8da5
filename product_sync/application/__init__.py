"""Application layer - product export and change notification.

Components, leaves first:

- **PricingResolver**: tax-inclusive final and list prices per currency
- **MediaResolver**: absolute image URL under store emulation
- **TaxonomyFlattener**: full category path strings
- **TagAggregator**: free-form tags plus the "add-to-cart" capability tag
- **PriceVariationBuilder**: one priced variation per non-base currency
- **ProductExporter**: assembles the Product record
- **ChangeNotifier**: re-index requests for saved entries
"""

from product_sync.application.change_notifier import (
    ChangeNotifier,
    NotificationReport,
    StoreOutcome,
    StoreOutcomeStatus,
)
from product_sync.application.media import MediaResolver, emulated_store, is_valid_image
from product_sync.application.price_variations import (
    OmittedVariation,
    PriceVariationBuilder,
    VariationBuildResult,
)
from product_sync.application.pricing import PriceQuote, PricingResolver
from product_sync.application.product_exporter import (
    ProductExporter,
    build_product_url,
    parse_date_published,
)
from product_sync.application.service import (
    ProductSyncService,
    create_service_from_settings,
    get_product_sync_service,
)
from product_sync.application.tags import (
    ADD_TO_CART_TAG,
    AvailableTagging,
    TagAggregator,
    TaggingProvider,
    UnavailableTagging,
    select_tagging_provider,
)
from product_sync.application.taxonomy import TaxonomyFlattener, build_category_string

__all__ = [
    # Pricing
    "PriceQuote",
    "PricingResolver",
    # Media
    "MediaResolver",
    "emulated_store",
    "is_valid_image",
    # Taxonomy
    "TaxonomyFlattener",
    "build_category_string",
    # Tags
    "ADD_TO_CART_TAG",
    "AvailableTagging",
    "TagAggregator",
    "TaggingProvider",
    "UnavailableTagging",
    "select_tagging_provider",
    # Price variations
    "OmittedVariation",
    "PriceVariationBuilder",
    "VariationBuildResult",
    # Exporter
    "ProductExporter",
    "build_product_url",
    "parse_date_published",
    # Notifier
    "ChangeNotifier",
    "NotificationReport",
    "StoreOutcome",
    "StoreOutcomeStatus",
    # Service
    "ProductSyncService",
    "create_service_from_settings",
    "get_product_sync_service",
]
