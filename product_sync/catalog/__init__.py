"""Catalog records and collaborator interfaces.

Describes what the sync core reads from the commerce system: catalog
entries, the category tree, stores, tags and external-service
connections.
"""

from product_sync.catalog.models import (
    NO_SELECTION,
    PRIMARY_IMAGE_ATTRIBUTE,
    REQUIRED_TOKENS,
    CatalogEntry,
    Category,
    Connection,
    ConnectionStatus,
    ImageDisplayConfig,
    Store,
    Tag,
    TagStatus,
)
from product_sync.catalog.providers import (
    CatalogEntryProvider,
    ConnectionRegistry,
    ExportClient,
    MediaService,
    StoreEmulator,
    StoreRegistry,
    TagSource,
)
from product_sync.catalog.taxonomy import CategoryTree

__all__ = [
    # Models
    "NO_SELECTION",
    "PRIMARY_IMAGE_ATTRIBUTE",
    "REQUIRED_TOKENS",
    "CatalogEntry",
    "Category",
    "Connection",
    "ConnectionStatus",
    "ImageDisplayConfig",
    "Store",
    "Tag",
    "TagStatus",
    # Taxonomy
    "CategoryTree",
    # Providers
    "CatalogEntryProvider",
    "ConnectionRegistry",
    "ExportClient",
    "MediaService",
    "StoreEmulator",
    "StoreRegistry",
    "TagSource",
]
