"""Tag aggregator.

Builds the "tag1" list of a product: the approved free-form tags visible
in the store, followed by the "add-to-cart" capability tag when the
entry can be bought without choosing options first.
"""

from typing import Protocol

import structlog

from product_sync.catalog.models import CatalogEntry, Store
from product_sync.catalog.providers import TagSource

logger = structlog.get_logger()

ADD_TO_CART_TAG = "add-to-cart"


class TaggingProvider(Protocol):
    """Free-form tag lookup, available or not."""

    def tags_for(self, entry: CatalogEntry, store: Store) -> list[str]:
        ...


class AvailableTagging:
    """Tagging provider backed by the tagging subsystem."""

    def __init__(self, source: TagSource) -> None:
        self.source = source

    def tags_for(self, entry: CatalogEntry, store: Store) -> list[str]:
        """Get approved tags of an entry visible in a store.

        Args:
            entry: Catalog entry.
            store: Store filter.

        Returns:
            Tag names in system order.
        """
        return list(self.source.approved_tags(entry.id, store.id))


class UnavailableTagging:
    """Tagging provider used when the tagging subsystem is disabled."""

    def tags_for(self, entry: CatalogEntry, store: Store) -> list[str]:
        return []


def select_tagging_provider(enabled: bool, source: TagSource | None) -> TaggingProvider:
    """Choose the tagging provider variant.

    Args:
        enabled: Whether tagging is switched on.
        source: Tag storage, if the subsystem is installed.

    Returns:
        AvailableTagging when enabled and installed, UnavailableTagging otherwise.
    """
    if enabled and source is not None:
        return AvailableTagging(source)
    logger.info("Tagging subsystem unavailable", enabled=enabled)
    return UnavailableTagging()


class TagAggregator:
    """Builds the free-form and capability tags of an entry."""

    def __init__(self, tagging: TaggingProvider) -> None:
        self.tagging = tagging

    def aggregate(self, entry: CatalogEntry, store: Store) -> list[str]:
        """Build the tag list.

        Args:
            entry: Catalog entry.
            store: Store whose tags are visible.

        Returns:
            Free-form tags, then "add-to-cart" if the entry needs no configuration.
        """
        tags = list(self.tagging.tags_for(entry, store))
        if not entry.can_configure:
            tags.append(ADD_TO_CART_TAG)
        return tags
