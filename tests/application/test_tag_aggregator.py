"""Tests for tag aggregation."""

from dataclasses import replace

from structlog.testing import capture_logs

from product_sync.application.tags import (
    ADD_TO_CART_TAG,
    AvailableTagging,
    TagAggregator,
    UnavailableTagging,
    select_tagging_provider,
)
from product_sync.catalog.models import CatalogEntry, Store
from product_sync.infrastructure.memory import InMemoryTagSource


class TestSelectTaggingProvider:
    """Tests for provider selection."""

    def test_available(self, tag_source: InMemoryTagSource) -> None:
        """Enabled and installed tagging is available."""
        assert isinstance(select_tagging_provider(True, tag_source), AvailableTagging)

    def test_disabled(self, tag_source: InMemoryTagSource) -> None:
        """Disabled tagging is unavailable."""
        with capture_logs() as logs:
            provider = select_tagging_provider(False, tag_source)
        assert isinstance(provider, UnavailableTagging)
        assert logs[0]["event"] == "Tagging subsystem unavailable"

    def test_not_installed(self) -> None:
        """Tagging without storage is unavailable."""
        assert isinstance(select_tagging_provider(True, None), UnavailableTagging)


class TestTagAggregator:
    """Tests for TagAggregator."""

    def test_approved_store_tags_then_add_to_cart(
        self, tag_source: InMemoryTagSource, entry: CatalogEntry, store: Store
    ) -> None:
        """Approved tags of the store come first, then add-to-cart."""
        aggregator = TagAggregator(AvailableTagging(tag_source))
        assert aggregator.aggregate(entry, store) == ["summer", "outdoor", ADD_TO_CART_TAG]

    def test_configurable_entry_has_no_add_to_cart(
        self, tag_source: InMemoryTagSource, entry: CatalogEntry, store: Store
    ) -> None:
        """Entries needing options cannot be added to the cart directly."""
        aggregator = TagAggregator(AvailableTagging(tag_source))
        tags = aggregator.aggregate(replace(entry, can_configure=True), store)
        assert tags == ["summer", "outdoor"]

    def test_tagging_unavailable(self, entry: CatalogEntry, store: Store) -> None:
        """Without tagging only the capability tag remains."""
        aggregator = TagAggregator(UnavailableTagging())
        assert aggregator.aggregate(entry, store) == [ADD_TO_CART_TAG]

    def test_nothing_to_tag(self, entry: CatalogEntry, store: Store) -> None:
        """Configurable entries without tags get an empty list."""
        aggregator = TagAggregator(UnavailableTagging())
        assert aggregator.aggregate(replace(entry, can_configure=True), store) == []

    def test_provider_list_left_untouched(self, entry: CatalogEntry, store: Store) -> None:
        """Aggregating twice over a shared provider list adds the tag once each time."""
        shared = ["summer"]

        class SharedTagging:
            def tags_for(self, entry: CatalogEntry, store: Store) -> list[str]:
                return shared

        aggregator = TagAggregator(SharedTagging())
        aggregator.aggregate(entry, store)
        assert aggregator.aggregate(entry, store) == ["summer", ADD_TO_CART_TAG]
        assert shared == ["summer"]
