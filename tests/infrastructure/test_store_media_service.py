"""Tests for the store media service."""

import pytest

from product_sync.catalog.models import CatalogEntry
from product_sync.domain.exceptions import StoreNotFoundError
from product_sync.infrastructure.environment import StoreEnvironment
from product_sync.infrastructure.media import StoreMediaService
from product_sync.infrastructure.memory import InMemoryStoreRegistry


@pytest.fixture
def media(store_registry: InMemoryStoreRegistry) -> StoreMediaService:
    """Media service whose environment starts in store 1."""
    return StoreMediaService(store_registry, StoreEnvironment(initial_store_id=1))


class TestStoreMediaService:
    """Tests for StoreMediaService."""

    def test_media_url(self, media: StoreMediaService) -> None:
        """Original files live under the product media folder."""
        assert (
            media.media_url("/t/r/trail.jpg")
            == "https://media.example.com/catalog/product/t/r/trail.jpg"
        )

    def test_resized_url(self, media: StoreMediaService, entry: CatalogEntry) -> None:
        """Resized copies are addressed by store, attribute and size."""
        assert media.resized_url(entry, "small_image", "/t/r/trail.jpg", 135, 135) == (
            "https://media.example.com/catalog/product/cache/1/small_image/135x135/t/r/trail.jpg"
        )

    def test_resized_url_width_only(self, media: StoreMediaService, entry: CatalogEntry) -> None:
        """A width-only resize leaves the height empty."""
        assert media.resized_url(entry, "image", "t/r/trail.jpg", 300).endswith(
            "/cache/1/image/300x/t/r/trail.jpg"
        )

    def test_admin_scope_has_no_media_host(
        self, store_registry: InMemoryStoreRegistry
    ) -> None:
        """Outside a storefront store there is no media URL."""
        media = StoreMediaService(store_registry, StoreEnvironment())
        with pytest.raises(StoreNotFoundError):
            media.media_url("/t/r/trail.jpg")

    def test_follows_environment(
        self, store_registry: InMemoryStoreRegistry
    ) -> None:
        """The current store is read on every call."""
        environment = StoreEnvironment()
        media = StoreMediaService(store_registry, environment)
        token = environment.start(1)
        try:
            assert media.media_url("a.jpg").startswith("https://media.example.com/")
        finally:
            environment.stop(token)
