"""Media URL service.

Builds product image URLs for whichever store is current in the
StoreEnvironment. Resized images are addressed through the image
cache layout `catalog/product/cache/<store>/<attribute>/<w>x<h>/<file>`.
"""

import structlog

from product_sync.catalog.models import CatalogEntry, Store
from product_sync.catalog.providers import StoreRegistry
from product_sync.domain.exceptions import StoreNotFoundError
from product_sync.infrastructure.environment import StoreEnvironment

logger = structlog.get_logger()

MEDIA_PATH = "catalog/product"


class StoreMediaService:
    """Media service bound to the current store context."""

    def __init__(self, stores: StoreRegistry, environment: StoreEnvironment) -> None:
        """Initialize media service.

        Args:
            stores: Registry used to look up the current store.
            environment: Store context holder.
        """
        self.stores = stores
        self.environment = environment

    def _current_store(self) -> Store:
        store_id = self.environment.current_store_id
        store = self.stores.get_store(store_id)
        if store is None:
            raise StoreNotFoundError(store_id)
        return store

    def media_url(self, path: str) -> str:
        """Get the URL of an original media file.

        Args:
            path: Media file path relative to the product media folder.

        Returns:
            Absolute URL on the current store's media host.

        Raises:
            StoreNotFoundError: If the current store has no configuration.
        """
        store = self._current_store()
        return f"{store.media_url.rstrip('/')}/{MEDIA_PATH}/{path.lstrip('/')}"

    def resized_url(
        self,
        entry: CatalogEntry,
        attribute: str,
        path: str,
        width: int | None,
        height: int | None = None,
    ) -> str:
        """Get the URL of a resized copy from the image cache.

        Args:
            entry: Entry the image belongs to.
            attribute: Image attribute the file was taken from.
            path: Media file path.
            width: Target width.
            height: Target height; omitted for width-only resizes.

        Returns:
            Absolute URL of the cached copy.

        Raises:
            StoreNotFoundError: If the current store has no configuration.
        """
        store = self._current_store()
        size = f"{width or ''}x{height or ''}"
        logger.debug(
            "Resolving resized image",
            entry_id=entry.id,
            store_id=store.id,
            attribute=attribute,
            size=size,
        )
        return (
            f"{store.media_url.rstrip('/')}/{MEDIA_PATH}/cache/{store.id}/"
            f"{attribute}/{size}/{path.lstrip('/')}"
        )
