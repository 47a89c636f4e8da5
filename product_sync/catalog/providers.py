"""Collaborator interfaces consumed by the sync core.

Every provider is read-only from the core's point of view. Concrete
implementations live in `product_sync.infrastructure`; tests supply
their own doubles.
"""

from typing import Protocol

from product_sync.catalog.models import CatalogEntry, Category, Connection, Store
from product_sync.domain.product import Product


class CatalogEntryProvider(Protocol):
    """Looks up catalog entries and their category chains."""

    def get_entry(self, entry_id: str, store_id: int) -> CatalogEntry | None:
        """Get an entry with attribute values for a store scope."""
        ...

    def get_category_path(self, category_id: int) -> list[Category]:
        """Get the categories from the tree root down to a category."""
        ...


class StoreRegistry(Protocol):
    """Enumerates store configurations."""

    def list_stores(self) -> list[Store]:
        ...

    def get_store(self, store_id: int) -> Store | None:
        ...

    def get_default_store(self) -> Store | None:
        ...


class TagSource(Protocol):
    """Query side of the tagging subsystem."""

    def approved_tags(self, entry_id: str, store_id: int) -> list[str]:
        """Get approved tag names visible in a store, in system order."""
        ...


class ConnectionRegistry(Protocol):
    """Finds the personalization-service account linked to a store."""

    def find(self, store: Store) -> Connection | None:
        ...


class ExportClient(Protocol):
    """Transport for re-index requests."""

    def send(self, product: Product, connection: Connection, store: Store) -> None:
        """Send a re-index request.

        Raises:
            ExportClientError: If the request fails.
        """
        ...


class StoreEmulator(Protocol):
    """Switches the execution context to another store and back."""

    def start(self, store_id: int) -> object:
        """Enter a store context.

        Returns:
            Token describing the previous context, passed back to `stop`.
        """
        ...

    def stop(self, token: object) -> None:
        ...


class MediaService(Protocol):
    """Builds media URLs for the store context currently in effect."""

    def media_url(self, path: str) -> str:
        """Get the URL of an original media file."""
        ...

    def resized_url(
        self,
        entry: CatalogEntry,
        attribute: str,
        path: str,
        width: int | None,
        height: int | None = None,
    ) -> str:
        """Get the URL of a resized copy from the image cache."""
        ...
