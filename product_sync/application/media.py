"""Media resolver.

Picks the image a store is configured to show for an entry and turns it
into an absolute URL. The media service answers for the current store
context, so resolution always runs inside an emulation of the target
store and the previous context is restored on every exit path.
"""

from collections.abc import Iterator
from contextlib import contextmanager

from product_sync.catalog.models import (
    NO_SELECTION,
    PRIMARY_IMAGE_ATTRIBUTE,
    CatalogEntry,
    Store,
)
from product_sync.catalog.providers import MediaService, StoreEmulator


@contextmanager
def emulated_store(emulator: StoreEmulator, store_id: int) -> Iterator[None]:
    """Run a block in the context of another store.

    Args:
        emulator: Store context switcher.
        store_id: Store to switch to.

    Yields:
        None while the store context is active.
    """
    token = emulator.start(store_id)
    try:
        yield
    finally:
        emulator.stop(token)


def is_valid_image(path: str | None) -> bool:
    """Check whether an image attribute value points at a file."""
    return bool(path) and path != NO_SELECTION


class MediaResolver:
    """Resolves the absolute image URL of an entry for a store."""

    def __init__(self, media: MediaService, emulator: StoreEmulator) -> None:
        """Initialize resolver.

        Args:
            media: Media URL service for the current store context.
            emulator: Store context switcher.
        """
        self.media = media
        self.emulator = emulator

    def resolve(self, entry: CatalogEntry, store: Store) -> str | None:
        """Resolve the image URL.

        The configured image attribute is used when it holds a file,
        otherwise the primary image attribute.

        Args:
            entry: Catalog entry.
            store: Store whose display configuration applies.

        Returns:
            Absolute URL, or None if the entry has no usable image.
        """
        config = store.image
        attribute = config.attribute
        path = entry.image(attribute)
        if not is_valid_image(path):
            attribute = PRIMARY_IMAGE_ATTRIBUTE
            path = entry.image(attribute)
        if not is_valid_image(path):
            return None

        with emulated_store(self.emulator, store.id):
            if not config.cached:
                return self.media.media_url(path)
            if not config.height:
                return self.media.resized_url(entry, attribute, path, config.width)
            return self.media.resized_url(
                entry, attribute, path, config.width, config.height
            )
