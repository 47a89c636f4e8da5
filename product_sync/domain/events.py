"""Domain events for catalog changes."""

from dataclasses import dataclass
from typing import Any, ClassVar

from product_sync.domain.base import DomainEvent

ALL_STORES = 0


@dataclass(frozen=True)
class CatalogEntrySaved(DomainEvent):
    """Event raised after a catalog entry is saved.

    Attributes:
        entry_id: ID of the saved entry.
        store_id: Store scope of the save; 0 means all stores.
    """

    event_type: ClassVar[str] = "catalog.entry_saved"

    entry_id: str = ""
    store_id: int = ALL_STORES

    def _payload(self) -> dict[str, Any]:
        """Get event-specific payload."""
        return {
            "entry_id": self.entry_id,
            "store_id": self.store_id,
        }
