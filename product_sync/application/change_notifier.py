"""Change notifier.

Reacts to catalog-entry-saved events by sending a re-index request for
the entry to the personalization service, once per affected store.

Stores without a connected account are skipped. A failure for one store
is logged and recorded in the report; it never stops the other stores
and never reaches the code that saved the entry.
"""

from dataclasses import dataclass, field
from enum import Enum

import structlog

from product_sync.application.product_exporter import ProductExporter
from product_sync.catalog.models import Store
from product_sync.catalog.providers import ConnectionRegistry, ExportClient, StoreRegistry
from product_sync.domain.events import ALL_STORES, CatalogEntrySaved
from product_sync.domain.exceptions import StoreNotFoundError

logger = structlog.get_logger()


class StoreOutcomeStatus(str, Enum):
    """Result of notifying one store."""

    SENT = "sent"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class StoreOutcome:
    """Notification outcome for one store.

    Attributes:
        store_id: Store ID.
        status: Outcome status.
        reason: Skip reason or error message.
    """

    store_id: int
    status: StoreOutcomeStatus
    reason: str | None = None


@dataclass
class NotificationReport:
    """Outcomes of one entry-saved notification.

    Attributes:
        entry_id: Saved entry.
        outcomes: One outcome per affected store, in processing order.
    """

    entry_id: str
    outcomes: list[StoreOutcome] = field(default_factory=list)

    def _with_status(self, status: StoreOutcomeStatus) -> list[StoreOutcome]:
        return [o for o in self.outcomes if o.status == status]

    @property
    def sent(self) -> list[StoreOutcome]:
        return self._with_status(StoreOutcomeStatus.SENT)

    @property
    def skipped(self) -> list[StoreOutcome]:
        return self._with_status(StoreOutcomeStatus.SKIPPED)

    @property
    def failed(self) -> list[StoreOutcome]:
        return self._with_status(StoreOutcomeStatus.FAILED)


class ChangeNotifier:
    """Dispatches re-index requests for saved catalog entries."""

    def __init__(
        self,
        exporter: ProductExporter,
        stores: StoreRegistry,
        connections: ConnectionRegistry,
        client: ExportClient,
        enabled: bool = True,
    ) -> None:
        """Initialize notifier.

        Args:
            exporter: Product exporter.
            stores: Store registry.
            connections: Connection registry.
            client: Re-index transport.
            enabled: Master switch; a disabled notifier does nothing.
        """
        self.exporter = exporter
        self.stores = stores
        self.connections = connections
        self.client = client
        self.enabled = enabled

    def handle(self, event: CatalogEntrySaved) -> NotificationReport:
        """Handle a catalog-entry-saved event.

        Args:
            event: The saved-entry event.

        Returns:
            Per-store outcomes.
        """
        return self.on_entry_saved(event.entry_id, event.store_id)

    def on_entry_saved(self, entry_id: str, store_scope_id: int) -> NotificationReport:
        """Send re-index requests for a saved entry.

        Args:
            entry_id: Saved entry.
            store_scope_id: Store the entry was saved in; 0 for all stores.

        Returns:
            Per-store outcomes. Never raises.
        """
        report = NotificationReport(entry_id=entry_id)
        if not self.enabled:
            logger.debug("Product sync disabled, skipping notification", entry_id=entry_id)
            return report

        try:
            stores = self._affected_stores(store_scope_id)
        except Exception as e:
            logger.exception(
                "Failed to resolve stores for re-index",
                entry_id=entry_id,
                store_scope_id=store_scope_id,
            )
            report.outcomes.append(
                StoreOutcome(store_scope_id, StoreOutcomeStatus.FAILED, str(e))
            )
            return report

        for store in stores:
            report.outcomes.append(self._notify_store(entry_id, store))

        logger.info(
            "Re-index notification finished",
            entry_id=entry_id,
            store_scope_id=store_scope_id,
            sent=len(report.sent),
            skipped=len(report.skipped),
            failed=len(report.failed),
        )
        return report

    def _affected_stores(self, store_scope_id: int) -> list[Store]:
        if store_scope_id == ALL_STORES:
            return self.stores.list_stores()
        store = self.stores.get_store(store_scope_id)
        if store is None:
            raise StoreNotFoundError(store_scope_id)
        return [store]

    def _notify_store(self, entry_id: str, store: Store) -> StoreOutcome:
        try:
            connection = self.connections.find(store)
            if connection is None or not connection.is_connected:
                logger.debug(
                    "Store not connected, skipping re-index",
                    entry_id=entry_id,
                    store_id=store.id,
                )
                reason = "no connection" if connection is None else "not connected"
                return StoreOutcome(store.id, StoreOutcomeStatus.SKIPPED, reason)

            product = self.exporter.export(entry_id, store)
            self.client.send(product, connection, store)
        except Exception as e:
            logger.exception(
                "Re-index failed for store",
                entry_id=entry_id,
                store_id=store.id,
            )
            return StoreOutcome(store.id, StoreOutcomeStatus.FAILED, str(e))

        logger.info("Re-index requested", entry_id=entry_id, store_id=store.id)
        return StoreOutcome(store.id, StoreOutcomeStatus.SENT)
