"""In-memory collaborator implementations.

Used when the service runs standalone and by tests. Data can be seeded
from a JSON fixture:

    {
        "stores": [{"id": 1, "code": "default", "base_url": "...", ...}],
        "categories": [{"id": 3, "name": "Electronics", "parent_id": 2, "level": 2}],
        "entries": [{"id": "42", "name": "Shoe", "price": "29.99", ...}],
        "store_entries": {"2": [{"id": "42", "name": "Chaussure", ...}]},
        "tags": [{"name": "summer", "entry_ids": ["42"], "store_ids": [1]}],
        "connections": {"1": {"account_name": "shop-en", "tokens": {...}}}
    }
"""

import json
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Any

import structlog

from product_sync.catalog.models import (
    CatalogEntry,
    Category,
    Connection,
    ImageDisplayConfig,
    Store,
    Tag,
    TagStatus,
)
from product_sync.catalog.taxonomy import CategoryTree

logger = structlog.get_logger()


# ============================================================================
# Catalog
# ============================================================================


class InMemoryCatalog:
    """Catalog entries with optional per-store attribute values."""

    def __init__(
        self,
        entries: list[CatalogEntry] | None = None,
        categories: list[Category] | None = None,
    ) -> None:
        """Initialize catalog.

        Args:
            entries: Entries in the default (all stores) scope.
            categories: Category tree nodes.
        """
        self._entries: dict[str, CatalogEntry] = {e.id: e for e in entries or []}
        self._store_entries: dict[tuple[str, int], CatalogEntry] = {}
        self.tree = CategoryTree(categories or [])

    def add_entry(self, entry: CatalogEntry, store_id: int | None = None) -> None:
        """Add an entry to the default scope or to one store's scope.

        Args:
            entry: Entry to add.
            store_id: Store whose values these are; None for the default scope.
        """
        if store_id is None:
            self._entries[entry.id] = entry
        else:
            self._store_entries[(entry.id, store_id)] = entry

    def get_entry(self, entry_id: str, store_id: int) -> CatalogEntry | None:
        """Get an entry, preferring store-scoped values.

        Args:
            entry_id: Entry identifier.
            store_id: Store scope.

        Returns:
            CatalogEntry if found, None otherwise.
        """
        return self._store_entries.get((entry_id, store_id)) or self._entries.get(entry_id)

    def get_category_path(self, category_id: int) -> list[Category]:
        return self.tree.path_to(category_id)


# ============================================================================
# Stores
# ============================================================================


class InMemoryStoreRegistry:
    """Store configurations in registration order."""

    def __init__(self, stores: list[Store] | None = None) -> None:
        self._stores: dict[int, Store] = {s.id: s for s in stores or []}

    def list_stores(self) -> list[Store]:
        return list(self._stores.values())

    def get_store(self, store_id: int) -> Store | None:
        return self._stores.get(store_id)

    def get_default_store(self) -> Store | None:
        """Get the store flagged as default, or the first registered store.

        Returns:
            Default store, None when no stores are registered.
        """
        for store in self._stores.values():
            if store.is_default:
                return store
        return next(iter(self._stores.values()), None)


# ============================================================================
# Tagging
# ============================================================================


class InMemoryTagSource:
    """Tag storage answering approved, store-visible tag queries."""

    def __init__(self, tags: list[Tag] | None = None) -> None:
        self._tags = list(tags or [])

    def approved_tags(self, entry_id: str, store_id: int) -> list[str]:
        """Get approved tag names visible in a store, in insertion order.

        Args:
            entry_id: Entry identifier.
            store_id: Store identifier.

        Returns:
            Tag names.
        """
        return [t.name for t in self._tags if t.is_visible(entry_id, store_id)]


# ============================================================================
# Connections
# ============================================================================


class InMemoryConnectionRegistry:
    """Personalization-service accounts keyed by store ID."""

    def __init__(self, connections: dict[int, Connection] | None = None) -> None:
        self._connections = dict(connections or {})

    def find(self, store: Store) -> Connection | None:
        return self._connections.get(store.id)


# ============================================================================
# Fixture Loading
# ============================================================================


@dataclass
class Collaborators:
    """Bundle of in-memory collaborators."""

    catalog: InMemoryCatalog = field(default_factory=InMemoryCatalog)
    stores: InMemoryStoreRegistry = field(default_factory=InMemoryStoreRegistry)
    tags: InMemoryTagSource = field(default_factory=InMemoryTagSource)
    connections: InMemoryConnectionRegistry = field(
        default_factory=InMemoryConnectionRegistry
    )


def _optional_decimal(value: Any) -> Decimal | None:
    return None if value is None else Decimal(str(value))


def _optional_date(value: Any) -> date | None:
    return None if value is None else date.fromisoformat(value)


def store_from_dict(data: dict[str, Any]) -> Store:
    """Create a Store from fixture data.

    Args:
        data: Store fixture record.

    Returns:
        Store instance.
    """
    image = data.get("image", {})
    return Store(
        id=int(data["id"]),
        code=data["code"],
        base_url=data["base_url"],
        base_currency=data.get("base_currency", "USD"),
        name=data.get("name", ""),
        media_base_url=data.get("media_base_url"),
        currencies=tuple(data.get("currencies", [])),
        exchange_rates={
            code: Decimal(str(rate))
            for code, rate in data.get("exchange_rates", {}).items()
        },
        multi_currency=data.get("multi_currency", False),
        variant_pricing=data.get("variant_pricing", False),
        tax_rate=Decimal(str(data.get("tax_rate", "0"))),
        prices_include_tax=data.get("prices_include_tax", True),
        image=ImageDisplayConfig(
            attribute=image.get("attribute", "image"),
            cached=image.get("cached", False),
            width=image.get("width"),
            height=image.get("height"),
        ),
        is_default=data.get("is_default", False),
    )


def entry_from_dict(data: dict[str, Any]) -> CatalogEntry:
    """Create a CatalogEntry from fixture data.

    Args:
        data: Entry fixture record.

    Returns:
        CatalogEntry instance.
    """
    return CatalogEntry(
        id=str(data["id"]),
        name=data["name"],
        price=Decimal(str(data["price"])),
        url_key=data.get("url_key"),
        special_price=_optional_decimal(data.get("special_price")),
        special_from=_optional_date(data.get("special_from")),
        special_to=_optional_date(data.get("special_to")),
        short_description=data.get("short_description"),
        description=data.get("description"),
        manufacturer=data.get("manufacturer"),
        created_at=data.get("created_at"),
        images=data.get("images", {}),
        is_salable=data.get("is_salable", True),
        can_configure=data.get("can_configure", False),
        category_ids=tuple(int(c) for c in data.get("category_ids", [])),
    )


def collaborators_from_dict(data: dict[str, Any]) -> Collaborators:
    """Build in-memory collaborators from fixture data.

    Args:
        data: Parsed fixture document.

    Returns:
        Populated collaborators.
    """
    catalog = InMemoryCatalog(
        entries=[entry_from_dict(e) for e in data.get("entries", [])],
        categories=[
            Category(
                id=int(c["id"]),
                name=c["name"],
                parent_id=c.get("parent_id"),
                level=c.get("level", 0),
                is_active=c.get("is_active", True),
            )
            for c in data.get("categories", [])
        ],
    )
    for store_id, entries in data.get("store_entries", {}).items():
        for entry in entries:
            catalog.add_entry(entry_from_dict(entry), store_id=int(store_id))

    tags = [
        Tag(
            name=t["name"],
            status=TagStatus(t.get("status", TagStatus.APPROVED.value)),
            entry_ids=frozenset(str(e) for e in t.get("entry_ids", [])),
            store_ids=frozenset(int(s) for s in t.get("store_ids", [])),
        )
        for t in data.get("tags", [])
    ]

    connections = {
        int(store_id): Connection(
            account_name=c["account_name"],
            tokens=c.get("tokens", {}),
        )
        for store_id, c in data.get("connections", {}).items()
    }

    return Collaborators(
        catalog=catalog,
        stores=InMemoryStoreRegistry([store_from_dict(s) for s in data.get("stores", [])]),
        tags=InMemoryTagSource(tags),
        connections=InMemoryConnectionRegistry(connections),
    )


def load_collaborators(path: str | Path | None = None) -> Collaborators:
    """Load collaborators from a JSON fixture file.

    Args:
        path: Fixture file path; None yields empty collaborators.

    Returns:
        Populated collaborators.
    """
    if path is None:
        return Collaborators()

    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    collaborators = collaborators_from_dict(data)
    logger.info(
        "Loaded catalog fixture",
        path=str(path),
        stores=len(collaborators.stores.list_stores()),
        categories=len(collaborators.catalog.tree),
    )
    return collaborators
