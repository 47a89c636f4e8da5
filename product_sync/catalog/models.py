"""Read-only records supplied by the commerce system.

These mirror what the catalog, store configuration, tagging and account
subsystems expose. The sync core never mutates them.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Mapping

PRIMARY_IMAGE_ATTRIBUTE = "image"
NO_SELECTION = "no_selection"


# ============================================================================
# Catalog
# ============================================================================


@dataclass(frozen=True)
class Category:
    """A node of the store category tree.

    Attributes:
        id: Category ID.
        name: Display name.
        parent_id: ID of parent category (None for the tree root).
        level: Depth in the tree (0 = tree root, 1 = store root).
        is_active: Whether the category is enabled.
    """

    id: int
    name: str
    parent_id: int | None = None
    level: int = 0
    is_active: bool = True


@dataclass(frozen=True)
class CatalogEntry:
    """A sellable product record, as seen in one store scope.

    Attributes:
        id: Entry identifier.
        name: Product name.
        price: Regular price in the store base currency.
        url_key: URL path segment of the product page.
        special_price: Discounted price, if any.
        special_from: First day the special price applies.
        special_to: Last day the special price applies.
        short_description: Short description, if set.
        description: Description, if set.
        manufacturer: Manufacturer display text, if set.
        created_at: Creation timestamp as stored by the catalog.
        images: Image attribute code to media file path.
        is_salable: Whether the entry is in stock and purchasable.
        can_configure: Whether the entry needs options chosen before purchase.
        category_ids: Categories the entry is assigned to.
    """

    id: str
    name: str
    price: Decimal
    url_key: str | None = None
    special_price: Decimal | None = None
    special_from: date | None = None
    special_to: date | None = None
    short_description: str | None = None
    description: str | None = None
    manufacturer: str | None = None
    created_at: str | None = None
    images: Mapping[str, str] = field(default_factory=dict)
    is_salable: bool = True
    can_configure: bool = False
    category_ids: tuple[int, ...] = ()

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "images", MappingProxyType(dict(self.images)))
        object.__setattr__(self, "category_ids", tuple(self.category_ids))

    def image(self, attribute: str) -> str | None:
        """Get the media file path stored under an image attribute."""
        return self.images.get(attribute)


# ============================================================================
# Stores
# ============================================================================


@dataclass(frozen=True)
class ImageDisplayConfig:
    """How product images are exposed for a store.

    Attributes:
        attribute: Image attribute to use (e.g., "image", "small_image").
        cached: Whether to serve resized images from the image cache.
        width: Resize width when cached.
        height: Resize height when cached; width-only resize if unset.
    """

    attribute: str = PRIMARY_IMAGE_ATTRIBUTE
    cached: bool = False
    width: int | None = None
    height: int | None = None


@dataclass(frozen=True)
class Store:
    """A sales channel configuration.

    Attributes:
        id: Store ID (0 is reserved for the admin scope).
        code: Store code used in URLs.
        name: Display name.
        base_url: Storefront base URL.
        media_base_url: Base URL of the media host.
        base_currency: Base currency code.
        currencies: Configured currency codes, in display order.
        exchange_rates: Rate from the base currency per currency code.
        multi_currency: Whether multi-currency is enabled.
        variant_pricing: Whether per-currency price variations are exported.
        tax_rate: Tax rate in percent.
        prices_include_tax: Whether catalog prices already include tax.
        image: Image display configuration.
        is_default: Whether this is the default store.
    """

    id: int
    code: str
    base_url: str
    base_currency: str = "USD"
    name: str = ""
    media_base_url: str | None = None
    currencies: tuple[str, ...] = ()
    exchange_rates: Mapping[str, Decimal] = field(default_factory=dict)
    multi_currency: bool = False
    variant_pricing: bool = False
    tax_rate: Decimal = Decimal("0")
    prices_include_tax: bool = True
    image: ImageDisplayConfig = field(default_factory=ImageDisplayConfig)
    is_default: bool = False

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "currencies", tuple(self.currencies))
        object.__setattr__(
            self, "exchange_rates", MappingProxyType(dict(self.exchange_rates))
        )

    @property
    def media_url(self) -> str:
        """Get media base URL, defaulting to `<base_url>/media/`."""
        return self.media_base_url or f"{self.base_url.rstrip('/')}/media/"


# ============================================================================
# Tagging
# ============================================================================


class TagStatus(str, Enum):
    """Moderation status of a free-form tag."""

    APPROVED = "approved"
    PENDING = "pending"
    DISABLED = "disabled"


@dataclass(frozen=True)
class Tag:
    """A customer or merchant supplied tag.

    Attributes:
        name: Tag text.
        status: Moderation status.
        entry_ids: Entries the tag is attached to.
        store_ids: Stores the tag is visible in.
    """

    name: str
    status: TagStatus = TagStatus.APPROVED
    entry_ids: frozenset[str] = frozenset()
    store_ids: frozenset[int] = frozenset()

    def is_visible(self, entry_id: str, store_id: int) -> bool:
        return (
            self.status == TagStatus.APPROVED
            and entry_id in self.entry_ids
            and store_id in self.store_ids
        )


# ============================================================================
# External Service Connection
# ============================================================================


REQUIRED_TOKENS = ("sso", "products")


class ConnectionStatus(str, Enum):
    """State of a store's link to the personalization service."""

    CONNECTED = "connected"
    INCOMPLETE = "incomplete"


@dataclass(frozen=True)
class Connection:
    """External-service account linked to a store.

    Attributes:
        account_name: Account identifier at the personalization service.
        tokens: API token name to token value.
    """

    account_name: str
    tokens: Mapping[str, str] = field(default_factory=dict)

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "tokens", MappingProxyType(dict(self.tokens)))

    @property
    def status(self) -> ConnectionStatus:
        """Connected when the account has a name and every required token."""
        if self.account_name and all(self.tokens.get(t) for t in REQUIRED_TOKENS):
            return ConnectionStatus.CONNECTED
        return ConnectionStatus.INCOMPLETE

    @property
    def is_connected(self) -> bool:
        return self.status == ConnectionStatus.CONNECTED

    def token(self, name: str) -> str | None:
        return self.tokens.get(name)

    def __repr__(self) -> str:
        """String representation without token values."""
        return f"<Connection(account_name={self.account_name}, status={self.status.value})>"

