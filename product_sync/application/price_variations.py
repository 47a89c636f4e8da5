"""Price variation builder.

Prices an entry in every configured currency of a store except the base
currency. A currency that cannot be priced is reported as omitted and
the remaining currencies are still built.
"""

from dataclasses import dataclass, field

import structlog

from product_sync.application.pricing import PricingResolver
from product_sync.catalog.models import CatalogEntry, Store
from product_sync.domain.exceptions import PricingUnavailableError
from product_sync.domain.product import PriceVariation
from product_sync.domain.value_objects import Availability

logger = structlog.get_logger()


@dataclass(frozen=True)
class OmittedVariation:
    """A currency left out of the variations.

    Attributes:
        currency: Currency code.
        reason: Why it could not be priced.
    """

    currency: str
    reason: str


@dataclass
class VariationBuildResult:
    """Outcome of building the price variations of one entry.

    Attributes:
        variations: Built variations in currency configuration order.
        omitted: Currencies that could not be priced.
    """

    variations: list[PriceVariation] = field(default_factory=list)
    omitted: list[OmittedVariation] = field(default_factory=list)

    @property
    def is_partial(self) -> bool:
        return bool(self.omitted)


class PriceVariationBuilder:
    """Builds one PriceVariation per priceable non-base currency."""

    def __init__(self, pricing: PricingResolver) -> None:
        self.pricing = pricing

    def build(self, entry: CatalogEntry, store: Store) -> VariationBuildResult:
        """Build price variations.

        Args:
            entry: Catalog entry.
            store: Store providing currencies and exchange rates.

        Returns:
            Variations plus the currencies that were skipped.
        """
        result = VariationBuildResult()
        base_currency = store.base_currency.upper()
        availability = Availability.from_salable(entry.is_salable)

        seen: set[str] = set()
        for currency in store.currencies:
            currency = currency.upper()
            if currency == base_currency or currency in seen:
                continue
            seen.add(currency)
            try:
                quote = self.pricing.resolve(entry, store, currency)
            except PricingUnavailableError as e:
                result.omitted.append(OmittedVariation(currency=currency, reason=e.reason))
                continue
            result.variations.append(
                PriceVariation(
                    variation_id=currency,
                    price=quote.price,
                    list_price=quote.list_price,
                    availability=availability,
                    currency=currency,
                )
            )

        for omitted in result.omitted:
            logger.info(
                "Price variation omitted",
                entry_id=entry.id,
                store_id=store.id,
                currency=omitted.currency,
                reason=omitted.reason,
            )
        return result
