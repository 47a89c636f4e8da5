"""Pricing resolver.

Computes the tax-inclusive final and list prices of a catalog entry in
any currency the store can convert to:

1. List price is the regular price; final price is the special price
   when it is active and lower than the regular price.
2. Prices stored without tax are grossed up by the store tax rate.
3. Non-base currencies are converted with the store exchange rate.
"""

from collections.abc import Callable
from datetime import date
from decimal import Decimal
from typing import NamedTuple

from product_sync.catalog.models import CatalogEntry, Store
from product_sync.domain.exceptions import InvalidCurrencyCodeError, PricingUnavailableError
from product_sync.domain.value_objects import CurrencyCode, Money

HUNDRED = Decimal("100")


class PriceQuote(NamedTuple):
    """Final and list price of an entry in one currency."""

    price: Money
    list_price: Money


class PricingResolver:
    """Resolves tax-inclusive prices for a currency context.

    Example usage:
        resolver = PricingResolver()
        quote = resolver.resolve(entry, store, "EUR")
        quote.price, quote.list_price
    """

    def __init__(self, today: Callable[[], date] = date.today) -> None:
        """Initialize resolver.

        Args:
            today: Clock used to decide whether a special price is active.
        """
        self.today = today

    def resolve(
        self, entry: CatalogEntry, store: Store, currency: str | None = None
    ) -> PriceQuote:
        """Resolve final and list price.

        Args:
            entry: Catalog entry.
            store: Store providing tax and exchange-rate configuration.
            currency: Target currency; defaults to the store base currency.

        Returns:
            PriceQuote with both prices including tax.

        Raises:
            PricingUnavailableError: If the currency code is invalid or has no
                usable exchange rate.
        """
        requested = currency or store.base_currency
        try:
            currency = str(CurrencyCode(requested))
        except InvalidCurrencyCodeError as e:
            raise PricingUnavailableError(entry.id, requested, "invalid currency code") from e
        rate = self._exchange_rate(entry, store, currency)

        list_amount = self._including_tax(entry.price, store)
        final_amount = self._including_tax(self._final_base_price(entry), store)

        return PriceQuote(
            price=Money(amount=final_amount * rate, currency=currency),
            list_price=Money(amount=list_amount * rate, currency=currency),
        )

    def _final_base_price(self, entry: CatalogEntry) -> Decimal:
        """Get the lowest applicable price before tax handling."""
        special = entry.special_price
        if special is None or special >= entry.price:
            return entry.price

        today = self.today()
        if entry.special_from and today < entry.special_from:
            return entry.price
        if entry.special_to and today > entry.special_to:
            return entry.price
        return special

    @staticmethod
    def _including_tax(amount: Decimal, store: Store) -> Decimal:
        if store.prices_include_tax:
            return amount
        return amount * (HUNDRED + store.tax_rate) / HUNDRED

    @staticmethod
    def _exchange_rate(entry: CatalogEntry, store: Store, currency: str) -> Decimal:
        if currency == store.base_currency.upper():
            return Decimal("1")

        rate = store.exchange_rates.get(currency)
        if rate is None:
            raise PricingUnavailableError(entry.id, currency, "no exchange rate")
        if rate <= 0:
            raise PricingUnavailableError(
                entry.id, currency, f"invalid exchange rate {rate}"
            )
        return rate
