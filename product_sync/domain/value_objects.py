"""Value Objects for the domain layer.

Value objects are immutable objects that are defined by their attributes
rather than identity. They are interchangeable when their values are equal.
"""

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

from product_sync.domain.base import ValueObject
from product_sync.domain.exceptions import InvalidCurrencyCodeError, NegativeMoneyError

_CURRENCY_PATTERN = re.compile(r"^[A-Z]{3}$")

CENT = Decimal("0.01")


# ============================================================================
# Currency
# ============================================================================


@dataclass(frozen=True)
class CurrencyCode(ValueObject):
    """ISO 4217 currency code (e.g., 'USD', 'EUR').

    The code is normalized to uppercase and must be three letters.
    """

    value: str

    def __post_init__(self) -> None:
        """Validate and normalize the currency code."""
        normalized = (self.value or "").strip().upper()
        if not _CURRENCY_PATTERN.match(normalized):
            raise InvalidCurrencyCodeError(self.value)
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        """Return string representation.

        Returns:
            The currency code.
        """
        return self.value


# ============================================================================
# Money Value Object
# ============================================================================


@dataclass(frozen=True)
class Money(ValueObject):
    """Represents a tax-inclusive monetary value with currency.

    The amount is a Decimal rounded half-up to two places, so two
    Money objects built from the same price compare equal.

    Attributes:
        amount: Amount in major currency units (e.g., dollars).
        currency: ISO 4217 currency code (e.g., 'USD', 'EUR').
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        """Validate money constraints."""
        amount = Decimal(self.amount).quantize(CENT, rounding=ROUND_HALF_UP)
        if amount < 0:
            raise NegativeMoneyError(amount)
        object.__setattr__(self, "amount", amount)
        object.__setattr__(self, "currency", str(CurrencyCode(self.currency)))


# ============================================================================
# Availability
# ============================================================================


class Availability(str, Enum):
    """Stock availability as understood by the personalization service."""

    IN_STOCK = "InStock"
    OUT_OF_STOCK = "OutOfStock"

    @classmethod
    def from_salable(cls, is_salable: bool) -> "Availability":
        """Map a catalog salable flag to an availability value."""
        return cls.IN_STOCK if is_salable else cls.OUT_OF_STOCK
