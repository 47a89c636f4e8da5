"""Domain exceptions.

All domain-level errors. Errors for a single optional product facet
(pricing in a foreign currency, a missing store connection) are
recoverable and handled by the component that raised them; lookup
failures for the entry or the store are fatal to a single build.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the application layer.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Lookup Errors
# ============================================================================


class EntryNotFoundError(DomainError):
    """Raised when a catalog entry cannot be resolved."""

    def __init__(self, entry_id: str) -> None:
        """Initialize entry not found error.

        Args:
            entry_id: ID of the catalog entry.
        """
        super().__init__(
            f"Catalog entry {entry_id} not found",
            details={"entry_id": entry_id},
        )


class StoreNotFoundError(DomainError):
    """Raised when a store cannot be resolved."""

    def __init__(self, store_id: int | None) -> None:
        """Initialize store not found error.

        Args:
            store_id: ID of the store, None when no default store exists.
        """
        message = (
            "No default store configured"
            if store_id is None
            else f"Store {store_id} not found"
        )
        super().__init__(message, details={"store_id": store_id})


class ConnectionLookupError(DomainError):
    """Raised when the external-service connection of a store cannot be read."""

    def __init__(self, store_id: int, reason: str) -> None:
        """Initialize connection lookup error.

        Args:
            store_id: ID of the store.
            reason: Why the lookup failed.
        """
        super().__init__(
            f"Connection lookup failed for store {store_id}: {reason}",
            details={"store_id": store_id, "reason": reason},
        )


# ============================================================================
# Pricing Errors
# ============================================================================


class PricingUnavailableError(DomainError):
    """Raised when no price can be derived for a currency.

    Typically caused by a missing exchange rate. Callers treat this as
    recoverable and skip the affected price variation.
    """

    def __init__(self, entry_id: str, currency: str, reason: str) -> None:
        """Initialize pricing unavailable error.

        Args:
            entry_id: ID of the catalog entry.
            currency: Requested currency code.
            reason: Why pricing failed.
        """
        super().__init__(
            f"Cannot price entry {entry_id} in {currency}: {reason}",
            details={"entry_id": entry_id, "currency": currency, "reason": reason},
        )
        self.currency = currency
        self.reason = reason


# ============================================================================
# Money Errors
# ============================================================================


class MoneyError(DomainError):
    """Base class for money-related errors."""

    pass


class NegativeMoneyError(MoneyError):
    """Raised when attempting to create money with negative amount."""

    def __init__(self, amount: object) -> None:
        """Initialize negative money error.

        Args:
            amount: The negative amount.
        """
        super().__init__(
            f"Money amount cannot be negative: {amount}",
            details={"amount": str(amount)},
        )


class InvalidCurrencyCodeError(MoneyError):
    """Raised when a currency code is not a three-letter ISO 4217 code."""

    def __init__(self, code: str) -> None:
        """Initialize invalid currency code error.

        Args:
            code: The rejected code.
        """
        super().__init__(
            f"Invalid ISO 4217 currency code: {code!r}",
            details={"code": code},
        )


# ============================================================================
# Transport Errors
# ============================================================================


class ExportClientError(DomainError):
    """Raised by the re-index transport when a request fails."""

    def __init__(
        self, store_id: int, message: str, status_code: int | None = None
    ) -> None:
        """Initialize export client error.

        Args:
            store_id: Store the request was sent for.
            message: Error description.
            status_code: HTTP status code, when a response was received.
        """
        super().__init__(
            f"[store {store_id}] {message}",
            details={"store_id": store_id, "status_code": status_code},
        )
        self.store_id = store_id
        self.status_code = status_code
