"""Current store execution context.

The storefront runs every request in the context of one store; media
and URL helpers read that context. Administrative code runs in the
admin scope (store 0) and must switch to a storefront store before
asking those helpers for store-specific values.
"""

from contextvars import ContextVar, Token

import structlog

logger = structlog.get_logger()

ADMIN_STORE_ID = 0


class StoreEnvironment:
    """Tracks the current store in a context variable.

    Implements the StoreEmulator interface: `start` switches to a store
    and returns a token, `stop` restores whatever was current before.
    """

    def __init__(self, initial_store_id: int = ADMIN_STORE_ID) -> None:
        """Initialize environment.

        Args:
            initial_store_id: Store that is current outside any emulation.
        """
        self._current: ContextVar[int] = ContextVar(
            f"current_store_{id(self)}", default=initial_store_id
        )

    @property
    def current_store_id(self) -> int:
        return self._current.get()

    def start(self, store_id: int) -> Token[int]:
        """Make a store current.

        Args:
            store_id: Store to switch to.

        Returns:
            Token that restores the previous store.
        """
        logger.debug(
            "Starting store emulation",
            store_id=store_id,
            previous_store_id=self._current.get(),
        )
        return self._current.set(store_id)

    def stop(self, token: Token[int]) -> None:
        """Restore the store that was current before `start`.

        Args:
            token: Token returned by `start`.
        """
        self._current.reset(token)
        logger.debug("Stopped store emulation", store_id=self._current.get())
