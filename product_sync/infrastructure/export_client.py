"""HTTP client for the personalization service re-index API.

Sends one product per request to `/v1/products/recrawl`, authenticated
with the store account's "products" API token.
"""

from typing import Any

import httpx
import structlog

from product_sync.catalog.models import Connection, Store
from product_sync.domain.exceptions import ExportClientError
from product_sync.domain.product import Product
from product_sync.infrastructure.config import settings

logger = structlog.get_logger()

RECRAWL_PATH = "/v1/products/recrawl"
PRODUCTS_TOKEN = "products"


class HttpReindexClient:
    """Synchronous re-index client.

    Example usage:
        with HttpReindexClient() as client:
            client.send(product, connection, store)
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize client.

        Args:
            base_url: API base URL (defaults to settings).
            timeout: Request timeout in seconds (defaults to settings).
            transport: Optional transport, used by tests.
        """
        self.base_url = base_url or settings.personalization_api_url
        self.timeout = timeout if timeout is not None else settings.personalization_api_timeout
        self._transport = transport
        self._client: httpx.Client | None = None

    def _get_client(self) -> httpx.Client:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
                headers={"Content-Type": "application/json"},
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client:
            self._client.close()
            self._client = None

    def __enter__(self) -> "HttpReindexClient":
        """Context manager entry."""
        return self

    def __exit__(self, *args: object) -> None:
        """Context manager exit."""
        self.close()

    def send(self, product: Product, connection: Connection, store: Store) -> None:
        """Send a re-index request for one product.

        Args:
            product: Product built for the store.
            connection: Store's connection to the personalization service.
            store: Store the product was built for.

        Raises:
            ExportClientError: On missing token, request error or non-2xx response.
        """
        token = connection.token(PRODUCTS_TOKEN)
        if not token:
            raise ExportClientError(
                store.id, f"Account {connection.account_name} has no products token"
            )

        payload: dict[str, Any] = {"products": [product.to_dict()]}

        try:
            response = self._get_client().post(
                RECRAWL_PATH,
                json=payload,
                auth=httpx.BasicAuth("", token),
            )
        except httpx.RequestError as e:
            logger.error(
                "Re-index request failed",
                store_id=store.id,
                product_id=product.product_id,
                error=str(e),
            )
            raise ExportClientError(store.id, f"Request failed: {str(e)}") from e

        if not response.is_success:
            raise ExportClientError(
                store.id,
                f"Failed to re-index product {product.product_id}: {response.text}",
                response.status_code,
            )

        logger.info(
            "Re-index request accepted",
            store_id=store.id,
            account=connection.account_name,
            product_id=product.product_id,
            status_code=response.status_code,
        )
