"""API layer module.

Contains FastAPI routers and request/response schemas.
"""

from product_sync.api.events import router as events_router
from product_sync.api.health import router as health_router
from product_sync.api.products import router as products_router

__all__ = [
    "events_router",
    "health_router",
    "products_router",
]
