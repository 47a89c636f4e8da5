"""Product sync main application module.

This module initializes the FastAPI application and configures
logging, middleware, routers and exception handlers.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from product_sync.api import events_router, health_router, products_router
from product_sync.api.middleware import setup_middleware
from product_sync.application.service import get_product_sync_service
from product_sync.infrastructure.config import settings
from product_sync.infrastructure.logging_config import configure_logging

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    configure_logging(settings.log_level, json_format=settings.log_json)
    logger.info(
        "Starting product sync",
        version=settings.api_version,
        module_enabled=settings.module_enabled,
    )
    service = get_product_sync_service()
    logger.info("Store discovery complete", store_count=len(service.stores.list_stores()))

    yield

    logger.info("Shutting down product sync")
    close = getattr(service.notifier.client, "close", None)
    if close:
        close()


app = FastAPI(
    title="Product Sync",
    description="Normalized product export for a personalization service",
    version=settings.api_version,
    lifespan=lifespan,
)

setup_middleware(app)

app.include_router(health_router, tags=["Health"])
app.include_router(products_router)
app.include_router(events_router)


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handle HTTP exceptions with consistent format."""
    request_id = getattr(request.state, "request_id", None)

    detail = exc.detail
    if isinstance(detail, dict):
        error_code = detail.get("error_code", "ERROR")
        message = detail.get("message", str(detail))
    else:
        error_code = "ERROR"
        message = str(detail)

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error_code": error_code,
            "message": message,
            "request_id": request_id,
        },
    )
