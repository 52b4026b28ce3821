"""Catalog Gateway API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map GatewayError → plain text (or JSON) responses
    - CORS configured from settings (not hardcoded)
    - One UpstreamClient per process: opened in lifespan, closed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Settings read at import: missing VTEX credentials stop the process before it listens
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from catalog_gateway.api.error_handlers import register_error_handlers
from catalog_gateway.api.routes import catalog, checkout, health, sku
from catalog_gateway.config import get_settings
from catalog_gateway.infrastructure.observability import setup_logging
from catalog_gateway.infrastructure.upstream_client import UpstreamClient

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.upstream_client = UpstreamClient(settings.upstream_credentials())
    logger.info(
        f"Server is running on port {settings.port}",
        extra={"port": settings.port},
    )
    yield
    await app.state.upstream_client.aclose()
    logger.info("Catalog Gateway shutting down")


app = FastAPI(
    title="Catalog Gateway", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(catalog.router)
app.include_router(sku.router)
app.include_router(checkout.router)

register_error_handlers(app)
