"""WMS API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map WmsError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan context manager
    - Default data seeded at startup only into an empty database

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py, registered once here
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wms.api.error_handlers import register_error_handlers
from wms.api.routes import (
    activity_logs, auth, bin_types, bins, categories, health, inventory,
    inventory_transactions, items, order_items, orders, organizations, reports,
    roles, shipments, suppliers, users, warehouses, zones,
)
from wms.config import get_settings
from wms.infrastructure.database import init_db
from wms.infrastructure.observability import setup_logging
from wms.services.seed import seed_defaults

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_all:
        await manager.create_all()
    if settings.seed_defaults:
        async with manager.session() as db:
            await seed_defaults(db, settings)
    logger.info("WMS API started")
    yield
    await manager.dispose()
    logger.info("WMS API shutting down")


app = FastAPI(title="WMS API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Routes: explicit registration
app.include_router(health.router)
app.include_router(auth.router)
app.include_router(users.router)
app.include_router(organizations.router)
app.include_router(roles.router)
app.include_router(warehouses.router)
app.include_router(zones.router)
app.include_router(bin_types.router)
app.include_router(bins.router)
app.include_router(categories.router)
app.include_router(suppliers.router)
app.include_router(items.router)
app.include_router(inventory.router)
app.include_router(inventory_transactions.router)
app.include_router(orders.router)
app.include_router(order_items.router)
app.include_router(shipments.router)
app.include_router(activity_logs.router)
app.include_router(reports.router)
