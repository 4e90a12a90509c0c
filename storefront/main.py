from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from storefront.config.settings import CORS_ORIGINS, CORS_ALLOW_ALL, BASE_URL, ENABLE_DOCS
from storefront.core.event_bus import EventType, event_bus
from storefront.core.exception_handlers import (
    validation_exception_handler,
    http_exception_handler,
    general_exception_handler,
)
from storefront.utils.logger import logger

# ───────────────────────────
# Models must be registered before the routers import queries
# ───────────────────────────
from storefront.database.init_db import import_models

import_models()

from storefront.api.orders.events.order_events import OrderLogHandler
from storefront.api.orders.router.router import api_orders

# ──────────────────────────
# FastAPI instance
# ──────────────────────────
app = FastAPI(
    title="Storefront API",
    version="1.0.0",
    description="Checkout and order endpoints of the e-shop",
    docs_url=("/swagger" if ENABLE_DOCS else None),
    redoc_url=("/redoc" if ENABLE_DOCS else None),
    openapi_url=("/openapi.json" if ENABLE_DOCS else None),
    servers=[{"url": BASE_URL, "description": "Environment base URL"}],
    redirect_slashes=False,
)

# ───────────────────────────
# Global exception handlers
# ───────────────────────────
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

# ───────────────────────────
# CORS
# ───────────────────────────
# CORS_ALLOW_ALL=true => any origin without credentials;
# otherwise CORS_ORIGINS (falls back to "*"), credentials only for explicit origins
if CORS_ALLOW_ALL:
    allowed_origins = ["*"]
    allow_credentials = False
else:
    allowed_origins = CORS_ORIGINS or ["*"]
    allow_credentials = bool(CORS_ORIGINS)
app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ───────────────────────────
# Event handlers
# ───────────────────────────
order_log_handler = OrderLogHandler()
event_bus.subscribe(EventType.ORDER_UPDATED, order_log_handler)


# ───────────────────────────
# Startup
# ───────────────────────────
@app.on_event("startup")
async def startup():
    from storefront.database.init_db import initialize_database

    logger.info("Starting API and database...")
    initialize_database()
    logger.info("API started.")


# ───────────────────────────
# Routes
# ───────────────────────────
@app.get("/")
async def root():
    return {"status": "ok", "message": "API is running"}


@app.get("/health")
async def health():
    return {"status": "healthy"}


app.include_router(api_orders)
