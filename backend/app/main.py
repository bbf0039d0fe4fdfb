"""
Anjali Furniture Backend — FastAPI Application Factory
========================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn app.main:app).

Application Architecture:
    ┌──────────────────────────────────────────────────────────┐
    │                      FastAPI App                         │
    │                                                          │
    │  Middleware Chain:                                       │
    │  CORS → Rate Limit → Body Limit → Req ID → Logging → …   │
    │                                                          │
    │  Routes:                                                 │
    │  /api/products  /api/woods  /api/requests  /api/config   │
    │  /health                                                 │
    │                                                          │
    │  Exception Handlers (all return the error envelope):     │
    │  BadRequest→400 │ Unauthorized→401 │ Store→500 │ *→500   │
    └──────────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, validate configuration, log readiness
    Shutdown: dispose the database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware

from app import __version__
from app.config import settings
from app.database import dispose_engine
from app.exceptions import AnjaliError, StoreError, UnauthorizedError
from app.middleware.body_limit import BodySizeLimitMiddleware
from app.middleware.logging import RequestLoggingMiddleware
from app.middleware.rate_limit import RateLimitMiddleware
from app.middleware.request_id import RequestIDMiddleware, request_id_var
from app.middleware.security_headers import SecurityHeadersMiddleware
from app.routes import customer_requests, health, products, site_config, woods
from app.schemas.envelope import failure

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s on stdout,
    which the hosting platform collects.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("asyncpg").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Runs initialization on startup and releases the engine on shutdown."""
    setup_logging()
    logger.info("=" * 60)
    logger.info("Anjali Furniture backend %s starting up...", __version__)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        # Keep serving: public endpoints still work and admin ones answer 401
        logger.error("Configuration error: %s", str(e))

    logger.info("Allowed origins: %s", ", ".join(settings.cors_origins_list))
    logger.info("Server running on port %d", settings.backend_port)
    logger.info("=" * 60)

    yield

    logger.info("Anjali Furniture backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions onto the error envelope.

    Handler hierarchy:
        UnauthorizedError       → 401 {"error": "Unauthorized"}
        StoreError (any kind)   → 500 {"error": <store message>}
        AnjaliError (others)    → its status_code
        RequestValidationError  → 400 (body is not a JSON object, missing status)
        Exception (fallback)    → 500 {"error": <exception message>}
    """

    @app.exception_handler(UnauthorizedError)
    async def handle_unauthorized(request: Request, exc: UnauthorizedError):
        return failure(exc.status_code, exc.message)

    @app.exception_handler(StoreError)
    async def handle_store_error(request: Request, exc: StoreError):
        """Every store failure is a 500; the kind only reaches the log."""
        rid = request_id_var.get("")
        logger.error(
            "[%s] Store error (%s) on %s %s: %s",
            rid, exc.kind.value, request.method, request.url.path, exc.message,
        )
        return failure(exc.status_code, exc.message)

    @app.exception_handler(AnjaliError)
    async def handle_app_error(request: Request, exc: AnjaliError):
        rid = request_id_var.get("")
        logger.warning("[%s] %s: %s", rid, type(exc).__name__, exc.message)
        return failure(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        rid = request_id_var.get("")
        errors = exc.errors()
        message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
        location = ".".join(str(part) for part in errors[0].get("loc", ())) if errors else ""
        if location:
            message = f"{location}: {message}"
        logger.warning("[%s] Invalid request: %s", rid, message)
        return failure(400, message)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return failure(500, str(exc) or type(exc).__name__)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns a fresh instance each call, so tests get their own middleware
    state (rate-limit windows) and dependency overrides.
    """
    app = FastAPI(
        title="Anjali Furniture API",
        description=(
            "Products, woods, customer requests, and storefront configuration "
            "for the Anjali Furniture site."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition (last added = first run)
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(BodySizeLimitMiddleware)
    app.add_middleware(RateLimitMiddleware)
    # Outermost: preflights are answered before the rate limit counts them,
    # and 429/413 envelopes still carry CORS headers
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "Retry-After"],
    )

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(products.router)
    app.include_router(woods.router)
    app.include_router(customer_requests.router)
    app.include_router(site_config.router)
    app.include_router(health.router)

    return app


app = create_app()
