"""
CookHub Backend — FastAPI Application Factory
===============================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() registers middleware, exception handlers, routers and
       the /static mount; the lifespan builds the Store.
Who:   uvicorn (`cookhub.main:app`) and the `cookhub` console script.

Application Architecture:
    ┌──────────────────────────────────────────────────────────┐
    │                      FastAPI App                         │
    │                                                          │
    │  Middleware Chain:                                       │
    │  ┌──────────┐ ┌──────────┐ ┌─────────────┐ ┌──────────┐  │
    │  │  Req ID  │→│ Logging  │→│ CORS Policy │→│   GZip   │  │
    │  └──────────┘ └──────────┘ └─────────────┘ └──────────┘  │
    │                                                          │
    │  Routes:                                                 │
    │  /api/recipes  /api/chefs  /api/masterclasses  /api/...  │
    │  /health       /           /static/*                     │
    │                                                          │
    │  Exception Handlers:                                     │
    │  Validation→400 │ NotFound→404 │ Capacity→409 │ DB→500   │
    └──────────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Check the database file (recover or fail), connect (fatal on failure)
    3. Create missing tables, seed an empty database
    4. Attach the Store to app.state

    Shutdown:
    1. Dispose the Store's engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from cookhub import __version__
from cookhub.bootstrap import initialize_store
from cookhub.config import settings
from cookhub.exceptions import (
    CapacityExceededError,
    CookHubError,
    DatabaseError,
    NotFoundError,
    ValidationError,
)
from cookhub.middleware.cors import CORSPolicyMiddleware, wide_header_paths
from cookhub.middleware.logging import RequestLoggingMiddleware
from cookhub.middleware.request_id import RequestIDMiddleware, request_id_var
from cookhub.routes import chefs, health, masterclasses, pages, recipes, stats, users

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure the root logger once, before anything else logs.

    Format: 2030-01-01T12:00:00 [INFO] cookhub.services.activity_service: ...
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Our access log replaces uvicorn's; SQL echo is opt-in via DB_ECHO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    if not settings.db_echo:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Build the Store on startup and dispose it on shutdown.

    StoreUnavailableError is not caught: uvicorn reports the failed startup
    and the process exits.
    """
    setup_logging()
    logger.info("=" * 60)
    logger.info("CookHub Backend %s starting up...", __version__)

    store = await initialize_store(settings)
    app.state.store = store

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    logger.info("CookHub Backend shutting down...")
    await store.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error(status_code: int, error: str, message: str, details=None, headers=None) -> JSONResponse:
    content = {"error": error, "message": message, "request_id": request_id_var.get("")}
    if details:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and the shared error body.

    Handler hierarchy:
        ValidationError          → 400 Bad Request
        RequestValidationError   → 400 Bad Request (framework-level request validation)
        NotFoundError            → 404 Not Found
        CapacityExceededError    → 409 Conflict
        DatabaseError            → 500 (generic message, context logged)
        StarletteHTTPException   → its own status (404 unknown path, 405 wrong verb)
        CookHubError (base)      → 500
        Exception (fallback)     → 500
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return _error(400, "validation_error", exc.message, exc.context)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        logger.warning("[%s] Invalid request body: %s", request_id_var.get(""), exc.errors())
        return _error(
            400,
            "validation_error",
            "Invalid JSON",
            {"errors": [error.get("msg") for error in exc.errors()]},
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error(404, "not_found", exc.message)

    @app.exception_handler(CapacityExceededError)
    async def handle_capacity_exceeded(request: Request, exc: CapacityExceededError):
        return _error(409, "capacity_exceeded", exc.message, exc.context)

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return _error(500, "server_error", "Internal server error")

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        codes = {404: "not_found", 405: "method_not_allowed"}
        return _error(
            exc.status_code,
            codes.get(exc.status_code, "http_error"),
            str(exc.detail),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(CookHubError)
    async def handle_cookhub_error(request: Request, exc: CookHubError):
        rid = request_id_var.get("")
        logger.error("[%s] %s: %s | Context: %s", rid, type(exc).__name__, exc.message, exc.context)
        return _error(500, "server_error", "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error("[%s] Unexpected error: %s", request_id_var.get(""), exc, exc_info=True)
        return _error(500, "internal_server_error", "An unexpected error occurred")


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Tests call this directly and attach their own Store to `app.state.store`
    (httpx's ASGITransport does not run the lifespan).
    """
    app = FastAPI(
        title="CookHub API",
        description=(
            "Cooking platform backend: recipes, chefs, master classes, "
            "subscriptions, enrollments and recommendations."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(recipes.router)
    app.include_router(chefs.router)
    app.include_router(masterclasses.router)
    app.include_router(users.router)
    app.include_router(stats.router)
    app.include_router(health.router)

    # A deployment without assets still starts; /static/* then answers 404
    if Path(settings.static_dir).is_dir():
        app.mount("/static", StaticFiles(directory=settings.static_dir), name="static")
    else:
        logger.warning("Static directory %s not found, /static is not served", settings.static_dir)

    # Landing page and its catch-all last: it matches every remaining GET path
    app.include_router(pages.router)

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → CORS Policy → GZip
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(CORSPolicyMiddleware, wide_paths=wide_header_paths(app.routes))
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    return app


# ── Application Instance ─────────────────────────────────────────────────
app = create_app()


def run() -> None:
    """Entry point of the `cookhub` console script."""
    uvicorn.run(
        "cookhub.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )
