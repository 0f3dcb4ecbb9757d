"""
KB Notes Backend — FastAPI Application Factory
===============================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       serving the catalog it was given (or the one named by settings).
Who:   Called by uvicorn (uvicorn kbnotes.main:app) or the `kbnotes` command.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────────┐ ┌─────────────────┐ ┌──────────┐  │
    │  │  Req ID      │→│  Logging        │→│  CORS    │  │
    │  └──────────────┘ └─────────────────┘ └──────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────────────────┐ ┌─────────────────┐   │
    │  │ GET /folders[/...notes]  │ │ GET /health     │   │
    │  └──────────────────────────┘ └─────────────────┘   │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ NotFound→404 │ HTTPException→status │ *→500  │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  logging, then create the SQLite file and `folders` table
              (a failure is logged and the API keeps serving from memory)
    Shutdown: dispose the database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from kbnotes import __version__
from kbnotes.config import settings
from kbnotes.database import dispose_engine, init_database
from kbnotes.exceptions import DatabaseError, KBNotesError
from kbnotes.middleware.logging import RequestLoggingMiddleware
from kbnotes.middleware.request_id import RequestIDMiddleware, new_request_id, request_id_var
from kbnotes.responses import IndentedJSONResponse
from kbnotes.routes import folders, health
from kbnotes.schemas.envelope import ErrorResponse
from kbnotes.services.catalog import NoteCatalog
from kbnotes.services.seed import build_catalog

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during app startup, before any other initialization.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),  # Docker captures stdout
        ],
        force=True,
    )

    # Access lines come from kbnotes.access instead
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("KB Notes Backend starting up...")
    logger.info("Serving %r", app.state.catalog)

    try:
        await init_database()
    except DatabaseError as e:
        # Folders and notes are served from memory; the API stays up
        logger.error("%s | Context: %s", e.message, e.context)

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("KB Notes Backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def error_response(code: int, message: str, headers: Optional[dict] = None) -> IndentedJSONResponse:
    """Render the `{"error": {"code", "message"}}` envelope."""
    return IndentedJSONResponse(
        status_code=code,
        content=ErrorResponse.build(code, message).model_dump(),
        headers=headers,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        KBNotesError            → its status_code (NotFoundError → 404)
        StarletteHTTPException  → its status (unknown route 404, wrong method 405)
        RequestValidationError  → 422
        Exception (fallback)    → 500, details logged server-side only
    """

    @app.exception_handler(KBNotesError)
    async def handle_app_error(request: Request, exc: KBNotesError):
        rid = request_id_var.get("")
        if exc.status_code >= 500:
            logger.error("[%s] %s | Context: %s", rid, exc.message, exc.context)
            return error_response(exc.status_code, "An internal error occurred. Please try again later.")
        logger.debug("[%s] %s", rid, exc.message)
        return error_response(exc.status_code, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException):
        return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s", rid, exc.errors())
        return error_response(422, "Invalid request")

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        # Runs outside RequestIDMiddleware, so the header is set here
        rid = request_id_var.get("") or new_request_id()
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return error_response(500, "An unexpected error occurred.", headers={"X-Request-ID": rid})


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(catalog: Optional[NoteCatalog] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        catalog: Folders and notes to serve. Defaults to the CATALOG_FILE
                 setting, or the built-in seed when that is unset.

    Raises:
        CatalogError: CATALOG_FILE is set but cannot be loaded.
    """
    app = FastAPI(
        title="KB Notes API",
        description="Read-only folders of base64-encoded markdown notes.",
        version=__version__,
        default_response_class=IndentedJSONResponse,
        lifespan=lifespan,
    )

    app.state.catalog = catalog if catalog is not None else build_catalog(settings.catalog_file)

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added executes first: RequestID → Logging → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["GET"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(folders.router)
    app.include_router(health.router)

    return app


def run() -> None:
    """Console entry point: serve the app with uvicorn on the configured address."""
    import uvicorn

    uvicorn.run(
        "kbnotes.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


# uvicorn expects `kbnotes.main:app` to be importable
app = create_app()
