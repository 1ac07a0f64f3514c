"""
NoteKeeper Backend - FastAPI Application Factory
===================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       that owns its own NoteStore (app.state.store).
Who:   uvicorn imports `notekeeper.main:app`; tests call create_app() directly
       to get an isolated store per test.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  CORS → GZip → Request ID → JSON Body → Logging     │
    │  → Trailing Slash                                   │
    │                                                     │
    │  Routes:                                            │
    │  GET /   GET|POST /api/notes   GET|DELETE           │
    │  /api/notes/{id}   GET /health                      │
    │                                                     │
    │  Exception Handlers:                                │
    │  ValidationError→400 │ NotFound→404 (empty)         │
    │  no route→404 unknown endpoint │ Exception→500      │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from notekeeper import __version__
from notekeeper.config import Settings, settings
from notekeeper.exceptions import NotFoundError, ValidationError
from notekeeper.middleware.body import JSONBodyMiddleware
from notekeeper.middleware.logging import RequestLoggingMiddleware
from notekeeper.middleware.request_id import RequestIDMiddleware
from notekeeper.middleware.trailing_slash import TrailingSlashMiddleware
from notekeeper.routes import health, notes, root
from notekeeper.services.note_store import NoteStore, seed_notes

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(config: Settings = settings) -> None:
    """
    Configure the root logger once, at application start-up.

    Format: 2024-01-15T12:00:00 [INFO] notekeeper.access: Method: GET
    Output: stdout (container runtimes collect it from there)
    """
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # uvicorn's own access log duplicates RequestLoggingMiddleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: configure logging, report the seeded store.
    Shutdown: nothing to release; the store simply goes away with the process.
    """
    config: Settings = app.state.settings
    setup_logging(config)
    logger.info("NoteKeeper %s starting with %d notes", __version__, len(app.state.store))
    logger.info("Server running on port %d", config.port)

    yield

    logger.info("NoteKeeper shutting down.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _request_id(request: Request) -> str:
    # request.state outlives the ContextVar, which is reset once the
    # RequestIDMiddleware returns (before the catch-all handler runs)
    return getattr(request.state, "request_id", "")


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to HTTP responses.

    Handler table:
        ValidationError           → 400 {"error": message}
        NotFoundError             → 404, empty body
        HTTPException 404/405     → 404 {"error": "unknown endpoint"}
        other HTTPException       → FastAPI default
        Exception                 → 500 {"error": "internal server error"}
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", _request_id(request), exc.message)
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return Response(status_code=404)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        # 404: no route matched; 405: path matched but not the verb.
        # Both are an unknown endpoint to the client.
        if exc.status_code in (404, 405):
            return JSONResponse(status_code=404, content={"error": "unknown endpoint"})
        return await http_exception_handler(request, exc)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            "[%s] Unexpected error: %s",
            _request_id(request),
            str(exc),
            exc_info=True,
        )
        return JSONResponse(status_code=500, content={"error": "internal server error"})


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    store: Optional[NoteStore] = None,
    config: Optional[Settings] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store:  The NoteStore this app serves. Defaults to a new store,
                seeded with the fixture notes unless config.seed_fixtures is off.
        config: Settings override (defaults to the module-level singleton).

    Returns:
        Fully configured FastAPI instance ready to receive requests.
    """
    config = config or settings
    if store is None:
        store = NoteStore(seed_notes() if config.seed_fixtures else None)

    app = FastAPI(
        title="NoteKeeper API",
        description="Create, list, fetch and delete short notes held in memory.",
        version=__version__,
        docs_url="/docs" if config.docs_enabled else None,
        redoc_url="/redoc" if config.docs_enabled else None,
        openapi_url="/openapi.json" if config.docs_enabled else None,
        lifespan=lifespan,
        redirect_slashes=False,
    )
    app.state.store = store
    app.state.settings = config

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition: the last one added
    # sees the request first. Execution order:
    # CORS → GZip → RequestID → JSONBody → RequestLogging → TrailingSlash → routes
    app.add_middleware(TrailingSlashMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(JSONBodyMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(GZipMiddleware, minimum_size=500)

    # Credentials stay off: browsers reject `*` together with credentials
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(root.router)
    app.include_router(notes.router)
    app.include_router(health.router)

    return app


# uvicorn expects `notekeeper.main:app` to be importable
app = create_app()
