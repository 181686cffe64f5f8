"""
Job Board Backend — FastAPI Application Factory
================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app(settings) returns a configured FastAPI
       instance. Settings are built once by the caller and stored on
       app.state together with the Database built from them.
Who:   Called by `jobboard.__main__` (uvicorn) and by the test suite.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────────┐ ┌──────────────┐ ┌─────────────┐ │
    │  │  Request ID  │→│  Logging     │→│  CORS       │ │
    │  └──────────────┘ └──────────────┘ └─────────────┘ │
    │                                                     │
    │  Routes:                                            │
    │  /v1/users   /v1/jobs   /v1/applications   /health  │
    │                                                     │
    │  API docs:                                          │
    │  /swagger-ui   /redoc   /api-docs/openapi.json      │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Validate configuration (refuse to start on errors)
    3. Open or create the database file and its schema
       (refuse to start when the file is unusable)

    Shutdown:
    1. Dispose database engine (close all connections)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from jobboard import __version__
from jobboard.config import Settings
from jobboard.database import Database
from jobboard.exceptions import (
    ConflictError,
    DatabaseError,
    JobBoardError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from jobboard.middleware.logging import RequestLoggingMiddleware
from jobboard.middleware.request_id import REQUEST_ID_HEADER, RequestIDMiddleware, request_id_var
from jobboard.routes import applications, health, jobs, users
from jobboard.security import API_KEY_HEADER

logger = logging.getLogger(__name__)

OPENAPI_URL = "/api-docs/openapi.json"
DOCS_URL = "/swagger-ui"
REDOC_URL = "/redoc"


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str) -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Output: stdout (collected by the container runtime)
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Third-party loggers that are chatty at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: logging, configuration checks, database file and schema.
    Shutdown: close the connection pool.

    Any startup error propagates, so uvicorn exits instead of serving a
    process that cannot reach its database.
    """
    settings: Settings = app.state.settings
    database: Database = app.state.database

    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging(settings.log_level)
    logger.info("=" * 60)
    logger.info("Job Board Backend %s starting up...", __version__)

    try:
        for warning in settings.validate_for_startup():
            logger.warning("Configuration: %s", warning)
    except ValueError as e:
        logger.error("Configuration error: %s", str(e))
        raise

    try:
        await database.init()
    except Exception as e:
        logger.error("Cannot open database %s: %s", settings.database_url, str(e))
        await database.dispose()
        raise

    logger.info("Server ready at http://%s:%d", settings.host, settings.port)
    logger.info("API docs: http://%s:%d%s", settings.host, settings.port, DOCS_URL)
    logger.info("=" * 60)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Job Board Backend shutting down...")
    await database.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_body(
    error: str,
    message: str,
    details: Optional[dict] = None,
    request_id: Optional[str] = None,
) -> dict:
    body = {"error": error, "message": message, "request_id": request_id or request_id_var.get("")}
    if details:
        body["details"] = details
    return body


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        ValidationError / RequestValidationError → 400 Bad Request
        UnauthorizedError                        → 401 Unauthorized
        NotFoundError                            → 404 Not Found
        ConflictError                            → 409 Conflict
        DatabaseError                            → 500 (generic message)
        JobBoardError (base)                     → 500
        Exception (fallback)                     → 500

    Response bodies never contain stack traces, SQL or file paths; those
    are logged server-side.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return JSONResponse(
            status_code=400,
            content=_error_body("validation_error", exc.message, exc.context),
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        """Malformed body, path or query parameters."""
        errors = [
            {
                "loc": [str(part) for part in err.get("loc", ())],
                "msg": err.get("msg", ""),
                "type": err.get("type", ""),
            }
            for err in exc.errors()
        ]
        logger.warning("[%s] Request validation failed: %s", request_id_var.get(""), errors)
        return JSONResponse(
            status_code=400,
            content=_error_body("validation_error", "Invalid request data", {"errors": errors}),
        )

    @app.exception_handler(UnauthorizedError)
    async def handle_unauthorized(request: Request, exc: UnauthorizedError):
        return JSONResponse(
            status_code=401,
            content=_error_body("unauthorized", exc.message),
            headers={"WWW-Authenticate": API_KEY_HEADER},
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(
            status_code=404,
            content=_error_body("not_found", exc.message),
        )

    @app.exception_handler(ConflictError)
    async def handle_conflict(request: Request, exc: ConflictError):
        return JSONResponse(
            status_code=409,
            content=_error_body("conflict", exc.message),
        )

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content=_error_body("server_error", "An internal error occurred. Please try again later."),
        )

    @app.exception_handler(JobBoardError)
    async def handle_app_error(request: Request, exc: JobBoardError):
        logger.error("[%s] Application error: %s | Context: %s", request_id_var.get(""), exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content=_error_body("server_error", exc.message),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all: generic 500, full traceback in the server log only."""
        # Runs outside RequestIDMiddleware; the ContextVar is already reset here
        rid = request_id_var.get("") or getattr(request.state, "request_id", "")
        logger.error(
            "[%s] Unexpected error: %s",
            rid,
            str(exc),
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content=_error_body(
                "internal_server_error",
                "An unexpected error occurred. Please try again or contact support.",
                request_id=rid,
            ),
            headers={REQUEST_ID_HEADER: rid} if rid else None,
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Configuration for this instance. Read from the environment
                  when omitted (uvicorn --factory entry point).

    Returns:
        FastAPI instance with middleware, exception handlers and routes.
        The database is opened by the lifespan handler, not here.
    """
    if settings is None:
        settings = Settings()

    app = FastAPI(
        title="Job Board API",
        description=(
            "Job Board API: users, job postings and applications. "
            "Please contact support directly if something is unclear or not working as intended."
        ),
        version=__version__,
        contact={"name": "Support"},
        openapi_url=OPENAPI_URL,
        docs_url=DOCS_URL,
        redoc_url=REDOC_URL,
        openapi_tags=[
            {"name": "users", "description": "User management endpoints."},
            {"name": "jobs", "description": "Job posting endpoints."},
            {"name": "applications", "description": "Job application endpoints."},
            {"name": "health", "description": "Service health."},
        ],
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = Database(settings)

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → CORS → routes
    origins = settings.cors_origins_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Accept", "Content-Type", API_KEY_HEADER, REQUEST_ID_HEADER],
        expose_headers=[REQUEST_ID_HEADER, "X-Total-Count"],
        max_age=3600,
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(users.router)
    app.include_router(jobs.router)
    app.include_router(applications.router)
    app.include_router(health.router)

    return app
