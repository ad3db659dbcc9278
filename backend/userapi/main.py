"""
Users API Backend - FastAPI Application Factory
================================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes middleware registration, route mounting, exception
       handling and ownership of the user store in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       with its own UserStore and UserService on app.state.
Who:   uvicorn (uvicorn userapi.main:app), the `userapi` entry point, tests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────┐ ┌──────┐ ┌──────────┐ ┌─────────┐         │
    │  │ CORS │→│ GZip │→│  Req ID  │→│ Logging │         │
    │  └──────┘ └──────┘ └──────────┘ └─────────┘         │
    │                                                     │
    │  Routes (/api/v1):                                  │
    │  GET health │ GET/POST users │ GET/DELETE users/{id}│
    │                                                     │
    │  Exception Handlers:                                │
    │  ValidationError→400 │ NotFoundError→404 │ *→500    │
    │                                                     │
    │  app.state: store (UserStore), user_service         │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from userapi import __version__
from userapi.config import settings
from userapi.exceptions import NotFoundError, UserAPIError, ValidationError
from userapi.middleware.logging import RequestLoggingMiddleware
from userapi.middleware.request_id import RequestIDMiddleware, request_id_var
from userapi.routes import health, users
from userapi.schemas.user import UNEXPECTED_ERROR_MESSAGE, APIResponse
from userapi.services.user_service import UserService
from userapi.store import UserStore

logger = logging.getLogger(__name__)

CORS_ALLOWED_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
CORS_ALLOWED_HEADERS = ["Content-Type", "Authorization"]


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s, to stdout.
    uvicorn's access log is turned down because RequestLoggingMiddleware
    already writes one line per request, with the request ID.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info("Users API %s starting up with %d users", __version__, len(app.state.store))

    yield

    # Nothing to flush: the store is in-memory only and dies with the process.
    logger.info("Users API shutting down.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=APIResponse.error(message).to_content())


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to HTTP status codes and error envelopes.

    Handler hierarchy:
        ValidationError         → 400 (bad create payload, see UserCreate.from_json)
        NotFoundError           → 404
        UserAPIError (base)     → its status_code
        Exception (fallback)    → 500, for errors raised outside
                                  RequestLoggingMiddleware (which converts
                                  route errors itself, inside CORS)

    Unmatched routes and methods are left to the framework defaults
    ({"detail": "Not Found"} / 405).
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return _error_response(400, exc.message)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error_response(404, exc.message)

    @app.exception_handler(UserAPIError)
    async def handle_app_error(request: Request, exc: UserAPIError):
        logger.error(
            "[%s] Application error: %s | Context: %s",
            request_id_var.get(""),
            exc.message,
            exc.context,
        )
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all: generic envelope to the client, full trace to the log."""
        logger.error(
            "[%s] Unexpected error: %s",
            request_id_var.get(""),
            str(exc),
            exc_info=True,
        )
        return _error_response(500, UNEXPECTED_ERROR_MESSAGE)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(store: Optional[UserStore] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: User store to serve. Defaults to a fresh store, seeded with the
               sample users unless SEED_SAMPLE_USERS is false.

    Returns:
        Fully configured FastAPI instance owning its store and service.
    """
    app = FastAPI(
        title="Users API",
        description="In-memory CRUD service over user records, with a uniform JSON envelope.",
        version=__version__,
        lifespan=lifespan,
    )

    if store is None:
        store = UserStore.with_sample_users() if settings.seed_sample_users else UserStore()
    app.state.store = store
    app.state.user_service = UserService(store)

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added = outermost. Execution order: CORS → GZip → RequestID → Logging
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=CORS_ALLOWED_METHODS,
        allow_headers=CORS_ALLOWED_HEADERS,
        expose_headers=["X-Request-ID"],
    )

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(health.router)
    app.include_router(users.router)

    return app


# uvicorn expects `userapi.main:app` to be importable
app = create_app()
