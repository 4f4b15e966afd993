"""
Rhythm90 Backend — FastAPI Application Factory
===============================================

What:  Builds the Rhythm90 FastAPI app: middleware, routers, error mapping
       and startup/shutdown hooks.
How:   create_app() assembles a fresh instance; the module-level `app` is
       the one uvicorn serves (uvicorn rhythm90.main:app). Tests call
       create_app() directly so each gets its own dependency overrides.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────┐ ┌──────┐ ┌──────┐     │
    │  │  Req ID  │→│  Logging    │→│ GZip │→│ CORS │     │
    │  └──────────┘ └─────────────┘ └──────┘ └──────┘     │
    │                                                     │
    │  Routes: /health /board /signals /rnr-summary       │
    │          /slack-hook + account, admin, growth, AI   │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ miss→404 text │ Validation→400 │ Unauth→401  │   │
    │  │ Forbidden→403 │ NotFound→404   │ Limit→429   │   │
    │  │ LLM→503       │ anything else→500           │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Routing misses:
    Path and method together select a handler. An unknown path AND a known
    path with an unsupported method both answer with the plain-text body
    "Not Found" and status 404; the router never reports 405.
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from rhythm90 import __version__
from rhythm90.config import settings
from rhythm90.database import dispose_engine
from rhythm90.exceptions import (
    ForbiddenError,
    LLMServiceError,
    NotFoundError,
    TooManyRequestsError,
    UnauthorizedError,
    ValidationError,
)
from rhythm90.middleware.logging import RequestLoggingMiddleware
from rhythm90.middleware.request_id import RequestIDMiddleware, request_id_var
from rhythm90.routes import (
    admin,
    assistant,
    auth,
    board,
    flags,
    growth,
    health,
    integrations,
    invites,
    notifications,
    password,
    users,
)

logger = logging.getLogger(__name__)

# Statuses Starlette's router raises for a request no route accepts
ROUTING_MISS_STATUSES = {404, 405}


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Output: stdout (captured by the container runtime)
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
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup:  configure logging, report missing optional configuration.
    Shutdown: dispose the database engine (close pooled connections).
    """
    setup_logging()
    logger.info("Rhythm90 Backend %s starting up...", __version__)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        # Only optional features depend on these; the board keeps working
        logger.warning("Configuration warning: %s", str(e))

    if settings.demo_mode:
        logger.info("DEMO_MODE is on: team mutations will be acknowledged without writing")

    logger.info("Board team=%s, signals play=%s", settings.board_team_id, settings.signals_play_id)
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    logger.info("Rhythm90 Backend shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_body(error: str, message: str, details: dict | None = None) -> dict:
    body = {"error": error, "message": message, "request_id": request_id_var.get("")}
    if details:
        body["details"] = details
    return body


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to responses.

    Handler table:
        routing miss (404/405)  → 404 text/plain "Not Found"
        ValidationError         → 400 structured JSON
        UnauthorizedError       → 401 text/plain "Unauthorized"
        ForbiddenError          → 403 structured JSON
        NotFoundError           → 404 structured JSON
        TooManyRequestsError    → 429 structured JSON
        LLMServiceError         → 503 structured JSON
        Exception (fallback)    → 500 structured JSON, stack trace logged only

    RequestValidationError (malformed or incomplete bodies) keeps FastAPI's
    default 422 response.
    """

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        if exc.status_code in ROUTING_MISS_STATUSES:
            return PlainTextResponse("Not Found", status_code=404)
        return await http_exception_handler(request, exc)

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s", rid, exc.message)
        return JSONResponse(
            status_code=400,
            content=_error_body("validation_error", exc.message, exc.context),
        )

    @app.exception_handler(UnauthorizedError)
    async def handle_unauthorized(request: Request, exc: UnauthorizedError):
        return PlainTextResponse("Unauthorized", status_code=401)

    @app.exception_handler(ForbiddenError)
    async def handle_forbidden(request: Request, exc: ForbiddenError):
        return JSONResponse(status_code=403, content=_error_body("forbidden", exc.message))

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content=_error_body("not_found", exc.message))

    @app.exception_handler(TooManyRequestsError)
    async def handle_too_many_requests(request: Request, exc: TooManyRequestsError):
        return JSONResponse(status_code=429, content=_error_body("too_many_requests", exc.message))

    @app.exception_handler(LLMServiceError)
    async def handle_llm_error(request: Request, exc: LLMServiceError):
        rid = request_id_var.get("")
        logger.error("[%s] LLM service error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=503,
            content=_error_body("llm_service_error", exc.message),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Catch-all for store failures and anything else unplanned.

        Security: the stack trace is logged server-side only.

        This handler runs outside the middleware stack, after
        RequestIDMiddleware has already unwound, so it echoes the ID itself.
        """
        rid = getattr(request.state, "request_id", "") or request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                **_error_body(
                    "internal_server_error",
                    "An unexpected error occurred. Please try again or contact support.",
                ),
                "request_id": rid,
            },
            headers={"X-Request-ID": rid},
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Rhythm90 API",
        description="Team board for marketing plays, signals and results-and-review summaries.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
        # "/board/" is a routing miss, not a redirect to "/board"
        redirect_slashes=False,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(health.router)
    app.include_router(board.router)
    app.include_router(integrations.router)
    app.include_router(auth.router)
    app.include_router(users.router)
    app.include_router(admin.router)
    app.include_router(flags.router)
    app.include_router(invites.router)
    app.include_router(growth.router)
    app.include_router(notifications.router)
    app.include_router(password.router)
    app.include_router(assistant.router)

    return app


# uvicorn expects `rhythm90.main:app` to be importable
app = create_app()
