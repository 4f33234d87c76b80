"""User Service API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map UserServiceError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Each app owns exactly one UserStore, exposed as app.state.user_store
    - Logging configured on startup via lifespan context manager

Design Decisions:
    - create_app() factory: tests build an app around a fresh store; the module-level
      `app` is what uvicorn serves
    - Store attached at construction, not in lifespan: ASGI test transports skip lifespan
    - Access log as HTTP middleware: one line per request with method, path, status, duration
"""

import logging
import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from user_service.api.error_handlers import register_error_handlers
from user_service.api.routes import health, users
from user_service.config import Settings, get_settings
from user_service.core.user_store import UserStore
from user_service.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)
access_logger = logging.getLogger("user_service.access")


def create_app(
    store: UserStore | None = None, settings: Settings | None = None,
) -> FastAPI:
    """Build the FastAPI app around the given (or a new) UserStore."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        logger.info(f"{settings.app_name} started")
        yield
        logger.info(f"{settings.app_name} shutting down")

    app = FastAPI(title="User Service API", version="1.0.0", lifespan=lifespan)
    app.state.user_store = store if store is not None else UserStore()

    # CORS — configured from settings, not hardcoded
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def access_log(request: Request, call_next):
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            _log_access(request, 500, started)
            raise
        _log_access(request, response.status_code, started)
        return response

    # Routes — explicit registration
    app.include_router(health.router)
    app.include_router(users.router)

    register_error_handlers(app)
    return app


def _log_access(request: Request, status_code: int, started: float) -> None:
    duration_ms = round((time.perf_counter() - started) * 1000, 2)
    access_logger.info(
        f"{request.method} {request.url.path} {status_code}",
        extra={
            "method": request.method,
            "path": request.url.path,
            "status_code": status_code,
            "duration_ms": duration_ms,
        },
    )


app = create_app()


def run() -> None:
    """Serve the module-level app with uvicorn."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
