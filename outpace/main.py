"""Outpace FastAPI application.

Entry point for the backend server. ``create_app`` builds the app around one
``Database`` (engine + connection pool) owned for the life of the process.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from outpace.api.auth import router as auth_router
from outpace.api.health import VERSION
from outpace.api.health import router as health_router
from outpace.api.projects import router as projects_router
from outpace.api.tasks import router as tasks_router
from outpace.config import Settings
from outpace.config import settings as default_settings
from outpace.db.database import Database
from outpace.errors import STATUS_BY_KIND, AppError, ErrorKind
from outpace.middleware.auth import BearerAuthMiddleware
from outpace.schemas.common import format_validation_errors

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


def _unexpected_error(request: Request, exc: Exception, settings: Settings) -> JSONResponse:
    logger.error(
        "Unhandled exception on %s %s: %s", request.method, request.url.path, exc, exc_info=True
    )
    # Internal details reach the client only in development
    message = str(exc) if settings.is_development and str(exc) else "Internal server error"
    return _error(STATUS_BY_KIND[ErrorKind.INTERNAL], message)


def register_exception_handlers(app: FastAPI, settings: Settings) -> None:
    """Translate every failure into the ``{success: false, error}`` envelope."""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
        else:
            logger.info("%s %s -> %d: %s", request.method, request.url.path, exc.status_code, exc.message)
        return _error(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return _error(STATUS_BY_KIND[ErrorKind.VALIDATION], format_validation_errors(exc.errors()))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return _error(404, "Route not found")
        if exc.status_code == 405:
            return _error(405, "Method not allowed")
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        return _unexpected_error(request, exc, settings)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings
    db = Database(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application startup and shutdown."""
        db.create_all()
        logger.info("Outpace API %s started (%s)", VERSION, settings.environment)
        yield
        db.dispose()

    app = FastAPI(
        title="Outpace",
        description="Task and project management API",
        version=VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db = db

    # Last added = outermost: CORS wraps the error catcher, which wraps auth
    app.add_middleware(BearerAuthMiddleware, settings=settings)

    @app.middleware("http")
    async def catch_unexpected_errors(request: Request, call_next):
        try:
            return await call_next(request)
        except Exception as exc:
            return _unexpected_error(request, exc, settings)

    origins = settings.cors_origin_list
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials="*" not in origins,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type"],
    )

    register_exception_handlers(app, settings)

    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(tasks_router)
    app.include_router(projects_router)

    @app.get("/")
    async def root():
        return {"name": "Outpace", "version": VERSION, "status": "running"}

    return app


def run() -> None:
    """Serve the app with uvicorn on the configured host/port."""
    import uvicorn

    configure_logging(default_settings.log_level)
    uvicorn.run(
        "outpace.main:create_app",
        factory=True,
        host=default_settings.host,
        port=default_settings.port,
    )
