"""
Main entrypoint for the Lesson Booking API.

This module assembles the FastAPI application: logging, CORS, request
logging, the API routers, JSON error handlers and the static frontend.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``, e.g.::

    uvicorn lesson_booking_api.app.main:app --reload

The MongoDB client is opened once by the startup hook and shared by
every request.  Passing ``database`` to ``create_app`` skips the
connection entirely, which is how the tests run against an in‑memory
store.
"""

import logging
import time
from http import HTTPStatus
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import router as api_router
from .core.config import settings
from .core.db import DocumentDatabase, connect
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:
    """Render every error as ``{"error": <message>}``."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        # Routing failures carry the default reason phrase; endpoints always set their own detail.
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED or (
            exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == HTTPStatus.NOT_FOUND.phrase
        ):
            return _error(status.HTTP_404_NOT_FOUND, "Resource not found")
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.info("%s %s rejected: %s", request.method, request.url.path, exc.errors())
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid request payload")

    @app.exception_handler(PyMongoError)
    async def store_exception_handler(request: Request, exc: PyMongoError) -> JSONResponse:
        logger.error("%s %s store error", request.method, request.url.path, exc_info=exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("%s %s unhandled error", request.method, request.url.path, exc_info=exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def create_app(
    database: Optional[DocumentDatabase] = None,
    public_dir: Optional[str] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    database : Optional[DocumentDatabase]
        Pre‑built database handle.  When omitted, the startup hook
        connects to MongoDB using ``settings``.
    public_dir : Optional[str]
        Directory with the static frontend and its ``images``
        subdirectory.  Defaults to ``settings.public_dir``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.database = database
    app.state.mongo_client = None
    app.state.public_dir = str(Path(public_dir or settings.public_dir).resolve())

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        query = f"?{request.url.query}" if request.url.query else ""
        logger.info(
            "%s %s%s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            query,
            response.status_code,
            elapsed_ms,
        )
        return response

    app.include_router(api_router)
    register_exception_handlers(app)

    # The frontend is mounted last so API routes take precedence.
    if Path(app.state.public_dir).is_dir():
        app.mount("/", StaticFiles(directory=app.state.public_dir, html=True), name="public")

    @app.on_event("startup")
    async def startup_event() -> None:
        if app.state.database is not None:
            return
        try:
            client, db = connect(settings)
        except PyMongoError:
            logger.exception("Failed to connect to MongoDB")
            raise
        app.state.mongo_client = client
        app.state.database = db

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        if app.state.mongo_client is not None:
            app.state.mongo_client.close()
            logger.info("MongoDB connection closed")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
