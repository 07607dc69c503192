"""FastAPI application factory and configuration.

This module provides the carousel server: the HTML shell on ``/``, the
block catalog on ``/blocks``, static assets for everything else and a
plain-text 404 when nothing matches.

Example:
    from src.api import create_app

    app = create_app()

    # Run with uvicorn:
    # uvicorn src.api.app:app --reload
"""

import os
import time
from collections.abc import AsyncGenerator, Awaitable, Callable
from contextlib import asynccontextmanager
from pathlib import Path
from uuid import uuid4

from fastapi import FastAPI, Request, Response
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.adapters import create_catalog_provider
from src.api.dependencies import AppState
from src.api.routes import blocks_router, health_router, pages_router
from src.core.logging import bind_contextvars, clear_contextvars, get_logger, is_development
from src.ports.catalog import CatalogProvider

logger = get_logger(__name__)

# Application version
APP_VERSION = os.getenv("APP_VERSION", "1.0.0")

# Packaged HTML shell, styles and scripts
DEFAULT_STATIC_DIR = Path(__file__).parent / "static"

NOT_FOUND_BODY = "Not found!"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Load the catalog on startup and release it on shutdown."""
    logger.info("server_starting")

    app_state: AppState = app.state.app_state
    await app_state.initialize(app.state.catalog_provider)

    logger.info("server_started", version=APP_VERSION)

    yield

    logger.info("server_shutting_down")
    await app_state.shutdown()
    logger.info("server_shutdown_complete")


async def not_found_handler(
    request: Request, exc: StarletteHTTPException
) -> Response:
    """Reply to unmatched paths with a plain-text 404."""
    if exc.status_code == 404:
        logger.debug("not_found", path=request.url.path)
        return PlainTextResponse(NOT_FOUND_BODY, status_code=404)
    return await http_exception_handler(request, exc)


async def log_requests(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Log one line per request with method, path, status and duration."""
    bind_contextvars(request_id=uuid4().hex[:12])
    start = time.perf_counter()
    try:
        response = await call_next(request)
        logger.info(
            "http_request",
            method=request.method,
            path=request.url.path,
            status=response.status_code,
            duration_ms=round((time.perf_counter() - start) * 1000, 2),
        )
        return response
    finally:
        clear_contextvars()


def create_app(
    title: str = "Block Carousel",
    description: str = "Serves the carousel page, its assets and the block catalog",
    cors_origins: list[str] | None = None,
    static_dir: str | Path | None = None,
    catalog: CatalogProvider | None = None,
    request_logging: bool | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        title: API title for OpenAPI docs.
        description: API description for OpenAPI docs.
        cors_origins: List of allowed CORS origins. Defaults to the
            CORS_ORIGINS env var, or ["*"].
        static_dir: Directory holding index.html and the static assets.
            Defaults to the STATIC_DIR env var, or the packaged assets.
        catalog: Block catalog to serve. Defaults to the file named by the
            CATALOG_PATH env var, or the built-in catalog.
        request_logging: Log every request. Defaults to on in development.

    Returns:
        Configured FastAPI application instance.
    """
    app = FastAPI(
        title=title,
        description=description,
        version=APP_VERSION,
        lifespan=lifespan,
    )

    if static_dir is None:
        static_dir = os.getenv("STATIC_DIR") or DEFAULT_STATIC_DIR
    static_path = Path(static_dir)

    if catalog is None:
        catalog = create_catalog_provider(path=os.getenv("CATALOG_PATH"))

    app.state.static_dir = static_path
    app.state.catalog_provider = catalog
    app.state.app_state = AppState()

    if cors_origins is None:
        cors_origins_env = os.getenv("CORS_ORIGINS", "*")
        if cors_origins_env == "*":
            cors_origins = ["*"]
        else:
            cors_origins = [origin.strip() for origin in cors_origins_env.split(",")]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)

    if request_logging is None:
        request_logging = is_development()
    if request_logging:
        app.middleware("http")(log_requests)

    app.add_exception_handler(StarletteHTTPException, not_found_handler)

    # Routes first; the static mount at "/" catches everything else
    app.include_router(pages_router)
    app.include_router(blocks_router)
    app.include_router(health_router)

    if static_path.is_dir():
        app.mount("/", StaticFiles(directory=static_path), name="static")
    else:
        logger.warning("static_dir_missing", static_dir=str(static_path))

    logger.info(
        "app_configured",
        title=title,
        static_dir=str(static_path),
        catalog=catalog.source,
        cors_origins=cors_origins,
    )

    return app


# Default app instance for uvicorn
app = create_app()
