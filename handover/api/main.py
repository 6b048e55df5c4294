"""Handover API - FastAPI over the Redis document store."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
import time

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
import structlog

from handover import __version__
from handover.checklists import VersionError
from handover.config import get_settings
from handover.logging import (
    clear_context,
    new_correlation_id,
    set_correlation_id,
    setup_logging,
)
from handover.logging.correlation import CORRELATION_HEADER
from handover.store import ChecklistStore, ProjectNotFoundError, StoreError
from handover.tracker import Tracker

from . import routers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Open the store on startup, flush background writes on shutdown."""
    settings = get_settings()
    setup_logging(
        service_name=settings.service_name,
        log_format=settings.log_format,
        log_level=settings.log_level,
    )
    store = ChecklistStore.from_url(
        settings.redis_url,
        key_prefix=settings.store_key_prefix,
        timeout=settings.store_timeout_seconds,
    )
    tracker = Tracker(store)
    app.state.tracker = tracker
    yield
    await tracker.drain()
    await store.close()


async def correlation_middleware(request: Request, call_next):
    correlation_id = request.headers.get(CORRELATION_HEADER) or new_correlation_id()
    set_correlation_id(correlation_id, method=request.method, path=request.url.path)

    start = time.time()
    logger = structlog.get_logger()

    try:
        response = await call_next(request)
        duration_ms = round((time.time() - start) * 1000, 2)

        if response.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error(
                "http_request_failed", status_code=response.status_code, duration_ms=duration_ms
            )
        else:
            logger.info("http_request", status_code=response.status_code, duration_ms=duration_ms)

        response.headers[CORRELATION_HEADER] = correlation_id
        return response
    except Exception as e:
        logger.error(
            "http_request_exception",
            error=str(e),
            error_type=type(e).__name__,
            duration_ms=round((time.time() - start) * 1000, 2),
            exc_info=True,
        )
        raise
    finally:
        clear_context()


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    structlog.get_logger().error("store_unavailable", error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"detail": "Document store unavailable, please retry"},
    )


async def not_found_handler(request: Request, exc: ProjectNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


async def version_error_handler(request: Request, exc: VersionError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"detail": str(exc)})


def create_app() -> FastAPI:
    app = FastAPI(
        title="Handover Tracker API",
        description="Merchant onboarding checklists and progress",
        version=__version__,
        lifespan=lifespan,
    )
    app.middleware("http")(correlation_middleware)
    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(ProjectNotFoundError, not_found_handler)
    app.add_exception_handler(VersionError, version_error_handler)

    @app.get("/")
    async def root():
        """Root endpoint - API information."""
        return {
            "name": "Handover Tracker API",
            "version": __version__,
            "description": "Merchant onboarding checklists and progress",
        }

    app.include_router(routers.health.router)
    app.include_router(routers.projects.router, prefix="/api")
    app.include_router(routers.versions.router, prefix="/api")
    app.include_router(routers.settings.router, prefix="/api")
    return app


app = create_app()
