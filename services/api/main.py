"""Reverse Words API - FastAPI application entry point.

Endpoints:
- POST / - Reverse a word
- GET / - Release information
- GET /health - Liveness probe
- GET /metrics - Prometheus exposition of the usage counters
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from core.config.settings import Settings, get_settings
from core.models.common import ErrorResponse
from services.api import __version__
from services.api.exceptions import MalformedBodyError
from services.api.middleware import log_requests
from services.api.prometheus import WordMetrics
from services.api.routers import metrics_router, words_router

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log the release and listening port on startup."""
    app_settings: Settings = app.state.settings
    logger.info(f"Starting Reverse Words API. Release: {app_settings.release}")
    logger.info(f"Listening on port {app_settings.app_port}")

    yield

    logger.info("Reverse Words API stopped")


def create_app(
    settings: Optional[Settings] = None,
    metrics: Optional[WordMetrics] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: Configuration; the cached environment settings when omitted.
        metrics: Counters shared by the handlers; a fresh registry when omitted.

    Returns:
        Configured application with all routers and error handlers.
    """
    settings = settings if settings is not None else get_settings()
    metrics = metrics if metrics is not None else WordMetrics()

    app = FastAPI(
        title="Reverse Words API",
        description="Reverses words and exposes usage counters",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.metrics = metrics

    @app.middleware("http")
    async def log_requests_middleware(request: Request, call_next):
        """Log all incoming requests with timing."""
        return await log_requests(request, call_next)

    app.include_router(words_router)
    app.include_router(metrics_router)

    @app.exception_handler(MalformedBodyError)
    async def malformed_body_handler(request: Request, exc: MalformedBodyError):
        """Reject request bodies that are not a usable JSON object."""
        logger.warning(f"{request.method} {request.url.path}: {exc}")
        error = ErrorResponse(
            error="malformed_body",
            message="Request body must be empty or a JSON object",
            detail=exc.detail,
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error.model_dump(mode="json"),
        )

    @app.exception_handler(404)
    async def not_found_handler(request: Request, exc):
        """404 error handler."""
        error = ErrorResponse(
            error="not_found",
            message=f"Endpoint {request.url.path} not found",
        )
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=error.model_dump(mode="json"),
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Global exception handler for unhandled errors."""
        logger.error(f"Unhandled exception: {exc}")
        error = ErrorResponse(
            error="internal_server_error",
            message="An internal server error occurred",
            detail=str(exc) if settings.debug else None,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error.model_dump(mode="json"),
        )

    return app


app = create_app(settings=settings)


def run() -> None:
    """Serve the application; exits non-zero if the port cannot be bound."""
    import uvicorn

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
