"""FastAPI application factory."""

import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from leaderboard_service import SERVICE_NAME, __version__
from leaderboard_service.config import Config
from leaderboard_service.datasources import (
    UserDirectory,
    UserServiceDataSource,
    UserServiceError,
    UserNotFoundError,
)
from leaderboard_service.api import router
from leaderboard_service.models import HealthResponse

logger = logging.getLogger(__name__)


def create_app(
    config: Config | None = None,
    datasource: UserDirectory | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Application configuration. If None, loads from environment.
        datasource: User directory to read from. If None, a
            UserServiceDataSource is built from the configuration.

    Returns:
        Configured FastAPI application
    """
    if config is None:
        config = Config.from_env()

    if datasource is None:
        datasource = UserServiceDataSource(
            base_url=config.user_service_url,
            timeout=config.request_timeout,
            page_size=config.page_size,
        )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler for startup/shutdown."""
        # Startup
        logger.info("Starting Leaderboard API")
        logger.info(f"Using user service: {config.user_service_url}")

        yield

        # Shutdown
        logger.info("Shutting down...")
        await datasource.close()

    app = FastAPI(
        title="Leaderboard API",
        description="Points leaderboard, user rank and top-N queries built on the user service",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.datasource = datasource
    app.state.started_at = time.monotonic()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=[
            "Origin",
            "Content-Type",
            "Authorization",
            "x-supabase-api-version",
            "apikey",
            "x-client-info",
        ],
    )

    @app.exception_handler(UserNotFoundError)
    async def user_not_found_handler(request: Request, exc: UserNotFoundError):
        return JSONResponse(status_code=404, content={"error": "User not found"})

    @app.exception_handler(UserServiceError)
    async def user_service_error_handler(request: Request, exc: UserServiceError):
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
        return JSONResponse(
            status_code=500,
            content={
                "error": "Failed to fetch leaderboard data",
                "details": str(exc),
            },
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    # Include API routes
    app.include_router(router)

    # Health check endpoint
    @app.get("/health", response_model=HealthResponse)
    async def health_check() -> HealthResponse:
        return HealthResponse(
            service=SERVICE_NAME,
            version=__version__,
            timestamp=datetime.now(timezone.utc).isoformat(timespec="seconds"),
            uptime=int(time.monotonic() - app.state.started_at),
            dependencies={"user-service": config.user_service_url},
        )

    return app
