# app/middleware/middleware.py
"""
Middleware components for the blog API.

This module contains the request logging middleware, the terminal error
middleware, CORS handling and the lifespan event handler for database
initialization and cleanup.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from time import perf_counter

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR
from starlette.types import ASGIApp
from structlog.stdlib import BoundLogger

from app.configs import AUTH_TOKEN_HEADER, DEFAULT_ERROR_MESSAGE, settings
from app.db import close_db, init_db
from app.monitoring import get_logger
from app.utils.helpers import get_summary, host

logger = get_logger("app.middleware")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Manage application startup and shutdown events."""
    # Startup
    logger.info(f"Starting {app.title}...")

    try:
        if settings.LOG_TO_FILE:
            logger.info(f"Logging to file enabled: {settings.LOG_FILE}")

        await init_db()

        logger.info("Services initialized successfully")
        logger.info("Services:")
        logger.info("  - Backend API: http://localhost:8000")
        logger.info("  - API Documentation: http://localhost:8000/docs")
        logger.info("  - Health Check: http://localhost:8000/health")

    except Exception:
        logger.exception("Failed to initialize services")
        raise

    yield

    # Shutdown
    logger.info(f"Shutting down {app.title}...")

    try:
        await close_db()
        logger.info("Services cleaned up successfully")

    except Exception:
        logger.exception("Error during service cleanup")


def configure_cors(app: FastAPI) -> None:
    """Configure CORS middleware for the application."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", AUTH_TOKEN_HEADER],
    )


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Log request summary and timing information."""

        start_time = perf_counter()
        summary = get_summary(request)

        route_info = summary or f"{request.method} {request.url.path}"
        logger.info(f"Request: {route_info}, from ip: {host(request)}")

        response = await call_next(request)
        duration = perf_counter() - start_time

        logger.info(
            f"Response: {response.status_code} for {request.method} {request.url.path} "
            f"in {duration:.2f}s",
        )

        return response


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Terminal error handler.

    Anything the route handlers and exception handlers did not turn into a
    response is logged with its full stack and answered with a fixed 500
    body that never exposes internals.
    """

    def __init__(self, app: ASGIApp, logger: BoundLogger | None = None) -> None:
        super().__init__(app)
        self.logger = logger or get_logger("app.errors")

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        try:
            return await call_next(request)
        except Exception:
            self.logger.exception(
                f"Unhandled error for ip: {host(request)} at endpoint {request.url.path}",
            )
            return ORJSONResponse(
                status_code=HTTP_500_INTERNAL_SERVER_ERROR,
                content={"detail": DEFAULT_ERROR_MESSAGE},
            )
