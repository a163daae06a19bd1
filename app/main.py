# app/main.py

"""Blog API - types, blogs and users over FastAPI and SQLModel."""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse

from app.configs import settings
from app.db import ping_db
from app.errors import (
    BaseAppError,
    create_exception_handler,
    create_validation_exception_handler,
)
from app.managers import get_token_manager
from app.middleware import (
    ErrorHandlingMiddleware,
    LoggingMiddleware,
    RequestContextMiddleware,
    configure_cors,
    lifespan,
)
from app.monitoring import configure_logging, get_logger
from app.routes import auth_router, blog_router, type_router, user_router
from app.schemas import HealthCheckResponse
from app.utils.helpers import today_str

configure_logging()
app_logger = get_logger("app")

# Refuse to start without a token signing secret
get_token_manager()

app = FastAPI(
    title=settings.APP_NAME,
    description="CRUD API for blogs and their types",
    version="1.0.0",
    lifespan=lifespan,
    default_response_class=ORJSONResponse,
    swagger_ui_parameters={
        "docExpansion": "none",
        "operationsSorter": "method",
    },
)

# The last middleware added runs first; the error handler is innermost so
# request logging still sees the 500.
app.add_middleware(ErrorHandlingMiddleware, logger=app_logger)
app.add_middleware(LoggingMiddleware)
app.add_middleware(RequestContextMiddleware)
configure_cors(app)

routes = [
    type_router,
    blog_router,
    user_router,
    auth_router,
]

_ = [app.include_router(router) for router in routes]

errors = [
    (BaseAppError, create_exception_handler(app_logger)),
    (RequestValidationError, create_validation_exception_handler(app_logger)),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]


@app.get(
    "/health",
    tags=["🩺 Health"],
    summary="Health check endpoint",
    response_model=HealthCheckResponse,
    response_class=ORJSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "version": "1.0.0",
                        "status": "ok",
                        "timestamp": "2025-01-01 10:00:00",
                        "database": "ok",
                    },
                },
            },
        },
    },
    operation_id="health_check",
)
async def health_check() -> HealthCheckResponse:
    """
    Health check endpoint.

    Returns
    -------
    HealthCheckResponse
        API version and database connectivity. The status is ``degraded``
        when the database does not answer.
    """
    database_ok = await ping_db()
    return HealthCheckResponse(
        version=app.version,
        status="ok" if database_ok else "degraded",
        timestamp=today_str(),
        database="ok" if database_ok else "unavailable",
    )


@app.get(
    "/",
    tags=["🏠 Root"],
    summary="Root access",
    response_model=dict[str, str],
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {"message": "Welcome to the Blog API"},
                },
            },
        },
    },
    operation_id="root_access",
)
async def root() -> dict[str, str]:
    """
    Root endpoint.

    Returns
    -------
    dict[str, str]
        Welcome message payload.
    """
    return {"message": f"Welcome to the {settings.APP_NAME}"}


if __name__ == "__main__":
    from uvicorn import run

    run(
        "app.main:app",
        host="127.0.0.1",
        port=8000,
        log_level="info",
        reload=True,
    )
