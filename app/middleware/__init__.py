from app.middleware.context import RequestContextMiddleware
from app.middleware.middleware import (
    ErrorHandlingMiddleware,
    LoggingMiddleware,
    configure_cors,
    lifespan,
)

__all__ = [
    "ErrorHandlingMiddleware",
    "LoggingMiddleware",
    "RequestContextMiddleware",
    "configure_cors",
    "lifespan",
]
