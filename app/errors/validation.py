"""Custom validation error handling for FastAPI."""

from collections.abc import Awaitable, Callable
from typing import cast

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from starlette.status import HTTP_400_BAD_REQUEST
from structlog.stdlib import BoundLogger

from app.errors.base import BaseAppError
from app.utils.helpers import host


class ValidationError(BaseAppError):
    """Raised when a request fails a field rule."""

    def __init__(self, detail: str = "Validation Error") -> None:
        super().__init__(detail=detail, status_code=HTTP_400_BAD_REQUEST)


def create_validation_exception_handler(
    logger: BoundLogger,
) -> Callable[[Request, Exception], Awaitable[ORJSONResponse]]:
    """
    Create a handler answering request-shape failures with 400.

    A body that is not JSON, or whose fields have the wrong JSON type,
    never reaches the field validators; the framework's errors are
    flattened into a short list instead.

    Args:
        logger: Logger instance to use for logging.

    Returns:
        A callable exception handler.
    """

    async def validation_exception_handler(
        request: Request,
        exc: Exception,
    ) -> ORJSONResponse:
        exec_error = cast(RequestValidationError, exc)

        formatted_errors = [
            {
                "field": ".".join(str(loc) for loc in error.get("loc", [])[1:]),  # Skip 'body'
                "message": error.get("msg", "Invalid value"),
                "type": error.get("type", "validation_error"),
            }
            for error in exec_error.errors()
        ]

        logger.warning(
            f"Validation error for ip: {host(request)} at endpoint {request.url.path}: {formatted_errors}",
        )

        return ORJSONResponse(
            status_code=HTTP_400_BAD_REQUEST,
            content={
                "detail": "Invalid request body.",
                "errors": formatted_errors,
            },
        )

    return validation_exception_handler
