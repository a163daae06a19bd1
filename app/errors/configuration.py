from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from app.errors.base import BaseAppError


class ConfigurationError(BaseAppError):
    """Raised when required configuration is missing at startup."""

    def __init__(self, detail: str = "Invalid configuration") -> None:
        super().__init__(detail, HTTP_500_INTERNAL_SERVER_ERROR)
