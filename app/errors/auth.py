"""Authentication and authorization errors."""

from starlette.status import HTTP_400_BAD_REQUEST, HTTP_401_UNAUTHORIZED, HTTP_403_FORBIDDEN

from app.configs import FORBIDDEN_MESSAGE, INVALID_TOKEN_MESSAGE, NO_TOKEN_MESSAGE
from app.errors.base import BaseAppError


class UserAuthenticationError(BaseAppError):
    """Base class for authentication errors."""

    def __init__(
        self,
        detail: str = "Authentication failed",
        status_code: int = HTTP_401_UNAUTHORIZED,
    ) -> None:
        super().__init__(detail, status_code)


class UnauthorizedError(UserAuthenticationError):
    """Raised when no bearer token was presented."""

    def __init__(self, detail: str = NO_TOKEN_MESSAGE) -> None:
        super().__init__(detail, HTTP_401_UNAUTHORIZED)


class InvalidTokenError(UserAuthenticationError):
    """Raised when a presented token is malformed, forged or expired."""

    def __init__(self, detail: str = INVALID_TOKEN_MESSAGE) -> None:
        super().__init__(detail, HTTP_400_BAD_REQUEST)


class ForbiddenError(UserAuthenticationError):
    """Raised when an authenticated principal lacks the admin flag."""

    def __init__(self, detail: str = FORBIDDEN_MESSAGE) -> None:
        super().__init__(detail, HTTP_403_FORBIDDEN)
