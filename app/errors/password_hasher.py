from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from app.errors.base import BaseAppError


class PasswordHashingError(BaseAppError):
    """Base error for password hasher module."""

    def __init__(self, detail: str = "Password hashing failed") -> None:
        super().__init__(detail, HTTP_500_INTERNAL_SERVER_ERROR)


class PasswordRehashError(PasswordHashingError):
    """Error for password rehashing."""

    def __init__(self, detail: str = "Password rehashing failed") -> None:
        super().__init__(detail)
