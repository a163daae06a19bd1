"""
Result types returned by the entity stores.

Store operations never raise for expected failures (missing records,
rejected writes); they return ``Ok(value)`` or ``Err(kind, detail)``.
``STATUS_BY_KIND`` is the one place where an ``ErrorKind`` becomes an HTTP
status code, and ``ResultError`` carries an ``Err`` up to the registered
exception handler.
"""

from dataclasses import dataclass
from enum import StrEnum

from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_401_UNAUTHORIZED,
    HTTP_403_FORBIDDEN,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from app.errors.base import BaseAppError


class ErrorKind(StrEnum):
    """Failure categories shared by stores, dependencies and routes."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    REFERENCE_NOT_FOUND = "reference_not_found"
    PERSISTENCE = "persistence"
    DUPLICATE = "duplicate"
    INVALID_CREDENTIALS = "invalid_credentials"
    UNAUTHORIZED = "unauthorized"
    BAD_TOKEN = "bad_token"
    FORBIDDEN = "forbidden"
    INTERNAL = "internal"


STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: HTTP_404_NOT_FOUND,
    ErrorKind.REFERENCE_NOT_FOUND: HTTP_400_BAD_REQUEST,
    ErrorKind.PERSISTENCE: HTTP_400_BAD_REQUEST,
    ErrorKind.DUPLICATE: HTTP_400_BAD_REQUEST,
    ErrorKind.INVALID_CREDENTIALS: HTTP_400_BAD_REQUEST,
    ErrorKind.UNAUTHORIZED: HTTP_401_UNAUTHORIZED,
    ErrorKind.BAD_TOKEN: HTTP_400_BAD_REQUEST,
    ErrorKind.FORBIDDEN: HTTP_403_FORBIDDEN,
    ErrorKind.INTERNAL: HTTP_500_INTERNAL_SERVER_ERROR,
}


@dataclass(frozen=True)
class Ok[T]:
    """Successful store operation."""

    value: T


@dataclass(frozen=True)
class Err:
    """Failed store operation."""

    kind: ErrorKind
    detail: str


type Result[T] = Ok[T] | Err


class ResultError(BaseAppError):
    """Raised to hand an ``Err`` to the exception handler."""

    def __init__(self, kind: ErrorKind, detail: str) -> None:
        super().__init__(detail, STATUS_BY_KIND[kind])
        self.kind = kind

    @classmethod
    def from_err(cls, err: Err) -> "ResultError":
        return cls(err.kind, err.detail)


def unwrap[T](result: Result[T]) -> T:
    """
    Return the value of an ``Ok`` or raise the ``Err`` as ``ResultError``.

    Examples:
    --------
    >>> unwrap(Ok(1))
    1
    """
    match result:
        case Ok(value):
            return value
        case Err() as err:
            raise ResultError.from_err(err)
