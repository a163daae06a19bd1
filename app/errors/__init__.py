from app.errors.auth import (
    ForbiddenError,
    InvalidTokenError,
    UnauthorizedError,
    UserAuthenticationError,
)
from app.errors.base import BaseAppError, create_exception_handler
from app.errors.configuration import ConfigurationError
from app.errors.result import (
    STATUS_BY_KIND,
    Err,
    ErrorKind,
    Ok,
    Result,
    ResultError,
    unwrap,
)
from app.errors.validation import ValidationError, create_validation_exception_handler

__all__ = [
    "STATUS_BY_KIND",
    "BaseAppError",
    "ConfigurationError",
    "Err",
    "ErrorKind",
    "ForbiddenError",
    "InvalidTokenError",
    "Ok",
    "Result",
    "ResultError",
    "UnauthorizedError",
    "UserAuthenticationError",
    "ValidationError",
    "create_exception_handler",
    "create_validation_exception_handler",
    "unwrap",
]
