"""Pure field validators for request records and identifiers."""

from app.validators.validators import (
    ValidateResult,
    is_valid_id,
    validate_blog,
    validate_blog_id,
    validate_credentials,
    validate_id,
    validate_type,
    validate_type_id,
    validate_type_rename,
    validate_user,
)

__all__ = [
    "ValidateResult",
    "is_valid_id",
    "validate_blog",
    "validate_blog_id",
    "validate_credentials",
    "validate_id",
    "validate_type",
    "validate_type_id",
    "validate_type_rename",
    "validate_user",
]
