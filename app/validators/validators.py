"""
Field validators for request records.

Every validator is a pure function returning a ``ValidateResult``. Rules are
checked in a fixed order and the first failure wins, so the same bad payload
always yields the same message.
"""

from dataclasses import dataclass
from uuid import UUID

from email_validator import EmailNotValidError, validate_email

from app.configs.settings import (
    MAX_NAME_LENGTH,
    MAX_TEXT_LENGTH,
    MIN_NAME_LENGTH,
    MIN_TEXT_LENGTH,
)
from app.schemas.auth import CredentialsIn
from app.schemas.blog import BlogIn
from app.schemas.type import TypeIn
from app.schemas.user import UserIn


@dataclass(frozen=True)
class ValidateResult:
    """Outcome of a validator: a pass, or a failure with its message."""

    is_valid: bool
    error_message: str | None = None

    @classmethod
    def ok(cls) -> "ValidateResult":
        return cls(is_valid=True)

    @classmethod
    def fail(cls, message: str) -> "ValidateResult":
        return cls(is_valid=False, error_message=message)


def is_valid_id(value: str) -> bool:
    """Return True when ``value`` parses as a UUID."""
    try:
        UUID(value.strip())
    except (ValueError, AttributeError, TypeError):
        return False
    return True


def validate_id(entity: str, value: str | None) -> ValidateResult:
    """
    Validate an identifier addressed to ``entity``.

    Examples:
    --------
    >>> validate_id("type", None).error_message
    'No Id sent.'
    >>> validate_id("type", "2").error_message
    'Invalid type Id 2.'
    """
    if not value or not value.strip():
        return ValidateResult.fail("No Id sent.")

    if not is_valid_id(value):
        return ValidateResult.fail(f"Invalid {entity} Id {value}.")

    return ValidateResult.ok()


def validate_type_id(value: str | None) -> ValidateResult:
    return validate_id("type", value)


def validate_blog_id(value: str | None) -> ValidateResult:
    return validate_id("blog", value)


def _check_length(
    field: str,
    value: str | None,
    min_length: int,
    max_length: int,
) -> ValidateResult:
    if not value:
        return ValidateResult.fail(f"Parameter {field} is required.")

    if len(value) < min_length or len(value) > max_length:
        return ValidateResult.fail(
            f"Invalid parameter {field} (Must be at least {min_length} "
            f"and maximum {max_length} characters length).",
        )

    return ValidateResult.ok()


def _first_failure(*results: ValidateResult) -> ValidateResult:
    return next((result for result in results if not result.is_valid), ValidateResult.ok())


def validate_type(record: TypeIn, type_id: str | None = None) -> ValidateResult:
    """
    Validate a type record.

    ``type_id`` is the identifier of the type being addressed. It is only
    present when an existing type is written (update), and is then checked
    before the name.

    Args:
        record: Type request body.
        type_id: Identifier of the type being updated, if any.

    Returns:
        ValidateResult: First failing rule, or a pass.
    """
    if type_id is not None:
        id_result = validate_type_id(type_id)
        if not id_result.is_valid:
            return id_result

    return _check_length("name", record.name, MIN_NAME_LENGTH, MAX_NAME_LENGTH)


def validate_type_rename(record: TypeIn) -> ValidateResult:
    """Validate the body of a type update. Renamed types are stored trimmed."""
    return _check_length("name", (record.name or "").strip(), MIN_NAME_LENGTH, MAX_NAME_LENGTH)


def validate_blog(record: BlogIn) -> ValidateResult:
    """
    Validate a blog record.

    Order: typeId, title, content, author. Titles are stored trimmed.

    Args:
        record: Blog request body.

    Returns:
        ValidateResult: First failing rule, or a pass.
    """
    if not record.type_id:
        return ValidateResult.fail("Parameter typeId is required.")

    if not is_valid_id(record.type_id):
        return ValidateResult.fail(f"Invalid type Id {record.type_id}.")

    return _first_failure(
        _check_length("title", (record.title or "").strip(), MIN_TEXT_LENGTH, MAX_TEXT_LENGTH),
        _check_length("content", record.content, MIN_TEXT_LENGTH, MAX_TEXT_LENGTH),
        _check_length("author", record.author, MIN_NAME_LENGTH, MAX_NAME_LENGTH),
    )


def _check_email(value: str | None) -> ValidateResult:
    result = _check_length("email", value, MIN_TEXT_LENGTH, MAX_TEXT_LENGTH)
    if not result.is_valid:
        return result

    try:
        validate_email(value or "", check_deliverability=False)
    except EmailNotValidError:
        return ValidateResult.fail("Invalid parameter email.")

    return ValidateResult.ok()


def validate_user(record: UserIn) -> ValidateResult:
    """Validate a registration record: name, email, password."""
    return _first_failure(
        _check_length("name", record.name, MIN_NAME_LENGTH, MAX_NAME_LENGTH),
        _check_email(record.email),
        _check_length("password", record.password, MIN_TEXT_LENGTH, MAX_TEXT_LENGTH),
    )


def validate_credentials(record: CredentialsIn) -> ValidateResult:
    """Validate a login record: email, password."""
    return _first_failure(
        _check_length("email", record.email, MIN_TEXT_LENGTH, MAX_TEXT_LENGTH),
        _check_length("password", record.password, MIN_TEXT_LENGTH, MAX_TEXT_LENGTH),
    )
