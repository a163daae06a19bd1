"""Tests for the pure field validators."""

from uuid import uuid4

import pytest

from app.schemas import BlogIn, CredentialsIn, TypeIn, UserIn
from app.validators import (
    ValidateResult,
    is_valid_id,
    validate_blog,
    validate_blog_id,
    validate_credentials,
    validate_type,
    validate_type_id,
    validate_type_rename,
    validate_user,
)

NAME_BOUNDS = "(Must be at least 5 and maximum 50 characters length)."
TEXT_BOUNDS = "(Must be at least 5 and maximum 255 characters length)."


def _blog(**overrides: str | None) -> BlogIn:
    fields: dict[str, str | None] = {
        "typeId": str(uuid4()),
        "title": "A valid title",
        "content": "Some valid content",
        "author": "Jane Doe",
    }
    fields.update(overrides)
    return BlogIn.model_validate(fields)


class TestIdentifiers:
    """Tests for identifier validation."""

    def test_uuid_is_valid(self) -> None:
        assert is_valid_id(str(uuid4()))

    @pytest.mark.parametrize("value", ["2", "not-an-id", "1234567890ab"])
    def test_malformed_id_rejected(self, value: str) -> None:
        assert not is_valid_id(value)
        result = validate_type_id(value)
        assert result == ValidateResult(is_valid=False, error_message=f"Invalid type Id {value}.")

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_missing_id_rejected(self, value: str | None) -> None:
        result = validate_blog_id(value)
        assert not result.is_valid
        assert result.error_message == "No Id sent."

    def test_message_names_entity(self) -> None:
        assert validate_blog_id("2").error_message == "Invalid blog Id 2."


class TestValidateType:
    """Tests for type record validation."""

    def test_valid_name(self) -> None:
        assert validate_type(TypeIn(name="Travel")) == ValidateResult.ok()

    def test_missing_name(self) -> None:
        result = validate_type(TypeIn())
        assert result.error_message == "Parameter name is required."

    def test_empty_name_is_missing(self) -> None:
        result = validate_type(TypeIn(name=""))
        assert result.error_message == "Parameter name is required."

    @pytest.mark.parametrize("name", ["abcde", "a" * 50])
    def test_length_bounds_are_inclusive(self, name: str) -> None:
        assert validate_type(TypeIn(name=name)).is_valid

    @pytest.mark.parametrize("name", ["abcd", "a" * 51])
    def test_out_of_bounds_rejected(self, name: str) -> None:
        result = validate_type(TypeIn(name=name))
        assert result.error_message == f"Invalid parameter name {NAME_BOUNDS}"

    def test_update_checks_id_before_name(self) -> None:
        result = validate_type(TypeIn(name="ab"), type_id="2")
        assert result.error_message == "Invalid type Id 2."

    def test_update_with_valid_id_checks_name(self) -> None:
        result = validate_type(TypeIn(name="ab"), type_id=str(uuid4()))
        assert result.error_message == f"Invalid parameter name {NAME_BOUNDS}"


class TestValidateTypeRename:
    """Tests for the body of a type update."""

    def test_whitespace_name_is_missing(self) -> None:
        result = validate_type_rename(TypeIn(name="       "))
        assert result.error_message == "Parameter name is required."

    def test_name_measured_after_trim(self) -> None:
        result = validate_type_rename(TypeIn(name="  abc  "))
        assert result.error_message == f"Invalid parameter name {NAME_BOUNDS}"

    def test_padded_valid_name(self) -> None:
        assert validate_type_rename(TypeIn(name="  Travel  ")).is_valid


class TestValidateBlog:
    """Tests for blog record validation."""

    def test_valid_blog(self) -> None:
        assert validate_blog(_blog()).is_valid

    def test_missing_type_id(self) -> None:
        result = validate_blog(_blog(typeId=None))
        assert result.error_message == "Parameter typeId is required."

    def test_malformed_type_id(self) -> None:
        result = validate_blog(_blog(typeId="2"))
        assert result.error_message == "Invalid type Id 2."

    def test_title_checked_before_content(self) -> None:
        result = validate_blog(_blog(title="ab", content="ab"))
        assert result.error_message == f"Invalid parameter title {TEXT_BOUNDS}"

    def test_content_upper_bound(self) -> None:
        assert validate_blog(_blog(content="c" * 255)).is_valid
        result = validate_blog(_blog(content="c" * 256))
        assert result.error_message == f"Invalid parameter content {TEXT_BOUNDS}"

    def test_author_uses_name_bounds(self) -> None:
        result = validate_blog(_blog(author="a" * 51))
        assert result.error_message == f"Invalid parameter author {NAME_BOUNDS}"

    def test_missing_author(self) -> None:
        result = validate_blog(_blog(author=None))
        assert result.error_message == "Parameter author is required."

    def test_whitespace_title_is_missing(self) -> None:
        result = validate_blog(_blog(title="       "))
        assert result.error_message == "Parameter title is required."

    def test_title_measured_after_trim(self) -> None:
        result = validate_blog(_blog(title="  abc  "))
        assert result.error_message == f"Invalid parameter title {TEXT_BOUNDS}"


class TestValidateUser:
    """Tests for registration and login validation."""

    def test_valid_user(self) -> None:
        record = UserIn(name="Jane Doe", email="jane@blogmail.io", password="Password123")
        assert validate_user(record).is_valid

    def test_name_checked_first(self) -> None:
        record = UserIn(name="Jo", email="bad", password="x")
        assert validate_user(record).error_message == f"Invalid parameter name {NAME_BOUNDS}"

    def test_malformed_email(self) -> None:
        record = UserIn(name="Jane Doe", email="not-an-email", password="Password123")
        assert validate_user(record).error_message == "Invalid parameter email."

    def test_short_password(self) -> None:
        record = UserIn(name="Jane Doe", email="jane@blogmail.io", password="abc")
        assert validate_user(record).error_message == f"Invalid parameter password {TEXT_BOUNDS}"

    def test_credentials_require_password(self) -> None:
        record = CredentialsIn(email="jane@blogmail.io")
        assert validate_credentials(record).error_message == "Parameter password is required."
