"""Tests for the JWT token manager."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest
from jose import jwt

from app.errors import ConfigurationError, InvalidTokenError
from app.managers.token_manager import (
    TokenManager,
    create_access_token,
    decode_access_token,
    get_token_manager,
)
from app.models import UserDB

SECRET = "unit-test-secret"


@pytest.fixture
def manager() -> TokenManager:
    return TokenManager(SECRET, expire_minutes=5)


class TestTokenManagerInit:
    """Test cases for TokenManager construction."""

    @pytest.mark.parametrize("secret", [None, ""])
    def test_missing_secret_is_fatal(self, secret: str | None) -> None:
        """A manager cannot be built without a signing secret."""
        with pytest.raises(ConfigurationError) as exc_info:
            TokenManager(secret)
        assert exc_info.value.status_code == 500

    def test_default_manager_uses_settings(self) -> None:
        """The cached manager is built from the configured secret."""
        assert get_token_manager() is get_token_manager()
        assert get_token_manager().algorithm == "HS256"


class TestIssueAndVerify:
    """Test cases for issuing and verifying tokens."""

    def test_round_trip_keeps_identity(
        self,
        manager: TokenManager,
        admin_user: UserDB,
    ) -> None:
        """Verified token data matches the user the token was issued for."""
        token_data = manager.verify(manager.issue(admin_user))

        assert token_data.id == admin_user.id
        assert token_data.is_admin is True

    def test_payload_claims(self, manager: TokenManager, sample_user: UserDB) -> None:
        """The payload carries _id, isAdmin, iat and exp."""
        payload = jwt.decode(manager.issue(sample_user), SECRET, algorithms=["HS256"])

        assert payload["_id"] == str(sample_user.id)
        assert payload["isAdmin"] is False
        assert payload["exp"] - payload["iat"] == 5 * 60

    def test_expired_token_rejected(self, manager: TokenManager, sample_user: UserDB) -> None:
        """A token past its expiry is invalid."""
        token = manager.issue(sample_user, expires_delta=timedelta(seconds=-10))

        with pytest.raises(InvalidTokenError) as exc_info:
            manager.verify(token)
        assert exc_info.value.status_code == 400
        assert exc_info.value.detail == "Invalid token."

    def test_foreign_signature_rejected(self, sample_user: UserDB) -> None:
        """A token signed with another secret is invalid."""
        token = TokenManager("another-secret").issue(sample_user)

        with pytest.raises(InvalidTokenError):
            TokenManager(SECRET).verify(token)

    @pytest.mark.parametrize("token", ["a", "null", "eyJ.eyJ.sig"])
    def test_malformed_token_rejected(self, manager: TokenManager, token: str) -> None:
        with pytest.raises(InvalidTokenError):
            manager.verify(token)

    def test_missing_id_claim_rejected(self, manager: TokenManager) -> None:
        """A correctly signed token without an identity is invalid."""
        token = jwt.encode(
            {"isAdmin": True, "exp": datetime.now(UTC) + timedelta(minutes=5)},
            SECRET,
            algorithm="HS256",
        )
        with pytest.raises(InvalidTokenError):
            manager.verify(token)

    def test_non_uuid_id_claim_rejected(self, manager: TokenManager) -> None:
        token = jwt.encode(
            {"_id": "42", "exp": datetime.now(UTC) + timedelta(minutes=5)},
            SECRET,
            algorithm="HS256",
        )
        with pytest.raises(InvalidTokenError):
            manager.verify(token)


class TestModuleHelpers:
    """Test cases for the settings-backed helpers."""

    def test_create_and_decode(self) -> None:
        user = UserDB(
            id=uuid4(),
            name="Helper User",
            email="helper@blogmail.io",
            password_hash="x",
            is_admin=False,
        )
        token_data = decode_access_token(create_access_token(user))
        assert token_data.id == user.id
        assert token_data.is_admin is False
