"""Tests for user registration, login and the current-user endpoint."""

from unittest.mock import AsyncMock, patch

from fastapi import status
from httpx import AsyncClient
from passlib.hash import pbkdf2_sha256
from sqlmodel.ext.asyncio.session import AsyncSession

from app.errors import Err, ErrorKind, Ok
from app.managers.token_manager import decode_access_token
from app.models import UserDB
from app.repositories import UserRepository
from app.schemas import UserIn

REGISTRATION = {"name": "Jane Doe", "email": "Jane@BlogMail.io", "password": "Password123"}


async def _register(client: AsyncClient, body: dict[str, str] = REGISTRATION) -> dict:
    response = await client.post("/api/users", json=body)
    assert response.status_code == status.HTTP_200_OK, response.text
    return response.json()


class TestRegistration:
    """Tests for POST /api/users."""

    async def test_register_returns_user_and_token(self, client: AsyncClient) -> None:
        response = await client.post("/api/users", json=REGISTRATION)

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["name"] == "Jane Doe"
        assert body["email"] == "jane@blogmail.io"
        assert body["isAdmin"] is False
        assert "password" not in body
        assert "password_hash" not in body

        token_data = decode_access_token(response.headers["x-auth-token"])
        assert str(token_data.id) == body["_id"]
        assert token_data.is_admin is False

    async def test_duplicate_email_rejected(self, client: AsyncClient) -> None:
        await _register(client)

        response = await client.post(
            "/api/users",
            json={**REGISTRATION, "email": "jane@blogmail.io"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"detail": "User already registered."}

    async def test_invalid_email_rejected(self, client: AsyncClient) -> None:
        response = await client.post("/api/users", json={**REGISTRATION, "email": "jane-at-home"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"detail": "Invalid parameter email."}


class TestLogin:
    """Tests for POST /api/auth."""

    async def test_login_issues_bearer_token(self, client: AsyncClient) -> None:
        user = await _register(client)

        response = await client.post(
            "/api/auth",
            json={"email": "jane@blogmail.io", "password": "Password123"},
        )

        assert response.status_code == status.HTTP_200_OK
        token = response.json()
        assert token["token_type"] == "bearer"
        assert str(decode_access_token(token["access_token"]).id) == user["_id"]

    async def test_wrong_password_rejected(self, client: AsyncClient) -> None:
        await _register(client)

        response = await client.post(
            "/api/auth",
            json={"email": "jane@blogmail.io", "password": "WrongPassword"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"detail": "Invalid email or password."}

    async def test_unknown_email_rejected(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/auth",
            json={"email": "nobody@blogmail.io", "password": "Password123"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"detail": "Invalid email or password."}

    async def test_missing_password_rejected(self, client: AsyncClient) -> None:
        response = await client.post("/api/auth", json={"email": "jane@blogmail.io"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"detail": "Parameter password is required."}

    async def test_failed_rehash_does_not_block_login(
        self,
        client: AsyncClient,
        session: AsyncSession,
    ) -> None:
        repo = UserRepository(session)
        created = await repo.create(
            UserIn(name="Jane Doe", email="jane@blogmail.io", password="Password123"),
            pbkdf2_sha256.hash("Password123"),
        )
        assert isinstance(created, Ok)
        await session.commit()

        update = AsyncMock(return_value=Err(ErrorKind.PERSISTENCE, "Failed to update the user."))
        with patch.object(UserRepository, "update", new=update):
            response = await client.post(
                "/api/auth",
                json={"email": "jane@blogmail.io", "password": "Password123"},
            )

        assert response.status_code == status.HTTP_200_OK
        token = response.json()["access_token"]
        assert decode_access_token(token).id == created.value.id
        update.assert_awaited_once()


class TestCurrentUser:
    """Tests for GET /api/users/me."""

    async def test_me_returns_token_owner(self, client: AsyncClient) -> None:
        response = await client.post("/api/users", json=REGISTRATION)
        headers = {"Authorization": f"Bearer {response.headers['x-auth-token']}"}

        me = await client.get("/api/users/me", headers=headers)

        assert me.status_code == status.HTTP_200_OK
        assert me.json() == response.json()

    async def test_me_requires_token(self, client: AsyncClient) -> None:
        response = await client.get("/api/users/me")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    async def test_me_for_deleted_user(
        self,
        client: AsyncClient,
        sample_user: UserDB,
        auth_headers: dict[str, str],
    ) -> None:
        response = await client.get("/api/users/me", headers=auth_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {
            "detail": f"Failed to get the user (Id: {sample_user.id}) from the database.",
        }
