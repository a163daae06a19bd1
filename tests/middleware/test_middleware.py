# tests/middleware/test_middleware.py
"""Tests for the terminal error middleware and the request context."""

from unittest.mock import AsyncMock, patch

from fastapi import status
from httpx import AsyncClient

from app.repositories import TypeRepository


async def test_unhandled_error_becomes_generic_500(client: AsyncClient) -> None:
    with patch.object(
        TypeRepository,
        "list_all",
        new=AsyncMock(side_effect=RuntimeError("connection string leaked here")),
    ):
        response = await client.get("/api/types")

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json() == {"detail": "Something went wrong."}
    assert "leaked" not in response.text


async def test_request_id_is_echoed(client: AsyncClient) -> None:
    response = await client.get("/api/types", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"


async def test_request_id_is_generated(client: AsyncClient) -> None:
    response = await client.get("/api/types")

    assert response.headers["X-Request-ID"]


async def test_health(client: AsyncClient) -> None:
    response = await client.get("/health")

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["status"] in ("ok", "degraded")
    assert response.json()["version"] == "1.0.0"


async def test_cors_exposes_auth_token_header(client: AsyncClient) -> None:
    response = await client.get("/api/types", headers={"Origin": "http://localhost:3001"})

    assert response.headers["access-control-allow-origin"] == "http://localhost:3001"
    assert "x-auth-token" in response.headers["access-control-expose-headers"]
