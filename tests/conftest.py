# tests/conftest.py
"""Root pytest configuration and shared fixtures."""

import os

# Settings are read once at import; this must happen before app is imported anywhere
os.environ["SECRET_KEY"] = "test-secret-key-for-signing-tokens"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["ENVIRONMENT"] = "testing"
os.environ["PASSWORD_SECURITY_LEVEL"] = "low"
os.environ["LOG_TO_FILE"] = "false"

from collections.abc import AsyncGenerator  # noqa: E402
from datetime import timedelta  # noqa: E402
from uuid import uuid4  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import SQLModel  # noqa: E402
from sqlmodel.ext.asyncio.session import AsyncSession  # noqa: E402

from app.db import get_session  # noqa: E402
from app.main import app  # noqa: E402
from app.managers.token_manager import create_access_token  # noqa: E402
from app.models import UserDB  # noqa: E402


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine]:
    """Create a fresh in-memory database for each test."""
    test_engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield test_engine

    await test_engine.dispose()


@pytest.fixture
def session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test database."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
async def session(
    session_maker: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession]:
    """A session for tests that talk to repositories directly."""
    async with session_maker() as db_session:
        yield db_session


@pytest.fixture
async def client(
    session_maker: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for testing, backed by the test database."""

    async def override_get_session() -> AsyncGenerator[AsyncSession]:
        async with session_maker() as db_session:
            try:
                yield db_session
                await db_session.commit()
            except Exception:
                await db_session.rollback()
                raise

    app.dependency_overrides[get_session] = override_get_session
    async with AsyncClient(
        base_url="http://test",
        transport=ASGITransport(app=app),
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def sample_user() -> UserDB:
    """Create a sample, non-admin user for testing."""
    return UserDB(
        id=uuid4(),
        name="Test User",
        email="test@blogmail.io",
        password_hash="$argon2id$v=19$m=8192,t=1,p=1$somehash",
        is_admin=False,
    )


@pytest.fixture
def admin_user() -> UserDB:
    """Create an admin user for testing."""
    return UserDB(
        id=uuid4(),
        name="Admin User",
        email="admin@blogmail.io",
        password_hash="$argon2id$v=19$m=8192,t=1,p=1$somehash",
        is_admin=True,
    )


@pytest.fixture
def auth_headers(sample_user: UserDB) -> dict[str, str]:
    """Create auth headers with a valid, non-admin access token."""
    token = create_access_token(sample_user, expires_delta=timedelta(minutes=30))
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def admin_auth_headers(admin_user: UserDB) -> dict[str, str]:
    """Create auth headers with an admin access token."""
    token = create_access_token(admin_user, expires_delta=timedelta(minutes=30))
    return {"Authorization": f"Bearer {token}"}
