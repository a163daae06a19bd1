from uuid import UUID

from pydantic import BaseModel, Field


class CredentialsIn(BaseModel):
    """Login body."""

    email: str | None = Field(default=None, examples=["jane@example.com"])
    password: str | None = Field(default=None, examples=["Password123"])


class Token(BaseModel):
    """Token schema for JWT access tokens."""

    access_token: str
    token_type: str = "bearer"


class TokenData(BaseModel):
    """Identity decoded from a verified access token."""

    id: UUID
    is_admin: bool = False
