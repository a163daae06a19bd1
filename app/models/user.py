"""User database model using SQLModel."""

from typing import cast
from uuid import UUID, uuid4

from sqlalchemy import Boolean
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String


class UserDB(SQLModel, table=True):
    """
    User database model.

    A user owns its credential (stored as an Argon2 hash) and is the
    principal behind every bearer token.
    """

    __tablename__ = cast("declared_attr[str]", "users")

    # Primary key
    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="User ID",
    )

    name: str = Field(
        sa_column=Column(String(50), nullable=False),
        description="Display name",
    )
    email: str = Field(
        sa_column=Column(String(255), unique=True, nullable=False, index=True),
        description="Email address (unique)",
    )
    password_hash: str = Field(
        sa_column=Column(String(1024), nullable=False),
        description="Hashed password",
    )
    is_admin: bool = Field(
        default=False,
        sa_column=Column(Boolean, nullable=False, default=False),
        description="Admin flag",
    )
