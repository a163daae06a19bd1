"""Blog database model using SQLModel."""

from typing import cast
from uuid import UUID, uuid4

from pydantic import ConfigDict
from sqlalchemy import JSON
from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String


class BlogDB(SQLModel, table=True):
    """
    Blog database model.

    The ``type`` column holds a JSON document ``{"_id": ..., "name": ...}``
    copied from the type at write time. It is a snapshot, not a foreign key:
    renaming or deleting the type leaves existing blogs untouched.
    """

    __tablename__ = cast("declared_attr[str]", "blogs")

    # Primary key
    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Blog ID",
    )

    title: str = Field(
        sa_column=Column(String(255), nullable=False, index=True),
        description="Blog title",
    )
    type: dict[str, str] = Field(
        sa_column=Column("type", JSON, nullable=False),
        description="Embedded type snapshot",
    )
    content: str = Field(
        sa_column=Column(String(255), nullable=False),
        description="Blog content",
    )
    author: str = Field(
        sa_column=Column(String(50), nullable=False),
        description="Author name",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "123e4567-e89b-12d3-a456-426614174000",
                "title": "What to pack for a weekend trip",
                "type": {"_id": "550e8400-e29b-41d4-a716-446655440000", "name": "Travel"},
                "content": "Pack light and bring an umbrella.",
                "author": "Jane Doe",
            },
        },
    )
