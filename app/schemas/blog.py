"""
Blog request and response models.

A blog embeds a snapshot of its type (``_id`` and ``name``) taken when the
blog is created or updated. The snapshot is a copy-on-write reference and is
never refreshed when the type is renamed later.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class BlogIn(BaseModel):
    """Blog request body for create and update."""

    model_config = ConfigDict(populate_by_name=True)

    type_id: str | None = Field(
        default=None,
        alias="typeId",
        description="ID of the type this blog belongs to",
        examples=["550e8400-e29b-41d4-a716-446655440000"],
    )
    title: str | None = Field(
        default=None,
        description="Blog title (5 to 255 characters)",
        examples=["What to pack for a weekend trip"],
    )
    content: str | None = Field(
        default=None,
        description="Blog content (5 to 255 characters)",
        examples=["Pack light and bring an umbrella."],
    )
    author: str | None = Field(
        default=None,
        description="Author name (5 to 50 characters)",
        examples=["Jane Doe"],
    )


class TypeSnapshot(BaseModel):
    """Denormalized copy of a type embedded in a blog."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: UUID = Field(alias="_id", description="Type ID at the time of the write")
    name: str = Field(description="Type name at the time of the write")

    def to_document(self) -> dict[str, str]:
        """Return the snapshot in the form stored on the blog row."""
        return {"_id": str(self.id), "name": self.name}


class BlogResponse(BaseModel):
    """Blog as returned by the API."""

    model_config = ConfigDict(
        populate_by_name=True,
        from_attributes=True,
        json_schema_extra={
            "example": {
                "_id": "123e4567-e89b-12d3-a456-426614174000",
                "title": "What to pack for a weekend trip",
                "type": {"_id": "550e8400-e29b-41d4-a716-446655440000", "name": "Travel"},
                "content": "Pack light and bring an umbrella.",
                "author": "Jane Doe",
            },
        },
    )

    id: UUID = Field(alias="_id", description="Blog ID")
    title: str
    type: TypeSnapshot
    content: str
    author: str
