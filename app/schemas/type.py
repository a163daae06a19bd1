"""
Type (blog category) request and response models.

Request models accept every field as an optional string so the field
validators in ``app.validators`` decide which rule was broken and word the
error message.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class TypeIn(BaseModel):
    """Type request body for create and update."""

    name: str | None = Field(
        default=None,
        description="Type name (5 to 50 characters)",
        examples=["Travel"],
    )


class TypeResponse(BaseModel):
    """Type as returned by the API."""

    model_config = ConfigDict(
        populate_by_name=True,
        from_attributes=True,
        json_schema_extra={
            "example": {
                "_id": "550e8400-e29b-41d4-a716-446655440000",
                "name": "Travel",
            },
        },
    )

    id: UUID = Field(alias="_id", description="Type ID")
    name: str = Field(description="Type name")
