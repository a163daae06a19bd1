"""
User request and response models.

The password hash never leaves the server: ``UserResponse`` has no password
field at all.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class UserIn(BaseModel):
    """User registration body."""

    name: str | None = Field(default=None, examples=["Jane Doe"])
    email: str | None = Field(default=None, examples=["jane@example.com"])
    password: str | None = Field(default=None, examples=["Password123"])


class UserResponse(BaseModel):
    """User as returned by the API."""

    model_config = ConfigDict(
        populate_by_name=True,
        from_attributes=True,
        json_schema_extra={
            "example": {
                "_id": "123e4567-e89b-12d3-a456-426614174000",
                "name": "Jane Doe",
                "email": "jane@example.com",
                "isAdmin": False,
            },
        },
    )

    id: UUID = Field(alias="_id", description="User ID")
    name: str
    email: str
    is_admin: bool = Field(default=False, alias="isAdmin")
