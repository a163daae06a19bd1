"""Type database model using SQLModel."""

from typing import cast
from uuid import UUID, uuid4

from sqlalchemy.orm import declared_attr
from sqlmodel import Column, Field, SQLModel, String


class TypeDB(SQLModel, table=True):
    """
    Type (blog category) database model.

    This model represents the types collection. Blogs copy the id and name
    of a type when they are written and keep no live reference to this row.
    """

    __tablename__ = cast("declared_attr[str]", "types")

    id: UUID = Field(
        default_factory=uuid4,
        primary_key=True,
        nullable=False,
        description="Type ID",
    )
    name: str = Field(
        sa_column=Column(String(50), nullable=False, index=True),
        description="Type name",
    )
