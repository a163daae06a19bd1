"""Type repository for database operations."""

from typing import ClassVar
from uuid import UUID

from app.errors.result import Result
from app.models.type import TypeDB
from app.repositories.base import BaseRepository
from app.schemas.type import TypeIn


class TypeRepository(BaseRepository[TypeDB]):
    """Repository for Type entities, listed by name."""

    model = TypeDB
    entity: ClassVar[str] = "type"
    sort_field: ClassVar[str] = "name"

    async def create(self, record: TypeIn) -> Result[TypeDB]:
        """
        Create a new type.

        Args:
            record: Validated type request body

        Returns:
            Result[TypeDB]: Created type, or ``PERSISTENCE``
        """
        return await self.insert(TypeDB(name=record.name or ""))

    async def replace(self, type_id: UUID, record: TypeIn) -> Result[TypeDB]:
        """
        Replace the name of an existing type, trimmed.

        Args:
            type_id: Type UUID
            record: Validated type request body

        Returns:
            Result[TypeDB]: Updated type, or ``PERSISTENCE``
        """
        return await self.update(type_id, {"name": (record.name or "").strip()})
