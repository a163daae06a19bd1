"""Base repository for document operations."""

from typing import Any, ClassVar
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from app.errors.result import Err, ErrorKind, Ok, Result
from app.monitoring import get_logger

logger = get_logger(__name__)


class BaseRepository[ModelT: SQLModel]:
    """
    Base repository implementing common CRUD operations.

    Expected failures never raise: lookups that miss and writes the store
    rejects come back as ``Err`` values with an entity and id specific
    message. Errors outside ``SQLAlchemyError`` propagate unchanged.

    Attributes:
        model: The SQLModel database model type.
        entity: Entity name used in messages ("type", "blog", ...).
        sort_field: Natural key used to order listings.
    """

    model: type[ModelT]
    entity: ClassVar[str]
    sort_field: ClassVar[str]
    id_field: ClassVar[str] = "id"

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def list_all(self) -> list[ModelT]:
        """
        Get every record sorted ascending by the natural key.

        Returns:
            list[ModelT]: All records, unpaginated
        """
        statement = select(self.model).order_by(getattr(self.model, self.sort_field))
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def get_by_id(self, record_id: UUID) -> ModelT | None:
        """
        Get a record by its ID.

        Args:
            record_id: Record UUID

        Returns:
            ModelT | None: Record if found, None otherwise
        """
        id_column = getattr(self.model, self.id_field)
        statement = select(self.model).where(id_column == record_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get(self, record_id: UUID) -> Result[ModelT]:
        """
        Get a record by ID for a read endpoint.

        Args:
            record_id: Record UUID

        Returns:
            Result[ModelT]: The record, or ``NOT_FOUND``
        """
        message = f"Failed to get the {self.entity} (Id: {record_id}) from the database."
        try:
            record = await self.get_by_id(record_id)
        except SQLAlchemyError:
            logger.exception(f"Failed to get the {self.entity} (Id: {record_id}).")
            record = None

        if record is None:
            return Err(ErrorKind.NOT_FOUND, message)
        return Ok(record)

    async def find_by(self, field_name: str, value: Any) -> ModelT | None:
        """
        Get the first record whose ``field_name`` equals ``value``.

        Args:
            field_name: Name of the field to search
            value: Value to search for

        Returns:
            ModelT | None: Record if found, None otherwise
        """
        field = getattr(self.model, field_name)
        statement = select(self.model).where(field == value).limit(1)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def insert(self, record: ModelT) -> Result[ModelT]:
        """
        Insert a new record.

        Args:
            record: Unsaved model instance

        Returns:
            Result[ModelT]: The stored record, or ``PERSISTENCE``
        """
        try:
            return Ok(await self._add_and_refresh(record))
        except SQLAlchemyError:
            logger.exception(f"Failed to create the {self.entity}.")
            return Err(
                ErrorKind.PERSISTENCE,
                f"Failed to save the {self.entity} on the database.",
            )

    async def update(self, record_id: UUID, values: dict[str, Any]) -> Result[ModelT]:
        """
        Replace the given fields of an existing record.

        A missing record is a write miss and reported like a rejected write.

        Args:
            record_id: Record UUID
            values: Field values to set

        Returns:
            Result[ModelT]: The updated record, or ``PERSISTENCE``
        """
        message = f"Failed to update the {self.entity} (Id: {record_id}) on the database."
        try:
            db_obj = await self.get_by_id(record_id)
            if db_obj is None:
                return Err(ErrorKind.PERSISTENCE, message)

            for key, value in values.items():
                setattr(db_obj, key, value)

            return Ok(await self._add_and_refresh(db_obj))
        except SQLAlchemyError:
            logger.exception(f"Failed to update the {self.entity} (Id: {record_id}).")
            return Err(ErrorKind.PERSISTENCE, message)

    async def delete(self, record_id: UUID) -> Result[ModelT]:
        """
        Delete a record by ID.

        Args:
            record_id: Record UUID

        Returns:
            Result[ModelT]: The deleted record, or ``PERSISTENCE``
        """
        message = f"Failed to delete the {self.entity} (Id: {record_id}) from the database."
        try:
            record = await self.get_by_id(record_id)
            if record is None:
                return Err(ErrorKind.PERSISTENCE, message)

            await self.session.delete(record)
            await self.session.flush()
        except SQLAlchemyError:
            await self.session.rollback()
            logger.exception(f"Failed to delete the {self.entity} (Id: {record_id}).")
            return Err(ErrorKind.PERSISTENCE, message)

        return Ok(record)

    def detach(self, record: ModelT) -> ModelT:
        """
        Remove a loaded record from the session.

        A detached record keeps its loaded values when the session is later
        rolled back.

        Args:
            record: Record loaded through this repository

        Returns:
            ModelT: The same record, detached
        """
        self.session.expunge(record)
        return record

    async def _add_and_refresh(self, record: ModelT) -> ModelT:
        """
        Add a record and refresh it from the database.

        Args:
            record: Record to add

        Returns:
            ModelT: Refreshed record

        Raises:
            SQLAlchemyError: After rolling the session back
        """
        try:
            self.session.add(record)
            await self.session.flush()
            await self.session.refresh(record)
        except SQLAlchemyError:
            await self.session.rollback()
            raise
        return record
