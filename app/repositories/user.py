"""User repository for database operations."""

from typing import ClassVar

from app.errors.result import Err, ErrorKind, Result
from app.models.user import UserDB
from app.repositories.base import BaseRepository
from app.schemas.user import UserIn


class UserRepository(BaseRepository[UserDB]):
    """Repository for User entities."""

    model = UserDB
    entity: ClassVar[str] = "user"
    sort_field: ClassVar[str] = "email"

    async def get_by_email(self, email: str) -> UserDB | None:
        """
        Get user by email.

        Args:
            email: Email address, compared case-insensitively

        Returns:
            UserDB | None: User if found, None otherwise
        """
        return await self.find_by("email", email.strip().lower())

    async def create(
        self,
        record: UserIn,
        password_hash: str,
        *,
        is_admin: bool = False,
    ) -> Result[UserDB]:
        """
        Create a new user.

        Args:
            record: Validated registration body
            password_hash: Hash of the user's password
            is_admin: Admin flag, only set by the admin bootstrap script

        Returns:
            Result[UserDB]: Created user, ``DUPLICATE`` if the email is taken,
            or ``PERSISTENCE``
        """
        email = (record.email or "").strip().lower()
        if await self.get_by_email(email):
            return Err(ErrorKind.DUPLICATE, "User already registered.")

        return await self.insert(
            UserDB(
                name=record.name or "",
                email=email,
                password_hash=password_hash,
                is_admin=is_admin,
            ),
        )
