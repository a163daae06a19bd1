"""Authentication service handling registration and password login."""

from app.errors.result import Err, ErrorKind, Ok, Result
from app.managers.password_manager import hash_password, verify_and_update_password
from app.managers.token_manager import create_access_token
from app.models import UserDB
from app.monitoring import get_logger
from app.repositories import UserRepository
from app.schemas.auth import CredentialsIn, Token
from app.schemas.user import UserIn

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password."

logger = get_logger(__name__)


class AuthService:
    """Service for handling user registration and authentication."""

    def __init__(self, user_repo: UserRepository) -> None:
        """
        Initialize the auth service.

        Args:
            user_repo: User repository for database operations
        """
        self.user_repo = user_repo

    async def register_user(self, record: UserIn) -> Result[UserDB]:
        """
        Register a new, non-admin user.

        Args:
            record: Validated registration body

        Returns:
            Result[UserDB]: Created user, ``DUPLICATE`` or ``PERSISTENCE``
        """
        password_hash = await hash_password(record.password or "")
        return await self.user_repo.create(record, password_hash)

    async def authenticate_user(self, credentials: CredentialsIn) -> Result[UserDB]:
        """
        Authenticate a user by email and password.

        Unknown emails still pay for a hash verification so both failure
        paths take about the same time. A stored hash using outdated
        parameters is replaced on successful login. A failed replacement is
        logged and does not fail the login.

        Args:
            credentials: Validated login body

        Returns:
            Result[UserDB]: Authenticated user, or ``INVALID_CREDENTIALS``
        """
        user = await self.user_repo.get_by_email(credentials.email or "")
        is_valid, new_hash = await verify_and_update_password(
            credentials.password or "",
            user.password_hash if user else None,
        )
        if user is None or not is_valid:
            return Err(ErrorKind.INVALID_CREDENTIALS, INVALID_CREDENTIALS_MESSAGE)

        if new_hash:
            logger.info(f"Rehashing outdated password hash for user {user.id}")
            self.user_repo.detach(user)
            match await self.user_repo.update(user.id, {"password_hash": new_hash}):
                case Ok(rehashed):
                    return Ok(rehashed)
                case Err(detail=detail):
                    logger.warning(f"Keeping outdated password hash for user {user.id}: {detail}")

        return Ok(user)

    def create_token_for_user(self, user: UserDB) -> Token:
        """
        Create an access token for a user.

        Args:
            user: User entity

        Returns:
            Token: Token object with the access token
        """
        return Token(access_token=create_access_token(user), token_type="bearer")

    async def ensure_admin(self, record: UserIn) -> Result[tuple[UserDB, bool]]:
        """
        Create an admin user, or promote the user already holding the email.

        The password of an existing user is left unchanged.

        Args:
            record: Validated registration body

        Returns:
            Result[tuple[UserDB, bool]]: The admin and whether it was created
        """
        existing = await self.user_repo.get_by_email(record.email or "")
        if existing is not None:
            match await self.user_repo.update(existing.id, {"is_admin": True}):
                case Ok(user):
                    return Ok((user, False))
                case Err() as err:
                    return err

        password_hash = await hash_password(record.password or "")
        match await self.user_repo.create(record, password_hash, is_admin=True):
            case Ok(user):
                return Ok((user, True))
            case Err() as err:
                return err
