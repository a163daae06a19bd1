"""
Password hashing module using Argon2 with passlib's CryptContext.

This module provides password hashing and verification using Argon2id.
Hashing is CPU bound, so the module-level coroutines run it in a thread
pool instead of on the event loop.
"""

from asyncio import get_running_loop
from concurrent.futures import ThreadPoolExecutor

from passlib.context import CryptContext
from passlib.exc import InternalBackendError

from app.configs import CONFIG_MAP, settings
from app.errors.password_hasher import PasswordHashingError, PasswordRehashError
from app.monitoring import get_logger

executor = ThreadPoolExecutor(max_workers=4)
logger = get_logger(__name__)


class PasswordHasher:
    """
    A password hashing and verification manager using Argon2id algorithm.

    This class wraps passlib's CryptContext to provide:
    - Password hashing with Argon2id
    - Password verification
    - Hash deprecation checking and rehashing capabilities
    """

    def __init__(self, level: str | None = None) -> None:
        """
        Initialize the PasswordHasher with Argon2id as the primary scheme.

        Args:
            level: Security level key of ``CONFIG_MAP``; defaults to
                ``settings.PASSWORD_SECURITY_LEVEL``
        """
        self.level = level or settings.PASSWORD_SECURITY_LEVEL
        self.pwd_context = CryptContext(
            schemes=["argon2", "pbkdf2_sha256"],
            deprecated="pbkdf2_sha256",
            argon2__memory_cost=CONFIG_MAP[self.level].memory_cost,
            argon2__time_cost=CONFIG_MAP[self.level].time_cost,
            argon2__parallelism=CONFIG_MAP[self.level].parallelism,
        )
        logger.info(f"PasswordHasher initialized with Argon2id on level {self.level}")

    def hash(self, password: str) -> str:
        """
        Hash a plaintext password using Argon2id.

        Args:
            password: The plaintext password to hash

        Returns:
            str: The hashed password in Argon2id format

        Raises:
            ValueError: If password is empty
            PasswordHashingError: If hashing fails

        Example:
            >>> hasher = PasswordHasher()
            >>> hashed = hasher.hash("my_secure_password")
            >>> print(hashed)  # $argon2id$v=19$m=65536,t=2,p=2$...
        """
        if not password:
            msg = "Password cannot be empty"
            raise ValueError(msg)

        try:
            return self.pwd_context.hash(password)
        except (ValueError, InternalBackendError, UnicodeError) as e:
            logger.exception("Invalid password format")
            mssg = "Failed to hash password"
            raise PasswordHashingError(mssg) from e

    def verify(self, password: str, hashed_password: str) -> bool:
        """
        Verify a plaintext password against a hashed password.

        Args:
            password: The plaintext password to verify
            hashed_password: The hashed password to verify against

        Returns:
            bool: True if password matches, False otherwise
        """
        if not isinstance(hashed_password, str) or not hashed_password.strip():
            logger.warning("Invalid hash format provided")
            return False

        try:
            return self.pwd_context.verify(password, hashed_password)
        except ValueError:
            logger.exception("Stored hash is corrupted or invalid format")
            return False

    def verify_and_update(
        self,
        password: str,
        hashed_password: str | None,
    ) -> tuple[bool, str | None]:
        """
        Verify a password and return a new hash if the current one needs updating.

        Args:
            password: The plaintext password to verify
            hashed_password: The hashed password (None for unknown users)

        Returns:
            tuple[bool, str | None]: Verification result and the new hash if
            the stored one uses a deprecated scheme or outdated parameters
        """
        if hashed_password is None:
            # Keeps timing the same for unknown users
            self.pwd_context.dummy_verify()
            return False, None

        if not self.verify(password, hashed_password):
            return False, None

        if not self.pwd_context.needs_update(hashed_password):
            return True, None

        try:
            return True, self.hash(password)
        except PasswordHashingError as e:
            mssg = "Failed to rehash password"
            raise PasswordRehashError(mssg) from e


_default_hasher: PasswordHasher | None = None


def get_password_hasher() -> PasswordHasher:
    """
    Get or create the default password hasher instance.

    Returns:
        PasswordHasher: The process-wide password hasher
    """
    global _default_hasher
    if _default_hasher is None:
        _default_hasher = PasswordHasher()
    return _default_hasher


async def hash_password(password: str) -> str:
    """
    Hash a password using the default hasher.

    Args:
        password: The plaintext password to hash

    Returns:
        str: The hashed password
    """
    return await get_running_loop().run_in_executor(
        executor,
        get_password_hasher().hash,
        password,
    )


async def verify_and_update_password(
    password: str,
    hashed_password: str | None,
) -> tuple[bool, str | None]:
    """
    Verify a password and get a new hash if the stored one is outdated.

    Args:
        password: The plaintext password to verify
        hashed_password: The stored hash, or None when the user is unknown

    Returns:
        tuple[bool, str | None]: Verification result and new hash if needed
    """
    return await get_running_loop().run_in_executor(
        executor,
        get_password_hasher().verify_and_update,
        password,
        hashed_password,
    )
