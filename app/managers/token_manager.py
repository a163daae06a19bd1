"""Token manager for issuing and verifying signed bearer tokens."""

from datetime import UTC, datetime, timedelta
from functools import lru_cache
from uuid import UUID

from jose import JWTError, jwt
from pydantic import ValidationError as PydanticValidationError

from app.configs import settings
from app.errors import ConfigurationError, InvalidTokenError
from app.models.user import UserDB
from app.monitoring import get_logger
from app.schemas.auth import TokenData

logger = get_logger(__name__)


class TokenManager:
    """
    Sign and verify HS256 access tokens.

    The payload carries the user's id as ``_id`` and the admin flag as
    ``isAdmin``, plus ``iat`` and ``exp`` timestamps.
    """

    def __init__(
        self,
        secret_key: str | None,
        algorithm: str = "HS256",
        expire_minutes: int = 60,
    ) -> None:
        """
        Initialize the manager.

        Args:
            secret_key: Signing secret; must be non-empty
            algorithm: JOSE algorithm name
            expire_minutes: Default token lifetime

        Raises:
            ConfigurationError: If no signing secret is configured
        """
        if not secret_key:
            msg = "FATAL ERROR: SECRET_KEY is not defined."
            raise ConfigurationError(msg)

        self._secret_key = secret_key
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    def issue(self, user: UserDB, expires_delta: timedelta | None = None) -> str:
        """
        Create a signed access token for a user.

        Args:
            user: The authenticated user
            expires_delta: Optional lifetime overriding the default

        Returns:
            str: Encoded JWT
        """
        now = datetime.now(UTC)
        expire = now + (expires_delta or timedelta(minutes=self.expire_minutes))
        to_encode = {
            "_id": str(user.id),
            "isAdmin": bool(user.is_admin),
            "iat": now,
            "exp": expire,
        }
        return jwt.encode(to_encode, self._secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenData:
        """
        Decode a token and return its identity.

        Args:
            token: Encoded JWT

        Returns:
            TokenData: The principal the token was issued for

        Raises:
            InvalidTokenError: If the token is malformed, forged or expired
        """
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self.algorithm])
            user_id = payload.get("_id")
            if not user_id:
                raise InvalidTokenError
            return TokenData(id=UUID(str(user_id)), is_admin=bool(payload.get("isAdmin")))
        except (JWTError, ValueError, PydanticValidationError) as e:
            logger.debug(f"Rejected token: {e}")
            raise InvalidTokenError from e


@lru_cache
def get_token_manager() -> TokenManager:
    """
    Get the process-wide token manager built from settings.

    Returns:
        TokenManager: Cached manager

    Raises:
        ConfigurationError: If ``SECRET_KEY`` is unset
    """
    secret = settings.SECRET_KEY.get_secret_value() if settings.SECRET_KEY else None
    return TokenManager(
        secret,
        algorithm=settings.ALGORITHM,
        expire_minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES,
    )


def create_access_token(user: UserDB, expires_delta: timedelta | None = None) -> str:
    """
    Create an access token with the default manager.

    Args:
        user: The authenticated user
        expires_delta: Optional lifetime overriding the default

    Returns:
        str: Encoded JWT
    """
    return get_token_manager().issue(user, expires_delta)


def decode_access_token(token: str) -> TokenData:
    """
    Verify an access token with the default manager.

    Args:
        token: Encoded JWT

    Returns:
        TokenData: Decoded identity
    """
    return get_token_manager().verify(token)
