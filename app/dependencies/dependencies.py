# app/dependencies/dependencies.py

"""Application dependencies: repositories, authentication and request validation."""

from collections.abc import Awaitable, Callable
from typing import Annotated
from uuid import UUID

from fastapi import Body, Depends, Path, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from app.db import get_session
from app.errors import ForbiddenError, UnauthorizedError, ValidationError
from app.managers.token_manager import decode_access_token
from app.monitoring import get_logger
from app.repositories import BlogRepository, TypeRepository, UserRepository
from app.schemas.auth import TokenData
from app.services import AuthService
from app.validators import ValidateResult, validate_id

logger = get_logger(__name__)

bearer_scheme = HTTPBearer(auto_error=False, description="Access token from /api/auth")


def get_type_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> TypeRepository:
    """
    Resolve the `TypeRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    TypeRepository
        Repository instance bound to the session.
    """
    return TypeRepository(session)


def get_blog_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> BlogRepository:
    """
    Resolve the `BlogRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    BlogRepository
        Repository instance bound to the session.
    """
    return BlogRepository(session)


def get_user_repository(
    session: Annotated[AsyncSession, Depends(get_session)],
) -> UserRepository:
    """
    Resolve the `UserRepository` dependency.

    Parameters
    ----------
    session : AsyncSession
        Database session.

    Returns
    -------
    UserRepository
        Repository instance bound to the session.
    """
    return UserRepository(session)


TypeRepoDep = Annotated[TypeRepository, Depends(get_type_repository)]
BlogRepoDep = Annotated[BlogRepository, Depends(get_blog_repository)]
UserRepoDep = Annotated[UserRepository, Depends(get_user_repository)]


def get_auth_service(user_repo: UserRepoDep) -> AuthService:
    """
    Resolve the `AuthService` dependency.

    Parameters
    ----------
    user_repo : UserRepository
        User repository bound to the request's session.

    Returns
    -------
    AuthService
        Service instance.
    """
    return AuthService(user_repo)


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]


async def require_auth(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> TokenData:
    """
    Authenticate the request from its bearer token.

    The decoded identity is also attached to ``request.state.user``.

    Parameters
    ----------
    request : Request
        Current request context.
    credentials : HTTPAuthorizationCredentials | None
        Parsed ``Authorization: Bearer`` header, None when absent.

    Returns
    -------
    TokenData
        Identity carried by the token.

    Raises
    ------
    UnauthorizedError
        If no token, an empty one, or a scheme other than ``Bearer``
        was sent (401).
    InvalidTokenError
        If the token is malformed, forged or expired (400).
    """
    if (
        credentials is None
        or credentials.scheme != "Bearer"
        or not credentials.credentials.strip()
    ):
        raise UnauthorizedError

    token_data = decode_access_token(credentials.credentials.strip())
    request.state.user = token_data
    return token_data


async def require_admin(
    token_data: Annotated[TokenData, Depends(require_auth)],
) -> TokenData:
    """
    Require the authenticated principal to carry the admin flag.

    Raises
    ------
    ForbiddenError
        If the principal is not an admin (403).
    """
    if not token_data.is_admin:
        logger.warning(f"Admin access denied for user {token_data.id}")
        raise ForbiddenError
    return token_data


AuthDep = Annotated[TokenData, Depends(require_auth)]
AdminDep = Annotated[TokenData, Depends(require_admin)]


def _raise_on_failure(result: ValidateResult) -> None:
    if not result.is_valid:
        raise ValidationError(result.error_message or "Validation Error")


def validate_object_id(entity: str) -> Callable[..., Awaitable[UUID]]:
    """
    Build a dependency validating the ``record_id`` path parameter.

    The parameter is taken as a raw string so malformed identifiers get the
    same 400 message as every other validation failure.

    Parameters
    ----------
    entity : str
        Entity name used in the error message ("type", "blog").

    Returns
    -------
    Callable[..., Awaitable[UUID]]
        Dependency returning the parsed identifier.
    """

    async def dependency(
        record_id: Annotated[str, Path(description=f"ID of the {entity}")],
    ) -> UUID:
        _raise_on_failure(validate_id(entity, record_id))
        return UUID(record_id.strip())

    return dependency


def validate[S: BaseModel](
    schema: type[S],
    validator: Callable[[S], ValidateResult],
) -> Callable[..., Awaitable[S]]:
    """
    Build a dependency that parses a request body and runs a field validator.

    Parameters
    ----------
    schema : type[BaseModel]
        Request body model.
    validator : Callable
        Pure validator run on the parsed body.

    Returns
    -------
    Callable[..., Awaitable[BaseModel]]
        Dependency returning the validated body.
    """

    async def dependency(record: Annotated[schema, Body()]) -> S:  # type: ignore[valid-type]
        _raise_on_failure(validator(record))
        return record

    return dependency
