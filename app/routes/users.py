# app/routes/users.py

"""
User Routes.

Registration and the current user's profile. Admin status cannot be granted
here; use ``auto/create_admin.py``.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import ORJSONResponse
from starlette.responses import Response

from app.configs import AUTH_TOKEN_HEADER
from app.dependencies import AuthDep, AuthServiceDep, UserRepoDep, validate
from app.errors import unwrap
from app.models import UserDB
from app.monitoring import get_logger
from app.schemas import UserIn, UserResponse
from app.validators import validate_user

router = APIRouter(prefix="/api/users", tags=["👤 Users"])

logger = get_logger(__name__)

UserBodyDep = Annotated[UserIn, Depends(validate(UserIn, validate_user))]

USER_EXAMPLE = {
    "_id": "123e4567-e89b-12d3-a456-426614174000",
    "name": "Jane Doe",
    "email": "jane@example.com",
    "isAdmin": False,
}


def db_user_to_response(db_user: UserDB) -> UserResponse:
    """
    Convert a `UserDB` instance to `UserResponse`.

    Parameters
    ----------
    db_user : UserDB
        Database user entity.

    Returns
    -------
    UserResponse
        Validated response model, without the password hash.
    """
    return UserResponse.model_validate(db_user)


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=UserResponse,
    summary="Register a new user",
    description="Register a user and return its access token in the `x-auth-token` header.",
    responses={
        200: {"content": {"application/json": {"example": USER_EXAMPLE}}},
        400: {
            "description": "Bad request",
            "content": {"application/json": {"example": {"detail": "User already registered."}}},
        },
    },
    operation_id="users_register",
)
async def register_user(
    response: Response,
    record: UserBodyDep,
    auth_service: AuthServiceDep,
) -> UserResponse:
    """
    Register a new user.

    Parameters
    ----------
    response : Response
        Response object receiving the token header.
    record : UserIn
        Validated registration payload.
    auth_service : AuthService
        Service dependency.

    Returns
    -------
    UserResponse
        The created user.
    """
    db_user = unwrap(await auth_service.register_user(record))
    token = auth_service.create_token_for_user(db_user)
    response.headers[AUTH_TOKEN_HEADER] = token.access_token
    logger.info(f"User {db_user.id} registered")
    return db_user_to_response(db_user)


@router.get(
    "/me",
    response_class=ORJSONResponse,
    response_model=UserResponse,
    summary="Get current user",
    description="Retrieve the profile of the currently authenticated user.",
    responses={
        200: {"content": {"application/json": {"example": USER_EXAMPLE}}},
        404: {
            "description": "User no longer exists",
            "content": {
                "application/json": {
                    "example": {"detail": "Failed to get the user (Id: <uuid>) from the database."},
                },
            },
        },
    },
    operation_id="users_me",
)
async def get_current_user(token_data: AuthDep, repo: UserRepoDep) -> UserResponse:
    """Return the user the bearer token was issued for."""
    return db_user_to_response(unwrap(await repo.get(token_data.id)))
