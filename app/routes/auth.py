"""Authentication routes issuing access tokens."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import ORJSONResponse

from app.dependencies import AuthServiceDep, validate
from app.errors import unwrap
from app.monitoring import get_logger
from app.schemas.auth import CredentialsIn, Token
from app.validators import validate_credentials

router = APIRouter(prefix="/api/auth", tags=["🔐 Auth"])

logger = get_logger(__name__)

CredentialsBodyDep = Annotated[CredentialsIn, Depends(validate(CredentialsIn, validate_credentials))]


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=Token,
    summary="Login for access token",
    description="Authenticate a user with email and password to obtain an access token.",
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                        "token_type": "bearer",
                    },
                },
            },
        },
        400: {
            "description": "Invalid credentials",
            "content": {"application/json": {"example": {"detail": "Invalid email or password."}}},
        },
    },
    operation_id="auth_login",
)
async def login(credentials: CredentialsBodyDep, auth_service: AuthServiceDep) -> Token:
    """
    Authenticate a user and return an access token.

    Parameters
    ----------
    credentials : CredentialsIn
        Validated login payload.
    auth_service : AuthService
        Service dependency.

    Returns
    -------
    Token
        Bearer access token.
    """
    user = unwrap(await auth_service.authenticate_user(credentials))
    logger.info(f"User {user.id} logged in")
    return auth_service.create_token_for_user(user)
