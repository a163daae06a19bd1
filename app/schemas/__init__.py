from app.schemas.auth import CredentialsIn, Token, TokenData
from app.schemas.blog import BlogIn, BlogResponse, TypeSnapshot
from app.schemas.health import HealthCheckResponse
from app.schemas.type import TypeIn, TypeResponse
from app.schemas.user import UserIn, UserResponse

__all__ = [
    "BlogIn",
    "BlogResponse",
    "CredentialsIn",
    "HealthCheckResponse",
    "Token",
    "TokenData",
    "TypeIn",
    "TypeResponse",
    "TypeSnapshot",
    "UserIn",
    "UserResponse",
]
