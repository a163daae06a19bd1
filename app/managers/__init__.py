from app.managers.password_manager import (
    PasswordHasher,
    get_password_hasher,
    hash_password,
    verify_and_update_password,
)
from app.managers.token_manager import (
    TokenManager,
    create_access_token,
    decode_access_token,
    get_token_manager,
)

__all__ = [
    "PasswordHasher",
    "TokenManager",
    "create_access_token",
    "decode_access_token",
    "get_password_hasher",
    "hash_password",
    "get_token_manager",
    "verify_and_update_password",
]
