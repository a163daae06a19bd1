from app.configs.settings import (
    AUTH_TOKEN_HEADER,
    CONFIG_MAP,
    DEFAULT_ERROR_MESSAGE,
    FORBIDDEN_MESSAGE,
    INVALID_TOKEN_MESSAGE,
    NO_TOKEN_MESSAGE,
    HasherConfig,
    Settings,
    settings,
)

__all__ = [
    "AUTH_TOKEN_HEADER",
    "CONFIG_MAP",
    "DEFAULT_ERROR_MESSAGE",
    "FORBIDDEN_MESSAGE",
    "INVALID_TOKEN_MESSAGE",
    "NO_TOKEN_MESSAGE",
    "HasherConfig",
    "Settings",
    "settings",
]
