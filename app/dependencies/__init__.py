# app/dependencies/__init__.py

from app.dependencies.dependencies import (
    AdminDep,
    AuthDep,
    AuthServiceDep,
    BlogRepoDep,
    TypeRepoDep,
    UserRepoDep,
    bearer_scheme,
    get_auth_service,
    get_blog_repository,
    get_type_repository,
    get_user_repository,
    require_admin,
    require_auth,
    validate,
    validate_object_id,
)

__all__ = [
    "AdminDep",
    "AuthDep",
    "AuthServiceDep",
    "BlogRepoDep",
    "TypeRepoDep",
    "UserRepoDep",
    "bearer_scheme",
    "get_auth_service",
    "get_blog_repository",
    "get_type_repository",
    "get_user_repository",
    "require_admin",
    "require_auth",
    "validate",
    "validate_object_id",
]
