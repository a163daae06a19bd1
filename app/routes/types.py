# app/routes/types.py

"""
Type Routes.

Provides CRUD endpoints for blog types (categories).

Summary
-------
Endpoints include:
  - List types
  - Get type by id
  - Create type
  - Update type
  - Delete type

Dependencies
------------
  - `TypeRepoDep`: Repository bound to the request's session.
  - `AuthDep` / `AdminDep`: Bearer authentication and the admin check.
  - `validate_object_id("type")`: Rejects malformed ids before any lookup.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends
from fastapi.responses import ORJSONResponse

from app.dependencies import AdminDep, AuthDep, TypeRepoDep, validate, validate_object_id
from app.errors import unwrap
from app.models import TypeDB
from app.monitoring import get_logger
from app.schemas import TypeIn, TypeResponse
from app.validators import validate_type, validate_type_rename

router = APIRouter(prefix="/api/types", tags=["🏷️ Types"])

logger = get_logger(__name__)

TypeIdDep = Annotated[UUID, Depends(validate_object_id("type"))]
TypeBodyDep = Annotated[TypeIn, Depends(validate(TypeIn, validate_type))]
TypeRenameDep = Annotated[TypeIn, Depends(validate(TypeIn, validate_type_rename))]

NOT_FOUND_EXAMPLE = {
    "description": "Not found",
    "content": {
        "application/json": {
            "example": {"detail": "Failed to get the type (Id: <uuid>) from the database."},
        },
    },
}
BAD_REQUEST_EXAMPLE = {
    "description": "Bad request",
    "content": {
        "application/json": {
            "example": {
                "detail": "Invalid parameter name (Must be at least 5 and maximum 50 characters length).",
            },
        },
    },
}
UNAUTHORIZED_EXAMPLE = {
    "description": "No token provided",
    "content": {"application/json": {"example": {"detail": "Access denied. No token provided."}}},
}
FORBIDDEN_EXAMPLE = {
    "description": "Admin role required",
    "content": {"application/json": {"example": {"detail": "Access denied."}}},
}


def db_type_to_response(db_type: TypeDB) -> TypeResponse:
    """
    Convert a `TypeDB` instance to `TypeResponse`.

    Parameters
    ----------
    db_type : TypeDB
        Database type entity.

    Returns
    -------
    TypeResponse
        Validated response model.
    """
    return TypeResponse.model_validate(db_type)


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[TypeResponse],
    summary="List types",
    description="Get every type sorted by name.",
    operation_id="types_list",
)
async def get_types(repo: TypeRepoDep) -> list[TypeResponse]:
    """
    List all types.

    Parameters
    ----------
    repo : TypeRepository
        Repository dependency.

    Returns
    -------
    list[TypeResponse]
        Types sorted ascending by name.
    """
    return [db_type_to_response(db_type) for db_type in await repo.list_all()]


@router.get(
    "/{record_id}",
    response_class=ORJSONResponse,
    response_model=TypeResponse,
    summary="Get type by ID",
    responses={400: BAD_REQUEST_EXAMPLE, 404: NOT_FOUND_EXAMPLE},
    operation_id="types_get_by_id",
)
async def get_type(type_id: TypeIdDep, repo: TypeRepoDep) -> TypeResponse:
    """
    Get a type by ID.

    Raises
    ------
    ResultError
        404 if no type has this ID.
    """
    return db_type_to_response(unwrap(await repo.get(type_id)))


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=TypeResponse,
    summary="Create a new type",
    responses={400: BAD_REQUEST_EXAMPLE, 401: UNAUTHORIZED_EXAMPLE},
    operation_id="types_create",
)
async def create_type(
    token_data: AuthDep,
    record: TypeBodyDep,
    repo: TypeRepoDep,
) -> TypeResponse:
    """
    Create a new type.

    Parameters
    ----------
    token_data : TokenData
        Authenticated principal.
    record : TypeIn
        Validated type payload.
    repo : TypeRepository
        Repository dependency.

    Returns
    -------
    TypeResponse
        Created type data.
    """
    db_type = unwrap(await repo.create(record))
    logger.info(f"Type {db_type.id} created by user {token_data.id}")
    return db_type_to_response(db_type)


@router.put(
    "/{record_id}",
    response_class=ORJSONResponse,
    response_model=TypeResponse,
    summary="Update a type",
    responses={400: BAD_REQUEST_EXAMPLE},
    operation_id="types_update",
)
async def update_type(
    type_id: TypeIdDep,
    record: TypeRenameDep,
    repo: TypeRepoDep,
) -> TypeResponse:
    """
    Replace the name of an existing type. The new name is stored trimmed.

    Blogs keep the type snapshot they were written with.

    Raises
    ------
    ResultError
        400 if the type does not exist or the write fails.
    """
    return db_type_to_response(unwrap(await repo.replace(type_id, record)))


@router.delete(
    "/{record_id}",
    response_class=ORJSONResponse,
    response_model=TypeResponse,
    summary="Delete a type",
    responses={400: BAD_REQUEST_EXAMPLE, 401: UNAUTHORIZED_EXAMPLE, 403: FORBIDDEN_EXAMPLE},
    operation_id="types_delete",
)
async def delete_type(
    token_data: AdminDep,
    type_id: TypeIdDep,
    repo: TypeRepoDep,
) -> TypeResponse:
    """
    Delete a type and return the deleted record.

    Parameters
    ----------
    token_data : TokenData
        Authenticated admin.
    type_id : UUID
        Validated type identifier.
    repo : TypeRepository
        Repository dependency.

    Returns
    -------
    TypeResponse
        The deleted type.
    """
    db_type = unwrap(await repo.delete(type_id))
    logger.info(f"Type {type_id} deleted by admin {token_data.id}")
    return db_type_to_response(db_type)
