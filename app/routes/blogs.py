# app/routes/blogs.py

"""
Blog Routes.

Provides CRUD endpoints for blogs. Every write looks up the referenced type
first and stores a snapshot of it (``_id`` and ``name``) on the blog.

Summary
-------
Endpoints include:
  - List blogs
  - Get blog by id
  - Create blog
  - Update blog
  - Delete blog

Dependencies
------------
  - `BlogRepoDep` / `TypeRepoDep`: Repositories sharing the request's session.
  - `AuthDep` / `AdminDep`: Bearer authentication and the admin check.
  - `validate_object_id("blog")`: Rejects malformed ids before any lookup.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends
from fastapi.responses import ORJSONResponse

from app.dependencies import (
    AdminDep,
    AuthDep,
    BlogRepoDep,
    TypeRepoDep,
    validate,
    validate_object_id,
)
from app.errors import Err, ErrorKind, Ok, Result, unwrap
from app.models import BlogDB
from app.monitoring import get_logger
from app.repositories import TypeRepository
from app.schemas import BlogIn, BlogResponse, TypeSnapshot
from app.validators import validate_blog

router = APIRouter(prefix="/api/blogs", tags=["📝 Blogs"])

logger = get_logger(__name__)

BlogIdDep = Annotated[UUID, Depends(validate_object_id("blog"))]
BlogBodyDep = Annotated[BlogIn, Depends(validate(BlogIn, validate_blog))]

BLOG_EXAMPLE = {
    "_id": "123e4567-e89b-12d3-a456-426614174000",
    "title": "What to pack for a weekend trip",
    "type": {"_id": "550e8400-e29b-41d4-a716-446655440000", "name": "Travel"},
    "content": "Pack light and bring an umbrella.",
    "author": "Jane Doe",
}


def _error_example(description: str, detail: str) -> dict:
    return {
        "description": description,
        "content": {"application/json": {"example": {"detail": detail}}},
    }


def db_blog_to_response(db_blog: BlogDB) -> BlogResponse:
    """
    Convert a `BlogDB` instance to `BlogResponse`.

    Parameters
    ----------
    db_blog : BlogDB
        Database blog entity.

    Returns
    -------
    BlogResponse
        Validated response model.
    """
    return BlogResponse.model_validate(db_blog)


async def snapshot_type(type_repo: TypeRepository, type_id: str) -> Result[TypeSnapshot]:
    """
    Look up the type a blog refers to and copy it.

    Parameters
    ----------
    type_repo : TypeRepository
        Type repository on the request's session.
    type_id : str
        Validated ``typeId`` from the blog body.

    Returns
    -------
    Result[TypeSnapshot]
        The snapshot, or ``REFERENCE_NOT_FOUND``.
    """
    db_type = await type_repo.get_by_id(UUID(type_id.strip()))
    if db_type is None:
        return Err(
            ErrorKind.REFERENCE_NOT_FOUND,
            f"Type not found (Id: {type_id}) on the database.",
        )
    return Ok(TypeSnapshot(_id=db_type.id, name=db_type.name))


@router.get(
    "",
    response_class=ORJSONResponse,
    response_model=list[BlogResponse],
    summary="List blogs",
    description="Get every blog sorted by title.",
    operation_id="blogs_list",
)
async def get_blogs(repo: BlogRepoDep) -> list[BlogResponse]:
    """
    List all blogs.

    Returns
    -------
    list[BlogResponse]
        Blogs sorted ascending by title.
    """
    return [db_blog_to_response(db_blog) for db_blog in await repo.list_all()]


@router.get(
    "/{record_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Get blog by ID",
    responses={
        200: {"content": {"application/json": {"example": BLOG_EXAMPLE}}},
        400: _error_example("Bad request", "Invalid blog Id 2."),
        404: _error_example(
            "Not found",
            "Failed to get the blog (Id: <uuid>) from the database.",
        ),
    },
    operation_id="blogs_get_by_id",
)
async def get_blog(blog_id: BlogIdDep, repo: BlogRepoDep) -> BlogResponse:
    """
    Get a blog by ID.

    Parameters
    ----------
    blog_id : UUID
        Validated blog identifier.
    repo : BlogRepository
        Repository dependency.

    Returns
    -------
    BlogResponse
        Blog data.
    """
    return db_blog_to_response(unwrap(await repo.get(blog_id)))


@router.post(
    "",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Create a new blog",
    responses={
        200: {"content": {"application/json": {"example": BLOG_EXAMPLE}}},
        400: _error_example("Bad request", "Type not found (Id: <uuid>) on the database."),
        401: _error_example("No token provided", "Access denied. No token provided."),
    },
    operation_id="blogs_create",
)
async def create_blog(
    token_data: AuthDep,
    record: BlogBodyDep,
    repo: BlogRepoDep,
    type_repo: TypeRepoDep,
) -> BlogResponse:
    """
    Create a new blog under an existing type.

    Parameters
    ----------
    token_data : TokenData
        Authenticated principal.
    record : BlogIn
        Validated blog payload.
    repo : BlogRepository
        Repository dependency.
    type_repo : TypeRepository
        Repository used to resolve ``typeId``.

    Returns
    -------
    BlogResponse
        Created blog data.
    """
    snapshot = unwrap(await snapshot_type(type_repo, record.type_id or ""))
    db_blog = unwrap(await repo.create(record, snapshot))
    logger.info(f"Blog {db_blog.id} created by user {token_data.id}")
    return db_blog_to_response(db_blog)


@router.put(
    "/{record_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Update a blog",
    responses={
        400: _error_example(
            "Bad request",
            "Failed to update the blog (Id: <uuid>) on the database.",
        ),
    },
    operation_id="blogs_update",
)
async def update_blog(
    blog_id: BlogIdDep,
    record: BlogBodyDep,
    repo: BlogRepoDep,
    type_repo: TypeRepoDep,
) -> BlogResponse:
    """
    Replace every field of an existing blog, including its type snapshot.

    Raises
    ------
    ResultError
        400 if the type or the blog does not exist, or the write fails.
    """
    snapshot = unwrap(await snapshot_type(type_repo, record.type_id or ""))
    return db_blog_to_response(unwrap(await repo.replace(blog_id, record, snapshot)))


@router.delete(
    "/{record_id}",
    response_class=ORJSONResponse,
    response_model=BlogResponse,
    summary="Delete a blog",
    responses={
        401: _error_example("No token provided", "Access denied. No token provided."),
        403: _error_example("Admin role required", "Access denied."),
    },
    operation_id="blogs_delete",
)
async def delete_blog(
    token_data: AdminDep,
    blog_id: BlogIdDep,
    repo: BlogRepoDep,
) -> BlogResponse:
    """Delete a blog and return the deleted record."""
    db_blog = unwrap(await repo.delete(blog_id))
    logger.info(f"Blog {blog_id} deleted by admin {token_data.id}")
    return db_blog_to_response(db_blog)
