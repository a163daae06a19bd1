"""Blog repository for database operations."""

from typing import ClassVar
from uuid import UUID

from app.errors.result import Result
from app.models.blog import BlogDB
from app.repositories.base import BaseRepository
from app.schemas.blog import BlogIn, TypeSnapshot


class BlogRepository(BaseRepository[BlogDB]):
    """
    Repository for Blog entities, listed by title.

    Blogs are written together with a ``TypeSnapshot`` of their type; the
    snapshot is stored inline and never re-read from the types table.
    """

    model = BlogDB
    entity: ClassVar[str] = "blog"
    sort_field: ClassVar[str] = "title"

    async def create(self, record: BlogIn, snapshot: TypeSnapshot) -> Result[BlogDB]:
        """
        Create a new blog.

        Args:
            record: Validated blog request body
            snapshot: Copy of the blog's type

        Returns:
            Result[BlogDB]: Created blog, or ``PERSISTENCE``
        """
        db_blog = BlogDB(
            title=(record.title or "").strip(),
            type=snapshot.to_document(),
            content=record.content or "",
            author=record.author or "",
        )
        return await self.insert(db_blog)

    async def replace(
        self,
        blog_id: UUID,
        record: BlogIn,
        snapshot: TypeSnapshot,
    ) -> Result[BlogDB]:
        """
        Replace every mutable field of an existing blog.

        Args:
            blog_id: Blog UUID
            record: Validated blog request body
            snapshot: Fresh copy of the blog's type

        Returns:
            Result[BlogDB]: Updated blog, or ``PERSISTENCE``
        """
        return await self.update(
            blog_id,
            {
                "title": (record.title or "").strip(),
                "type": snapshot.to_document(),
                "content": record.content or "",
                "author": record.author or "",
            },
        )
