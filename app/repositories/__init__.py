"""Repository layer for database operations."""

from app.repositories.base import BaseRepository
from app.repositories.blog import BlogRepository
from app.repositories.type import TypeRepository
from app.repositories.user import UserRepository

__all__ = ["BaseRepository", "BlogRepository", "TypeRepository", "UserRepository"]
