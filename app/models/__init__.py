"""Database models for the application."""

from app.models.blog import BlogDB
from app.models.type import TypeDB
from app.models.user import UserDB

__all__ = ["BlogDB", "TypeDB", "UserDB"]
