"""Database repositories."""

from bloghub.db.repositories.user import UserRepository

__all__ = [
    "UserRepository",
]
