"""SQLModel database models."""

from bloghub.models.user import User

__all__ = [
    "User",
]
