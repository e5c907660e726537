"""
User database model.

Defines the User table for authentication and profile management.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import text
from sqlmodel import Field, SQLModel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(SQLModel, table=True):
    """
    User model for authentication.

    ``password`` holds a bcrypt digest, or the OAuth sentinel for accounts
    created through GitHub SSO. ``email`` is unique; it is null only for SSO
    accounts whose provider exposed no primary verified address.
    """
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(max_length=255, nullable=False)
    email: Optional[str] = Field(default=None, unique=True, index=True, max_length=255)
    password: str = Field(nullable=False)

    # Timestamps
    created_at: datetime = Field(default_factory=_utcnow, nullable=False,
                                 sa_column_kwargs={"server_default": text("(CURRENT_TIMESTAMP)")})
