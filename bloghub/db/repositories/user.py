"""
User repository.

Handles database operations for User model.
"""

from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from bloghub.models.user import User


def normalize_email(email: Optional[str]) -> Optional[str]:
    """Emails are stored and compared lowercased."""
    return email.strip().lower() if email else email


class UserRepository:
    """Repository for User database operations."""

    def __init__(self, session: Session):
        """
        Initialize repository with database session.

        Args:
            session: SQLModel database session
        """
        self.session = session

    def create(self, user: User) -> User:
        """
        Create a new user in the database.

        Args:
            user: User instance to create

        Returns:
            Created user with generated id

        Raises:
            IntegrityError: If the email is already taken (session is rolled back)
        """
        user.email = normalize_email(user.email)
        self.session.add(user)
        self._commit()
        self.session.refresh(user)
        return user

    def get_by_id(self, user_id: int) -> Optional[User]:
        """
        Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User instance if found, None otherwise
        """
        return self.session.get(User, user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email address.

        Args:
            email: User email

        Returns:
            User instance if found, None otherwise
        """
        statement = select(User).where(User.email == normalize_email(email))
        return self.session.exec(statement).first()

    def update(self, user: User) -> User:
        """
        Update an existing user.

        Args:
            user: User instance with updated data

        Returns:
            Updated user

        Raises:
            IntegrityError: If the new email is already taken (session is rolled back)
        """
        user.email = normalize_email(user.email)
        self.session.add(user)
        self._commit()
        self.session.refresh(user)
        return user

    def exists_by_email(self, email: str) -> bool:
        """
        Check if a user with the given email exists.

        Args:
            email: Email to check

        Returns:
            True if user exists, False otherwise
        """
        return self.get_by_email(email) is not None

    def email_taken_by_other(self, email: str, user_id: int) -> bool:
        """Check if the email belongs to a user other than ``user_id``."""
        statement = select(User.id).where(User.email == normalize_email(email), User.id != user_id)
        return self.session.exec(statement).first() is not None

    def _commit(self) -> None:
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            raise
