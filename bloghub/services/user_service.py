"""
User service.

Business logic for registration, sign-in and profile management.
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from bloghub.core.exceptions import ConflictError, NotFoundError, Unauthorized
from bloghub.core.security import TokenService, get_password_hash, verify_password
from bloghub.db.repositories.user import UserRepository
from bloghub.models.user import User
from bloghub.schemas.user import SigninRequest, SigninResponse, SignupRequest, UserPublic, UserUpdate

logger = logging.getLogger(__name__)


class UserService:
    """Service for user-related business logic."""

    def __init__(self, session: Session, token_service: TokenService | None = None):
        """
        Initialize service with database session.

        Args:
            session: SQLModel database session
            token_service: Signs session tokens; only needed by authenticate()
        """
        self.repository = UserRepository(session)
        self.token_service = token_service

    def register(self, user_data: SignupRequest) -> User:
        """
        Register a new user.

        Args:
            user_data: User registration data

        Returns:
            Created user

        Raises:
            ConflictError: If email already exists
        """
        if self.repository.exists_by_email(user_data.email):
            raise ConflictError("User already exists")

        user = User(username=user_data.username, email=user_data.email,
                    password=get_password_hash(user_data.password))
        try:
            user = self.repository.create(user)
        except IntegrityError:
            # Lost a race against a concurrent signup with the same email.
            raise ConflictError("User already exists")

        logger.info("Registered user id=%s", user.id)
        return user

    def authenticate(self, login_data: SigninRequest) -> SigninResponse:
        """
        Authenticate user and return a session token.

        Unknown email and wrong password are reported with different messages,
        which the frontend relies on.

        Raises:
            Unauthorized: If the email is unknown or the password is wrong
        """
        user = self.repository.get_by_email(login_data.email)
        if not user:
            logger.info("Sign-in rejected: unknown email")
            raise Unauthorized("User not found")

        if not verify_password(login_data.password, user.password):
            logger.info("Sign-in rejected: bad password for user id=%s", user.id)
            raise Unauthorized("Invalid password")

        token = self.token_service.issue(user.id, user.username, user.email)
        logger.info("User id=%s signed in", user.id)
        return SigninResponse(token=token, user=UserPublic.model_validate(user))

    def get_profile(self, user_id: int) -> User:
        """
        Get a user's public profile.

        Raises:
            NotFoundError: If no user has this ID
        """
        user = self.repository.get_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        return user

    def update_profile(self, user_id: int, data: UserUpdate) -> User:
        """
        Update username and email, and optionally the password.

        Already-issued tokens keep their old claims until they expire.

        Raises:
            ConflictError: If the email belongs to another user
            NotFoundError: If no user has this ID
            Unauthorized: If the current password does not match
        """
        if self.repository.email_taken_by_other(data.email, user_id):
            raise ConflictError("Email already in use by another user")

        user = self.get_profile(user_id)

        if data.current_password and data.new_password:
            if not verify_password(data.current_password, user.password):
                raise Unauthorized("Current password is incorrect")
            user.password = get_password_hash(data.new_password)
            logger.info("Password changed for user id=%s", user_id)

        user.username = data.username
        user.email = data.email
        try:
            return self.repository.update(user)
        except IntegrityError:
            raise ConflictError("Email already in use by another user")
