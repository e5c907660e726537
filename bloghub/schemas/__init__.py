"""Pydantic schemas for request/response validation."""

from bloghub.schemas.token import TokenPayload
from bloghub.schemas.user import (
    MessageResponse,
    ProfileResponse,
    SigninRequest,
    SigninResponse,
    SignupRequest,
    SignupResponse,
    UserPublic,
    UserResponse,
    UserUpdate,
)

__all__ = [
    "TokenPayload",
    "MessageResponse",
    "ProfileResponse",
    "SigninRequest",
    "SigninResponse",
    "SignupRequest",
    "SignupResponse",
    "UserPublic",
    "UserResponse",
    "UserUpdate",
]
