"""
User API schemas.

Pydantic models for user-related request/response validation.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field


# Request schemas
class SignupRequest(BaseModel):
    """Schema for user registration."""
    username: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=1)


class SigninRequest(BaseModel):
    """Schema for user login."""
    email: EmailStr
    password: str


class UserUpdate(BaseModel):
    """
    Schema for updating a user profile.

    The password only changes when both ``currentPassword`` and
    ``newPassword`` are sent.
    """
    model_config = ConfigDict(populate_by_name=True)

    username: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    current_password: Optional[str] = Field(None, alias="currentPassword")
    new_password: Optional[str] = Field(None, alias="newPassword", min_length=1)


# Response schemas
class UserPublic(BaseModel):
    """Identity returned alongside a session token."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: Optional[str] = None


class UserResponse(UserPublic):
    """Schema for user data in API responses (no sensitive data)."""
    created_at: datetime


class SignupResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str = "User registered successfully"
    user_id: int = Field(..., alias="userId")


class SigninResponse(BaseModel):
    token: str
    user: UserPublic


class ProfileResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str = "Access granted!"
    user_id: int = Field(..., alias="userId")


class MessageResponse(BaseModel):
    message: str
