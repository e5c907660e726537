"""
User profile endpoints.

Public profile lookup and owner-only profile update.
"""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from bloghub.api.dependencies import get_current_user
from bloghub.core.exceptions import Forbidden
from bloghub.db.session import get_db
from bloghub.schemas.token import TokenPayload
from bloghub.schemas.user import MessageResponse, UserResponse, UserUpdate
from bloghub.services.user_service import UserService

router = APIRouter()


@router.get("/{user_id}", summary="Get a user's public profile.", response_model=UserResponse)
def get_user(user_id: int, db: Session = Depends(get_db)):
    return UserService(db).get_profile(user_id)


@router.put("/{user_id}", summary="Update the caller's own profile.", response_model=MessageResponse)
def update_user(user_id: int, data: UserUpdate, db: Session = Depends(get_db),
                identity: TokenPayload = Depends(get_current_user), ):
    """
    Update username and email; change the password when both
    ``currentPassword`` and ``newPassword`` are given.
    """
    if identity.id != user_id:
        raise Forbidden("Cannot update another user's profile")

    UserService(db).update_profile(user_id, data)
    return MessageResponse(message="Profile updated successfully")
