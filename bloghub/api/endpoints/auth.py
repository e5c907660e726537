"""
Authentication endpoints.

Handles user registration, sign-in and the token check endpoint.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from bloghub.api.dependencies import get_current_user, get_token_service
from bloghub.core.security import TokenService
from bloghub.db.session import get_db
from bloghub.schemas.token import TokenPayload
from bloghub.schemas.user import ProfileResponse, SigninRequest, SigninResponse, SignupRequest, SignupResponse
from bloghub.services.user_service import UserService

router = APIRouter()


@router.post("/signup",
             summary="User registration endpoint.",
             response_model=SignupResponse,
             status_code=status.HTTP_201_CREATED)
def signup(user_data: SignupRequest, db: Session = Depends(get_db)):
    """
    Register a new user.

    Args:
        user_data: User registration data (username, email, password)
        db: Database session

    Returns:
        Confirmation message and the new user ID

    Raises:
        ConflictError 400: If email already registered
    """
    user = UserService(db).register(user_data)
    return SignupResponse(user_id=user.id)


@router.post("/signin",
             summary="User login endpoint.",
             response_model=SigninResponse)
def signin(login_data: SigninRequest, db: Session = Depends(get_db),
           token_service: TokenService = Depends(get_token_service)):
    """
    Authenticate user via JSON body.

    Returns:
        Session token and the public user identity
    """
    return UserService(db, token_service).authenticate(login_data)


@router.get("/profile",
            summary="Token check endpoint.",
            response_model=ProfileResponse)
def profile(identity: TokenPayload = Depends(get_current_user)):
    return ProfileResponse(user_id=identity.id)
