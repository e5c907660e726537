"""
API router.

Aggregates all endpoints. Paths are mounted at the root because the
frontend calls ``/signup``, ``/github/callback`` and so on directly.
"""

from fastapi import APIRouter

from bloghub.api.endpoints import auth, github, users

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    auth.router, tags=["Authentication"]
)
api_router.include_router(
    github.router, prefix="/github", tags=["GitHub SSO"]
)
api_router.include_router(
    users.router, prefix="/user", tags=["Users"]
)
