"""
Shared API dependencies.

Reusable FastAPI dependencies for authentication, database access and the
services built from settings.
"""

import logging
from datetime import timedelta
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from bloghub.core.config import settings
from bloghub.core.exceptions import Unauthorized
from bloghub.core.security import TokenError, TokenService
from bloghub.schemas.token import TokenPayload
from bloghub.services.github_oauth import GitHubOAuthClient

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_token_service() -> TokenService:
    return TokenService(secret_key=settings.SECRET_KEY, algorithm=settings.ALGORITHM,
                        expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))


def get_github_client() -> GitHubOAuthClient:
    return GitHubOAuthClient(settings)


def get_current_user(request: Request,
                     credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
                     token_service: TokenService = Depends(get_token_service), ) -> TokenPayload:
    """
    Verify the bearer token and return its claims.

    The identity comes from the token alone; the database is not consulted.
    The claims are also stored on ``request.state.user``.
    """
    if credentials is None:
        raise Unauthorized("Unauthorized")

    try:
        identity = token_service.verify(credentials.credentials)
    except TokenError as e:
        logger.info("Rejected bearer token on %s %s: %s", request.method, request.url.path, e.reason)
        raise Unauthorized("Invalid token")

    request.state.user = identity
    return identity
