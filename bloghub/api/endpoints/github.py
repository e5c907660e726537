"""
GitHub SSO endpoints.

``/github/login`` sends the browser to GitHub; ``/github/callback`` finishes
the login and hands the session token to the frontend.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import PlainTextResponse, RedirectResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from bloghub.api.dependencies import get_github_client, get_token_service
from bloghub.core.config import settings
from bloghub.core.exceptions import AppError, ValidationError
from bloghub.core.security import TokenService
from bloghub.db.session import get_db
from bloghub.services.github_oauth import GitHubLoginService, GitHubOAuthClient, build_frontend_redirect

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/login", summary="Redirect to the GitHub authorization page.")
def github_login(oauth_client: GitHubOAuthClient = Depends(get_github_client)):
    return RedirectResponse(oauth_client.build_authorization_url(), status_code=status.HTTP_302_FOUND)


@router.get("/callback", summary="Complete GitHub SSO and redirect to the frontend.")
def github_callback(code: Optional[str] = Query(None, description="Authorization code issued by GitHub"),
                    db: Session = Depends(get_db),
                    oauth_client: GitHubOAuthClient = Depends(get_github_client),
                    token_service: TokenService = Depends(get_token_service), ):
    """
    Exchange the code, link the account and redirect with the token.

    Any failure returns a plain 500 page; nothing is retried.
    """
    if not code:
        raise ValidationError("Missing authorization code")

    service = GitHubLoginService(db, oauth_client, token_service,
                                 require_verified_email=settings.GITHUB_REQUIRE_VERIFIED_EMAIL)
    try:
        result = service.complete_login(code)
    except (AppError, SQLAlchemyError):
        logger.exception("GitHub SSO failed")
        return PlainTextResponse("GitHub Login Failed", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    return RedirectResponse(build_frontend_redirect(settings.FRONTEND_URL, result),
                            status_code=status.HTTP_302_FOUND)
