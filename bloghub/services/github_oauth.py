"""
GitHub SSO.

``GitHubOAuthClient`` talks to GitHub (authorize URL, code exchange, profile
and email lookups). ``GitHubLoginService`` maps the GitHub identity onto a
local account and signs a session token for it.

The flow sends no ``state`` parameter, so callbacks are not bound to the
browser that started the login.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional
from urllib.parse import urlencode

import httpx
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from bloghub.core.config import Settings
from bloghub.core.exceptions import UpstreamError
from bloghub.core.security import OAUTH_PASSWORD_SENTINEL, TokenService
from bloghub.db.repositories.user import UserRepository
from bloghub.models.user import User

logger = logging.getLogger(__name__)


def select_primary_email(emails: List[Dict[str, Any]]) -> Optional[str]:
    """Return the first address GitHub marks as both primary and verified."""
    for entry in emails:
        if entry.get("primary") and entry.get("verified"):
            return entry.get("email")
    return None


class GitHubOAuthClient:
    """Build the GitHub authorization URL and call the GitHub APIs."""

    def __init__(self, settings: Settings, transport: httpx.BaseTransport | None = None) -> None:
        self._client_id = settings.GITHUB_CLIENT_ID
        self._client_secret = settings.GITHUB_CLIENT_SECRET
        self._authorize_url = settings.GITHUB_AUTHORIZE_URL
        self._token_url = settings.GITHUB_TOKEN_URL
        self._api_url = settings.GITHUB_API_URL.rstrip("/")
        self._scope = settings.GITHUB_SCOPE
        self._timeout = settings.GITHUB_HTTP_TIMEOUT
        self._transport = transport

    def build_authorization_url(self) -> str:
        query = urlencode({"client_id": self._client_id, "scope": self._scope})
        return f"{self._authorize_url}?{query}"

    def exchange_code(self, code: str) -> str:
        """
        Exchange an authorization code for a GitHub access token.

        GitHub answers an expired or reused code with HTTP 200 and an
        ``error`` field, so a missing ``access_token`` is treated as failure.
        """
        payload = {
            "client_id": self._client_id,
            "client_secret": self._client_secret,
            "code": code,
        }
        data = self._request("POST", self._token_url, json=payload, headers={"Accept": "application/json"})

        access_token = data.get("access_token") if isinstance(data, dict) else None
        if not access_token:
            error = data.get("error") if isinstance(data, dict) else None
            raise UpstreamError(f"GitHub rejected the authorization code: {error or 'no access token'}")
        return access_token

    def fetch_user(self, access_token: str) -> Dict[str, Any]:
        data = self._request("GET", f"{self._api_url}/user", headers=self._auth_headers(access_token))
        if not isinstance(data, dict) or not data.get("login"):
            raise UpstreamError("GitHub returned an unexpected user profile")
        return data

    def fetch_emails(self, access_token: str) -> List[Dict[str, Any]]:
        data = self._request("GET", f"{self._api_url}/user/emails", headers=self._auth_headers(access_token))
        if not isinstance(data, list) or not all(isinstance(entry, dict) for entry in data):
            raise UpstreamError("GitHub returned an unexpected email list")
        return data

    @staticmethod
    def _auth_headers(access_token: str) -> Dict[str, str]:
        return {"Authorization": f"token {access_token}", "Accept": "application/json"}

    def _request(self, method: str, url: str, **kwargs) -> Any:
        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                response = client.request(method, url, **kwargs)
                response.raise_for_status()
                return response.json()
        except httpx.HTTPStatusError as e:
            raise UpstreamError(f"GitHub responded {e.response.status_code} for {method} {url}") from e
        except httpx.HTTPError as e:
            raise UpstreamError(f"GitHub request failed for {method} {url}: {e}") from e
        except ValueError as e:
            raise UpstreamError(f"GitHub returned invalid JSON for {method} {url}") from e


@dataclass(frozen=True)
class GitHubLoginResult:
    token: str
    user_id: int
    username: str


class GitHubLoginService:
    """Resolve a GitHub callback into a local account and a session token."""

    def __init__(self, session: Session, oauth_client: GitHubOAuthClient, token_service: TokenService,
                 require_verified_email: bool = False):
        self.repository = UserRepository(session)
        self.oauth_client = oauth_client
        self.token_service = token_service
        self.require_verified_email = require_verified_email

    def complete_login(self, code: str) -> GitHubLoginResult:
        """
        Run the callback steps: exchange the code, read the GitHub profile,
        find or create the local user, then sign a token.

        The account is only written after every GitHub call has succeeded.

        Raises:
            UpstreamError: If GitHub rejects the code or cannot be reached,
                or no verified email exists while one is required
        """
        access_token = self.oauth_client.exchange_code(code)
        profile = self.oauth_client.fetch_user(access_token)
        emails = self.oauth_client.fetch_emails(access_token)

        login = profile["login"]
        email = select_primary_email(emails)
        if email is None:
            if self.require_verified_email:
                raise UpstreamError("GitHub account has no primary verified email")
            logger.warning("GitHub user %s has no primary verified email; linking without email", login)

        user = self._find_or_create(login, email)
        token = self.token_service.issue(user.id, login, user.email)
        return GitHubLoginResult(token=token, user_id=user.id, username=login)

    def _find_or_create(self, login: str, email: Optional[str]) -> User:
        # Without an email there is nothing to match on, so every such login
        # gets a fresh account.
        if email is not None:
            existing = self.repository.get_by_email(email)
            if existing:
                return existing

        try:
            user = self.repository.create(User(username=login, email=email, password=OAUTH_PASSWORD_SENTINEL))
        except IntegrityError:
            # A concurrent callback created the same account first.
            existing = self.repository.get_by_email(email) if email is not None else None
            if existing is None:
                raise
            return existing

        logger.info("Created GitHub SSO user id=%s for login %s", user.id, login)
        return user


def build_frontend_redirect(frontend_url: str, result: GitHubLoginResult) -> str:
    """URL of the frontend page that stores the token after SSO."""
    query = urlencode({"token": result.token, "id": result.user_id, "name": result.username})
    return f"{frontend_url.rstrip('/')}/github/callback?{query}"
