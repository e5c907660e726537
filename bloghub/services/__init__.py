"""Business logic services."""

from bloghub.services.github_oauth import GitHubLoginService, GitHubOAuthClient
from bloghub.services.user_service import UserService

__all__ = [
    "GitHubLoginService",
    "GitHubOAuthClient",
    "UserService",
]
