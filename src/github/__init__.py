"""GitHub API client package."""

from .auth import AuthProvider, AuthToken, PersonalAccessTokenAuth
from .client import GitHubClient, GitHubClientConfig
from .etag_cache import CachedResponse, RevalidationCache
from .exceptions import (
    BadRequestError,
    EmptyResponseError,
    ForbiddenError,
    GitHubError,
    InternalServerError,
    NotFoundError,
    UnauthorizedError,
)

__all__ = [
    "AuthProvider",
    "AuthToken",
    "BadRequestError",
    "CachedResponse",
    "EmptyResponseError",
    "ForbiddenError",
    "GitHubClient",
    "GitHubClientConfig",
    "GitHubError",
    "InternalServerError",
    "NotFoundError",
    "PersonalAccessTokenAuth",
    "RevalidationCache",
    "UnauthorizedError",
]
