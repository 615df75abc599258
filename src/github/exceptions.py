"""GitHub API client exceptions.

Every failure raised by the upstream client carries a short category name,
the HTTP status code to answer the inbound request with, and a
human-readable message. The HTTP layer maps these straight onto responses.
"""

from typing import Any


class GitHubError(Exception):
    """Base exception for GitHub API errors."""

    name: str = "Internal server error"
    http_code: int = 500

    def __init__(
        self,
        message: str,
        http_code: int | None = None,
        name: str | None = None,
    ):
        """Initialize GitHub error.

        Args:
            message: Error message
            http_code: HTTP status code, defaults to the class status
            name: Category label, defaults to the class label
        """
        super().__init__(message)
        self.message = message
        if http_code is not None:
            self.http_code = http_code
        if name is not None:
            self.name = name

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the response body shape."""
        return {
            "name": self.name,
            "message": self.message,
            "httpCode": self.http_code,
        }

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, "
            f"http_code={self.http_code}, message={self.message!r})"
        )


class BadRequestError(GitHubError):
    """Raised when GitHub rejects the request as malformed."""

    name = "Bad Request"
    http_code = 400


class UnauthorizedError(GitHubError):
    """Raised when the token is rejected."""

    name = "Unauthorized"
    http_code = 401


class ForbiddenError(GitHubError):
    """Raised when the token lacks the required permissions."""

    name = "Forbidden"
    http_code = 403


class NotFoundError(GitHubError):
    """Raised when resource is not found."""

    name = "Not Found"
    http_code = 404


class EmptyResponseError(GitHubError):
    """Raised when GitHub answers successfully but without a body."""

    name = "No Content"
    http_code = 204


class InternalServerError(GitHubError):
    """Raised on transport failures and unclassified upstream statuses."""

    name = "Internal server error"
    http_code = 500
