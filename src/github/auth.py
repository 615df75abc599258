"""GitHub authentication handlers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .exceptions import UnauthorizedError


@dataclass(frozen=True)
class AuthToken:
    """Authentication token with its header scheme."""

    token: str
    token_type: str = "token"

    def to_header(self) -> dict[str, str]:
        """Convert to authorization header."""
        return {"Authorization": f"{self.token_type} {self.token}"}


class AuthProvider(ABC):
    """Abstract base class for authentication providers."""

    @abstractmethod
    async def get_token(self) -> AuthToken:
        """Get authentication token."""
        pass


class PersonalAccessTokenAuth(AuthProvider):
    """Personal Access Token authentication provider."""

    def __init__(self, token: str):
        """Initialize PAT authentication.

        Args:
            token: GitHub Personal Access Token
        """
        if not token:
            raise UnauthorizedError("Personal Access Token is required")
        self._token = AuthToken(token=token, token_type="token")  # nosec B106

    async def get_token(self) -> AuthToken:
        """Get authentication token."""
        return self._token
