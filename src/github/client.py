"""GitHub API client with token authentication and ETag revalidation."""

import asyncio
import json
import logging
import time
import uuid
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

import aiohttp

from .auth import AuthProvider
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

logger = logging.getLogger(__name__)


@dataclass
class GitHubClientConfig:
    """Configuration for GitHub client."""

    base_url: str = "https://api.github.com"
    timeout: float = 30
    user_agent: str = "PR-Details-Service/1.0"
    max_concurrent_requests: int = 10


class GitHubClient:
    """Async GitHub API client issuing conditional GET requests.

    One instance owns one ``RevalidationCache`` and is meant to be shared by
    every component that talks to GitHub for the lifetime of the process.
    """

    def __init__(
        self,
        auth: AuthProvider,
        config: GitHubClientConfig | None = None,
        etag_cache: RevalidationCache | None = None,
    ) -> None:
        """Initialize GitHub client.

        Args:
            auth: Authentication provider
            config: Client configuration
            etag_cache: ETag store, a fresh one is created when omitted
        """
        self.auth = auth
        self.config = config or GitHubClientConfig()
        self.etag_cache = etag_cache if etag_cache is not None else RevalidationCache()

        # HTTP session will be initialized on first use
        self._session: aiohttp.ClientSession | None = None
        self._session_lock = asyncio.Lock()
        self._request_semaphore = asyncio.Semaphore(self.config.max_concurrent_requests)

    async def __aenter__(self) -> "GitHubClient":
        """Async context manager entry."""
        await self._ensure_session()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

    async def _ensure_session(self) -> aiohttp.ClientSession:
        """Ensure HTTP session is initialized."""
        if self._session is None or self._session.closed:
            async with self._session_lock:
                if self._session is None or self._session.closed:
                    timeout = aiohttp.ClientTimeout(total=self.config.timeout)
                    connector = aiohttp.TCPConnector(limit=100, limit_per_host=30)

                    self._session = aiohttp.ClientSession(
                        timeout=timeout,
                        connector=connector,
                        headers={
                            "User-Agent": self.config.user_agent,
                            "Accept": "application/vnd.github.v3+json",
                        },
                    )
        return self._session

    async def close(self) -> None:
        """Close HTTP session and cleanup resources."""
        if self._session and not self._session.closed:
            await self._session.close()
            self._session = None

    def _generate_correlation_id(self) -> str:
        """Generate correlation ID for request tracking."""
        return str(uuid.uuid4())[:8]

    def pulls_url(self, owner: str, repo: str) -> str:
        """URL listing the open pull requests of a repository."""
        return f"{self._repo_url(owner, repo)}/pulls?state=open"

    def pull_commits_url(self, owner: str, repo: str, pull_number: int) -> str:
        """URL listing the commits of one pull request."""
        return f"{self._repo_url(owner, repo)}/pulls/{int(pull_number)}/commits"

    def _repo_url(self, owner: str, repo: str) -> str:
        base_url = self.config.base_url.rstrip("/")
        return f"{base_url}/repos/{quote(owner, safe='')}/{quote(repo, safe='')}"

    async def fetch(self, url: str) -> Any:
        """Make a conditional GET request and return the decoded JSON body.

        The stored ETag for ``url`` is sent as ``If-None-Match``. A 200 with
        an ETag replaces the stored entry. A 304 returns the body stored with
        the ETag that was sent.

        Args:
            url: Fully qualified GitHub URL, query string included

        Returns:
            Decoded JSON response body

        Raises:
            GitHubError: Typed error describing the failure
        """
        correlation_id = self._generate_correlation_id()

        headers = (await self.auth.get_token()).to_header()
        cached = await self.etag_cache.get(url)
        if cached is not None:
            headers["If-None-Match"] = cached.etag

        session = await self._ensure_session()

        try:
            async with self._request_semaphore:
                start_time = time.time()
                logger.debug(f"GitHub API request [{correlation_id}] GET {url}")

                async with session.get(url, headers=headers) as response:
                    request_time = time.time() - start_time
                    logger.debug(
                        f"GitHub API response [{correlation_id}] "
                        f"{response.status} in {request_time:.2f}s"
                    )

                    if response.status == 200:
                        body = await self._read_json(response, url, correlation_id)
                        if body is None:
                            raise self._log_error(
                                EmptyResponseError(
                                    f"Empty response when calling {url}."
                                ),
                                correlation_id,
                            )
                        etag = response.headers.get("ETag")
                        if etag:
                            await self.etag_cache.store(url, etag, body)
                        return body

                    if response.status == 304:
                        return await self._handle_not_modified(
                            response, url, cached, correlation_id
                        )

                    raise self._classify_status(response.status, url, correlation_id)

        except GitHubError:
            raise
        except TimeoutError:
            raise self._log_error(
                InternalServerError(
                    f"Error when calling {url}. Reason: Request timed out after "
                    f"{self.config.timeout}s"
                ),
                correlation_id,
            ) from None
        except aiohttp.ClientError as e:
            raise self._log_error(
                InternalServerError(f"Error when calling {url}. Reason: {e}"),
                correlation_id,
            ) from e

    async def _handle_not_modified(
        self,
        response: aiohttp.ClientResponse,
        url: str,
        cached: CachedResponse | None,
        correlation_id: str,
    ) -> Any:
        """Serve a 304 from the body stored alongside the ETag."""
        if cached is not None and cached.body is not None:
            body = cached.body
        else:
            # Nothing retained: fall back to the (normally empty) 304 body.
            body = await self._read_json(response, url, correlation_id)
            if body is None:
                raise self._log_error(
                    EmptyResponseError(f"Empty response when calling {url}."),
                    correlation_id,
                )

        etag = response.headers.get("ETag")
        if etag:
            await self.etag_cache.store(url, etag, body)

        logger.debug(f"GitHub API [{correlation_id}] {url} not modified")
        return body

    async def _read_json(
        self, response: aiohttp.ClientResponse, url: str, correlation_id: str
    ) -> Any:
        """Decode a JSON body, returning None for an empty one."""
        try:
            return await response.json(content_type=None)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise self._log_error(
                InternalServerError(
                    f"Error when calling {url}. Reason: Invalid JSON response: {e}"
                ),
                correlation_id,
            ) from e

    def _classify_status(
        self, status: int, url: str, correlation_id: str
    ) -> GitHubError:
        """Map an upstream error status onto a typed error.

        Args:
            status: HTTP status code returned by GitHub
            url: Requested URL
            correlation_id: Request correlation ID

        Returns:
            The error to raise
        """
        error: GitHubError
        if status == 400:
            error = BadRequestError(f"Bad request to {url}.")
        elif status == 401:
            error = UnauthorizedError("The GitHub token is invalid.")
        elif status == 403:
            error = ForbiddenError(
                "The GitHub token does not have the necessary permissions."
            )
        elif status == 404:
            error = NotFoundError(f"The resource at {url} was not found.")
        else:
            error = InternalServerError(
                f"Unexpected error when calling {url}. "
                f"Reason: Request failed with status code {status}"
            )
        return self._log_error(error, correlation_id)

    def _log_error(self, error: GitHubError, correlation_id: str) -> GitHubError:
        logger.error(
            f"GitHub API error [{correlation_id}] {error.http_code}: {error.message}"
        )
        return error
