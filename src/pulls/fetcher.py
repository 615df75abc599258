"""Listing of open pull requests."""

import logging
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from src.github.client import GitHubClient
from src.github.exceptions import InternalServerError

from .models import PullRequest

logger = logging.getLogger(__name__)

_PULL_REQUEST_LIST = TypeAdapter(list[PullRequest])

T = TypeVar("T")


def parse_payload(adapter: TypeAdapter[T], payload: Any, url: str) -> T:
    """Validate a GitHub payload, raising a typed error on mismatch.

    Args:
        adapter: Pydantic adapter for the expected shape
        payload: Decoded JSON body
        url: URL the payload came from

    Returns:
        Validated payload

    Raises:
        InternalServerError: If the payload does not have the expected shape
    """
    try:
        return adapter.validate_python(payload)
    except ValidationError as e:
        message = (
            f"Unexpected response when calling {url}. "
            f"Reason: {e.error_count()} validation error(s)"
        )
        logger.error(f"{message}: {e}")
        raise InternalServerError(message) from e


class PullRequestFetcher:
    """Fetches the open pull requests of a repository."""

    def __init__(self, client: GitHubClient) -> None:
        self.client = client

    async def list_open_pull_requests(self, owner: str, repo: str) -> list[PullRequest]:
        """Get open pull requests, in the order GitHub lists them.

        Args:
            owner: Repository owner
            repo: Repository name

        Returns:
            Open pull requests

        Raises:
            GitHubError: If the GitHub request fails
        """
        url = self.client.pulls_url(owner, repo)
        payload = await self.client.fetch(url)
        pull_requests = parse_payload(_PULL_REQUEST_LIST, payload, url)

        logger.debug(f"Found {len(pull_requests)} open PRs in {owner}/{repo}")
        return pull_requests
