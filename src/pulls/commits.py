"""Listing of pull request commits."""

import logging

from pydantic import TypeAdapter

from src.github.client import GitHubClient

from .fetcher import parse_payload
from .models import Commit

logger = logging.getLogger(__name__)

_COMMIT_LIST = TypeAdapter(list[Commit])


class CommitCounter:
    """Fetches the commits of a single pull request."""

    def __init__(self, client: GitHubClient) -> None:
        self.client = client

    async def list_commits(
        self, owner: str, repo: str, pull_number: int
    ) -> list[Commit]:
        """Get the commits of a pull request.

        Args:
            owner: Repository owner
            repo: Repository name
            pull_number: Pull request number

        Returns:
            Commits of the pull request

        Raises:
            GitHubError: If the GitHub request fails
        """
        url = self.client.pull_commits_url(owner, repo, pull_number)
        payload = await self.client.fetch(url)
        commits = parse_payload(_COMMIT_LIST, payload, url)

        logger.debug(f"PR #{pull_number} in {owner}/{repo} has {len(commits)} commits")
        return commits

    async def count_commits(self, owner: str, repo: str, pull_number: int) -> int:
        """Get the number of commits in a pull request."""
        return len(await self.list_commits(owner, repo, pull_number))
