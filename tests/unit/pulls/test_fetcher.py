"""
Unit tests for the pull request fetcher and commit counter.

Why: Both components translate a GitHub URL into typed lists and must pass
     client failures through untouched.

What: Tests PullRequestFetcher and CommitCounter URL construction, parsing,
      order preservation, error propagation and payload shape errors.

How: Uses a mocked GitHubClient whose fetch() is an AsyncMock.
"""

from unittest.mock import AsyncMock, Mock

import pytest

from src.github.client import GitHubClient, GitHubClientConfig
from src.github.exceptions import InternalServerError, NotFoundError
from src.pulls.commits import CommitCounter
from src.pulls.fetcher import PullRequestFetcher
from tests.fixtures.github_payloads import (
    commit_payloads,
    commits_url,
    pull_payload,
    pulls_url,
)


@pytest.fixture
def mock_client() -> Mock:
    """GitHub client mock building real URLs with a mocked fetch()."""
    client = Mock(spec=GitHubClient)
    real = GitHubClient(auth=Mock(), config=GitHubClientConfig())
    client.pulls_url = real.pulls_url
    client.pull_commits_url = real.pull_commits_url
    client.fetch = AsyncMock()
    return client


class TestPullRequestFetcher:
    """Test PullRequestFetcher."""

    @pytest.mark.asyncio
    async def test_lists_open_pull_requests_in_order(self, mock_client: Mock) -> None:
        """
        Why: Output order must follow GitHub's listing order.
        What: Tests parsing and order of the listing.
        How: Returns three PRs in non-sorted order and checks numbers.
        """
        mock_client.fetch.return_value = [
            pull_payload(3),
            pull_payload(1),
            pull_payload(2),
        ]
        fetcher = PullRequestFetcher(mock_client)

        prs = await fetcher.list_open_pull_requests("test-owner", "test-repo")

        mock_client.fetch.assert_awaited_once_with(pulls_url())
        assert [pr.number for pr in prs] == [3, 1, 2]

    @pytest.mark.asyncio
    async def test_propagates_client_error(self, mock_client: Mock) -> None:
        """
        Why: Typed errors must surface unchanged.
        What: Tests the same exception instance is raised.
        How: Makes fetch() raise NotFoundError.
        """
        error = NotFoundError("The resource at x was not found.")
        mock_client.fetch.side_effect = error
        fetcher = PullRequestFetcher(mock_client)

        with pytest.raises(NotFoundError) as exc_info:
            await fetcher.list_open_pull_requests("test-owner", "test-repo")

        assert exc_info.value is error

    @pytest.mark.asyncio
    async def test_unexpected_payload_shape(self, mock_client: Mock) -> None:
        """
        Why: A payload of the wrong shape must still produce a typed error.
        What: Tests validation failure maps to InternalServerError.
        How: Returns a dict instead of a list.
        """
        mock_client.fetch.return_value = {"message": "Moved Permanently"}
        fetcher = PullRequestFetcher(mock_client)

        with pytest.raises(InternalServerError) as exc_info:
            await fetcher.list_open_pull_requests("test-owner", "test-repo")

        assert pulls_url() in exc_info.value.message


class TestCommitCounter:
    """Test CommitCounter."""

    @pytest.mark.asyncio
    async def test_list_commits(self, mock_client: Mock) -> None:
        """
        Why: Commit lists are fetched per pull request number.
        What: Tests the URL and parsed list.
        How: Returns five commits for PR 123.
        """
        mock_client.fetch.return_value = commit_payloads(5)
        counter = CommitCounter(mock_client)

        commits = await counter.list_commits("test-owner", "test-repo", 123)

        mock_client.fetch.assert_awaited_once_with(commits_url(123))
        assert [c.sha for c in commits] == [f"test_sha_{i}" for i in range(5)]

    @pytest.mark.asyncio
    async def test_count_commits(self, mock_client: Mock) -> None:
        """
        Why: Callers often only need the number of commits.
        What: Tests count_commits().
        How: Returns two commits.
        """
        mock_client.fetch.return_value = commit_payloads(2)
        counter = CommitCounter(mock_client)

        assert await counter.count_commits("test-owner", "test-repo", 9) == 2

    @pytest.mark.asyncio
    async def test_propagates_client_error(self, mock_client: Mock) -> None:
        """
        Why: Typed errors must surface unchanged.
        What: Tests client failures pass through.
        How: Makes fetch() raise InternalServerError.
        """
        mock_client.fetch.side_effect = InternalServerError("down")
        counter = CommitCounter(mock_client)

        with pytest.raises(InternalServerError, match="down"):
            await counter.list_commits("test-owner", "test-repo", 1)
