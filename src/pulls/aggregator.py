"""Aggregation of open pull requests with their commit counts."""

import asyncio
import logging
import time

from .commits import CommitCounter
from .fetcher import PullRequestFetcher
from .models import Commit, PullRequestDetail

logger = logging.getLogger(__name__)


class PullRequestAggregator:
    """Joins the open pull requests of a repository with their commit counts.

    The listing call runs first; the commit listing of every pull request
    then runs concurrently. The result is all-or-nothing: the first failure
    cancels the commit fetches still in flight and is re-raised as is.
    """

    def __init__(self, fetcher: PullRequestFetcher, commit_counter: CommitCounter):
        """Initialize aggregator.

        Args:
            fetcher: Open pull request fetcher
            commit_counter: Pull request commit fetcher
        """
        self.fetcher = fetcher
        self.commit_counter = commit_counter

    async def get_open_pull_requests_details(
        self, owner: str, repo: str
    ) -> list[PullRequestDetail]:
        """Get every open pull request of a repository with its commit count.

        Args:
            owner: Repository owner
            repo: Repository name

        Returns:
            One detail entry per open pull request, in GitHub listing order

        Raises:
            GitHubError: The first failure from any GitHub request
        """
        start_time = time.time()
        pull_requests = await self.fetcher.list_open_pull_requests(owner, repo)

        tasks = [
            asyncio.create_task(
                self.commit_counter.list_commits(owner, repo, pr.number),
                name=f"commits-{owner}/{repo}#{pr.number}",
            )
            for pr in pull_requests
        ]

        try:
            commit_lists: list[list[Commit]] = await asyncio.gather(*tasks)
        except BaseException:
            await self._cancel_pending(tasks)
            raise

        details = [
            PullRequestDetail.from_pull_request(pr, len(commits))
            for pr, commits in zip(pull_requests, commit_lists, strict=True)
        ]

        logger.info(
            f"Aggregated {len(details)} open PRs for {owner}/{repo} "
            f"in {time.time() - start_time:.2f}s"
        )
        return details

    async def _cancel_pending(self, tasks: list[asyncio.Task[list[Commit]]]) -> None:
        """Cancel unfinished tasks and wait for them to settle."""
        pending = [task for task in tasks if not task.done()]
        for task in pending:
            task.cancel()
        if pending:
            logger.debug(f"Cancelled {len(pending)} in-flight commit fetches")
            await asyncio.gather(*pending, return_exceptions=True)
