"""Open pull request details built on top of the GitHub client."""

from .aggregator import PullRequestAggregator
from .commits import CommitCounter
from .fetcher import PullRequestFetcher
from .models import Commit, GitHubUser, PullRequest, PullRequestDetail

__all__ = [
    "Commit",
    "CommitCounter",
    "GitHubUser",
    "PullRequest",
    "PullRequestAggregator",
    "PullRequestDetail",
    "PullRequestFetcher",
]
