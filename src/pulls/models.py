"""Pydantic models for GitHub pull request data.

Upstream models mirror only the fields of the GitHub REST payloads the
service reads; every other field GitHub returns is ignored.
"""

from pydantic import BaseModel, ConfigDict, Field


class GitHubModel(BaseModel):
    """Base model for immutable GitHub payloads."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class GitHubUser(GitHubModel):
    """A GitHub account."""

    login: str


class PullRequest(GitHubModel):
    """An entry of ``GET /repos/{owner}/{repo}/pulls``."""

    id: int
    number: int
    title: str
    user: GitHubUser

    @property
    def author(self) -> str:
        """Login of the pull request author."""
        return self.user.login


class Commit(GitHubModel):
    """An entry of ``GET /repos/{owner}/{repo}/pulls/{number}/commits``."""

    # Only the count of commits is used so far.
    sha: str


class PullRequestDetail(BaseModel):
    """Open pull request joined with its commit count."""

    model_config = ConfigDict(frozen=True)

    id: int
    number: int
    title: str
    author: str
    commit_count: int = Field(ge=0)

    @classmethod
    def from_pull_request(
        cls, pull_request: PullRequest, commit_count: int
    ) -> "PullRequestDetail":
        """Build the detail entry for a pull request."""
        return cls(
            id=pull_request.id,
            number=pull_request.number,
            title=pull_request.title,
            author=pull_request.author,
            commit_count=commit_count,
        )
