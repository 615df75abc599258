"""Canned GitHub REST payloads for pull requests and commits."""

from typing import Any

TEST_TOKEN = "test_token"  # nosec B105
API_URL = "https://api.github.com"


def pulls_url(owner: str = "test-owner", repo: str = "test-repo") -> str:
    """GitHub URL listing open pull requests."""
    return f"{API_URL}/repos/{owner}/{repo}/pulls?state=open"


def commits_url(number: int, owner: str = "test-owner", repo: str = "test-repo") -> str:
    """GitHub URL listing the commits of a pull request."""
    return f"{API_URL}/repos/{owner}/{repo}/pulls/{number}/commits"


def pull_payload(
    number: int, title: str | None = None, login: str = "test-owner"
) -> dict[str, Any]:
    """Pull request payload with a few of the extra fields GitHub sends."""
    return {
        "id": number,
        "number": number,
        "title": title or f"Test Pull {number}",
        "state": "open",
        "user": {"login": login, "id": 1000 + number},
        "head": {"sha": f"head-{number}"},
    }


def commit_payloads(count: int) -> list[dict[str, Any]]:
    """A list of commit payloads."""
    return [
        {"sha": f"test_sha_{i}", "commit": {"message": f"commit {i}"}}
        for i in range(count)
    ]
