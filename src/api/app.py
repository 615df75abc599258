"""FastAPI application exposing open pull request details."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import JSONResponse, Response

from src.config.models import Config, GitHubConfig
from src.github.auth import PersonalAccessTokenAuth
from src.github.client import GitHubClient, GitHubClientConfig
from src.github.exceptions import GitHubError, InternalServerError
from src.pulls.aggregator import PullRequestAggregator
from src.pulls.commits import CommitCounter
from src.pulls.fetcher import PullRequestFetcher
from src.pulls.models import PullRequestDetail

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1")


def build_github_client(github_config: GitHubConfig) -> GitHubClient:
    """Create the GitHub client shared by every request."""
    return GitHubClient(
        auth=PersonalAccessTokenAuth(github_config.token),
        config=GitHubClientConfig(
            base_url=github_config.base_url,
            timeout=github_config.timeout,
            user_agent=github_config.user_agent,
            max_concurrent_requests=github_config.max_concurrent_requests,
        ),
    )


def build_aggregator(client: GitHubClient) -> PullRequestAggregator:
    """Wire fetcher and commit counter around a single client."""
    return PullRequestAggregator(
        fetcher=PullRequestFetcher(client),
        commit_counter=CommitCounter(client),
    )


def error_response(error: GitHubError) -> Response:
    """Render a typed error as an HTTP response.

    Statuses that cannot carry a body (204) are sent without one.
    """
    if error.http_code == 204:
        return Response(status_code=error.http_code)
    return JSONResponse(status_code=error.http_code, content=error.to_dict())


@router.get(
    "/repos/{owner}/{repo}/pulls",
    response_model=list[PullRequestDetail],
)
async def get_open_pull_requests_details(
    owner: str, repo: str, request: Request
) -> list[PullRequestDetail]:
    """Open pull requests of a repository with their commit counts."""
    aggregator: PullRequestAggregator = request.app.state.aggregator
    try:
        return await aggregator.get_open_pull_requests_details(owner, repo)
    except GitHubError:
        raise
    except Exception as e:
        logger.exception(f"Unexpected error getting open PRs for {owner}/{repo}")
        raise InternalServerError(
            f"Unexpected error when getting open pull requests for "
            f"{owner}/{repo}. Reason: {e}"
        ) from e


def create_app(config: Config, client: GitHubClient | None = None) -> FastAPI:
    """Create the FastAPI application.

    Args:
        config: Service configuration
        client: GitHub client to use instead of one built from config

    Returns:
        Configured application
    """
    github_client = client or build_github_client(config.github)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(f"Using GitHub API at {github_client.config.base_url}")
        try:
            yield
        finally:
            await github_client.close()

    app = FastAPI(title="Pull Request Details", lifespan=lifespan)
    app.state.config = config
    app.state.github_client = github_client
    app.state.aggregator = build_aggregator(github_client)

    @app.exception_handler(GitHubError)
    async def github_error_handler(request: Request, exc: GitHubError) -> Response:
        logger.warning(
            f"{request.method} {request.url.path} failed with "
            f"{exc.http_code}: {exc.message}"
        )
        return error_response(exc)

    app.include_router(router)
    return app
