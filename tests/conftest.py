"""
Test configuration and fixtures shared by unit and integration tests.

Provides a minimal service configuration and a GitHub client wired to a
fake token.
"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio

from src.config.models import Config
from src.github.auth import PersonalAccessTokenAuth
from src.github.client import GitHubClient, GitHubClientConfig
from tests.fixtures.github_payloads import API_URL, TEST_TOKEN


@pytest.fixture
def test_config() -> Config:
    """Minimal service configuration with a fake token."""
    return Config(github={"token": TEST_TOKEN})


@pytest_asyncio.fixture
async def github_client() -> AsyncGenerator[GitHubClient, None]:
    """GitHub client pointed at the public API URL, closed after the test."""
    client = GitHubClient(
        auth=PersonalAccessTokenAuth(TEST_TOKEN),
        config=GitHubClientConfig(base_url=API_URL),
    )
    yield client
    await client.close()
