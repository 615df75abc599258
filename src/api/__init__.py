"""HTTP API package."""

from .app import build_aggregator, build_github_client, create_app, error_response

__all__ = [
    "build_aggregator",
    "build_github_client",
    "create_app",
    "error_response",
]
