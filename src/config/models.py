"""Pydantic configuration models for the pull request details service.

The configuration hierarchy follows this structure:
- Config: Root configuration containing all subsystems
- SystemConfig: Logging and environment settings
- GitHubConfig: GitHub API access
- ServerConfig: Inbound HTTP listener

Environment variables are substituted using the format ${VAR_NAME} with
optional defaults: ${VAR_NAME:default_value}
"""

import os
import re
from collections.abc import Mapping
from enum import Enum
from typing import Any
from urllib.parse import urlparse

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    field_validator,
    model_validator,
)


class LogLevel(str, Enum):
    """Supported logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


ENV_VAR_PATTERN = re.compile(r"\$\{([^}:]+)(?::([^}]*))?\}")


def substitute_env_vars(value: Any, environ: Mapping[str, str] | None = None) -> Any:
    """Substitute environment variables in string values, recursively.

    Supports formats:
    - ${VAR_NAME} - Required environment variable
    - ${VAR_NAME:default} - Optional with default value

    Args:
        value: Raw configuration value
        environ: Environment to read, defaults to os.environ

    Returns:
        Value with environment variables substituted

    Raises:
        ValueError: If required environment variable is missing
    """
    environ = os.environ if environ is None else environ

    if isinstance(value, str):

        def replacer(match: re.Match[str]) -> str:
            var_name = match.group(1)
            default_value = match.group(2)

            env_value = environ.get(var_name)
            if env_value is not None:
                return env_value
            elif default_value is not None:
                return default_value
            else:
                raise ValueError(
                    f"Required environment variable '{var_name}' not found"
                )

        return ENV_VAR_PATTERN.sub(replacer, value)
    elif isinstance(value, dict):
        return {k: substitute_env_vars(v, environ) for k, v in value.items()}
    elif isinstance(value, list):
        return [substitute_env_vars(item, environ) for item in value]
    else:
        return value


class BaseConfigModel(BaseModel):
    """Base configuration model with environment variable substitution.

    Placeholders are resolved against ``context["environ"]`` when validating
    with a context, otherwise against os.environ.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    @model_validator(mode="before")
    @classmethod
    def resolve_env_vars(cls, values: Any, info: ValidationInfo) -> Any:
        if not isinstance(values, dict):
            return values
        environ = (info.context or {}).get("environ")
        return substitute_env_vars(values, environ)


class SystemConfig(BaseConfigModel):
    """Core system configuration settings."""

    log_level: LogLevel = Field(
        default=LogLevel.INFO, description="System-wide logging level"
    )

    environment: str = Field(
        default="development",
        description="Deployment environment (development, staging, production)",
    )


class GitHubConfig(BaseConfigModel):
    """GitHub API access configuration."""

    token: str = Field(min_length=1, description="GitHub token sent with every call")

    base_url: str = Field(
        default="https://api.github.com", description="GitHub REST API base URL"
    )

    timeout: float = Field(
        default=30, gt=0, le=300, description="Per-request timeout in seconds"
    )

    user_agent: str = Field(
        default="PR-Details-Service/1.0", description="User-Agent request header"
    )

    max_concurrent_requests: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Maximum GitHub requests in flight at once",
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate the API base URL is absolute http(s)."""
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError(f"GitHub base URL must be an http(s) URL, got '{v}'")
        return v.rstrip("/")


class ServerConfig(BaseConfigModel):
    """Inbound HTTP server configuration."""

    host: str = Field(default="0.0.0.0", description="Interface to bind")  # nosec B104

    port: int = Field(default=3000, ge=1, le=65535, description="Port to listen on")


class Config(BaseConfigModel):
    """Root configuration."""

    system: SystemConfig = Field(default_factory=SystemConfig)
    github: GitHubConfig
    server: ServerConfig = Field(default_factory=ServerConfig)
