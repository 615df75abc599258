"""Configuration management for the pull request details service.

This module provides type-safe configuration with support for:
- YAML configuration files with environment variable substitution
- Environment variable overrides (GITHUB_TOKEN, PORT, ...), also read from .env
- Pydantic-based validation and type safety

Example usage:
    from src.config import load_config

    config = load_config()
    token = config.github.token
    port = config.server.port
"""

from .exceptions import (
    ConfigurationError,
    ConfigurationFileError,
    ConfigurationMissingError,
    ConfigurationValidationError,
)
from .loader import DEFAULT_ENV_FILE, ENV_OVERRIDES, ConfigurationLoader, load_config
from .models import (
    BaseConfigModel,
    Config,
    GitHubConfig,
    LogLevel,
    ServerConfig,
    SystemConfig,
)

__all__ = [
    "BaseConfigModel",
    "Config",
    "ConfigurationError",
    "ConfigurationFileError",
    "ConfigurationLoader",
    "ConfigurationMissingError",
    "ConfigurationValidationError",
    "DEFAULT_ENV_FILE",
    "ENV_OVERRIDES",
    "GitHubConfig",
    "LogLevel",
    "ServerConfig",
    "SystemConfig",
    "load_config",
]
