"""Configuration loading.

This module loads configuration from an optional YAML file, a ``.env`` file
and environment variables, then validates it.

The loading hierarchy is:
1. Default values from Pydantic models
2. Configuration file (YAML)
3. ``.env`` file
4. Process environment variables
"""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from dotenv import dotenv_values
from pydantic import ValidationError

from .exceptions import (
    ConfigurationFileError,
    ConfigurationMissingError,
    ConfigurationValidationError,
)
from .models import Config, substitute_env_vars

logger = logging.getLogger(__name__)

DEFAULT_ENV_FILE = ".env"

# Environment variable -> (section, field)
ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "GITHUB_TOKEN": ("github", "token"),
    "GITHUB_API_URL": ("github", "base_url"),
    "GITHUB_TIMEOUT": ("github", "timeout"),
    "GITHUB_MAX_CONCURRENT_REQUESTS": ("github", "max_concurrent_requests"),
    "HOST": ("server", "host"),
    "PORT": ("server", "port"),
    "LOG_LEVEL": ("system", "log_level"),
    "ENVIRONMENT": ("system", "environment"),
}


class ConfigurationLoader:
    """Handles loading and validation of configuration from various sources."""

    def read_file(self, config_path: str | Path) -> dict[str, Any]:
        """Read raw configuration data from a YAML file.

        Args:
            config_path: Path to the YAML configuration file

        Returns:
            Raw configuration data

        Raises:
            ConfigurationFileError: If file cannot be read or parsed
        """
        config_path = Path(config_path)

        if not config_path.exists():
            raise ConfigurationFileError(f"Configuration file not found: {config_path}")

        if not config_path.is_file():
            raise ConfigurationFileError(
                f"Configuration path is not a file: {config_path}"
            )

        try:
            with open(config_path, encoding="utf-8") as f:
                config_data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationFileError(
                f"Failed to parse YAML configuration: {e}"
            ) from e
        except OSError as e:
            raise ConfigurationFileError(
                f"Failed to read configuration file: {e}"
            ) from e

        if config_data is None:
            return {}
        if not isinstance(config_data, dict):
            raise ConfigurationFileError(
                f"Configuration file must contain a mapping at the top level: "
                f"{config_path}"
            )
        return config_data

    def read_environ(
        self, env_file: str | Path | None = DEFAULT_ENV_FILE
    ) -> dict[str, str]:
        """Merge a ``.env`` file under the process environment.

        Variables already set in the process win over the file. A missing
        file contributes nothing.

        Args:
            env_file: Path to the dotenv file, None to skip it

        Returns:
            Environment mapping to load configuration from
        """
        file_values: dict[str, str] = {}
        if env_file is not None and Path(env_file).is_file():
            file_values = {
                key: value
                for key, value in dotenv_values(env_file).items()
                if value is not None
            }
            logger.debug(f"Read {len(file_values)} variables from {env_file}")
        return {**file_values, **os.environ}

    def load_from_file(
        self, config_path: str | Path, environ: Mapping[str, str] | None = None
    ) -> Config:
        """Load configuration from a YAML file, then apply environment overrides.

        Args:
            config_path: Path to the YAML configuration file
            environ: Environment to read overrides from, defaults to os.environ

        Returns:
            Loaded and validated configuration

        Raises:
            ConfigurationFileError: If file cannot be read or parsed
            ConfigurationMissingError: If the GitHub token is missing
            ConfigurationValidationError: If configuration validation fails
        """
        config_data = self.read_file(config_path)
        config_data = self.apply_env_overrides(config_data, environ)
        logger.info(f"Loading configuration from {Path(config_path).resolve()}")
        return self._build(config_data, environ)

    def load_from_env(self, environ: Mapping[str, str] | None = None) -> Config:
        """Load configuration from environment variables only.

        Args:
            environ: Environment to read, defaults to os.environ

        Returns:
            Loaded and validated configuration

        Raises:
            ConfigurationMissingError: If GITHUB_TOKEN is not set
            ConfigurationValidationError: If configuration validation fails
        """
        config_data = self.apply_env_overrides({}, environ)
        return self._build(config_data, environ)

    def load_from_dict(
        self, config_data: dict[str, Any], environ: Mapping[str, str] | None = None
    ) -> Config:
        """Load configuration from a dictionary.

        Args:
            config_data: Configuration data dictionary
            environ: Environment for ${VAR} placeholders, defaults to os.environ

        Returns:
            Loaded and validated configuration

        Raises:
            ConfigurationMissingError: If the GitHub token is missing
            ConfigurationValidationError: If configuration validation fails
        """
        return self._build(config_data, environ)

    def apply_env_overrides(
        self, config_data: dict[str, Any], environ: Mapping[str, str] | None = None
    ) -> dict[str, Any]:
        """Overlay environment variables onto raw configuration data.

        Args:
            config_data: Raw configuration data
            environ: Environment to read, defaults to os.environ

        Returns:
            New configuration data with overrides applied
        """
        environ = os.environ if environ is None else environ
        merged = {
            key: dict(value) if isinstance(value, dict) else value
            for key, value in config_data.items()
        }

        for var_name, (section, field) in ENV_OVERRIDES.items():
            value = environ.get(var_name)
            if value is None or value == "":
                continue
            section_data = merged.setdefault(section, {})
            if not isinstance(section_data, dict):
                raise ConfigurationValidationError(
                    f"Configuration section '{section}' must be a mapping"
                )
            section_data[field] = value

        return merged

    def _build(
        self, config_data: dict[str, Any], environ: Mapping[str, str] | None
    ) -> Config:
        environ = os.environ if environ is None else environ

        if not self._resolve_token(config_data, environ):
            raise ConfigurationMissingError(
                "GitHub token is required (set GITHUB_TOKEN)"
            )

        try:
            config = Config.model_validate(config_data, context={"environ": environ})
        except ValidationError as e:
            raise ConfigurationValidationError(
                f"Configuration validation failed: {e}"
            ) from e

        logger.debug(
            f"Configuration loaded (environment={config.system.environment}, "
            f"port={config.server.port})"
        )
        return config

    def _resolve_token(
        self, config_data: dict[str, Any], environ: Mapping[str, str]
    ) -> str | None:
        """Token value after placeholder substitution, None when it has none."""
        github_data = config_data.get("github")
        if not isinstance(github_data, dict):
            return None
        token = github_data.get("token")
        if not isinstance(token, str):
            return token
        try:
            return substitute_env_vars(token, environ) or None
        except ValueError:
            return None


def load_config(
    config_path: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
    env_file: str | Path | None = DEFAULT_ENV_FILE,
) -> Config:
    """Load configuration from a file and/or the environment.

    Args:
        config_path: Optional path to a YAML configuration file
        environ: Environment to read, defaults to os.environ merged over
            ``env_file``
        env_file: Dotenv file read when ``environ`` is not given

    Returns:
        Loaded configuration

    Raises:
        ConfigurationError: If configuration cannot be loaded or is invalid
    """
    loader = ConfigurationLoader()
    if environ is None:
        environ = loader.read_environ(env_file)

    if config_path:
        return loader.load_from_file(config_path, environ)
    return loader.load_from_env(environ)
