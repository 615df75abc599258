"""Errors raised while loading the service configuration."""


class ConfigurationError(Exception):
    """Base exception for configuration problems that prevent startup."""


class ConfigurationFileError(ConfigurationError):
    """The YAML configuration file is missing, unreadable or malformed."""


class ConfigurationValidationError(ConfigurationError):
    """Configuration values failed model validation."""


class ConfigurationMissingError(ConfigurationError):
    """The GitHub token has no value."""
