"""Errors raised while reading doclink's key/value configuration."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Raised when a configuration value cannot be parsed or names something unknown."""


class MissingConfigurationError(ConfigurationError):
    """Raised when a configuration file named on the command line or in code is absent."""
