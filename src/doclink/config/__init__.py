"""Application configuration helpers."""

from __future__ import annotations

from .env import environment_values
from .errors import ConfigurationError, MissingConfigurationError
from .files import load_config_file
from .settings import (
    AgentConfig,
    LevenshteinSettings,
    PipelineConfig,
    SimilarityConfig,
    get_pipeline_config,
    parse_pipeline_config,
)

__all__ = [
    "AgentConfig",
    "ConfigurationError",
    "LevenshteinSettings",
    "MissingConfigurationError",
    "PipelineConfig",
    "SimilarityConfig",
    "environment_values",
    "get_pipeline_config",
    "load_config_file",
    "parse_pipeline_config",
]
