"""Typed configuration built from plain key/value pairs."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Final

from .env import environment_values
from .errors import ConfigurationError
from .files import load_config_file

if TYPE_CHECKING:
    from collections.abc import Mapping

MEASURE_NAMES: Final[frozenset[str]] = frozenset(
    {"equality", "levenshtein", "token_overlap", "sewordsim", "relatedness"}
)
STAGE_ORDER: Final[tuple[str, ...]] = ("recommendation", "connection")

DEFAULT_VALUES: Final[dict[str, str]] = {
    "similarity.measures": "equality,levenshtein",
    "similarity.levenshtein.min_length": "2",
    "similarity.levenshtein.max_distance": "1",
    "similarity.levenshtein.threshold": "0.9",
    "similarity.token_overlap.threshold": "0.9",
    "similarity.sewordsim.threshold": "0.5",
    "similarity.relatedness.threshold": "0.5",
    "stages.recommendation": "name_type,mention_instance",
    "stages.connection": "instance_connection",
    "agent.name_type.probability": "1.0",
    "agent.mention_instance.probability": "0.6",
    "agent.instance_connection.with_type": "0.8",
    "agent.instance_connection.without_type": "0.6",
    "pipeline.max_workers": "1",
}


@dataclass(frozen=True, slots=True)
class LevenshteinSettings:
    min_length: int = 2
    max_distance: int = 1
    threshold: float = 0.9


@dataclass(frozen=True, slots=True)
class SimilarityConfig:
    """Which measures to build, in priority order, and their thresholds."""

    measures: tuple[str, ...] = ("equality", "levenshtein")
    levenshtein: LevenshteinSettings = field(default_factory=LevenshteinSettings)
    token_overlap_threshold: float = 0.9
    sewordsim_path: Path | None = None
    sewordsim_threshold: float = 0.5
    relatedness_threshold: float = 0.5


@dataclass(frozen=True, slots=True)
class AgentConfig:
    name_type_probability: float = 1.0
    mention_instance_probability: float = 0.6
    with_type_probability: float = 0.8
    without_type_probability: float = 0.6


@dataclass(frozen=True, slots=True)
class PipelineConfig:
    """Complete configuration for one trace link recovery run."""

    similarity: SimilarityConfig = field(default_factory=SimilarityConfig)
    agents: AgentConfig = field(default_factory=AgentConfig)
    stages: tuple[tuple[str, tuple[str, ...]], ...] = (
        ("recommendation", ("name_type", "mention_instance")),
        ("connection", ("instance_connection",)),
    )
    max_workers: int = 1

    def agents_for(self, stage: str) -> tuple[str, ...]:
        for name, agents in self.stages:
            if name == stage:
                return agents
        return ()


def get_pipeline_config(
    overrides: Mapping[str, str] | None = None,
    *,
    config_file: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> PipelineConfig:
    """Merge defaults, file, environment and explicit overrides, then parse them.

    Precedence, lowest first: built-in defaults, ``config_file``, ``DOCLINK_*``
    environment variables, ``overrides``.
    """

    values = dict(DEFAULT_VALUES)
    if config_file is not None:
        values.update(load_config_file(config_file))
    values.update(environment_values(environ))
    if overrides:
        values.update(overrides)
    return parse_pipeline_config(values)


def parse_pipeline_config(values: Mapping[str, str]) -> PipelineConfig:
    merged = {**DEFAULT_VALUES, **values}
    return PipelineConfig(
        similarity=_parse_similarity_config(merged),
        agents=_parse_agent_config(merged),
        stages=tuple((stage, _parse_names(merged, f"stages.{stage}")) for stage in STAGE_ORDER),
        max_workers=_parse_positive_int(merged, "pipeline.max_workers"),
    )


def _parse_similarity_config(values: Mapping[str, str]) -> SimilarityConfig:
    measures = _parse_names(values, "similarity.measures")
    unknown = [name for name in measures if name not in MEASURE_NAMES]
    if unknown:
        raise ConfigurationError(f"Unknown similarity measures: {', '.join(unknown)}")
    if len(set(measures)) != len(measures):
        raise ConfigurationError("Similarity measures must not be listed twice")

    raw_path = values.get("similarity.sewordsim.path", "").strip()
    return SimilarityConfig(
        measures=measures,
        levenshtein=LevenshteinSettings(
            min_length=_parse_positive_int(values, "similarity.levenshtein.min_length"),
            max_distance=_parse_positive_int(values, "similarity.levenshtein.max_distance"),
            threshold=_parse_unit_float(values, "similarity.levenshtein.threshold"),
        ),
        token_overlap_threshold=_parse_unit_float(values, "similarity.token_overlap.threshold"),
        sewordsim_path=Path(raw_path).expanduser() if raw_path else None,
        sewordsim_threshold=_parse_unit_float(values, "similarity.sewordsim.threshold"),
        relatedness_threshold=_parse_unit_float(values, "similarity.relatedness.threshold"),
    )


def _parse_agent_config(values: Mapping[str, str]) -> AgentConfig:
    return AgentConfig(
        name_type_probability=_parse_unit_float(values, "agent.name_type.probability"),
        mention_instance_probability=_parse_unit_float(
            values, "agent.mention_instance.probability"
        ),
        with_type_probability=_parse_unit_float(values, "agent.instance_connection.with_type"),
        without_type_probability=_parse_unit_float(
            values, "agent.instance_connection.without_type"
        ),
    )


def _parse_names(values: Mapping[str, str], key: str) -> tuple[str, ...]:
    raw = values.get(key, "")
    return tuple(name.strip() for name in raw.split(",") if name.strip())


def _parse_unit_float(values: Mapping[str, str], key: str) -> float:
    raw = values.get(key, "")
    try:
        number = float(raw)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid number for {key}: {raw!r}") from exc
    if not 0.0 <= number <= 1.0:
        raise ConfigurationError(f"Value for {key} must lie in [0, 1]: {number}")
    return number


def _parse_positive_int(values: Mapping[str, str], key: str) -> int:
    raw = values.get(key, "")
    try:
        number = int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"Invalid integer for {key}: {raw!r}") from exc
    if number < 1:
        raise ConfigurationError(f"Value for {key} must be positive: {number}")
    return number
