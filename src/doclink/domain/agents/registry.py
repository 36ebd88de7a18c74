"""Explicit mapping from pipeline stages to configured agents."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from doclink.config import ConfigurationError

from .connection import InstanceConnectionAgent
from .recommendation import MentionInstanceAgent, NameTypeAgent

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from doclink.config import AgentConfig, PipelineConfig

    from .contracts import Agent

log = logging.getLogger(__name__)

type AgentFactory = Callable[[AgentConfig], Agent]


class UnknownAgentError(ConfigurationError):
    """Raised when configuration names an agent that has no factory."""


def _name_type(config: AgentConfig) -> Agent:
    return NameTypeAgent(probability=config.name_type_probability)


def _mention_instance(config: AgentConfig) -> Agent:
    return MentionInstanceAgent(probability=config.mention_instance_probability)


def _instance_connection(config: AgentConfig) -> Agent:
    return InstanceConnectionAgent(
        with_type_probability=config.with_type_probability,
        without_type_probability=config.without_type_probability,
    )


AGENT_FACTORIES: Final[Mapping[str, AgentFactory]] = {
    "name_type": _name_type,
    "mention_instance": _mention_instance,
    "instance_connection": _instance_connection,
}


@dataclass(frozen=True, slots=True)
class AgentRegistry:
    stages: tuple[tuple[str, tuple[Agent, ...]], ...] = ()

    @property
    def stage_names(self) -> tuple[str, ...]:
        return tuple(stage for stage, _agents in self.stages)

    def agents_for(self, stage: str) -> tuple[Agent, ...]:
        for name, agents in self.stages:
            if name == stage:
                return agents
        return ()


def build_registry(
    config: PipelineConfig,
    *,
    factories: Mapping[str, AgentFactory] = AGENT_FACTORIES,
) -> AgentRegistry:
    """Instantiate the agents named per stage in ``config``, keeping their order."""

    stages: list[tuple[str, tuple[Agent, ...]]] = []
    for stage, names in config.stages:
        agents: list[Agent] = []
        for name in names:
            factory = factories.get(name)
            if factory is None:
                raise UnknownAgentError(
                    f"Unknown agent {name!r} in stage {stage!r}; "
                    f"known agents: {', '.join(sorted(factories))}"
                )
            agents.append(factory(config.agents))
        stages.append((stage, tuple(agents)))
        log.debug("Stage %s uses agents %s", stage, ", ".join(names) or "(none)")
    return AgentRegistry(stages=tuple(stages))
