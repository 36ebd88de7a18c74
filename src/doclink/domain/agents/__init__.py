"""Contribution agents and the staged pipeline that runs them."""

from __future__ import annotations

from .connection import InstanceConnectionAgent
from .contracts import Agent, AgentContext
from .pipeline import AgentPipeline
from .recommendation import MentionInstanceAgent, NameTypeAgent, model_type_words
from .registry import AGENT_FACTORIES, AgentRegistry, UnknownAgentError, build_registry

__all__ = [
    "AGENT_FACTORIES",
    "Agent",
    "AgentContext",
    "AgentPipeline",
    "AgentRegistry",
    "InstanceConnectionAgent",
    "MentionInstanceAgent",
    "NameTypeAgent",
    "UnknownAgentError",
    "build_registry",
    "model_type_words",
]
