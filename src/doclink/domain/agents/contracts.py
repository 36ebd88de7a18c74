"""Shared contract and context for contribution agents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from doclink.domain.connection import ConnectionState
    from doclink.domain.model import Metamodel, ModelInstance, NounMapping
    from doclink.domain.recommendation import RecommendationState
    from doclink.domain.similarity import SimilarityAggregator


@dataclass(frozen=True, slots=True, kw_only=True)
class AgentContext:
    """Everything one agent sees while processing one metamodel.

    Mentions, model instances and the aggregator are read-only; the two states
    are the only things agents write to.
    """

    metamodel: Metamodel
    mentions: tuple[NounMapping, ...]
    model_instances: tuple[ModelInstance, ...]
    similarity: SimilarityAggregator
    recommendations: RecommendationState
    connections: ConnectionState


class Agent(Protocol):
    """Contract implemented by each contribution agent."""

    @property
    def name(self) -> str: ...

    def run(self, context: AgentContext) -> None: ...
