from __future__ import annotations

import threading
from dataclasses import dataclass, field

import pytest

from doclink.domain.agents import AgentContext, AgentPipeline, AgentRegistry
from doclink.domain.connection import ConnectionState
from doclink.domain.model import Metamodel
from doclink.domain.recommendation import RecommendationState
from doclink.domain.similarity import SimilarityAggregator


@dataclass(slots=True)
class RecordingAgent:
    name: str
    journal: list[str]
    lock: threading.Lock = field(default_factory=threading.Lock)

    def run(self, context: AgentContext) -> None:
        with self.lock:
            self.journal.append(self.name)


@dataclass(slots=True)
class ExplodingAgent:
    name: str = "exploding"

    def run(self, context: AgentContext) -> None:
        raise RuntimeError("agent failed")


@pytest.fixture
def context(similarity: SimilarityAggregator) -> AgentContext:
    return AgentContext(
        metamodel=Metamodel.ARCHITECTURE,
        mentions=(),
        model_instances=(),
        similarity=similarity,
        recommendations=RecommendationState(similarity),
        connections=ConnectionState(),
    )


def test_stages_run_in_order(context: AgentContext) -> None:
    journal: list[str] = []
    registry = AgentRegistry(
        stages=(
            ("recommendation", (RecordingAgent("a", journal), RecordingAgent("b", journal))),
            ("connection", (RecordingAgent("c", journal),)),
        )
    )

    result = AgentPipeline(registry=registry).run(context)

    assert result is context
    assert journal == ["a", "b", "c"]


def test_stage_agents_may_run_on_a_thread_pool(context: AgentContext) -> None:
    journal: list[str] = []
    lock = threading.Lock()
    registry = AgentRegistry(
        stages=(
            (
                "recommendation",
                tuple(RecordingAgent(name, journal, lock) for name in ("a", "b", "c")),
            ),
            ("connection", (RecordingAgent("d", journal, lock),)),
        )
    )

    AgentPipeline(registry=registry, max_workers=3).run(context)

    assert sorted(journal[:3]) == ["a", "b", "c"]
    assert journal[3] == "d"


@pytest.mark.parametrize("max_workers", [1, 2])
def test_agent_errors_propagate(context: AgentContext, max_workers: int) -> None:
    journal: list[str] = []
    registry = AgentRegistry(
        stages=(
            ("recommendation", (ExplodingAgent(), RecordingAgent("a", journal))),
            ("connection", (RecordingAgent("b", journal),)),
        )
    )

    with pytest.raises(RuntimeError, match="agent failed"):
        AgentPipeline(registry=registry, max_workers=max_workers).run(context)

    assert "b" not in journal
