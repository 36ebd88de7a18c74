from __future__ import annotations

import pytest

from doclink.domain.agents import AgentContext, InstanceConnectionAgent
from doclink.domain.connection import ConnectionState
from doclink.domain.model import Metamodel
from doclink.domain.recommendation import RecommendationState
from doclink.domain.similarity import SimilarityAggregator
from tests.helpers.mentions import make_model_instance, type_mention


@pytest.fixture
def context(similarity: SimilarityAggregator) -> AgentContext:
    recommendations = RecommendationState(similarity)
    recommendations.add_recommended_instance(
        "Logic",
        "Component",
        claimant="name_type",
        probability=1.0,
        type_mappings=(type_mention("component"),),
    )
    recommendations.add_recommended_instance("Store", claimant="mention_instance", probability=0.6)
    recommendations.add_recommended_instance(
        "Parser", "Class", claimant="name_type", probability=1.0
    )
    return AgentContext(
        metamodel=Metamodel.ARCHITECTURE,
        mentions=(),
        model_instances=(
            make_model_instance("LogicComponent", "Component", identifier="_logic"),
            make_model_instance("Store", "Database", identifier="_store"),
        ),
        similarity=similarity,
        recommendations=recommendations,
        connections=ConnectionState(),
    )


def _probabilities(context: AgentContext) -> dict[tuple[str, str], list[float]]:
    return {
        (link.recommended_instance.name, link.model_instance.identifier): [
            entry.probability for entry in link.evidence
        ]
        for link in context.connections.links
    }


def test_forward_probability_depends_on_type_mentions(context: AgentContext) -> None:
    agent = InstanceConnectionAgent(with_type_probability=0.8, without_type_probability=0.5)

    assert agent.connect_forward(context) == 2
    assert _probabilities(context) == {
        ("Logic", "_logic"): [0.8],
        ("Store", "_store"): [0.5],
    }


def test_backward_links_similar_names(context: AgentContext) -> None:
    agent = InstanceConnectionAgent(with_type_probability=0.7)

    assert agent.connect_backward(context) == 2
    assert _probabilities(context) == {
        ("Logic", "_logic"): [0.7],
        ("Store", "_store"): [0.7],
    }


def test_run_accumulates_both_strategies(context: AgentContext) -> None:
    agent = InstanceConnectionAgent(with_type_probability=0.8, without_type_probability=0.6)

    agent.run(context)

    assert _probabilities(context) == {
        ("Logic", "_logic"): [0.8, 0.8],
        ("Store", "_store"): [0.6, 0.8],
    }
    assert all(link.confidence == 1.0 for link in context.connections.links)
    assert all(link.claimants == ("instance_connection",) for link in context.connections.links)
