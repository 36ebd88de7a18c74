from __future__ import annotations

import os

import pytest

from doclink.config import SimilarityConfig
from doclink.domain.connection import ConnectionState
from doclink.domain.recommendation import RecommendationState
from doclink.domain.similarity import SimilarityAggregator, build_aggregator


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in list(os.environ):
        if name.startswith("DOCLINK_"):
            monkeypatch.delenv(name)


@pytest.fixture
def similarity() -> SimilarityAggregator:
    """Aggregator over the default measures (equality, levenshtein)."""

    return build_aggregator(SimilarityConfig())


@pytest.fixture
def recommendation_state(similarity: SimilarityAggregator) -> RecommendationState:
    return RecommendationState(similarity)


@pytest.fixture
def connection_state() -> ConnectionState:
    return ConnectionState()
