"""Application orchestration entry points."""

from __future__ import annotations

from contextlib import ExitStack
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from doclink.adapters import SqlAlchemyWordSimDataSource, open_wordnet_relatedness
from doclink.config import get_pipeline_config
from doclink.domain.agents import AgentContext, AgentPipeline, build_registry
from doclink.domain.connection import ConnectionStates
from doclink.domain.model import Metamodel
from doclink.domain.recommendation import RecommendationStates
from doclink.domain.similarity import build_aggregator

if TYPE_CHECKING:
    from collections.abc import Iterable

    from doclink.config import PipelineConfig
    from doclink.domain.model import (
        InstanceLink,
        ModelInstance,
        NounMapping,
        PosPair,
        RecommendedInstance,
    )
    from doclink.domain.similarity import MeasureVerdict, SimilarityAggregator


log = getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MetamodelResult:
    metamodel: Metamodel
    recommended_instances: tuple[RecommendedInstance, ...]
    links: tuple[InstanceLink, ...]


@dataclass(frozen=True, slots=True)
class RunResult:
    """Read-only outcome of one run, one entry per metamodel that had instances."""

    measures: tuple[str, ...]
    results: tuple[MetamodelResult, ...]

    @property
    def links(self) -> tuple[InstanceLink, ...]:
        return tuple(link for result in self.results for link in result.links)

    def for_metamodel(self, metamodel: Metamodel) -> MetamodelResult | None:
        for result in self.results:
            if result.metamodel is metamodel:
                return result
        return None


@dataclass(frozen=True, slots=True)
class WordComparison:
    similar: bool
    score: float | None
    verdicts: tuple[MeasureVerdict, ...]


def build_similarity(config: PipelineConfig, resources: ExitStack) -> SimilarityAggregator:
    """Build the aggregator with the on-disk adapters; ``resources`` closes them."""

    return build_aggregator(
        config.similarity,
        open_wordsim_source=SqlAlchemyWordSimDataSource.open,
        open_relatedness=open_wordnet_relatedness,
        resources=resources,
    )


def recover_trace_links(
    mentions: Iterable[NounMapping],
    model_instances: Iterable[ModelInstance],
    *,
    config: PipelineConfig | None = None,
    similarity: SimilarityAggregator | None = None,
) -> RunResult:
    """Run the configured stages over ``mentions`` for every metamodel present.

    Architecture and code instances are processed separately, each with its own
    recommendation and connection state. ``similarity`` replaces the
    configured aggregator, mostly for tests.
    """

    effective_config = config or get_pipeline_config()
    pipeline = AgentPipeline(
        registry=build_registry(effective_config), max_workers=effective_config.max_workers
    )
    all_mentions = tuple(mentions)
    instances_by_metamodel = _group_by_metamodel(model_instances)

    with ExitStack() as resources:
        aggregator = similarity or build_similarity(effective_config, resources)
        recommendations = RecommendationStates.build(aggregator)
        connections = ConnectionStates.build()

        results: list[MetamodelResult] = []
        for metamodel in Metamodel:
            instances = instances_by_metamodel.get(metamodel, ())
            if not instances:
                continue
            context = AgentContext(
                metamodel=metamodel,
                mentions=all_mentions,
                model_instances=instances,
                similarity=aggregator,
                recommendations=recommendations.state_for(metamodel),
                connections=connections.state_for(metamodel),
            )
            pipeline.run(context)
            context.recommendations.validate_invariants()
            results.append(
                MetamodelResult(
                    metamodel=metamodel,
                    recommended_instances=context.recommendations.recommended_instances,
                    links=context.connections.links,
                )
            )
            log.info(
                "Finished %s: recommended=%d, links=%d",
                metamodel,
                len(context.recommendations),
                len(context.connections),
            )

    return RunResult(measures=aggregator.measure_names, results=tuple(results))


def compare_words(
    first: str,
    second: str,
    *,
    pos: PosPair | None = None,
    config: PipelineConfig | None = None,
) -> WordComparison:
    effective_config = config or get_pipeline_config()
    with ExitStack() as resources:
        aggregator = build_similarity(effective_config, resources)
        return WordComparison(
            similar=aggregator.are_similar(first, second, pos=pos),
            score=aggregator.score(first, second, pos=pos),
            verdicts=aggregator.explain(first, second, pos=pos),
        )


def available_measures(config: PipelineConfig | None = None) -> tuple[str, ...]:
    """Names of the configured measures that could actually be built."""

    effective_config = config or get_pipeline_config()
    with ExitStack() as resources:
        return build_similarity(effective_config, resources).measure_names


def _group_by_metamodel(
    model_instances: Iterable[ModelInstance],
) -> dict[Metamodel, tuple[ModelInstance, ...]]:
    grouped: dict[Metamodel, list[ModelInstance]] = {}
    for instance in model_instances:
        grouped.setdefault(instance.metamodel, []).append(instance)
    return {metamodel: tuple(instances) for metamodel, instances in grouped.items()}
