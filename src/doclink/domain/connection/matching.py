"""Strategies that decide which recommended instances denote which model instances."""

from __future__ import annotations

import itertools
import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from doclink.domain.model import ModelInstance, RecommendedInstance
    from doclink.domain.similarity import SimilarityAggregator


def model_instance_forms(model_instance: ModelInstance) -> tuple[str, ...]:
    """Full name followed by its separator/camel-case parts, without repeats."""

    return tuple(dict.fromkeys((model_instance.name, *model_instance.name_parts)))


def recommended_instance_name_forms(recommended_instance: RecommendedInstance) -> tuple[str, ...]:
    references = (mapping.reference for mapping in recommended_instance.name_mappings)
    return tuple(dict.fromkeys((recommended_instance.name, *references)))


def recommended_instance_compound_forms(
    recommended_instance: RecommendedInstance,
) -> tuple[str, ...]:
    """The name, plus ``"name type"`` when the instance carries a type."""

    if not recommended_instance.has_type:
        return (recommended_instance.name,)
    return (
        recommended_instance.name,
        f"{recommended_instance.name} {recommended_instance.type}",
    )


def most_likely_recommended_instances(
    model_instance: ModelInstance,
    recommended_instances: Iterable[RecommendedInstance],
    similarity: SimilarityAggregator,
) -> tuple[RecommendedInstance, ...]:
    """Recommended instances whose names best match ``model_instance``.

    Candidates are those with a name (or name mention) similar to the model
    instance's name or one of its parts. Each candidate is scored by its best
    pairing of those name forms. The highest-scored candidates are returned, all
    of them on a tie, together with any candidate no measure could score.
    """

    forms = model_instance_forms(model_instance)
    candidates = [
        candidate
        for candidate in recommended_instances
        if similarity.any_similar(recommended_instance_name_forms(candidate), forms)
    ]
    if not candidates:
        return ()

    scored = [
        (candidate, _best_score(recommended_instance_name_forms(candidate), forms, similarity))
        for candidate in candidates
    ]
    scores = [score for _candidate, score in scored if score is not None]
    if not scores:
        return tuple(candidates)

    best = max(scores)
    return tuple(
        candidate
        for candidate, score in scored
        if score is None or math.isclose(score, best)
    )


def is_recommended_instance_similar_to_model_instance(
    recommended_instance: RecommendedInstance,
    model_instance: ModelInstance,
    similarity: SimilarityAggregator,
) -> bool:
    return similarity.any_similar(
        recommended_instance_compound_forms(recommended_instance),
        model_instance_forms(model_instance),
    )


def _best_score(
    names: tuple[str, ...], forms: tuple[str, ...], similarity: SimilarityAggregator
) -> float | None:
    best: float | None = None
    for name, form in itertools.product(names, forms):
        score = similarity.score(name, form)
        if score is not None and (best is None or score > best):
            best = score
    return best
