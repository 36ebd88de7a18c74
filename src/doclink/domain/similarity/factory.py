"""Build a similarity aggregator from configuration.

Measures are constructed in the configured priority order. A measure whose
resource is missing or malformed is left out with a warning; the aggregator is
always constructible.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from .aggregator import SimilarityAggregator
from .lexical import EqualityMeasure, LevenshteinMeasure, TokenOverlapMeasure
from .measures import MeasureUnavailableError
from .relatedness import RelatednessMeasure
from .wordsim import WordSimMeasure

if TYPE_CHECKING:
    from contextlib import ExitStack
    from pathlib import Path

    from doclink.config import SimilarityConfig

    from .measures import SimilarityMeasure
    from .relatedness import GlossOverlapRelatedness
    from .wordsim import WordSimDataSource

log = logging.getLogger(__name__)

type OpenWordSimSource = Callable[[Path], WordSimDataSource]
type OpenRelatedness = Callable[[], GlossOverlapRelatedness]


def build_aggregator(
    config: SimilarityConfig,
    *,
    open_wordsim_source: OpenWordSimSource | None = None,
    open_relatedness: OpenRelatedness | None = None,
    resources: ExitStack | None = None,
) -> SimilarityAggregator:
    """Return an aggregator over every configured measure that could be built.

    ``resources`` receives a close callback for each opened data source that
    exposes ``close()``.
    """

    measures: list[SimilarityMeasure] = []
    for name in config.measures:
        try:
            measure = _build_measure(
                name,
                config,
                open_wordsim_source=open_wordsim_source,
                open_relatedness=open_relatedness,
                resources=resources,
            )
        except MeasureUnavailableError as exc:
            log.warning("Skipping similarity measure %s: %s", name, exc)
            continue
        measures.append(measure)

    log.info("Similarity measures in use: %s", ", ".join(m.name for m in measures) or "none")
    return SimilarityAggregator(measures=tuple(measures))


def _build_measure(
    name: str,
    config: SimilarityConfig,
    *,
    open_wordsim_source: OpenWordSimSource | None,
    open_relatedness: OpenRelatedness | None,
    resources: ExitStack | None,
) -> SimilarityMeasure:
    if name == "equality":
        return EqualityMeasure()
    if name == "levenshtein":
        settings = config.levenshtein
        return LevenshteinMeasure(
            min_length=settings.min_length,
            max_distance=settings.max_distance,
            threshold=settings.threshold,
        )
    if name == "token_overlap":
        return TokenOverlapMeasure(threshold=config.token_overlap_threshold)
    if name == "sewordsim":
        if config.sewordsim_path is None:
            raise MeasureUnavailableError("no lookup table path configured")
        if open_wordsim_source is None:
            raise MeasureUnavailableError("no lookup table adapter available")
        source = open_wordsim_source(config.sewordsim_path)
        close = getattr(source, "close", None)
        if resources is not None and callable(close):
            resources.callback(close)
        return WordSimMeasure(data_source=source, threshold=config.sewordsim_threshold)
    if name == "relatedness":
        if open_relatedness is None:
            raise MeasureUnavailableError("no lexical database adapter available")
        return RelatednessMeasure(
            calculator=open_relatedness(), threshold=config.relatedness_threshold
        )
    raise MeasureUnavailableError(f"unknown measure {name!r}")
