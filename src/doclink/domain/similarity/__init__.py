"""Pluggable word-similarity measures and their OR-aggregator."""

from __future__ import annotations

from .aggregator import MeasureVerdict, SimilarityAggregator
from .factory import build_aggregator
from .lexical import EqualityMeasure, LevenshteinMeasure, TokenOverlapMeasure
from .measures import MeasureUnavailableError, SimilarityMeasure, is_applicable
from .relatedness import (
    Concept,
    GlossOverlapRelatedness,
    LexicalDatabase,
    RelatednessMeasure,
    jaccard,
)
from .stemming import stem
from .wordsim import WordSimDataSource, WordSimMeasure

__all__ = [
    "Concept",
    "EqualityMeasure",
    "GlossOverlapRelatedness",
    "LevenshteinMeasure",
    "LexicalDatabase",
    "MeasureUnavailableError",
    "MeasureVerdict",
    "RelatednessMeasure",
    "SimilarityAggregator",
    "SimilarityMeasure",
    "TokenOverlapMeasure",
    "WordSimDataSource",
    "WordSimMeasure",
    "build_aggregator",
    "is_applicable",
    "jaccard",
    "stem",
]
