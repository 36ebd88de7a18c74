"""String-level measures: equality, edit distance and token overlap."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from rapidfuzz import fuzz
from rapidfuzz.distance import Levenshtein

if TYPE_CHECKING:
    from doclink.domain.model import PosPair


@dataclass(frozen=True, slots=True, kw_only=True)
class EqualityMeasure:
    name: str = "equality"
    case_sensitive: bool = False

    @property
    def applicable_pos(self) -> frozenset[PosPair] | None:
        return None

    def are_similar(self, first: str, second: str) -> bool:
        return self._normalize(first) == self._normalize(second)

    def score(self, first: str, second: str) -> float | None:
        return 1.0 if self.are_similar(first, second) else 0.0

    def _normalize(self, word: str) -> str:
        stripped = word.strip()
        return stripped if self.case_sensitive else stripped.casefold()


@dataclass(frozen=True, slots=True, kw_only=True)
class LevenshteinMeasure:
    """Edit distance between two words.

    Words of at most ``min_length`` characters only match when equal. Longer
    words match when at most ``max_distance`` edits apart, and never more than
    ``threshold`` times the length of the shorter word.
    """

    name: str = "levenshtein"
    min_length: int = 2
    max_distance: int = 1
    threshold: float = 0.9

    @property
    def applicable_pos(self) -> frozenset[PosPair] | None:
        return None

    def are_similar(self, first: str, second: str) -> bool:
        left = first.strip().casefold()
        right = second.strip().casefold()
        shorter = min(len(left), len(right))
        if shorter <= self.min_length:
            return left == right
        allowed = min(self.max_distance, int(self.threshold * shorter))
        return Levenshtein.distance(left, right, score_cutoff=allowed) <= allowed

    def score(self, first: str, second: str) -> float | None:
        return Levenshtein.normalized_similarity(
            first.strip().casefold(), second.strip().casefold()
        )


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenOverlapMeasure:
    """Token-set overlap, useful for multi-word references ("logic server")."""

    name: str = "token_overlap"
    threshold: float = 0.9

    @property
    def applicable_pos(self) -> frozenset[PosPair] | None:
        return None

    def are_similar(self, first: str, second: str) -> bool:
        score = self.score(first, second)
        return score is not None and score >= self.threshold

    def score(self, first: str, second: str) -> float | None:
        if not first.strip() or not second.strip():
            return 0.0
        return fuzz.token_set_ratio(first.casefold(), second.casefold()) / 100.0
