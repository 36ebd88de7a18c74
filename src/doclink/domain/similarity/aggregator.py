"""OR-composition of similarity measures.

The aggregator answers "similar" as soon as any applicable measure does.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .measures import MeasureUnavailableError, is_applicable

if TYPE_CHECKING:
    from collections.abc import Iterable

    from doclink.domain.model import PosPair, Word

    from .measures import SimilarityMeasure

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, kw_only=True)
class MeasureVerdict:
    """Outcome of one measure for one word pair (used for diagnostics)."""

    measure: str
    applicable: bool
    available: bool = True
    similar: bool = False
    score: float | None = None


@dataclass(slots=True)
class SimilarityAggregator:
    measures: tuple[SimilarityMeasure, ...] = ()

    @property
    def measure_names(self) -> tuple[str, ...]:
        return tuple(measure.name for measure in self.measures)

    def are_similar(self, first: str, second: str, *, pos: PosPair | None = None) -> bool:
        for measure in self.measures:
            if not is_applicable(measure, pos):
                continue
            try:
                if measure.are_similar(first, second):
                    return True
            except MeasureUnavailableError as exc:
                _log_unavailable(measure, exc)
        return False

    def are_words_similar(self, first: Word, second: Word) -> bool:
        pos = (first.pos, second.pos) if first.pos and second.pos else None
        return self.are_similar(first.text, second.text, pos=pos)

    def any_similar(self, firsts: Iterable[str], seconds: Iterable[str]) -> bool:
        """Return whether any word of ``firsts`` is similar to any word of ``seconds``."""

        candidates = tuple(seconds)
        return any(self.are_similar(first, second) for first in firsts for second in candidates)

    def score(self, first: str, second: str, *, pos: PosPair | None = None) -> float | None:
        """Highest score of any applicable measure, or ``None`` if none scored."""

        best: float | None = None
        for measure in self.measures:
            if not is_applicable(measure, pos):
                continue
            try:
                score = measure.score(first, second)
            except MeasureUnavailableError as exc:
                _log_unavailable(measure, exc)
                continue
            if score is not None and (best is None or score > best):
                best = score
        return best

    def explain(
        self, first: str, second: str, *, pos: PosPair | None = None
    ) -> tuple[MeasureVerdict, ...]:
        verdicts: list[MeasureVerdict] = []
        for measure in self.measures:
            if not is_applicable(measure, pos):
                verdicts.append(MeasureVerdict(measure=measure.name, applicable=False))
                continue
            try:
                verdicts.append(
                    MeasureVerdict(
                        measure=measure.name,
                        applicable=True,
                        similar=measure.are_similar(first, second),
                        score=measure.score(first, second),
                    )
                )
            except MeasureUnavailableError as exc:
                _log_unavailable(measure, exc)
                verdicts.append(
                    MeasureVerdict(measure=measure.name, applicable=True, available=False)
                )
        return tuple(verdicts)


def _log_unavailable(measure: SimilarityMeasure, exc: MeasureUnavailableError) -> None:
    log.warning("Similarity measure %s unavailable, treating as not similar: %s", measure.name, exc)
