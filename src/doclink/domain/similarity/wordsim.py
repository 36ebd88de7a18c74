"""Lookup-table measure over precomputed stem-pair similarities.

The table maps ``(stem_1, stem_2)`` to a similarity in [0, 1]. Both words are
stemmed before the lookup. A pair absent from the table is unknown, so the
measure abstains and leaves the decision to the other measures.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

from .stemming import stem

if TYPE_CHECKING:
    from doclink.domain.model import PosPair

log = logging.getLogger(__name__)


class WordSimDataSource(Protocol):
    """Read-only access to a stem-pair similarity table.

    Implementations raise ``MeasureUnavailableError`` when the backing store
    cannot be queried.
    """

    def similarity(self, first_stem: str, second_stem: str) -> float | None: ...


@dataclass(slots=True, kw_only=True)
class WordSimMeasure:
    data_source: WordSimDataSource
    threshold: float = 0.5
    name: str = "sewordsim"

    @property
    def applicable_pos(self) -> frozenset[PosPair] | None:
        return None

    def are_similar(self, first: str, second: str) -> bool:
        score = self.score(first, second)
        return score is not None and score >= self.threshold

    def score(self, first: str, second: str) -> float | None:
        first_stem = stem(first)
        second_stem = stem(second)
        similarity = self.data_source.similarity(first_stem, second_stem)
        if similarity is None and first_stem != second_stem:
            similarity = self.data_source.similarity(second_stem, first_stem)
        if similarity is None:
            log.debug("No table entry for stems %r/%r", first_stem, second_stem)
        return similarity
