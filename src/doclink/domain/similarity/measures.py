"""Capability contract shared by every similarity measure.

A measure answers two questions about a pair of words: whether they are
similar enough (``are_similar``) and, where it can, how similar they are
(``score``). ``score`` returns ``None`` when the measure has no opinion, which
the aggregator treats as "unknown" rather than "dissimilar".
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final, Protocol

from doclink.domain.model import PartOfSpeech

if TYPE_CHECKING:
    from doclink.domain.model import PosPair

NOUN_AND_VERB_PAIRS: Final[frozenset[PosPair]] = frozenset(
    {
        (PartOfSpeech.NOUN, PartOfSpeech.NOUN),
        (PartOfSpeech.VERB, PartOfSpeech.VERB),
    }
)


class MeasureUnavailableError(RuntimeError):
    """Raised when a measure's backing resource cannot be opened or queried."""


class SimilarityMeasure(Protocol):
    name: str

    @property
    def applicable_pos(self) -> frozenset[PosPair] | None:
        """POS pairs this measure is valid for; ``None`` means any."""
        ...

    def are_similar(self, first: str, second: str) -> bool: ...

    def score(self, first: str, second: str) -> float | None: ...


def is_applicable(measure: SimilarityMeasure, pos: PosPair | None) -> bool:
    allowed = measure.applicable_pos
    if allowed is None or pos is None:
        return True
    return pos in allowed
