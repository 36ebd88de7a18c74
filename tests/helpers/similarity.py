"""Fake measures and similarity resources."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from doclink.domain.model import PartOfSpeech, PosPair
from doclink.domain.similarity import Concept, MeasureUnavailableError


@dataclass(slots=True, kw_only=True)
class StaticMeasure:
    """Measure that gives the same answer for every pair and records its calls."""

    name: str = "static"
    similar: bool = False
    fixed_score: float | None = None
    applicable_pos: frozenset[PosPair] | None = None
    calls: list[tuple[str, str]] = field(default_factory=list[tuple[str, str]])

    def are_similar(self, first: str, second: str) -> bool:
        self.calls.append((first, second))
        return self.similar

    def score(self, first: str, second: str) -> float | None:
        return self.fixed_score


@dataclass(slots=True, kw_only=True)
class FailingMeasure:
    name: str = "failing"
    applicable_pos: frozenset[PosPair] | None = None

    def are_similar(self, first: str, second: str) -> bool:
        raise MeasureUnavailableError("store went away")

    def score(self, first: str, second: str) -> float | None:
        raise MeasureUnavailableError("store went away")


@dataclass(slots=True)
class InMemoryWordSimSource:
    scores: dict[tuple[str, str], float] = field(default_factory=dict[tuple[str, str], float])
    closed: bool = False

    def similarity(self, first_stem: str, second_stem: str) -> float | None:
        return self.scores.get((first_stem, second_stem))

    def close(self) -> None:
        self.closed = True


@dataclass(frozen=True, slots=True)
class ConceptEntry:
    words: tuple[str, ...]
    gloss: str


@dataclass(slots=True)
class InMemoryLexicalDatabase:
    """One concept per (word, part of speech), keyed ``word.pos``."""

    entries: dict[tuple[str, PartOfSpeech], ConceptEntry] = field(
        default_factory=dict[tuple[str, PartOfSpeech], ConceptEntry]
    )

    def concepts(self, word: str, pos: PartOfSpeech) -> Sequence[Concept]:
        if (word, pos) not in self.entries:
            return ()
        return (Concept(identifier=f"{word}.{pos}", pos=pos),)

    def words(self, concept: Concept) -> Sequence[str]:
        return self._entry(concept).words

    def gloss(self, concept: Concept) -> str:
        return self._entry(concept).gloss

    def _entry(self, concept: Concept) -> ConceptEntry:
        word = concept.identifier.rsplit(".", 1)[0]
        return self.entries[(word, concept.pos)]
