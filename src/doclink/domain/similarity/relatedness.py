"""Gloss-overlap relatedness between lexical concepts.

For two concepts the measure builds two term sets each: the words directly
associated with the concept and the words of its gloss (definition). Terms are
lower-cased, stop-word filtered and stemmed. The relatedness is the mean of the
Jaccard overlap of the associated words and the Jaccard overlap of the gloss
terms. A word can denote several concepts, so two words are scored by their
best concept pair.
"""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from doclink.domain.model import PartOfSpeech

from .measures import NOUN_AND_VERB_PAIRS
from .stemming import stem

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence, Set

    from doclink.domain.model import PosPair


@dataclass(frozen=True, slots=True)
class Concept:
    identifier: str
    pos: PartOfSpeech


class LexicalDatabase(Protocol):
    def concepts(self, word: str, pos: PartOfSpeech) -> Sequence[Concept]: ...

    def words(self, concept: Concept) -> Sequence[str]: ...

    def gloss(self, concept: Concept) -> str: ...


@dataclass(frozen=True, slots=True)
class ConceptTerms:
    words: frozenset[str]
    gloss: frozenset[str]


def jaccard(first: Set[str], second: Set[str]) -> float:
    union = first | second
    if not union:
        return 0.0
    return len(first & second) / len(union)


@dataclass(slots=True, kw_only=True)
class GlossOverlapRelatedness:
    """Concept-level calculator; caches term sets per concept."""

    database: LexicalDatabase
    stop_words: frozenset[str] = frozenset()
    _terms: dict[Concept, ConceptTerms] = field(
        default_factory=dict["Concept", "ConceptTerms"], repr=False
    )

    def relatedness(self, first: Concept, second: Concept) -> float:
        first_terms = self.terms_for(first)
        second_terms = self.terms_for(second)
        words_score = jaccard(first_terms.words, second_terms.words)
        gloss_score = jaccard(first_terms.gloss, second_terms.gloss)
        return (words_score + gloss_score) / 2.0

    def terms_for(self, concept: Concept) -> ConceptTerms:
        cached = self._terms.get(concept)
        if cached is not None:
            return cached
        associated = (
            token for word in self.database.words(concept) for token in word.split("_")
        )
        terms = ConceptTerms(
            words=self._clean(associated),
            gloss=self._clean(self.database.gloss(concept).split()),
        )
        self._terms[concept] = terms
        return terms

    def _clean(self, tokens: Iterable[str]) -> frozenset[str]:
        cleaned: set[str] = set()
        for token in tokens:
            term = token.strip(string.punctuation).lower()
            if term and term not in self.stop_words:
                cleaned.add(stem(term))
        return frozenset(cleaned)


@dataclass(slots=True, kw_only=True)
class RelatednessMeasure:
    calculator: GlossOverlapRelatedness
    threshold: float = 0.5
    name: str = "relatedness"
    parts_of_speech: tuple[PartOfSpeech, ...] = (PartOfSpeech.NOUN, PartOfSpeech.VERB)

    @property
    def applicable_pos(self) -> frozenset[PosPair] | None:
        return NOUN_AND_VERB_PAIRS

    def are_similar(self, first: str, second: str) -> bool:
        score = self.score(first, second)
        return score is not None and score >= self.threshold

    def score(self, first: str, second: str) -> float | None:
        best: float | None = None
        database = self.calculator.database
        for pos in self.parts_of_speech:
            first_concepts = database.concepts(first, pos)
            second_concepts = database.concepts(second, pos)
            for first_concept in first_concepts:
                for second_concept in second_concepts:
                    score = self.calculator.relatedness(first_concept, second_concept)
                    if best is None or score > best:
                        best = score
        return best
