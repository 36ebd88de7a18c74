"""WordNet (via NLTK) as the lexical database behind the relatedness measure."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Final, Self

from doclink.domain.model import PartOfSpeech
from doclink.domain.similarity import Concept, GlossOverlapRelatedness, MeasureUnavailableError

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

log = logging.getLogger(__name__)

_WORDNET_POS: Final[dict[PartOfSpeech, str]] = {
    PartOfSpeech.NOUN: "n",
    PartOfSpeech.VERB: "v",
    PartOfSpeech.ADJECTIVE: "a",
    PartOfSpeech.ADVERB: "r",
}


@dataclass(slots=True)
class WordNetLexicalDatabase:
    reader: Any

    @classmethod
    def load(cls) -> Self:
        from nltk.corpus import wordnet

        try:
            wordnet.synsets("entity")
        except LookupError as exc:
            raise MeasureUnavailableError(
                "WordNet corpus is not installed; run nltk.download('wordnet')"
            ) from exc
        return cls(reader=wordnet)

    def concepts(self, word: str, pos: PartOfSpeech) -> Sequence[Concept]:
        lemma = "_".join(word.strip().split())
        if not lemma:
            return ()
        synsets = self._query(lambda: self.reader.synsets(lemma, pos=_WORDNET_POS[pos]))
        return tuple(Concept(identifier=synset.name(), pos=pos) for synset in synsets)

    def words(self, concept: Concept) -> Sequence[str]:
        return self._query(lambda: tuple(self.reader.synset(concept.identifier).lemma_names()))

    def gloss(self, concept: Concept) -> str:
        return self._query(lambda: self.reader.synset(concept.identifier).definition() or "")

    def _query[T](self, call: Callable[[], T]) -> T:
        try:
            return call()
        except (LookupError, OSError) as exc:
            raise MeasureUnavailableError(f"WordNet query failed: {exc}") from exc


def english_stop_words() -> frozenset[str]:
    """NLTK's English stop words, or an empty set if the corpus is missing."""

    from nltk.corpus import stopwords

    try:
        return frozenset(stopwords.words("english"))
    except LookupError:
        log.warning("NLTK stopwords corpus missing; gloss terms are not stop-word filtered")
        return frozenset()


def open_wordnet_relatedness() -> GlossOverlapRelatedness:
    return GlossOverlapRelatedness(
        database=WordNetLexicalDatabase.load(), stop_words=english_stop_words()
    )
