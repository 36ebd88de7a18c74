"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class MappingKind(StrEnum):
    """Role a text mention plays for a model element."""

    NAME = "name"
    TYPE = "type"


class Metamodel(StrEnum):
    """Kind of structural model a model instance belongs to."""

    ARCHITECTURE = "architecture"
    CODE = "code"


class PartOfSpeech(StrEnum):
    NOUN = "noun"
    VERB = "verb"
    ADJECTIVE = "adjective"
    ADVERB = "adverb"

    @classmethod
    def from_tag(cls, tag: str | None) -> PartOfSpeech | None:
        """Map a Penn Treebank tag (``NNS``, ``VBD``, ...) to a coarse part of speech."""

        if not tag:
            return None
        return _TAG_PREFIXES.get(tag.upper()[:2])


_TAG_PREFIXES: dict[str, PartOfSpeech] = {
    "NN": PartOfSpeech.NOUN,
    "VB": PartOfSpeech.VERB,
    "JJ": PartOfSpeech.ADJECTIVE,
    "RB": PartOfSpeech.ADVERB,
}

type PosPair = tuple[PartOfSpeech, PartOfSpeech]
