"""Text-side inputs produced by the (external) NLP stage.

Mentions are compared and hashed by identity: two mentions with the same
reference string are still distinct pieces of evidence.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from .enums import MappingKind, PartOfSpeech

if TYPE_CHECKING:
    from collections.abc import Iterable


@dataclass(frozen=True, slots=True, kw_only=True)
class Word:
    text: str
    sentence_no: int
    position: int
    pos: PartOfSpeech | None = None
    lemma: str | None = None


@dataclass(frozen=True, eq=False, slots=True, kw_only=True)
class NounMapping:
    """A name-like or type-like phrase extracted from the documentation."""

    reference: str
    kind: MappingKind
    words: tuple[Word, ...] = ()
    id: UUID = field(default_factory=uuid4)

    @property
    def pos(self) -> PartOfSpeech | None:
        """Part of speech of the head (last) word, if known."""

        if not self.words:
            return None
        return self.words[-1].pos


def mentions_of_kind(mentions: Iterable[NounMapping], kind: MappingKind) -> tuple[NounMapping, ...]:
    return tuple(mention for mention in mentions if mention.kind is kind)
