"""Agents that turn mentions into recommended instances."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from doclink.domain.model import MappingKind, mentions_of_kind, split_name_parts

if TYPE_CHECKING:
    from collections.abc import Iterable

    from doclink.domain.model import ModelInstance, NounMapping

    from .contracts import AgentContext

log = logging.getLogger(__name__)

type WordSlot = tuple[int, int]


@dataclass(frozen=True, slots=True)
class NameTypeAgent:
    """Propose (name, type) pairs from a name mention next to a type mention.

    ``"the Logic component"``: the type mention ``component`` is adjacent to the
    name mention ``Logic``. The proposed type is the model vocabulary word the
    type mention is similar to (``Component``), so recommended instances use
    the model's spelling of types. Type mentions similar to no model type word
    produce nothing.
    """

    probability: float = 1.0
    name: str = "name_type"

    def run(self, context: AgentContext) -> None:
        type_words = model_type_words(context.model_instances)
        if not type_words:
            log.debug("No model types for %s, skipping %s", context.metamodel, self.name)
            return

        type_mentions = _index_by_word_slot(mentions_of_kind(context.mentions, MappingKind.TYPE))
        proposed = 0
        for name_mention in mentions_of_kind(context.mentions, MappingKind.NAME):
            for type_mention in _adjacent_mentions(name_mention, type_mentions):
                for type_word in type_words:
                    if not context.similarity.are_similar(type_mention.reference, type_word):
                        continue
                    context.recommendations.add_recommended_instance(
                        name_mention.reference,
                        type_word,
                        claimant=self.name,
                        probability=self.probability,
                        name_mappings=(name_mention,),
                        type_mappings=(type_mention,),
                    )
                    proposed += 1
        log.info("%s proposed %d named and typed instances", self.name, proposed)


@dataclass(frozen=True, slots=True)
class MentionInstanceAgent:
    """Propose one type-less recommended instance per name mention."""

    probability: float = 0.6
    name: str = "mention_instance"

    def run(self, context: AgentContext) -> None:
        names = mentions_of_kind(context.mentions, MappingKind.NAME)
        for mention in names:
            context.recommendations.add_recommended_instance(
                mention.reference,
                claimant=self.name,
                probability=self.probability,
                name_mappings=(mention,),
            )
        log.info("%s proposed %d instances", self.name, len(names))


def model_type_words(model_instances: Iterable[ModelInstance]) -> tuple[str, ...]:
    """Model types and their name parts, sorted, without repeats.

    ``"BasicComponent"`` contributes ``BasicComponent``, ``Basic`` and
    ``Component``.
    """

    words: set[str] = set()
    for instance in model_instances:
        if not instance.type.strip():
            continue
        words.add(instance.type)
        words.update(split_name_parts(instance.type))
    return tuple(sorted(words))


def _index_by_word_slot(mentions: Iterable[NounMapping]) -> dict[WordSlot, list[NounMapping]]:
    index: dict[WordSlot, list[NounMapping]] = {}
    for mention in mentions:
        for word in mention.words:
            index.setdefault((word.sentence_no, word.position), []).append(mention)
    return index


def _adjacent_mentions(
    mention: NounMapping, index: dict[WordSlot, list[NounMapping]]
) -> tuple[NounMapping, ...]:
    own_slots = {(word.sentence_no, word.position) for word in mention.words}
    found: dict[NounMapping, None] = {}
    for word in mention.words:
        for offset in (-1, 1):
            slot = (word.sentence_no, word.position + offset)
            if slot in own_slots:
                continue
            for neighbour in index.get(slot, ()):
                if neighbour is not mention:
                    found[neighbour] = None
    return tuple(found)
