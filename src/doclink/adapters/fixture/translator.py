"""Translate validated fixture payloads into domain objects."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from doclink.domain.model import ModelInstance, NounMapping, PartOfSpeech, Word

from .schema import FixturePayload

if TYPE_CHECKING:
    from pathlib import Path

    from .schema import MentionPayload, ModelInstancePayload, WordPayload

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Fixture:
    mentions: tuple[NounMapping, ...]
    model_instances: tuple[ModelInstance, ...]


def load_fixture(path: Path) -> Fixture:
    """Read and validate the fixture at ``path``.

    Raises ``OSError`` if the file cannot be read and ``pydantic.ValidationError``
    if its content does not match the schema.
    """

    payload = FixturePayload.model_validate_json(path.read_text(encoding="utf-8"))
    fixture = translate_fixture(payload)
    log.info(
        "Loaded %d mentions and %d model instances from %s",
        len(fixture.mentions),
        len(fixture.model_instances),
        path,
    )
    return fixture


def translate_fixture(payload: FixturePayload) -> Fixture:
    return Fixture(
        mentions=tuple(_translate_mention(mention) for mention in payload.mentions),
        model_instances=tuple(
            _translate_model_instance(instance) for instance in payload.model_instances
        ),
    )


def _translate_mention(payload: MentionPayload) -> NounMapping:
    return NounMapping(
        reference=payload.reference,
        kind=payload.kind,
        words=tuple(_translate_word(word) for word in payload.words),
    )


def _translate_word(payload: WordPayload) -> Word:
    return Word(
        text=payload.text,
        sentence_no=payload.sentence,
        position=payload.position,
        pos=PartOfSpeech.from_tag(payload.pos),
        lemma=payload.lemma,
    )


def _translate_model_instance(payload: ModelInstancePayload) -> ModelInstance:
    return ModelInstance(
        name=payload.name,
        type=payload.type,
        identifier=payload.identifier,
        metamodel=payload.metamodel,
    )
