"""Pydantic models describing the JSON fixture of mentions and model instances.

Example::

    {
      "mentions": [
        {"reference": "Logic", "kind": "name",
         "words": [{"text": "Logic", "sentence": 0, "position": 1, "pos": "NNP"}]}
      ],
      "model_instances": [
        {"name": "LogicComponent", "type": "BasicComponent", "id": "_logic"}
      ]
    }
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from doclink.domain.model import MappingKind, Metamodel


def _blank_to_none(value: object) -> object:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    return value


class FixtureBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class WordPayload(FixtureBaseModel):
    text: str
    sentence: int = Field(default=0, ge=0)
    position: int = Field(ge=0)
    pos: str | None = None
    lemma: str | None = None

    _normalize_pos = field_validator("pos", mode="before")(_blank_to_none)
    _normalize_lemma = field_validator("lemma", mode="before")(_blank_to_none)


class MentionPayload(FixtureBaseModel):
    reference: str = Field(min_length=1)
    kind: MappingKind
    words: list[WordPayload] = Field(default_factory=list[WordPayload])


class ModelInstancePayload(FixtureBaseModel):
    name: str
    type: str = ""
    identifier: str = Field(alias="id", min_length=1)
    metamodel: Metamodel = Metamodel.ARCHITECTURE


class FixturePayload(FixtureBaseModel):
    mentions: list[MentionPayload] = Field(default_factory=list[MentionPayload])
    model_instances: list[ModelInstancePayload] = Field(
        default_factory=list[ModelInstancePayload]
    )
