from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest
from pydantic import ValidationError

from doclink.adapters.fixture import FixturePayload, load_fixture, translate_fixture
from doclink.domain.model import MappingKind, Metamodel, PartOfSpeech

if TYPE_CHECKING:
    from pathlib import Path

FIXTURE = {
    "mentions": [
        {
            "reference": "Logic",
            "kind": "name",
            "words": [{"text": "Logic", "sentence": 0, "position": 1, "pos": "NNP"}],
        },
        {
            "reference": "component",
            "kind": "type",
            "words": [
                {"text": "component", "position": 2, "pos": "NN", "lemma": "component"}
            ],
        },
    ],
    "model_instances": [
        {"name": "LogicComponent", "type": "BasicComponent", "id": "_logic"},
        {"name": "Parser", "type": "Class", "identifier": "_parser", "metamodel": "code"},
    ],
}


def test_load_fixture_translates_payload(tmp_path: Path) -> None:
    path = tmp_path / "fixture.json"
    path.write_text(json.dumps(FIXTURE), encoding="utf-8")

    fixture = load_fixture(path)

    logic, component = fixture.mentions
    assert logic.kind is MappingKind.NAME
    assert logic.words[0].pos is PartOfSpeech.NOUN
    assert logic.words[0].lemma is None
    assert component.kind is MappingKind.TYPE
    assert (component.words[0].sentence_no, component.words[0].position) == (0, 2)
    assert component.words[0].lemma == "component"

    architecture, code = fixture.model_instances
    assert architecture.identifier == "_logic"
    assert architecture.metamodel is Metamodel.ARCHITECTURE
    assert code.identifier == "_parser"
    assert code.metamodel is Metamodel.CODE


def test_blank_tags_become_unknown_parts_of_speech() -> None:
    payload = FixturePayload.model_validate(
        {
            "mentions": [
                {
                    "reference": "run",
                    "kind": "name",
                    "words": [{"text": "run", "position": 0, "pos": " "}],
                }
            ]
        }
    )

    fixture = translate_fixture(payload)

    assert fixture.mentions[0].words[0].pos is None
    assert fixture.model_instances == ()


@pytest.mark.parametrize(
    "payload",
    [
        {"mentions": [{"reference": "Logic", "kind": "alias"}]},
        {"mentions": [{"reference": "", "kind": "name"}]},
        {"model_instances": [{"name": "Logic"}]},
        {"mentions": [{"reference": "Logic", "kind": "name", "words": [{"text": "Logic"}]}]},
    ],
)
def test_invalid_fixtures_are_rejected(payload: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        FixturePayload.model_validate(payload)
