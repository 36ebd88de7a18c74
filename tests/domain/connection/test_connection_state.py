from __future__ import annotations

import pytest

from doclink.domain.connection import ConnectionState, ConnectionStates
from doclink.domain.model import Metamodel, RecommendedInstance
from tests.helpers.mentions import make_model_instance


def _recommended(name: str, type: str = "Component") -> RecommendedInstance:  # noqa: A002
    return RecommendedInstance.create(name=name, type=type, claimant="test", probability=1.0)


def test_repeated_proposals_accumulate_evidence(connection_state: ConnectionState) -> None:
    logic = _recommended("Logic")
    model = make_model_instance("LogicComponent")

    first = connection_state.add_to_links(logic, model, 0.6, claimant="forward")
    second = connection_state.add_to_links(logic, model, 0.3, claimant="backward")

    assert second is first
    assert len(connection_state) == 1
    assert [entry.probability for entry in first.evidence] == [0.6, 0.3]
    assert first.confidence == pytest.approx(0.9)
    assert connection_state.link_for(logic, model) is first


def test_links_are_keyed_by_both_instances(connection_state: ConnectionState) -> None:
    logic = _recommended("Logic")
    store = _recommended("Store", "Database")
    logic_model = make_model_instance("LogicComponent")
    store_model = make_model_instance("Store")

    connection_state.add_to_links(logic, logic_model, 0.8, claimant="forward")
    connection_state.add_to_links(store, store_model, 0.8, claimant="forward")
    connection_state.add_to_links(store, logic_model, 0.2, claimant="backward")

    assert len(connection_state) == 3
    linked = connection_state.links_for_model_instance(logic_model)
    assert {link.recommended_instance.name for link in linked} == {"Logic", "Store"}
    assert len(connection_state.links_for_recommended_instance(store)) == 2
    assert connection_state.link_for(logic, store_model) is None


def test_invalid_probability_is_rejected(connection_state: ConnectionState) -> None:
    with pytest.raises(ValueError, match="probability"):
        connection_state.add_to_links(
            _recommended("Logic"), make_model_instance("Logic"), 1.2, claimant="forward"
        )

    assert len(connection_state) == 0


def test_accumulation_is_deterministic_across_runs() -> None:
    logic = _recommended("Logic")
    store = _recommended("Store", "Database")
    models = (make_model_instance("LogicComponent"), make_model_instance("Store"))
    proposals = [
        (logic, models[0], 0.6, "forward"),
        (store, models[1], 0.8, "forward"),
        (logic, models[0], 0.8, "backward"),
        (store, models[0], 0.1, "backward"),
    ]

    def run() -> list[tuple[str, str, float, tuple[str, ...]]]:
        state = ConnectionState()
        for recommended, model, probability, claimant in proposals:
            state.add_to_links(recommended, model, probability, claimant=claimant)
        return [
            (
                link.recommended_instance.name,
                link.model_instance.identifier,
                link.confidence,
                link.claimants,
            )
            for link in state.links
        ]

    assert run() == run()


def test_states_are_kept_per_metamodel() -> None:
    states = ConnectionStates.build()
    code_model = make_model_instance("Parser", "Class", metamodel=Metamodel.CODE)

    states.state_for(Metamodel.CODE).add_to_links(
        _recommended("Parser", "Class"), code_model, 0.8, claimant="forward"
    )

    assert len(states.state_for(Metamodel.CODE)) == 1
    assert len(states.state_for(Metamodel.ARCHITECTURE)) == 0
