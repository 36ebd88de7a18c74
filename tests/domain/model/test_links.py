from __future__ import annotations

import pytest

from doclink.domain.model import InstanceLink, LinkEvidence, RecommendedInstance
from tests.helpers.mentions import make_model_instance


def _link() -> InstanceLink:
    return InstanceLink(
        recommended_instance=RecommendedInstance.create(
            name="Logic", type="Component", claimant="test", probability=1.0
        ),
        model_instance=make_model_instance("LogicComponent"),
    )


def test_link_confidence_sums_evidence_and_caps_at_one() -> None:
    link = _link()
    assert link.confidence == 0.0

    link.add_evidence(LinkEvidence(claimant="forward", probability=0.3))
    assert link.confidence == pytest.approx(0.3)

    link.add_evidence(LinkEvidence(claimant="backward", probability=0.5))
    link.add_evidence(LinkEvidence(claimant="forward", probability=0.6))

    assert link.confidence == 1.0
    assert [entry.probability for entry in link.evidence] == [0.3, 0.5, 0.6]
    assert link.claimants == ("forward", "backward")


@pytest.mark.parametrize("probability", [-0.01, 1.01])
def test_link_evidence_rejects_probabilities_outside_unit_interval(probability: float) -> None:
    with pytest.raises(ValueError, match="probability"):
        LinkEvidence(claimant="forward", probability=probability)
