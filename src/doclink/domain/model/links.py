"""Trace links between recommended instances and model instances."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .instances import ModelInstance
    from .recommendation import RecommendedInstance

MAX_CONFIDENCE = 1.0


@dataclass(frozen=True, slots=True)
class LinkEvidence:
    """One proposal for a link, as made by one claimant."""

    claimant: str
    probability: float

    def __post_init__(self) -> None:
        if not 0.0 <= self.probability <= 1.0:
            raise ValueError(f"Link probability must lie in [0, 1]: {self.probability}")


@dataclass(eq=False, kw_only=True)
class InstanceLink:
    """Accumulated evidence that a recommended instance denotes a model instance.

    Every proposal is kept. ``confidence`` is the evidence sum capped at 1.0.
    """

    recommended_instance: RecommendedInstance
    model_instance: ModelInstance
    _evidence: list[LinkEvidence] = field(default_factory=list["LinkEvidence"], repr=False)

    @property
    def evidence(self) -> tuple[LinkEvidence, ...]:
        return tuple(self._evidence)

    @property
    def confidence(self) -> float:
        return min(MAX_CONFIDENCE, sum(entry.probability for entry in self._evidence))

    @property
    def claimants(self) -> tuple[str, ...]:
        return tuple(dict.fromkeys(entry.claimant for entry in self._evidence))

    def add_evidence(self, evidence: LinkEvidence) -> None:
        self._evidence.append(evidence)
