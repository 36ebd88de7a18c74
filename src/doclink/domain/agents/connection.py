"""Agent that links recommended instances to model instances."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from doclink.domain.connection import (
    is_recommended_instance_similar_to_model_instance,
    most_likely_recommended_instances,
)

if TYPE_CHECKING:
    from .contracts import AgentContext

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class InstanceConnectionAgent:
    """Link recommended instances to model instances in two passes.

    Forward: for every model instance, the best-matching recommended instances
    by name are linked; with ``with_type_probability`` when they carry type
    mentions, else ``without_type_probability``.

    Backward: every recommended instance whose name (or ``"name type"``) is
    similar to a model instance's name or name parts is linked with
    ``with_type_probability``. Links found by both passes accumulate evidence.
    """

    with_type_probability: float = 0.8
    without_type_probability: float = 0.6
    name: str = "instance_connection"

    def run(self, context: AgentContext) -> None:
        forward = self.connect_forward(context)
        backward = self.connect_backward(context)
        log.info(
            "%s added %d forward and %d backward link proposals for %s",
            self.name,
            forward,
            backward,
            context.metamodel,
        )

    def connect_forward(self, context: AgentContext) -> int:
        recommended = context.recommendations.recommended_instances
        proposals = 0
        for model_instance in context.model_instances:
            for candidate in most_likely_recommended_instances(
                model_instance, recommended, context.similarity
            ):
                probability = (
                    self.with_type_probability
                    if candidate.type_mappings
                    else self.without_type_probability
                )
                context.connections.add_to_links(
                    candidate, model_instance, probability, claimant=self.name
                )
                proposals += 1
        return proposals

    def connect_backward(self, context: AgentContext) -> int:
        proposals = 0
        for candidate in context.recommendations.recommended_instances:
            for model_instance in context.model_instances:
                if not is_recommended_instance_similar_to_model_instance(
                    candidate, model_instance, context.similarity
                ):
                    continue
                context.connections.add_to_links(
                    candidate, model_instance, self.with_type_probability, claimant=self.name
                )
                proposals += 1
        return proposals
