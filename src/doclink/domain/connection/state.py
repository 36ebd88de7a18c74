"""Accumulating store of trace links.

Links are keyed by (recommended instance, model instance). Proposals for an
existing pair add evidence to the link instead of replacing it.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from doclink.domain.model import InstanceLink, LinkEvidence, Metamodel

if TYPE_CHECKING:
    from uuid import UUID

    from doclink.domain.model import ModelInstance, RecommendedInstance

log = logging.getLogger(__name__)

type LinkKey = tuple[UUID, str]


@dataclass(slots=True)
class ConnectionState:
    _links: dict[LinkKey, InstanceLink] = field(
        default_factory=dict["LinkKey", "InstanceLink"], repr=False
    )
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    @property
    def links(self) -> tuple[InstanceLink, ...]:
        with self._lock:
            return tuple(self._links.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._links)

    def add_to_links(
        self,
        recommended_instance: RecommendedInstance,
        model_instance: ModelInstance,
        probability: float,
        *,
        claimant: str,
    ) -> InstanceLink:
        evidence = LinkEvidence(claimant=claimant, probability=probability)
        key = _key(recommended_instance, model_instance)
        with self._lock:
            link = self._links.get(key)
            if link is None:
                link = InstanceLink(
                    recommended_instance=recommended_instance,
                    model_instance=model_instance,
                )
                self._links[key] = link
            link.add_evidence(evidence)
        log.debug(
            "Link %r -> %s: +%.3f from %s (confidence %.3f)",
            recommended_instance.name,
            model_instance.identifier,
            probability,
            claimant,
            link.confidence,
        )
        return link

    def link_for(
        self, recommended_instance: RecommendedInstance, model_instance: ModelInstance
    ) -> InstanceLink | None:
        with self._lock:
            return self._links.get(_key(recommended_instance, model_instance))

    def links_for_model_instance(self, model_instance: ModelInstance) -> tuple[InstanceLink, ...]:
        with self._lock:
            return tuple(
                link
                for link in self._links.values()
                if link.model_instance.identifier == model_instance.identifier
            )

    def links_for_recommended_instance(
        self, recommended_instance: RecommendedInstance
    ) -> tuple[InstanceLink, ...]:
        with self._lock:
            return tuple(
                link
                for link in self._links.values()
                if link.recommended_instance is recommended_instance
            )


def _key(recommended_instance: RecommendedInstance, model_instance: ModelInstance) -> LinkKey:
    return (recommended_instance.id, model_instance.identifier)


@dataclass(slots=True)
class ConnectionStates:
    """One connection state per metamodel."""

    states: dict[Metamodel, ConnectionState]

    @classmethod
    def build(cls) -> ConnectionStates:
        return cls(states={metamodel: ConnectionState() for metamodel in Metamodel})

    def state_for(self, metamodel: Metamodel) -> ConnectionState:
        return self.states[metamodel]
