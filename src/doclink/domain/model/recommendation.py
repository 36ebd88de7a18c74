"""Recommended instances: text-inferred candidates for model elements."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .text import NounMapping


@dataclass(eq=False, kw_only=True)
class RecommendedInstance:
    """Candidate model element with the name and type evidence supporting it.

    Mapping collections behave as insertion-ordered sets and only ever grow.
    Mutation goes through ``RecommendationState``; agents should treat
    instances they receive as read-only.
    """

    name: str
    type: str = ""
    claimant: str
    probability: float
    id: UUID = field(default_factory=uuid4)
    _name_mappings: dict[NounMapping, None] = field(
        default_factory=dict["NounMapping", None], repr=False
    )
    _type_mappings: dict[NounMapping, None] = field(
        default_factory=dict["NounMapping", None], repr=False
    )

    @classmethod
    def create(
        cls,
        *,
        name: str,
        type: str,  # noqa: A002
        claimant: str,
        probability: float,
        name_mappings: Iterable[NounMapping] = (),
        type_mappings: Iterable[NounMapping] = (),
    ) -> RecommendedInstance:
        instance = cls(name=name, type=type, claimant=claimant, probability=probability)
        instance.add_mappings(name_mappings, type_mappings)
        return instance

    @property
    def name_mappings(self) -> tuple[NounMapping, ...]:
        return tuple(self._name_mappings)

    @property
    def type_mappings(self) -> tuple[NounMapping, ...]:
        return tuple(self._type_mappings)

    @property
    def has_type(self) -> bool:
        return bool(self.type.strip())

    def add_mappings(
        self,
        name_mappings: Iterable[NounMapping],
        type_mappings: Iterable[NounMapping],
    ) -> None:
        for mapping in name_mappings:
            self._name_mappings.setdefault(mapping, None)
        for mapping in type_mappings:
            self._type_mappings.setdefault(mapping, None)

    def contains_mapping(self, mapping: NounMapping) -> bool:
        return mapping in self._name_mappings or mapping in self._type_mappings

    def is_structurally_identical(self, other: RecommendedInstance) -> bool:
        """Same literal name and type and the same mapping sets."""

        return (
            self.name == other.name
            and self.type == other.type
            and self._name_mappings.keys() == other._name_mappings.keys()
            and self._type_mappings.keys() == other._type_mappings.keys()
        )
