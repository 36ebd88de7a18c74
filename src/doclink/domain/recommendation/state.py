"""Deduplicating store of recommended instances.

Agents submit (name, type, mentions) proposals in any order; the store folds
them into a canonical set. The merge order of checks matters and is:

1. structurally identical submission -> no-op
2. bucket existing instances by case-insensitive name
3. narrow the bucket to the same case-insensitive type
4. same name and type -> extend the first match
5. unseen name -> insert
6. otherwise extend the first bucket member whose type is similar, or whose
   type is blank while the submission's is not (first match, not best match);
   a blank-typed member takes over the submission's type
7. no match: insert when the submission has a type, else drop it

Step 6 depends on what was inserted before, so the final set can differ with
agent order when types are ambiguous. Every other step is order-insensitive.

All mutation and lookups happen behind one re-entrant lock per store.
"""

from __future__ import annotations

import bisect
import itertools
import logging
import threading
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from doclink.domain.model import Metamodel, RecommendedInstance

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator
    from uuid import UUID

    from doclink.domain.model import NounMapping
    from doclink.domain.similarity import SimilarityAggregator

log = logging.getLogger(__name__)


class RecommendationInvariantError(AssertionError):
    """Raised when the store discovers a state its merge rules cannot produce."""


@dataclass(slots=True)
class RecommendationState:
    """Recommended instances of one run, in stable (name, type, insertion) order."""

    similarity: SimilarityAggregator
    _instances: list[RecommendedInstance] = field(
        default_factory=list["RecommendedInstance"], repr=False
    )
    _sequence: dict[UUID, int] = field(default_factory=dict["UUID", int], repr=False)
    _counter: Iterator[int] = field(default_factory=itertools.count, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    @property
    def recommended_instances(self) -> tuple[RecommendedInstance, ...]:
        with self._lock:
            return tuple(self._instances)

    def __len__(self) -> int:
        with self._lock:
            return len(self._instances)

    def __iter__(self) -> Iterator[RecommendedInstance]:
        return iter(self.recommended_instances)

    def add_recommended_instance(
        self,
        name: str,
        type: str = "",  # noqa: A002
        *,
        claimant: str,
        probability: float,
        name_mappings: Iterable[NounMapping] = (),
        type_mappings: Iterable[NounMapping] = (),
    ) -> RecommendedInstance | None:
        """Merge a proposal into the store.

        Returns the stored instance that now carries the proposal's evidence,
        or ``None`` if the proposal was rejected (blank name and type) or
        dropped (blank type, name already known).
        """

        if not name.strip() and not type.strip():
            log.debug("Rejecting recommended instance without name and type from %s", claimant)
            return None

        candidate = RecommendedInstance.create(
            name=name,
            type=type,
            claimant=claimant,
            probability=probability,
            name_mappings=name_mappings,
            type_mappings=type_mappings,
        )
        with self._lock:
            return self._merge(candidate)

    def recommended_instances_by_name(self, name: str) -> tuple[RecommendedInstance, ...]:
        folded = name.casefold()
        return self._select(lambda instance: instance.name.casefold() == folded)

    def recommended_instances_by_similar_name(self, name: str) -> tuple[RecommendedInstance, ...]:
        return self._select(lambda instance: self.similarity.are_similar(instance.name, name))

    def recommended_instances_by_type(
        self,
        type: str,  # noqa: A002
    ) -> tuple[RecommendedInstance, ...]:
        folded = type.casefold()
        return self._select(lambda instance: instance.type.casefold() == folded)

    def recommended_instances_by_similar_type(
        self,
        type: str,  # noqa: A002
    ) -> tuple[RecommendedInstance, ...]:
        return self._select(lambda instance: self.similarity.are_similar(instance.type, type))

    def recommended_instances_by_type_mapping(
        self, mapping: NounMapping
    ) -> tuple[RecommendedInstance, ...]:
        return self._select(lambda instance: mapping in instance.type_mappings)

    def recommended_instances_by_mapping(
        self, mapping: NounMapping
    ) -> tuple[RecommendedInstance, ...]:
        return self._select(lambda instance: instance.contains_mapping(mapping))

    def validate_invariants(self) -> None:
        with self._lock:
            keys = [self._sort_key(instance) for instance in self._instances]
            if keys != sorted(keys):
                raise RecommendationInvariantError("Recommended instances are out of order")
            seen: set[tuple[str, str]] = set()
            for instance in self._instances:
                identity = (instance.name.casefold(), instance.type.casefold())
                if identity in seen:
                    raise RecommendationInvariantError(
                        f"Duplicate recommended instance {instance.name!r}/{instance.type!r}"
                    )
                seen.add(identity)

    def _merge(self, candidate: RecommendedInstance) -> RecommendedInstance | None:
        for existing in self._instances:
            if existing.is_structurally_identical(candidate):
                log.debug("Ignoring identical recommended instance %r", candidate.name)
                return existing

        name = candidate.name.casefold()
        with_exact_name = [r for r in self._instances if r.name.casefold() == name]
        kind = candidate.type.casefold()
        with_exact_name_and_type = [r for r in with_exact_name if r.type.casefold() == kind]

        if len(with_exact_name_and_type) > 1:
            raise RecommendationInvariantError(
                f"{len(with_exact_name_and_type)} stored instances share "
                f"name {candidate.name!r} and type {candidate.type!r}"
            )
        if with_exact_name_and_type:
            return self._extend(with_exact_name_and_type[0], candidate)

        if not with_exact_name:
            return self._insert(candidate)

        for existing in with_exact_name:
            if self._types_compatible(existing, candidate):
                if candidate.has_type and not existing.has_type:
                    self._retype(existing, candidate.type)
                return self._extend(existing, candidate)

        if candidate.has_type:
            return self._insert(candidate)

        log.debug("Dropping type-less duplicate of %r from %s", candidate.name, candidate.claimant)
        return None

    def _types_compatible(
        self, existing: RecommendedInstance, candidate: RecommendedInstance
    ) -> bool:
        if self.similarity.are_similar(existing.type, candidate.type):
            return True
        return not existing.has_type and candidate.has_type

    def _extend(
        self, existing: RecommendedInstance, candidate: RecommendedInstance
    ) -> RecommendedInstance:
        log.debug(
            "Merging %r/%r from %s into %r/%r",
            candidate.name,
            candidate.type,
            candidate.claimant,
            existing.name,
            existing.type,
        )
        existing.add_mappings(candidate.name_mappings, candidate.type_mappings)
        return existing

    def _retype(self, existing: RecommendedInstance, type: str) -> None:  # noqa: A002
        self._instances.remove(existing)
        existing.type = type
        bisect.insort(self._instances, existing, key=self._sort_key)
        log.debug("Recommended instance %r now typed %r", existing.name, type)

    def _insert(self, candidate: RecommendedInstance) -> RecommendedInstance:
        self._sequence[candidate.id] = next(self._counter)
        bisect.insort(self._instances, candidate, key=self._sort_key)
        log.debug("Added recommended instance %r/%r", candidate.name, candidate.type)
        return candidate

    def _sort_key(self, instance: RecommendedInstance) -> tuple[str, str, int]:
        return (instance.name, instance.type, self._sequence[instance.id])

    def _select(
        self, predicate: Callable[[RecommendedInstance], bool]
    ) -> tuple[RecommendedInstance, ...]:
        with self._lock:
            return tuple(instance for instance in self._instances if predicate(instance))


@dataclass(slots=True)
class RecommendationStates:
    """One recommendation state per metamodel."""

    states: dict[Metamodel, RecommendationState]

    @classmethod
    def build(cls, similarity: SimilarityAggregator) -> RecommendationStates:
        return cls(states={metamodel: RecommendationState(similarity) for metamodel in Metamodel})

    def state_for(self, metamodel: Metamodel) -> RecommendationState:
        return self.states[metamodel]
