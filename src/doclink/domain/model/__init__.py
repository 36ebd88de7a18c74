"""Domain model for trace link recovery."""

from __future__ import annotations

from .enums import MappingKind, Metamodel, PartOfSpeech, PosPair
from .instances import ModelInstance, split_name_parts
from .links import InstanceLink, LinkEvidence
from .recommendation import RecommendedInstance
from .text import NounMapping, Word, mentions_of_kind

__all__ = [
    "InstanceLink",
    "LinkEvidence",
    "MappingKind",
    "Metamodel",
    "ModelInstance",
    "NounMapping",
    "PartOfSpeech",
    "PosPair",
    "RecommendedInstance",
    "Word",
    "mentions_of_kind",
    "split_name_parts",
]
