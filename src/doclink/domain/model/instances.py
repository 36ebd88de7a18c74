"""Read-only view of the structural model's elements."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .enums import Metamodel

_SEPARATORS = re.compile(r"[\s\-_./:]+")
_CAMEL_CASE_PARTS = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|\d+")


@dataclass(frozen=True, slots=True, kw_only=True)
class ModelInstance:
    name: str
    type: str
    identifier: str
    metamodel: Metamodel = Metamodel.ARCHITECTURE

    @property
    def name_parts(self) -> tuple[str, ...]:
        return split_name_parts(self.name)


def split_name_parts(name: str) -> tuple[str, ...]:
    """Split ``name`` at separators and camel-case boundaries.

    ``"LogicComponent"`` -> ``("Logic", "Component")``,
    ``"html-Parser2"`` -> ``("html", "Parser", "2")``.
    """

    parts: list[str] = []
    for chunk in _SEPARATORS.split(name):
        if chunk:
            parts.extend(_CAMEL_CASE_PARTS.findall(chunk) or [chunk])
    return tuple(parts)
