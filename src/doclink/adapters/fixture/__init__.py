"""JSON fixtures of mentions and model instances for the developer CLI."""

from __future__ import annotations

from .schema import FixturePayload, MentionPayload, ModelInstancePayload, WordPayload
from .translator import Fixture, load_fixture, translate_fixture

__all__ = [
    "Fixture",
    "FixturePayload",
    "MentionPayload",
    "ModelInstancePayload",
    "WordPayload",
    "load_fixture",
    "translate_fixture",
]
