"""Incremental, deduplicating store of recommended instances."""

from __future__ import annotations

from .state import RecommendationInvariantError, RecommendationState, RecommendationStates

__all__ = ["RecommendationInvariantError", "RecommendationState", "RecommendationStates"]
