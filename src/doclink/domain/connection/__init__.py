"""Linking recommended instances to model instances."""

from __future__ import annotations

from .matching import (
    is_recommended_instance_similar_to_model_instance,
    model_instance_forms,
    most_likely_recommended_instances,
    recommended_instance_compound_forms,
    recommended_instance_name_forms,
)
from .state import ConnectionState, ConnectionStates

__all__ = [
    "ConnectionState",
    "ConnectionStates",
    "is_recommended_instance_similar_to_model_instance",
    "model_instance_forms",
    "most_likely_recommended_instances",
    "recommended_instance_compound_forms",
    "recommended_instance_name_forms",
]
