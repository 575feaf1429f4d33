"""Minimum loadable weight per equipment kind."""

from __future__ import annotations

from collections.abc import Mapping

from overload.core.enums import StartingWeightType
from overload.core.errors import DomainError


def resolve_minimum_weight(
    starting_weight_type: StartingWeightType | str,
    custom_starting_weight: float | None,
    weights: Mapping[str, float],
) -> float:
    """
    Floor for suggested weights. Custom equipment uses the exercise's own value
    (0 when unset); everything else is looked up in the configured mapping.
    """
    try:
        kind = StartingWeightType(starting_weight_type)
    except ValueError as e:
        raise DomainError(f"Unknown equipment '{starting_weight_type}'") from e
    if kind is StartingWeightType.CUSTOM:
        return float(custom_starting_weight or 0)
    if kind.value not in weights:
        raise DomainError(f"No minimum weight configured for equipment '{kind.value}'")
    return float(weights[kind.value])
