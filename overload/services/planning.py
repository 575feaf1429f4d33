"""Next-workout planning: pick the 1RM to build on, then ask the engine for suggestions.

The 1RM comes from, in order: a value the user typed in, the trend projection
over the most recent logs, or the configured default when the exercise has no
history yet.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from overload.core.constants import MAX_SUGGESTIONS, ONE_RM_HISTORY_SIZE
from overload.core.enums import OneRMSource
from overload.services.equipment import resolve_minimum_weight
from overload.services.estimation import (
    ExerciseParameters,
    TrendResult,
    WorkoutSuggestion,
    compute_trend,
    suggest_next_workouts,
)


@dataclass(frozen=True)
class NextWorkoutPlan:
    current_one_rm: float
    source: OneRMSource
    minimum_weight: float
    trend: TrendResult | None = None
    suggestions: list[WorkoutSuggestion] = field(default_factory=list)


def exercise_parameters(exercise: Any, equipment_weights: Mapping[str, float]) -> ExerciseParameters:
    """Build engine parameters from a stored exercise row."""
    return ExerciseParameters(
        sets_range=(int(exercise.sets_range[0]), int(exercise.sets_range[1])),
        reps_range=(int(exercise.reps_range[0]), int(exercise.reps_range[1])),
        weight_increment=float(exercise.weight_increment),
        minimum_weight=resolve_minimum_weight(
            exercise.starting_weight_type,
            float(exercise.custom_starting_weight) if exercise.custom_starting_weight is not None else None,
            equipment_weights,
        ),
    )


def plan_next_workout(
    params: ExerciseParameters,
    recent_logs: Sequence[Any],
    *,
    default_one_rm: float,
    custom_one_rm: float | None = None,
    history_size: int = ONE_RM_HISTORY_SIZE,
    limit: int = MAX_SUGGESTIONS,
) -> NextWorkoutPlan:
    """
    recent_logs are oldest first; only the last `history_size` feed the trend.
    A trend is reported whenever history exists, even if custom_one_rm wins.
    """
    history = list(recent_logs)[-history_size:]
    trend = compute_trend(history) if history else None

    if custom_one_rm is not None:
        current, source = float(custom_one_rm), OneRMSource.CUSTOM
    elif trend is not None:
        current, source = trend.next_one_rm, OneRMSource.HISTORY
    else:
        current, source = float(default_one_rm), OneRMSource.DEFAULT

    return NextWorkoutPlan(
        current_one_rm=current,
        source=source,
        minimum_weight=params.minimum_weight,
        trend=trend,
        suggestions=suggest_next_workouts(current, params, limit=limit),
    )
