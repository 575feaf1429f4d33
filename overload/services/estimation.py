"""Progressive-overload estimation engine.

Three pure functions, no I/O and no shared state:

- estimate_one_rep_max: 1RM from a completed (and optionally failed) set.
  C = weight × (1 + 0.025 × reps) × (1 + 0.025 × (sets − 1)).
  A failed extra set interpolates toward F, the value with one more set
  completed: C + (failed_rep / reps) × (F − C).
- compute_trend: least-squares line over recent 1RM estimates (oldest first),
  projected one session ahead.
- suggest_next_workouts: grid search over weight/sets/reps for combinations
  whose 1RM lands in (current, current × 1.05], smallest increase first.

Callers own every default (fallback 1RM, equipment minimum weight); the
engine only sees numbers.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any

from overload.core.constants import (
    MAX_SUGGESTIONS,
    ONE_RM_PRECISION,
    ONE_RM_STEP,
    SEARCH_WEIGHT_HIGH,
    SEARCH_WEIGHT_LOW,
    SUGGESTION_CEILING,
    TREND_SLOPE_TOLERANCE,
)
from overload.core.enums import Trend
from overload.core.errors import DomainError, InvalidRangeError, InvalidRepsError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SetPerformance:
    """One logged exercise performance."""

    weight: float
    target_reps: int
    completed_sets: int
    failed_rep: int = 0


@dataclass(frozen=True)
class ExerciseParameters:
    """Search constraints for one exercise. minimum_weight comes from the equipment lookup."""

    sets_range: tuple[int, int]
    reps_range: tuple[int, int]
    weight_increment: float
    minimum_weight: float = 0.0


@dataclass(frozen=True)
class WorkoutSuggestion:
    sets: int
    reps: int
    weight: float
    estimated_one_rm: float


@dataclass(frozen=True)
class TrendResult:
    trend: Trend
    next_one_rm: float


# ── 1RM estimate ─────────────────────────────────────────────────────────

def estimate_one_rep_max(
    weight: float,
    target_reps: int,
    completed_sets: int,
    failed_rep: int = 0,
) -> float:
    """
    Estimated 1RM (same unit as weight), rounded to 2 decimals.

    failed_rep > 0 means one more set was attempted and failed after
    failed_rep reps; the estimate is interpolated toward that set.
    """
    if target_reps <= 0:
        raise InvalidRepsError(f"target_reps must be greater than 0, got {target_reps}")
    if weight < 0:
        raise DomainError(f"weight cannot be negative, got {weight}")
    if completed_sets < 0:
        raise DomainError(f"completed_sets cannot be negative, got {completed_sets}")
    if failed_rep < 0:
        raise DomainError(f"failed_rep cannot be negative, got {failed_rep}")

    rep_factor = 1 + ONE_RM_STEP * target_reps
    completed = weight * rep_factor * (1 + ONE_RM_STEP * (completed_sets - 1))
    if failed_rep > 0:
        with_failed_set = weight * rep_factor * (1 + ONE_RM_STEP * completed_sets)
        completed += (failed_rep / target_reps) * (with_failed_set - completed)
    return round(completed, ONE_RM_PRECISION)


def estimate_set(performance: SetPerformance) -> float:
    """estimate_one_rep_max for a SetPerformance record."""
    return estimate_one_rep_max(
        performance.weight,
        performance.target_reps,
        performance.completed_sets,
        performance.failed_rep,
    )


# ── Trend ────────────────────────────────────────────────────────────────

def _estimate_value(item: Any) -> float:
    """Accept a plain number, a mapping or a row with estimated_one_rm."""
    if isinstance(item, (int, float, Decimal)):
        return float(item)
    if isinstance(item, Mapping):
        return float(item["estimated_one_rm"])
    return float(item.estimated_one_rm)


def compute_trend(recent_estimates: Iterable[Any]) -> TrendResult:
    """
    Fit y = m·x + b over x = 0..n-1 and project x = n.

    Fewer than two points gives no slope: stable, with the single value
    (or 0 when empty) as the projection.
    """
    values = [_estimate_value(item) for item in recent_estimates]
    n = len(values)
    if n < 2:
        return TrendResult(trend=Trend.STABLE, next_one_rm=values[0] if values else 0.0)

    sum_x = sum_y = sum_xy = sum_xx = 0.0
    for x, y in enumerate(values):
        sum_x += x
        sum_y += y
        sum_xy += x * y
        sum_xx += x * x

    slope = (n * sum_xy - sum_x * sum_y) / (n * sum_xx - sum_x * sum_x)
    intercept = (sum_y - slope * sum_x) / n
    next_one_rm = round(slope * n + intercept, ONE_RM_PRECISION)

    if slope > TREND_SLOPE_TOLERANCE:
        trend = Trend.UP
    elif slope < -TREND_SLOPE_TOLERANCE:
        trend = Trend.DOWN
    else:
        trend = Trend.STABLE
    return TrendResult(trend=trend, next_one_rm=next_one_rm)


# ── Suggestions ──────────────────────────────────────────────────────────

def _check_range(name: str, bounds: tuple[int, int]) -> tuple[int, int]:
    low, high = int(bounds[0]), int(bounds[1])
    if low > high:
        raise InvalidRangeError(f"{name} minimum ({low}) is greater than maximum ({high})")
    return low, high


def _snap(weight: float, increment: float) -> float:
    """Nearest multiple of increment (halves round up, like Math.round)."""
    return round(math.floor(weight / increment + 0.5) * increment, ONE_RM_PRECISION)


def suggest_next_workouts(
    current_one_rm: float,
    params: ExerciseParameters,
    limit: int = MAX_SUGGESTIONS,
) -> list[WorkoutSuggestion]:
    """
    Combinations whose estimated 1RM is a small step above current_one_rm.

    Weight runs from max(70% of 1RM, minimum_weight) to 130% of 1RM in
    weight_increment steps, sets and reps over their inclusive ranges.
    Accepted: current < estimate <= current × 1.05. Sorted ascending by
    estimate and capped at `limit`. An empty list is a valid answer.
    """
    sets_low, sets_high = _check_range("sets_range", params.sets_range)
    reps_low, reps_high = _check_range("reps_range", params.reps_range)
    if reps_low <= 0:
        raise InvalidRepsError(f"reps_range must start above 0, got {reps_low}")
    if params.weight_increment <= 0:
        raise DomainError(f"weight_increment must be greater than 0, got {params.weight_increment}")

    increment = params.weight_increment
    start = max(current_one_rm * SEARCH_WEIGHT_LOW, params.minimum_weight)
    end = current_one_rm * SEARCH_WEIGHT_HIGH
    ceiling = current_one_rm * SUGGESTION_CEILING

    results: list[WorkoutSuggestion] = []
    seen_weights: set[float] = set()
    step = 0
    while True:
        # Index stepping keeps float error from accumulating over the range
        weight = start + step * increment
        if weight > end:
            break
        step += 1
        snapped = _snap(weight, increment)
        if snapped < params.minimum_weight or snapped in seen_weights:
            continue
        seen_weights.add(snapped)
        for sets in range(sets_low, sets_high + 1):
            for reps in range(reps_low, reps_high + 1):
                estimated = estimate_one_rep_max(snapped, reps, sets, 0)
                if current_one_rm < estimated <= ceiling:
                    results.append(
                        WorkoutSuggestion(
                            sets=sets,
                            reps=reps,
                            weight=snapped,
                            estimated_one_rm=estimated,
                        )
                    )

    results.sort(key=lambda s: s.estimated_one_rm)
    logger.debug(
        "Suggestion search: current_1rm=%s weights=%d accepted=%d returned=%d",
        current_one_rm,
        len(seen_weights),
        len(results),
        min(len(results), limit),
    )
    return results[:limit]
