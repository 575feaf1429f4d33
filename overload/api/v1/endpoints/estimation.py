"""Future workout calculator: the estimation engine without any stored data.

DomainError from the engine (bad reps, inverted ranges) is turned into a 400
by the handler registered in overload.main. The routes are plain functions so
the CPU-bound search runs in the threadpool instead of on the event loop.
"""

from fastapi import APIRouter

from overload.schemas.estimation import (
    OneRepMaxRequest,
    OneRepMaxResponse,
    SuggestionRequest,
    TrendRead,
    TrendRequest,
    WorkoutSuggestionRead,
)
from overload.services.estimation import (
    ExerciseParameters,
    compute_trend,
    estimate_one_rep_max,
    suggest_next_workouts,
)

router = APIRouter()


@router.post("/one-rep-max", response_model=OneRepMaxResponse)
def one_rep_max(payload: OneRepMaxRequest):
    """Estimated 1RM for completed sets, interpolated when an extra set failed."""
    estimated = estimate_one_rep_max(
        payload.weight,
        payload.target_reps,
        payload.completed_sets,
        payload.failed_rep,
    )
    return OneRepMaxResponse(estimated_one_rm=estimated)


@router.post("/trend", response_model=TrendRead)
def one_rep_max_trend(payload: TrendRequest):
    """Linear trend over the given estimates (oldest first) and the projected next 1RM."""
    return TrendRead.model_validate(compute_trend([p.estimated_one_rm for p in payload.recent_estimates]))


@router.post("/suggestions", response_model=list[WorkoutSuggestionRead])
def workout_suggestions(payload: SuggestionRequest):
    """Up to `limit` combinations that raise the 1RM by at most 5%, smallest first."""
    params = ExerciseParameters(
        sets_range=payload.sets_range,
        reps_range=payload.reps_range,
        weight_increment=payload.weight_increment,
        minimum_weight=payload.minimum_weight,
    )
    suggestions = suggest_next_workouts(payload.current_one_rm, params, limit=payload.limit)
    return [WorkoutSuggestionRead.model_validate(s) for s in suggestions]
