"""Request/response schemas for the estimation engine and next-workout plans."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator

from overload.core.constants import (
    MAX_ONE_RM_INPUT,
    MAX_REPS,
    MAX_SETS,
    MAX_SUGGESTIONS,
    MIN_WEIGHT_INCREMENT,
)
from overload.core.enums import OneRMSource, Trend


class OneRepMaxRequest(BaseModel):
    weight: float = Field(..., ge=0)
    target_reps: int
    completed_sets: int = Field(..., ge=0)
    failed_rep: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def _failed_rep_below_target(self) -> "OneRepMaxRequest":
        # target_reps <= 0 is left to the engine so it reports invalid_reps
        if self.target_reps > 0 and self.failed_rep >= self.target_reps:
            raise ValueError("Failed rep must be less than target reps")
        return self


class OneRepMaxResponse(BaseModel):
    estimated_one_rm: float


class OneRMPoint(BaseModel):
    estimated_one_rm: float


class TrendRequest(BaseModel):
    recent_estimates: list[OneRMPoint] = Field(
        default_factory=list, description="Oldest first; the last 5 are usually enough"
    )


class TrendRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    trend: Trend
    next_one_rm: float


SetCount = Annotated[int, Field(le=MAX_SETS)]
RepCount = Annotated[int, Field(le=MAX_REPS)]


class SuggestionRequest(BaseModel):
    # Range order is checked by the engine so inverted ranges surface as invalid_range
    current_one_rm: float = Field(..., le=MAX_ONE_RM_INPUT)
    sets_range: tuple[SetCount, SetCount]
    reps_range: tuple[RepCount, RepCount]
    weight_increment: float = Field(..., ge=MIN_WEIGHT_INCREMENT)
    minimum_weight: float = Field(default=0.0, ge=0)
    limit: int = Field(default=MAX_SUGGESTIONS, ge=1, le=MAX_SUGGESTIONS)


class WorkoutSuggestionRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    sets: int
    reps: int
    weight: float
    estimated_one_rm: float


class NextWorkoutRead(BaseModel):
    """Suggestions for an exercise plus where the starting 1RM came from."""

    model_config = ConfigDict(from_attributes=True)

    exercise_id: int
    exercise: str
    current_one_rm: float
    source: OneRMSource
    minimum_weight: float
    trend: TrendRead | None = None
    suggestions: list[WorkoutSuggestionRead] = []
