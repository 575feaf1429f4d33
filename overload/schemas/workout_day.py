"""Workout day and progression scheme schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from overload.core.enums import ProgressionScheme

# ── Progression scheme settings ──────────────────────────────────────────


class StraightSetsSettings(BaseModel):
    target_sets: int = Field(..., gt=0)
    target_reps: int = Field(..., gt=0)
    weight: float = Field(..., gt=0)


class ReversePyramidSettings(BaseModel):
    top_set_weight: float = Field(..., gt=0)
    top_set_reps: int = Field(..., gt=0)
    drop_percentage: float = Field(..., ge=0.05, le=0.15, description="e.g. 0.10 = 10% per back-off set")
    backoff_sets: int = Field(..., gt=0)


class DoubleProgressionSettings(BaseModel):
    rep_range_min: int = Field(..., gt=0)
    rep_range_max: int = Field(..., gt=0)
    target_sets: int = Field(..., gt=0)
    current_weight: float = Field(..., gt=0)


class BackoffSet(BaseModel):
    rep_range: tuple[int, int]
    weight: float | None = None


class RptIndependentSettings(BaseModel):
    top_set_rep_range: tuple[int, int]
    drop_percentage: float = Field(..., ge=0.05, le=0.15)
    backoff_sets: list[BackoffSet]


class SetVariation(BaseModel):
    reps: int = Field(..., gt=0)
    weight_multiplier: float = Field(..., gt=0, description="Fraction of base weight")
    is_optional: bool = False


class FailureHandling(BaseModel):
    min_reps_before_failure: int = Field(..., gt=0)
    deload_percentage: float = Field(..., ge=0.05, le=0.20)


class RetardedVolumeSettings(BaseModel):
    base_weight: float = Field(..., gt=0)
    target_sets: int = Field(..., gt=0)
    set_variations: list[SetVariation] = Field(..., min_length=1)
    failure_handling: FailureHandling


# Scheme type -> attribute holding its settings block
_SCHEME_FIELDS = {
    ProgressionScheme.STRAIGHT_SETS: "straight_sets",
    ProgressionScheme.REVERSE_PYRAMID: "reverse_pyramid",
    ProgressionScheme.DOUBLE_PROGRESSION: "double_progression",
    ProgressionScheme.RPT_INDEPENDENT: "rpt_independent",
    ProgressionScheme.RETARDED_VOLUME: "retarded_volume",
}


class ProgressionSettings(BaseModel):
    """One scheme per exercise; the block matching `type` must be present."""

    type: ProgressionScheme
    straight_sets: StraightSetsSettings | None = None
    reverse_pyramid: ReversePyramidSettings | None = None
    double_progression: DoubleProgressionSettings | None = None
    rpt_independent: RptIndependentSettings | None = None
    retarded_volume: RetardedVolumeSettings | None = None

    @model_validator(mode="after")
    def _settings_match_type(self) -> ProgressionSettings:
        if getattr(self, _SCHEME_FIELDS[self.type]) is None:
            raise ValueError("Progression scheme settings must match the selected type")
        return self


# ── Workout days ─────────────────────────────────────────────────────────


class WorkoutDayBase(BaseModel):
    day_name: str = Field(..., min_length=1, max_length=255)
    exercises: list[str] = Field(..., min_length=1, description="Exercise names in order")
    progression_schemes: dict[str, ProgressionSettings] = Field(default_factory=dict)


class WorkoutDayCreate(WorkoutDayBase):
    pass


class WorkoutDayUpdate(BaseModel):
    day_name: str | None = Field(None, min_length=1, max_length=255)
    exercises: list[str] | None = Field(None, min_length=1)
    display_order: int | None = Field(None, ge=0)
    last_completed: datetime | None = None
    progression_schemes: dict[str, ProgressionSettings] | None = None


class WorkoutDayRead(WorkoutDayBase):
    model_config = ConfigDict(from_attributes=True)
    id: int
    user_id: int
    display_order: int
    last_completed: datetime | None = None


class WorkoutDayOrder(BaseModel):
    id: int
    display_order: int = Field(..., ge=0)


class WorkoutDayReorder(BaseModel):
    workouts: list[WorkoutDayOrder] = Field(..., min_length=1)
