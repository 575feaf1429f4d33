"""Workout log schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from overload.core.constants import MIN_AUTOMATIC_SETS


class WorkoutLogBase(BaseModel):
    exercise: str = Field(..., min_length=1, max_length=255, description="Exercise name")
    weight: float = Field(..., ge=0)
    target_reps: int = Field(..., gt=0)
    completed_sets: int = Field(..., ge=0)
    failed_rep: int = Field(default=0, ge=0, description="Reps reached on a failed extra set")


class WorkoutLogCreate(WorkoutLogBase):
    date: datetime | None = None  # Defaults to now
    automatic: bool = Field(default=False, description="Logged by the guided workout flow")

    @model_validator(mode="after")
    def _check_set_counts(self) -> "WorkoutLogCreate":
        # failed_rep == target_reps would be a completed set, not a failed one
        if self.failed_rep and self.failed_rep >= self.target_reps:
            raise ValueError("Failed rep must be less than target reps")
        if self.automatic and self.completed_sets < MIN_AUTOMATIC_SETS:
            raise ValueError(f"Automated workouts require at least {MIN_AUTOMATIC_SETS} sets")
        return self


class WorkoutLogRead(WorkoutLogBase):
    model_config = ConfigDict(from_attributes=True)
    id: int
    user_id: int
    date: datetime
    estimated_one_rm: float
