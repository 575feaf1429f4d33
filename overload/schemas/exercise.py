"""Exercise schemas."""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from overload.core.constants import MAX_REPS, MAX_SETS, MIN_WEIGHT_INCREMENT
from overload.core.enums import StartingWeightType

# [min, max]; both >= 1
IntRange = tuple[int, int]


def _check_range(value: IntRange, label: str, upper: int) -> IntRange:
    low, high = value
    if low < 1 or high < 1:
        raise ValueError(f"Minimum and maximum {label} must be at least 1")
    if high > upper:
        raise ValueError(f"Maximum {label} must be at most {upper}")
    if low > high:
        raise ValueError(f"Minimum {label} must be less than or equal to maximum {label}")
    return value


class ExerciseBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    body_part: str = Field(..., min_length=1, max_length=100)
    sets_range: IntRange = (3, 5)
    reps_range: IntRange = (8, 12)
    weight_increment: float = Field(default=2.5, ge=MIN_WEIGHT_INCREMENT)
    rest_timer: int = Field(default=60, ge=0, description="Rest between sets in seconds")
    starting_weight_type: StartingWeightType = StartingWeightType.BARBELL
    custom_starting_weight: float | None = Field(None, gt=0)

    @field_validator("sets_range")
    @classmethod
    def _sets_range(cls, v: IntRange) -> IntRange:
        return _check_range(v, "sets", MAX_SETS)

    @field_validator("reps_range")
    @classmethod
    def _reps_range(cls, v: IntRange) -> IntRange:
        return _check_range(v, "reps", MAX_REPS)


class ExerciseCreate(ExerciseBase):
    @model_validator(mode="after")
    def _custom_weight_required(self) -> "ExerciseCreate":
        if self.starting_weight_type is StartingWeightType.CUSTOM and self.custom_starting_weight is None:
            raise ValueError("Custom starting weight is required when using Custom type")
        return self


class ExerciseUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    body_part: str | None = Field(None, min_length=1, max_length=100)
    sets_range: IntRange | None = None
    reps_range: IntRange | None = None
    weight_increment: float | None = Field(None, ge=MIN_WEIGHT_INCREMENT)
    rest_timer: int | None = Field(None, ge=0)
    starting_weight_type: StartingWeightType | None = None
    custom_starting_weight: float | None = Field(None, gt=0)

    @field_validator("sets_range")
    @classmethod
    def _sets_range(cls, v: IntRange | None) -> IntRange | None:
        return _check_range(v, "sets", MAX_SETS) if v is not None else v

    @field_validator("reps_range")
    @classmethod
    def _reps_range(cls, v: IntRange | None) -> IntRange | None:
        return _check_range(v, "reps", MAX_REPS) if v is not None else v


class ExerciseRead(ExerciseBase):
    model_config = ConfigDict(from_attributes=True)
    id: int
    user_id: int
