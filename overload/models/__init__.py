"""ORM models - import all so Base.metadata is complete for migrations."""

from overload.models.exercise import Exercise
from overload.models.user import User
from overload.models.weight_log import WeightLog
from overload.models.workout_day import WorkoutDay
from overload.models.workout_log import WorkoutLog

__all__ = [
    "Exercise",
    "User",
    "WeightLog",
    "WorkoutDay",
    "WorkoutLog",
]
