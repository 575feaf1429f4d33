"""Shared enums for models and API."""

from enum import Enum


class StartingWeightType(str, Enum):
    """Equipment an exercise is loaded on; decides the minimum weight."""

    BARBELL = "Barbell"
    EZ_BAR = "EZ Bar"
    DUMBBELL = "Dumbbell"
    SMITH_MACHINE = "Smith Machine"
    CUSTOM = "Custom"  # Uses custom_starting_weight


class Trend(str, Enum):
    """Direction of the 1RM regression line."""

    UP = "up"
    DOWN = "down"
    STABLE = "stable"


class ProgressionScheme(str, Enum):
    """Per-exercise progression scheme stored on a workout day."""

    STRAIGHT_SETS = "STRAIGHT_SETS"
    REVERSE_PYRAMID = "REVERSE_PYRAMID"
    DOUBLE_PROGRESSION = "DOUBLE_PROGRESSION"
    RPT_INDEPENDENT = "RPT_INDEPENDENT"
    RETARDED_VOLUME = "RETARDED_VOLUME"


class OneRMSource(str, Enum):
    """Where the 1RM used for a suggestion came from."""

    CUSTOM = "custom"  # Entered by the user
    HISTORY = "history"  # Projected from the trend of logged sets
    DEFAULT = "default"  # No history, configured fallback
