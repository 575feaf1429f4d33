"""Validation rules on request schemas."""
import pytest
from pydantic import ValidationError

from overload.core.enums import ProgressionScheme, StartingWeightType
from overload.schemas.exercise import ExerciseCreate, ExerciseUpdate
from overload.schemas.workout_day import ProgressionSettings, WorkoutDayCreate
from overload.schemas.workout_log import WorkoutLogCreate


@pytest.mark.unit
class TestExerciseSchemas:
    def test_defaults(self):
        exercise = ExerciseCreate(name="Bench Press", body_part="Chest")
        assert exercise.sets_range == (3, 5)
        assert exercise.reps_range == (8, 12)
        assert exercise.weight_increment == 2.5
        assert exercise.rest_timer == 60
        assert exercise.starting_weight_type is StartingWeightType.BARBELL

    def test_inverted_sets_range(self):
        with pytest.raises(ValidationError, match="Minimum sets"):
            ExerciseCreate(name="Squat", body_part="Legs", sets_range=(5, 3))

    def test_reps_range_starts_at_one(self):
        with pytest.raises(ValidationError):
            ExerciseCreate(name="Squat", body_part="Legs", reps_range=(0, 5))

    def test_ranges_have_upper_bounds(self):
        with pytest.raises(ValidationError, match="Maximum sets must be at most 10"):
            ExerciseCreate(name="Squat", body_part="Legs", sets_range=(3, 11))
        with pytest.raises(ValidationError, match="Maximum reps must be at most 30"):
            ExerciseUpdate(reps_range=(8, 31))

    def test_increment_minimum(self):
        with pytest.raises(ValidationError):
            ExerciseCreate(name="Curl", body_part="Arms", weight_increment=0.25)

    def test_custom_equipment_needs_weight(self):
        with pytest.raises(ValidationError, match="Custom starting weight"):
            ExerciseCreate(name="Sled", body_part="Legs", starting_weight_type="Custom")

    def test_custom_equipment_with_weight(self):
        exercise = ExerciseCreate(
            name="Sled", body_part="Legs", starting_weight_type="Custom", custom_starting_weight=40
        )
        assert exercise.custom_starting_weight == 40

    def test_partial_update_checks_range(self):
        assert ExerciseUpdate(rest_timer=90).model_dump(exclude_unset=True) == {"rest_timer": 90}
        with pytest.raises(ValidationError):
            ExerciseUpdate(reps_range=(12, 8))


@pytest.mark.unit
class TestWorkoutLogSchema:
    def test_valid_log(self):
        log = WorkoutLogCreate(exercise="Bench Press", weight=100, target_reps=8, completed_sets=3, failed_rep=4)
        assert log.date is None
        assert not log.automatic

    def test_failed_rep_must_be_below_target(self):
        with pytest.raises(ValidationError, match="Failed rep"):
            WorkoutLogCreate(exercise="Bench Press", weight=100, target_reps=8, completed_sets=3, failed_rep=8)

    def test_target_reps_positive(self):
        with pytest.raises(ValidationError):
            WorkoutLogCreate(exercise="Bench Press", weight=100, target_reps=0, completed_sets=3)

    def test_automatic_log_needs_three_sets(self):
        with pytest.raises(ValidationError, match="at least 3 sets"):
            WorkoutLogCreate(exercise="Row", weight=60, target_reps=10, completed_sets=2, automatic=True)

    def test_manual_log_allows_fewer_sets(self):
        assert WorkoutLogCreate(exercise="Row", weight=60, target_reps=10, completed_sets=1).completed_sets == 1


@pytest.mark.unit
class TestWorkoutDaySchemas:
    def test_needs_an_exercise(self):
        with pytest.raises(ValidationError):
            WorkoutDayCreate(day_name="Push", exercises=[])

    def test_scheme_settings_must_match_type(self):
        with pytest.raises(ValidationError, match="must match the selected type"):
            ProgressionSettings(
                type=ProgressionScheme.REVERSE_PYRAMID,
                straight_sets={"target_sets": 3, "target_reps": 8, "weight": 60},
            )

    def test_day_with_schemes(self):
        day = WorkoutDayCreate(
            day_name="Push",
            exercises=["Bench Press", "Overhead Press"],
            progression_schemes={
                "Bench Press": {
                    "type": "REVERSE_PYRAMID",
                    "reverse_pyramid": {
                        "top_set_weight": 100,
                        "top_set_reps": 5,
                        "drop_percentage": 0.1,
                        "backoff_sets": 2,
                    },
                },
            },
        )
        assert day.progression_schemes["Bench Press"].reverse_pyramid.backoff_sets == 2

    def test_drop_percentage_bounds(self):
        with pytest.raises(ValidationError):
            ProgressionSettings(
                type="RPT_INDEPENDENT",
                rpt_independent={"top_set_rep_range": (4, 6), "drop_percentage": 0.3, "backoff_sets": []},
            )
