"""Unit tests for next-workout planning and the equipment minimum-weight lookup."""
from decimal import Decimal
from types import SimpleNamespace

import pytest

from overload.core.config import Settings
from overload.core.enums import OneRMSource, StartingWeightType, Trend
from overload.core.errors import DomainError
from overload.services.equipment import resolve_minimum_weight
from overload.services.estimation import ExerciseParameters
from overload.services.planning import exercise_parameters, plan_next_workout

WEIGHTS = {"Barbell": 20.0, "EZ Bar": 12.0, "Dumbbell": 2.5, "Smith Machine": 15.0}

PARAMS = ExerciseParameters(sets_range=(3, 5), reps_range=(8, 12), weight_increment=2.5, minimum_weight=20)


def _logs(*values):
    return [SimpleNamespace(estimated_one_rm=Decimal(str(v))) for v in values]


@pytest.mark.unit
class TestResolveMinimumWeight:
    @pytest.mark.parametrize(
        "kind,expected",
        [
            (StartingWeightType.BARBELL, 20.0),
            (StartingWeightType.EZ_BAR, 12.0),
            ("Dumbbell", 2.5),
            ("Smith Machine", 15.0),
        ],
    )
    def test_equipment_lookup(self, kind, expected):
        assert resolve_minimum_weight(kind, None, WEIGHTS) == expected

    def test_custom_uses_exercise_value(self):
        assert resolve_minimum_weight(StartingWeightType.CUSTOM, 7.5, WEIGHTS) == 7.5

    def test_custom_without_value_has_no_floor(self):
        assert resolve_minimum_weight("Custom", None, WEIGHTS) == 0.0

    def test_mapping_is_injected(self):
        assert resolve_minimum_weight("Barbell", None, {"Barbell": 15.0}) == 15.0

    def test_unknown_equipment(self):
        with pytest.raises(DomainError):
            resolve_minimum_weight("Kettlebell", None, WEIGHTS)

    def test_equipment_missing_from_mapping(self):
        with pytest.raises(DomainError):
            resolve_minimum_weight("EZ Bar", None, {"Barbell": 20.0})

    def test_default_settings_mapping(self):
        assert Settings().equipment_minimum_weights == WEIGHTS


@pytest.mark.unit
class TestExerciseParameters:
    def test_from_stored_row(self):
        row = SimpleNamespace(
            sets_range=[3, 5],
            reps_range=[6, 10],
            weight_increment=Decimal("1.25"),
            starting_weight_type=StartingWeightType.DUMBBELL,
            custom_starting_weight=None,
        )
        assert exercise_parameters(row, WEIGHTS) == ExerciseParameters(
            sets_range=(3, 5), reps_range=(6, 10), weight_increment=1.25, minimum_weight=2.5
        )

    def test_custom_weight_row(self):
        row = SimpleNamespace(
            sets_range=[2, 4],
            reps_range=[10, 15],
            weight_increment=Decimal("5"),
            starting_weight_type=StartingWeightType.CUSTOM,
            custom_starting_weight=Decimal("30.00"),
        )
        assert exercise_parameters(row, WEIGHTS).minimum_weight == 30.0


@pytest.mark.unit
class TestPlanNextWorkout:
    def test_no_history_falls_back_to_default(self):
        plan = plan_next_workout(PARAMS, [], default_one_rm=20)
        assert plan.source is OneRMSource.DEFAULT
        assert plan.current_one_rm == 20
        assert plan.trend is None
        # An empty bar already beats a 1RM of 20 by more than 5%
        assert plan.suggestions == []

    def test_default_is_caller_supplied(self):
        plan = plan_next_workout(PARAMS, [], default_one_rm=100)
        assert plan.current_one_rm == 100
        assert plan.suggestions

    def test_history_projects_trend(self):
        plan = plan_next_workout(PARAMS, _logs(50, 55, 60), default_one_rm=20)
        assert plan.source is OneRMSource.HISTORY
        assert plan.trend.trend is Trend.UP
        assert plan.current_one_rm == pytest.approx(65)
        assert all(65 < s.estimated_one_rm <= 65 * 1.05 for s in plan.suggestions)

    def test_single_log_uses_its_value(self):
        plan = plan_next_workout(PARAMS, _logs(80), default_one_rm=20)
        assert plan.source is OneRMSource.HISTORY
        assert plan.trend.trend is Trend.STABLE
        assert plan.current_one_rm == 80

    def test_custom_one_rm_wins(self):
        plan = plan_next_workout(PARAMS, _logs(50, 55, 60), default_one_rm=20, custom_one_rm=100)
        assert plan.source is OneRMSource.CUSTOM
        assert plan.current_one_rm == 100
        assert plan.trend is not None
        assert plan.suggestions[0].weight == 70.0

    def test_only_recent_history_counts(self):
        plan = plan_next_workout(PARAMS, _logs(10, 20, 30, 40, 50, 60, 70), default_one_rm=20, history_size=5)
        # Regression over 30..70 projects 80
        assert plan.current_one_rm == pytest.approx(80)

    def test_limit_passed_through(self):
        plan = plan_next_workout(PARAMS, [], default_one_rm=100, limit=2)
        assert len(plan.suggestions) == 2

    def test_minimum_weight_reported(self):
        assert plan_next_workout(PARAMS, [], default_one_rm=100).minimum_weight == 20
