"""Per-exercise trend and next-workout suggestions, read from stored logs."""
from decimal import Decimal

import pytest

from overload.core.config import get_settings
from overload.core.enums import StartingWeightType
from overload.models.exercise import Exercise
from overload.models.workout_log import WorkoutLog

pytestmark = pytest.mark.integration

URL = f"{get_settings().api_v1_prefix}/exercises"
USER = {"X-User-Id": "7"}


def _bench():
    return Exercise(
        id=5,
        user_id=7,
        name="Bench Press",
        body_part="Chest",
        sets_range=[3, 5],
        reps_range=[8, 12],
        weight_increment=Decimal("2.50"),
        rest_timer=90,
        starting_weight_type=StartingWeightType.BARBELL,
        custom_starting_weight=None,
    )


def _newest_first(*values):
    """Logs for oldest-first 1RM values, in the descending date order the history query returns."""
    logs = [
        WorkoutLog(id=i, user_id=7, exercise="Bench Press", estimated_one_rm=Decimal(str(v)))
        for i, v in enumerate(values, start=1)
    ]
    return logs[::-1]


def _sql(statement) -> str:
    return str(statement.compile(compile_kwargs={"literal_binds": True}))


class TestExerciseTrend:
    def test_projects_from_recent_logs(self, api_client, fake_db):
        fake_db.queue(_bench(), _newest_first(50, 55, 60))
        response = api_client.get(f"{URL}/5/trend", headers=USER)
        assert response.status_code == 200
        assert response.json() == {"trend": "up", "next_one_rm": 65.0}

    def test_history_window_from_settings(self, api_client, fake_db):
        fake_db.queue(_bench(), [])
        api_client.get(f"{URL}/5/trend", headers=USER)
        history_sql = _sql(fake_db.statements[1])
        assert f"LIMIT {get_settings().one_rm_history_size}" in history_sql
        assert "workout_logs.user_id = 7" in history_sql

    def test_no_history_is_stable(self, api_client, fake_db):
        fake_db.queue(_bench(), [])
        assert api_client.get(f"{URL}/5/trend", headers=USER).json() == {"trend": "stable", "next_one_rm": 0.0}


class TestExerciseSuggestions:
    def test_trend_projection_is_the_starting_point(self, api_client, fake_db):
        fake_db.queue(_bench(), _newest_first(50, 55, 60))
        body = api_client.get(f"{URL}/5/suggestions", headers=USER).json()
        assert body["source"] == "history"
        assert body["current_one_rm"] == pytest.approx(65)
        assert body["trend"] == {"trend": "up", "next_one_rm": 65.0}
        assert body["minimum_weight"] == 20.0
        assert all(65 < s["estimated_one_rm"] <= 65 * 1.05 for s in body["suggestions"])

    def test_custom_one_rm_overrides_trend(self, api_client, fake_db):
        fake_db.queue(_bench(), _newest_first(50, 55, 60))
        response = api_client.get(f"{URL}/5/suggestions", params={"custom_one_rm": 100}, headers=USER)
        body = response.json()
        assert body["source"] == "custom"
        assert body["current_one_rm"] == 100
        assert body["trend"]["trend"] == "up"
        assert body["suggestions"][0] == {"sets": 5, "reps": 12, "weight": 70.0, "estimated_one_rm": 100.1}
        assert len(body["suggestions"]) <= 10

    def test_default_without_history(self, api_client, fake_db):
        fake_db.queue(_bench(), [])
        body = api_client.get(f"{URL}/5/suggestions", headers=USER).json()
        assert body["source"] == "default"
        assert body["current_one_rm"] == get_settings().default_one_rm
        assert body["trend"] is None
        # An empty 20 kg bar is already more than 5% above a 1RM of 20
        assert body["suggestions"] == []

    def test_other_users_exercise_not_found(self, api_client, fake_db):
        fake_db.queue(None)
        response = api_client.get(f"{URL}/5/suggestions", headers={"X-User-Id": "8"})
        assert response.status_code == 404
        assert "exercises.user_id = 8" in _sql(fake_db.statements[0])
