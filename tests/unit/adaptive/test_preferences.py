"""Tests for learned training preferences and exercise response blending."""

import datetime

import pytest

from app.adaptive.exercise_response import ExerciseResponseConfig, merge_exercise_response
from app.adaptive.preferences import (
    PreferencesConfig,
    default_preferences,
    learn_preferences,
    time_of_day,
)
from app.schemas.exercise_response import ExerciseResponseCreate
from app.schemas.workout import CompletedSet, WorkoutLogResponse

# 2026-03-01 is a Sunday
START = datetime.datetime(2026, 3, 1)
NOW = datetime.datetime(2026, 4, 1)


def _make_log(day: int, hour: int = 18, duration: int | None = 60, exercises: int = 4) -> WorkoutLogResponse:
    return WorkoutLogResponse(
        id=day + 1,
        user_id="u1",
        date=START + datetime.timedelta(days=day, hours=hour),
        duration=duration,
        completed_sets=[
            CompletedSet(exercise_id=f"exercise_{i}", weight=50, reps=10)
            for i in range(exercises)
            for _ in range(3)
        ],
    )


# ======================================================================
# Preferences
# ======================================================================


class TestTimeOfDay:
    @pytest.mark.parametrize(
        "hour, expected",
        [(0, "morning"), (11, "morning"), (12, "afternoon"), (17, "afternoon"), (18, "evening"), (23, "evening")],
    )
    def test_slots(self, hour, expected):
        assert time_of_day(START.replace(hour=hour)) == expected


class TestLearnPreferences:
    def test_too_few_logs(self):
        assert learn_preferences("u1", [_make_log(d) for d in range(4)], now=NOW) is None

    def test_defaults(self):
        prefs = default_preferences("u1", now=NOW)
        assert prefs.preferred_time == "any"
        assert prefs.preferred_duration == 60
        assert prefs.preferred_exercises_per_workout == 6
        assert prefs.preferred_frequency == 4

    def test_learned_values(self):
        logs = [
            _make_log(0, hour=7, duration=50, exercises=5),
            _make_log(2, hour=8, duration=55, exercises=5),
            _make_log(4, hour=19, duration=60, exercises=4),
            _make_log(7, hour=7, duration=None, exercises=4),
            _make_log(9, hour=9, duration=70, exercises=5),
            _make_log(11, hour=13, duration=90, exercises=6),
        ]
        prefs = learn_preferences("u1", logs, now=NOW)
        assert prefs.preferred_time == "morning"
        assert prefs.preferred_duration == 54  # 325 / 6 = 54.2
        assert prefs.preferred_exercises_per_workout == 5  # 29 / 6 = 4.8
        assert prefs.preferred_frequency == 3  # 6 sessions over 2 weeks
        assert prefs.last_updated == NOW

    def test_tie_goes_to_earlier_slot(self):
        logs = [_make_log(d, hour=h) for d, h in [(0, 19), (1, 13), (2, 20), (3, 14), (4, 8)]]
        assert learn_preferences("u1", logs, now=NOW).preferred_time == "afternoon"

    def test_halves_round_up(self):
        logs = [_make_log(d, duration=m) for d, m in [(0, 60), (1, 61), (2, 60), (3, 61)]]
        config = PreferencesConfig(min_logs=4)
        assert learn_preferences("u1", logs, config=config, now=NOW).preferred_duration == 61


# ======================================================================
# Exercise response
# ======================================================================


class TestMergeExerciseResponse:
    def test_first_observation_is_stored_as_is(self):
        state = merge_exercise_response(
            "u1", "bench_press", None,
            ExerciseResponseCreate(effectiveness_score=8, fatigue_impact=6, notes="felt strong"),
            now=NOW,
        )
        assert state.effectiveness_score == 8
        assert state.fatigue_impact == 6
        assert state.recovery_time == 72.0
        assert state.preferred_rep_range == (8, 12)
        assert state.preferred_rir_range == (1, 3)
        assert state.notes == "felt strong"
        assert state.last_updated == NOW

    def test_later_observations_are_blended(self):
        first = merge_exercise_response(
            "u1", "bench_press", None,
            ExerciseResponseCreate(effectiveness_score=8, fatigue_impact=6, notes="felt strong"),
        )
        second = merge_exercise_response(
            "u1", "bench_press", first,
            ExerciseResponseCreate(effectiveness_score=4, fatigue_impact=2),
        )
        assert second.effectiveness_score == pytest.approx(6.8)
        assert second.fatigue_impact == pytest.approx(4.8)
        assert second.recovery_time == pytest.approx(57.6)
        assert second.notes == "felt strong"

    def test_custom_weighting(self):
        config = ExerciseResponseConfig(history_weight=0.5)
        first = merge_exercise_response(
            "u1", "squat", None, ExerciseResponseCreate(effectiveness_score=10, fatigue_impact=10), config,
        )
        second = merge_exercise_response(
            "u1", "squat", first, ExerciseResponseCreate(effectiveness_score=0, fatigue_impact=0), config,
        )
        assert second.effectiveness_score == pytest.approx(5.0)
        assert second.recovery_time == pytest.approx(60.0)
