"""Tests for the service layer.

Happy paths run against the in-memory database; error paths use the
``FailingStore`` double from ``tests/conftest.py``.
"""

import datetime
import logging

import pytest
from fastapi import HTTPException

from app.adaptive.learning import default_learning_profile
from app.db.repositories import (
    ExerciseHistoryRepository,
    ExerciseResponseRepository,
    FatigueRepository,
    LearningProfileRepository,
    PreferencesRepository,
    RecommendationRepository,
    WellnessRepository,
    WorkoutLogRepository,
)
from app.schemas.exercise_response import ExerciseResponseCreate
from app.schemas.learning import ExercisePreferenceUpdate
from app.schemas.load import WeightRecommendationRequest
from app.schemas.recommendation import PlannedExercise, PlannedSet, WorkoutDayPlan
from app.schemas.wellness import MealLogCreate, SleepLogCreate
from app.schemas.workout import CompletedSet, ExerciseHistoryCreate, WorkoutLogCreate
from app.services import (
    ExerciseResponseService,
    FatigueService,
    LearningService,
    LoadService,
    PreferencesService,
    RecommendationService,
    WorkoutService,
)
from tests.conftest import FailingStore

NOW = datetime.datetime(2026, 3, 15, 20, 0)


# ======================================================================
# Helpers
# ======================================================================


def _fatigue_service(store) -> FatigueService:
    return FatigueService(FatigueRepository(store), WorkoutLogRepository(store))


def _learning_service(store) -> LearningService:
    return LearningService(LearningProfileRepository(store), WorkoutLogRepository(store), WellnessRepository(store))


def _preferences_service(store) -> PreferencesService:
    return PreferencesService(PreferencesRepository(store), WorkoutLogRepository(store))


def _workout_service(store) -> WorkoutService:
    return WorkoutService(WorkoutLogRepository(store), ExerciseHistoryRepository(store), WellnessRepository(store))


def _load_service(store) -> LoadService:
    return LoadService(_fatigue_service(store), ExerciseHistoryRepository(store), WellnessRepository(store))


def _recommendation_service(store) -> RecommendationService:
    return RecommendationService(
        RecommendationRepository(store),
        _learning_service(store),
        _fatigue_service(store),
        _preferences_service(store),
    )


def _log_workouts(store, days: list[int], n_sets: int = 3, hour: int = 18, user_id: str = "u1"):
    service = _workout_service(store)
    for i, days_ago in enumerate(days):
        service.log_workout(user_id, WorkoutLogCreate(
            date=(NOW - datetime.timedelta(days=days_ago)).replace(hour=hour),
            duration=45,
            completed_sets=[
                CompletedSet(exercise_id="bench_press", weight=60 + 5 * i, reps=8, completed_rpe=7)
                for _ in range(n_sets)
            ],
        ))


# ======================================================================
# FatigueService
# ======================================================================


class TestFatigueService:
    def test_first_read_creates_defaults(self, store):
        service = _fatigue_service(store)
        state = service.get_fatigue("u1")
        assert state.current_fatigue == 30.0
        assert FatigueRepository(store).get("u1").ok

    def test_workout_then_rest(self, store):
        service = _fatigue_service(store)
        assert service.apply_workout("u1", 60.0).current_fatigue == 60.0
        assert service.get_fatigue("u1").current_fatigue == 60.0
        assert service.apply_rest("u1").current_fatigue == 55.0

    def test_read_failure_returns_defaults(self, failing_store, caplog):
        with caplog.at_level(logging.ERROR):
            state = _fatigue_service(failing_store).get_fatigue("u1")
        assert state.current_fatigue == 30.0
        assert "Fatigue read failed" in caplog.text

    def test_write_failure_returns_computed_state(self, caplog):
        store = FailingStore(fail_reads=False, fail_writes=True)
        with caplog.at_level(logging.ERROR):
            state = _fatigue_service(store).apply_workout("u1", 40.0)
        assert state.current_fatigue == 50.0
        assert "Fatigue write failed" in caplog.text

    def test_check_deload_by_workload(self, store):
        _log_workouts(store, list(range(13)))
        check = _fatigue_service(store).check_deload("u1", now=NOW)
        assert check.recent_workouts == 13
        assert check.needs_deload is True

    def test_check_deload_by_fatigue(self, store):
        service = _fatigue_service(store)
        service.apply_workout("u1", 100.0)  # 30 + 50 = 80
        check = service.check_deload("u1", now=NOW)
        assert check.current_fatigue == 80.0
        assert check.needs_deload is True
        assert check.recent_workouts == 0

    def test_muscle_group_fatigue(self, store):
        _log_workouts(store, [0])
        result = _fatigue_service(store).muscle_group_fatigue("u1", now=NOW)
        # 3 sets x 60 kg x 8 reps x RPE factor 0.8 = 1152
        assert result.muscle_group_fatigue["chest"] == pytest.approx(11.52)
        assert result.muscle_group_fatigue["legs"] == 0.0

    def test_muscle_group_fatigue_without_logs(self, failing_store):
        result = _fatigue_service(failing_store).muscle_group_fatigue("u1")
        assert set(result.muscle_group_fatigue.values()) == {0.0}


# ======================================================================
# LoadService
# ======================================================================


class TestLoadService:
    def test_no_history(self, store):
        request = WeightRecommendationRequest(exercise_id="nonexistent", target_reps=8, target_rir=2)
        assert _load_service(store).recommend_weight("u1", request) is None

    def test_recommendation_uses_stored_inputs(self, store):
        workouts = _workout_service(store)
        workouts.record_history("u1", ExerciseHistoryCreate(
            exercise_id="bench_press", date=NOW - datetime.timedelta(days=3), weight=100, reps=8, rir=2,
        ))
        workouts.log_sleep("u1", SleepLogCreate(date=NOW, quality=9))

        request = WeightRecommendationRequest(
            exercise_id="bench_press", target_reps=8, target_rir=2, consider_sleep=True,
        )
        rec = _load_service(store).recommend_weight("u1", request)
        # default fatigue 30 gives no fatigue adjustment, sleep 9 gives +2%
        assert rec.recommended_weight == 102.5
        assert rec.factors[-1].factor == "Sleep quality (9/10)"

    def test_history_read_failure(self, failing_store):
        request = WeightRecommendationRequest(exercise_id="bench_press", target_reps=8, target_rir=2)
        assert _load_service(failing_store).recommend_weight("u1", request) is None


# ======================================================================
# Learning and preferences
# ======================================================================


class TestLearningService:
    def test_missing_profile_is_neutral_and_not_stored(self, store):
        profile = _learning_service(store).get_profile("u1")
        assert profile.response_to_volume == 5.0
        assert not LearningProfileRepository(store).get("u1").ok

    def test_update_needs_ten_logs(self, store):
        _log_workouts(store, list(range(0, 18, 2)))
        profile = _learning_service(store).update_profile("u1")
        assert profile.recovery_capacity == 5.0
        assert not LearningProfileRepository(store).get("u1").ok

    def test_update_is_stored(self, store):
        _log_workouts(store, list(range(0, 20, 2)))
        for day in range(5):
            _workout_service(store).log_meal("u1", MealLogCreate(date=NOW - datetime.timedelta(days=day)))

        profile = _learning_service(store).update_profile("u1")
        assert profile.recovery_capacity == 4.5
        assert profile.nutrition_adherence == 5.5
        assert LearningProfileRepository(store).get("u1").data == profile

    def test_set_exercise_preferences(self, store):
        service = _learning_service(store)
        service.set_exercise_preferences("u1", ExercisePreferenceUpdate(
            exercise_preferences=["deadlift"], exercise_avoidances=["dip"],
        ))
        stored = service.get_profile("u1")
        assert stored.exercise_preferences == ["deadlift"]
        assert stored.exercise_avoidances == ["dip"]

    def test_read_failure_keeps_profile(self, failing_store, caplog):
        with caplog.at_level(logging.ERROR):
            profile = _learning_service(failing_store).update_profile("u1")
        assert profile.response_to_volume == 5.0
        assert "Workout logs unavailable" in caplog.text


class TestPreferencesService:
    def test_learn_with_too_few_logs(self, store):
        _log_workouts(store, [0, 2, 4, 6])
        assert _preferences_service(store).learn("u1") is None

    def test_learn_and_read_back(self, store):
        _log_workouts(store, [0, 2, 4, 6, 8], hour=7)
        service = _preferences_service(store)
        learned = service.learn("u1")
        assert learned.preferred_time == "morning"
        assert learned.preferred_duration == 45
        assert learned.preferred_exercises_per_workout == 1
        assert service.get_preferences("u1") == learned

    def test_defaults_on_read_failure(self, failing_store):
        prefs = _preferences_service(failing_store).get_preferences("u1")
        assert prefs.preferred_frequency == 4


# ======================================================================
# Exercise responses
# ======================================================================


class TestExerciseResponseService:
    def test_record_and_blend(self, store):
        service = ExerciseResponseService(ExerciseResponseRepository(store))
        assert service.get("u1", "bench_press") is None

        service.record("u1", "bench_press", ExerciseResponseCreate(effectiveness_score=8, fatigue_impact=6))
        blended = service.record("u1", "bench_press", ExerciseResponseCreate(effectiveness_score=4, fatigue_impact=2))

        assert blended.effectiveness_score == pytest.approx(6.8)
        assert service.get("u1", "bench_press").effectiveness_score == pytest.approx(6.8)

    def test_write_failure_still_returns_profile(self):
        store = FailingStore(fail_reads=False, fail_writes=True)
        service = ExerciseResponseService(ExerciseResponseRepository(store))
        profile = service.record("u1", "squat", ExerciseResponseCreate(effectiveness_score=7, fatigue_impact=5))
        assert profile.recovery_time == 60.0


# ======================================================================
# Recommendations
# ======================================================================


class TestRecommendationService:
    def test_generate_stores_records(self, store):
        profile = default_learning_profile("u1").model_copy(update={"response_to_volume": 8.0})
        LearningProfileRepository(store).save(profile)
        service = _recommendation_service(store)

        records = service.generate("u1")
        assert [r.title for r in records] == ["Increase training volume"]
        assert [r.id for r in service.list_recent("u1")] == [records[0].id]

    def test_neutral_profile_generates_nothing(self, store):
        assert _recommendation_service(store).generate("u1") == []

    def test_generate_survives_write_failure(self, monkeypatch, caplog):
        service = _recommendation_service(FailingStore(fail_reads=False, fail_writes=True))
        profile = default_learning_profile("u1").model_copy(update={"response_to_intensity": 9.0})
        monkeypatch.setattr(service.learning_service, "get_profile", lambda user_id: profile)

        with caplog.at_level(logging.ERROR):
            records = service.generate("u1")
        assert [r.title for r in records] == ["Increase training intensity"]
        assert "Could not store recommendations" in caplog.text

    def test_list_recent_on_read_failure(self, failing_store):
        assert _recommendation_service(failing_store).list_recent("u1") == []

    def test_next_workout_uses_fatigue_and_preferences(self, store):
        service = _recommendation_service(store)
        service.fatigue_service.apply_workout("u1", 90.0)  # 30 + 45 = 75
        day = WorkoutDayPlan(
            name="Upper",
            exercises=[
                PlannedExercise(exercise_id=f"ex_{i}", sets=[PlannedSet(target_reps=10, target_rir=2)] * 5)
                for i in range(8)
            ],
        )
        result = service.next_workout("u1", day)
        assert result.fatigue_level == 75.0
        assert len(result.recommended_day.exercises) == 6
        assert len(result.recommended_day.exercises[0].sets) == 4


# ======================================================================
# WorkoutService
# ======================================================================


class TestWorkoutService:
    def test_store_errors_become_503(self, failing_store):
        service = _workout_service(failing_store)
        with pytest.raises(HTTPException) as exc_info:
            service.list_workouts("u1")
        assert exc_info.value.status_code == 503

        with pytest.raises(HTTPException):
            service.log_sleep("u1", SleepLogCreate(date=NOW, quality=7))

    def test_exercise_history_limit(self, store):
        service = _workout_service(store)
        for days in range(5):
            service.record_history("u1", ExerciseHistoryCreate(
                exercise_id="bench_press", date=NOW - datetime.timedelta(days=days), weight=100 - days, reps=5,
            ))
        assert [e.weight for e in service.exercise_history("u1", "bench_press", limit=2)] == [100, 99]
