"""Tests for the typed repositories over an in-memory database."""

import datetime

import pytest

from app.adaptive.fatigue import default_fatigue_state
from app.adaptive.learning import default_learning_profile
from app.adaptive.preferences import default_preferences
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
from app.db.store import SQLModelRowStore, StoreErrorKind
from app.models.fatigue import UserFatigue
from app.schemas.exercise_response import ExerciseResponseState
from app.schemas.recommendation import PersonalizedRecommendationRecord
from app.schemas.wellness import MealLogCreate, NutritionLogCreate, SleepLogCreate
from app.schemas.workout import CompletedSet, ExerciseHistoryCreate, WorkoutLogCreate

NOW = datetime.datetime(2026, 3, 15, 12, 0)


def _days_ago(days: int) -> datetime.datetime:
    return NOW - datetime.timedelta(days=days)


class _RecordingStore(SQLModelRowStore):
    """Keeps every row handed back by ``select``."""

    def __init__(self, session):
        super().__init__(session)
        self.selected = []

    def select(self, model, *args, **kwargs):
        result = super().select(model, *args, **kwargs)
        if result.ok:
            self.selected.extend(result.data)
        return result


# ======================================================================
# Per-user state
# ======================================================================


class TestFatigueRepository:
    def test_round_trip(self, store):
        repo = FatigueRepository(store)
        state = default_fatigue_state("u1", now=NOW).model_copy(update={"current_fatigue": 64.5})

        assert repo.save(state).ok
        loaded = repo.get("u1")
        assert loaded.ok
        assert loaded.data == state

    def test_naive_utc_timestamps_are_accepted(self, store):
        repo = FatigueRepository(store)
        assert NOW.tzinfo is None
        assert repo.save(default_fatigue_state("u1", now=NOW)).ok

        loaded = repo.get("u1").data.last_updated
        assert loaded == NOW
        assert loaded.tzinfo is None

    def test_missing_user(self, store):
        assert FatigueRepository(store).get("ghost").error == StoreErrorKind.NOT_FOUND

    def test_create_twice_fails(self, store):
        repo = FatigueRepository(store)
        assert repo.create(default_fatigue_state("u1", now=NOW)).ok
        assert repo.create(default_fatigue_state("u1", now=NOW)).error == StoreErrorKind.WRITE_FAILED

    def test_invalid_row_is_reported(self, store):
        row = UserFatigue(
            user_id="u1", current_fatigue=250.0, baseline_fatigue=20.0, recovery_rate=5.0,
            recovery_status="poor", ready_to_train=False, muscle_group_fatigue={}, last_updated=NOW,
        )
        assert store.insert(row).ok
        assert FatigueRepository(store).get("u1").error == StoreErrorKind.INVALID_ROW


class TestProfileRepositories:
    def test_learning_profile_round_trip(self, store):
        repo = LearningProfileRepository(store)
        profile = default_learning_profile("u1", now=NOW).model_copy(
            update={"response_to_volume": 7.5, "exercise_preferences": ["bench_press", "pull_up"]},
        )
        assert repo.save(profile).ok
        assert repo.get("u1").data == profile

    def test_preferences_round_trip(self, store):
        repo = PreferencesRepository(store)
        prefs = default_preferences("u1", now=NOW).model_copy(update={"preferred_time": "morning"})
        assert repo.save(prefs).ok
        assert repo.get("u1").data == prefs

    def test_exercise_response_keyed_by_user_and_exercise(self, store):
        repo = ExerciseResponseRepository(store)
        state = ExerciseResponseState(
            user_id="u1", exercise_id="bench_press", effectiveness_score=7.0,
            fatigue_impact=5.0, recovery_time=60.0, last_updated=NOW,
        )
        assert repo.save(state).ok
        assert repo.save(state.model_copy(update={"exercise_id": "deadlift", "fatigue_impact": 9.0})).ok

        loaded = repo.get("u1", "bench_press").data
        assert loaded == state
        assert loaded.preferred_rep_range == (8, 12)
        assert repo.get("u1", "deadlift").data.fatigue_impact == 9.0
        assert repo.get("u2", "bench_press").error == StoreErrorKind.NOT_FOUND


class TestRecommendationRepository:
    def test_add_and_list_newest_first(self, store):
        repo = RecommendationRepository(store)
        records = [
            PersonalizedRecommendationRecord(
                id=f"rec-{i}", user_id="u1", type="training", title=f"Advice {i}",
                description="...", priority="high", base_reason="test",
                data_points={"i": i}, created=_days_ago(3 - i),
            )
            for i in range(3)
        ]
        assert repo.add_many(records).ok

        listed = repo.list_for_user("u1").data
        assert [r.id for r in listed] == ["rec-2", "rec-1", "rec-0"]
        assert listed[0].data_points == {"i": 2}
        assert [r.id for r in repo.list_for_user("u1", limit=1).data] == ["rec-2"]
        assert repo.list_for_user("u2").data == []


# ======================================================================
# Logs
# ======================================================================


class TestWorkoutLogRepository:
    def test_create_and_list(self, store):
        repo = WorkoutLogRepository(store)
        for days in (1, 10, 5):
            created = repo.create("u1", WorkoutLogCreate(
                date=_days_ago(days),
                duration=60,
                completed_sets=[CompletedSet(exercise_id="back_squat", weight=100, reps=5, completed_rpe=8)],
            ))
            assert created.ok
            assert created.data.id is not None

        logs = repo.list_for_user("u1").data
        assert [log.date for log in logs] == [_days_ago(10), _days_ago(5), _days_ago(1)]
        assert logs[0].completed_sets[0].exercise_id == "back_squat"

    def test_since_filter(self, store):
        repo = WorkoutLogRepository(store)
        for days in (1, 10, 5):
            repo.create("u1", WorkoutLogCreate(date=_days_ago(days)))
        assert len(repo.list_for_user("u1", since=_days_ago(7)).data) == 2

    def test_old_rows_never_leave_the_store(self, session):
        store = _RecordingStore(session)
        repo = WorkoutLogRepository(store)
        for days in (30, 20, 6, 2):
            repo.create("u1", WorkoutLogCreate(date=_days_ago(days)))

        logs = repo.list_for_user("u1", since=_days_ago(7)).data
        assert [log.date for log in logs] == [_days_ago(6), _days_ago(2)]
        assert [row.date for row in store.selected] == [_days_ago(6), _days_ago(2)]


class TestExerciseHistoryRepository:
    def test_latest_newest_first_per_exercise(self, store):
        repo = ExerciseHistoryRepository(store)
        for days, weight in [(9, 90.0), (2, 100.0), (5, 95.0)]:
            repo.create("u1", ExerciseHistoryCreate(
                exercise_id="bench_press", date=_days_ago(days), weight=weight, reps=8, rir=2,
            ))
        repo.create("u1", ExerciseHistoryCreate(exercise_id="deadlift", date=NOW, weight=180, reps=3))

        latest = repo.latest("u1", "bench_press").data
        assert [e.weight for e in latest] == [100.0, 95.0, 90.0]
        assert [e.weight for e in repo.latest("u1", "bench_press", limit=2).data] == [100.0, 95.0]
        assert repo.latest("u1", "nonexistent").data == []


class TestWellnessRepository:
    def test_latest_sleep_and_nutrition(self, store):
        repo = WellnessRepository(store)
        assert repo.latest_sleep("u1").data is None
        assert repo.latest_nutrition("u1").data is None

        repo.add_sleep("u1", SleepLogCreate(date=_days_ago(2), quality=4))
        repo.add_sleep("u1", SleepLogCreate(date=_days_ago(1), quality=8, duration_min=450))
        repo.add_nutrition("u1", NutritionLogCreate(date=_days_ago(1), adherence_score=6))

        assert repo.latest_sleep("u1").data.quality == 8
        assert repo.latest_nutrition("u1").data.adherence_score == 6

    def test_meals(self, store):
        repo = WellnessRepository(store)
        repo.add_meal("u1", MealLogCreate(date=_days_ago(0), meal_type="dinner", calories=700))
        repo.add_meal("u1", MealLogCreate(date=_days_ago(1), meal_type="lunch"))
        meals = repo.list_meals("u1").data
        assert [m.meal_type for m in meals] == ["lunch", "dinner"]


@pytest.mark.parametrize(
    "call",
    [
        lambda s: FatigueRepository(s).get("u1"),
        lambda s: LearningProfileRepository(s).get("u1"),
        lambda s: WorkoutLogRepository(s).list_for_user("u1"),
        lambda s: WellnessRepository(s).latest_sleep("u1"),
        lambda s: ExerciseHistoryRepository(s).latest("u1", "bench_press"),
    ],
)
def test_read_failures_propagate(failing_store, call):
    assert call(failing_store).error == StoreErrorKind.READ_FAILED
