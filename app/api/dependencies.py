"""
Shared API dependencies.

Each service is assembled per request from a :class:`SQLModelRowStore`
over the request's database session.  Tests override :func:`get_db` (or
any factory below) to plug in other stores.
"""

from fastapi import Depends
from sqlmodel import Session

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
from app.db.session import get_db
from app.db.store import RowStore, SQLModelRowStore
from app.services import (
    ExerciseResponseService,
    FatigueService,
    LearningService,
    LoadService,
    PreferencesService,
    RecommendationService,
    WorkoutService,
)


def get_store(db: Session = Depends(get_db)) -> RowStore:
    return SQLModelRowStore(db)


def get_fatigue_service(store: RowStore = Depends(get_store)) -> FatigueService:
    return FatigueService(FatigueRepository(store), WorkoutLogRepository(store))


def get_load_service(store: RowStore = Depends(get_store)) -> LoadService:
    return LoadService(
        FatigueService(FatigueRepository(store), WorkoutLogRepository(store)),
        ExerciseHistoryRepository(store),
        WellnessRepository(store),
    )


def get_learning_service(store: RowStore = Depends(get_store)) -> LearningService:
    return LearningService(
        LearningProfileRepository(store),
        WorkoutLogRepository(store),
        WellnessRepository(store),
    )


def get_preferences_service(store: RowStore = Depends(get_store)) -> PreferencesService:
    return PreferencesService(PreferencesRepository(store), WorkoutLogRepository(store))


def get_exercise_response_service(store: RowStore = Depends(get_store)) -> ExerciseResponseService:
    return ExerciseResponseService(ExerciseResponseRepository(store))


def get_recommendation_service(store: RowStore = Depends(get_store)) -> RecommendationService:
    workouts = WorkoutLogRepository(store)
    return RecommendationService(
        RecommendationRepository(store),
        LearningService(LearningProfileRepository(store), workouts, WellnessRepository(store)),
        FatigueService(FatigueRepository(store), workouts),
        PreferencesService(PreferencesRepository(store), workouts),
    )


def get_workout_service(store: RowStore = Depends(get_store)) -> WorkoutService:
    return WorkoutService(
        WorkoutLogRepository(store),
        ExerciseHistoryRepository(store),
        WellnessRepository(store),
    )
