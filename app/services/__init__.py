"""Business logic services."""

from app.services.fatigue_service import FatigueService
from app.services.load_service import LoadService
from app.services.learning_service import LearningService, PreferencesService
from app.services.exercise_response_service import ExerciseResponseService
from app.services.recommendation_service import RecommendationService
from app.services.workout_service import WorkoutService

__all__ = [
    "FatigueService",
    "LoadService",
    "LearningService",
    "PreferencesService",
    "ExerciseResponseService",
    "RecommendationService",
    "WorkoutService",
]
