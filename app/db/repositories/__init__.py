"""Database repositories."""

from app.db.repositories.fatigue import FatigueRepository
from app.db.repositories.preferences import PreferencesRepository
from app.db.repositories.learning_profile import LearningProfileRepository
from app.db.repositories.exercise_response import ExerciseResponseRepository
from app.db.repositories.recommendation import RecommendationRepository
from app.db.repositories.workout import ExerciseHistoryRepository, WorkoutLogRepository
from app.db.repositories.wellness import WellnessRepository

__all__ = [
    "FatigueRepository",
    "PreferencesRepository",
    "LearningProfileRepository",
    "ExerciseResponseRepository",
    "RecommendationRepository",
    "WorkoutLogRepository",
    "ExerciseHistoryRepository",
    "WellnessRepository",
]
