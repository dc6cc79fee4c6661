"""SQLModel database models."""

from app.models.fatigue import UserFatigue
from app.models.preferences import TrainingPreferences
from app.models.learning_profile import LearningProfile
from app.models.exercise_response import ExerciseResponseProfile
from app.models.recommendation import PersonalizedRecommendation
from app.models.workout import ExerciseHistoryEntry, WorkoutLog
from app.models.wellness import MealLog, NutritionLog, SleepLog

__all__ = [
    "UserFatigue",
    "TrainingPreferences",
    "LearningProfile",
    "ExerciseResponseProfile",
    "PersonalizedRecommendation",
    "WorkoutLog",
    "ExerciseHistoryEntry",
    "SleepLog",
    "NutritionLog",
    "MealLog",
]
