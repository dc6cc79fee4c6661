"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from app.models.fatigue import UserFatigue  # noqa: F401
from app.models.preferences import TrainingPreferences  # noqa: F401
from app.models.learning_profile import LearningProfile  # noqa: F401
from app.models.exercise_response import ExerciseResponseProfile  # noqa: F401
from app.models.recommendation import PersonalizedRecommendation  # noqa: F401
from app.models.workout import ExerciseHistoryEntry, WorkoutLog  # noqa: F401
from app.models.wellness import MealLog, NutritionLog, SleepLog  # noqa: F401
