"""Pydantic schemas for request/response validation."""

from app.schemas.training import ExerciseType, MuscleGroup, TrainingGoal, TrainingLevel
from app.schemas.fatigue import (
    DeloadCheckResponse,
    MuscleGroupFatigueResponse,
    UserFatigueState,
    WorkoutFatigueRequest,
)
from app.schemas.workout import (
    CompletedSet,
    ExerciseHistoryCreate,
    ExerciseHistoryResponse,
    WorkoutLogCreate,
    WorkoutLogResponse,
)
from app.schemas.wellness import (
    MealLogCreate,
    MealLogResponse,
    NutritionLogCreate,
    NutritionLogResponse,
    SleepLogCreate,
    SleepLogResponse,
)
from app.schemas.load import WeightFactor, WeightRecommendation, WeightRecommendationRequest
from app.schemas.periodization import (
    LookupResult,
    MesocyclePlan,
    MesocycleStructure,
    PeriodizationConfig,
    TrainingBlockConfig,
    LongTermPlan,
)
from app.schemas.technique import TechniqueDetails
from app.schemas.learning import ExercisePreferenceUpdate, LearningProfileState, TrainingPreferencesState
from app.schemas.exercise_response import ExerciseResponseCreate, ExerciseResponseState
from app.schemas.recommendation import NextWorkoutRecommendation, PersonalizedRecommendationRecord, WorkoutDayPlan

__all__ = [
    "ExerciseType",
    "MuscleGroup",
    "TrainingGoal",
    "TrainingLevel",
    "DeloadCheckResponse",
    "MuscleGroupFatigueResponse",
    "UserFatigueState",
    "WorkoutFatigueRequest",
    "CompletedSet",
    "ExerciseHistoryCreate",
    "ExerciseHistoryResponse",
    "WorkoutLogCreate",
    "WorkoutLogResponse",
    "MealLogCreate",
    "MealLogResponse",
    "NutritionLogCreate",
    "NutritionLogResponse",
    "SleepLogCreate",
    "SleepLogResponse",
    "WeightFactor",
    "WeightRecommendation",
    "WeightRecommendationRequest",
    "LookupResult",
    "MesocyclePlan",
    "MesocycleStructure",
    "PeriodizationConfig",
    "TrainingBlockConfig",
    "LongTermPlan",
    "TechniqueDetails",
    "ExercisePreferenceUpdate",
    "LearningProfileState",
    "TrainingPreferencesState",
    "ExerciseResponseCreate",
    "ExerciseResponseState",
    "NextWorkoutRecommendation",
    "PersonalizedRecommendationRecord",
    "WorkoutDayPlan",
]
