"""
Workout and wellness log service.

Logs are the raw inputs of the fatigue, learning and load models.  Unlike
the derived state, a log that cannot be stored is reported to the caller
(HTTP 503): there is no sensible default for user-entered data.
"""

import datetime
import logging
from typing import Optional

from fastapi import HTTPException, status

from app.db.repositories.wellness import WellnessRepository
from app.db.repositories.workout import ExerciseHistoryRepository, WorkoutLogRepository
from app.db.store import StoreResult
from app.schemas.wellness import (
    MealLogCreate,
    MealLogResponse,
    NutritionLogCreate,
    NutritionLogResponse,
    SleepLogCreate,
    SleepLogResponse,
)
from app.schemas.workout import (
    ExerciseHistoryCreate,
    ExerciseHistoryResponse,
    WorkoutLogCreate,
    WorkoutLogResponse,
)

logger = logging.getLogger(__name__)


class WorkoutService:
    """Service for workout, exercise history and wellness logs."""

    def __init__(
        self,
        workout_repository: WorkoutLogRepository,
        history_repository: ExerciseHistoryRepository,
        wellness_repository: WellnessRepository,
    ):
        self.workout_repository = workout_repository
        self.history_repository = history_repository
        self.wellness_repository = wellness_repository

    def log_workout(self, user_id: str, data: WorkoutLogCreate) -> WorkoutLogResponse:
        return self._unwrap(self.workout_repository.create(user_id, data), "workout log")

    def list_workouts(
        self, user_id: str, since: Optional[datetime.datetime] = None,
    ) -> list[WorkoutLogResponse]:
        return self._unwrap(self.workout_repository.list_for_user(user_id, since=since), "workout logs")

    def record_history(self, user_id: str, data: ExerciseHistoryCreate) -> ExerciseHistoryResponse:
        return self._unwrap(self.history_repository.create(user_id, data), "exercise history")

    def exercise_history(
        self, user_id: str, exercise_id: str, limit: int = 10,
    ) -> list[ExerciseHistoryResponse]:
        result = self.history_repository.latest(user_id, exercise_id, limit=limit)
        return self._unwrap(result, "exercise history")

    def log_sleep(self, user_id: str, data: SleepLogCreate) -> SleepLogResponse:
        return self._unwrap(self.wellness_repository.add_sleep(user_id, data), "sleep log")

    def log_nutrition(self, user_id: str, data: NutritionLogCreate) -> NutritionLogResponse:
        return self._unwrap(self.wellness_repository.add_nutrition(user_id, data), "nutrition log")

    def log_meal(self, user_id: str, data: MealLogCreate) -> MealLogResponse:
        return self._unwrap(self.wellness_repository.add_meal(user_id, data), "meal log")

    def list_meals(self, user_id: str) -> list[MealLogResponse]:
        return self._unwrap(self.wellness_repository.list_meals(user_id), "meal logs")

    @staticmethod
    def _unwrap(result: StoreResult, what: str):
        if not result.ok:
            logger.error("Storage error on %s (%s): %s", what, result.error.value, result.message)
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail=f"Could not access {what}",
            )
        return result.data
