"""
Sleep, nutrition and meal log repository.
"""

from typing import Optional

from app.db.repositories.base import to_schema, to_schema_list
from app.db.store import RowStore, StoreResult
from app.models.wellness import MealLog, NutritionLog, SleepLog
from app.schemas.wellness import (
    MealLogCreate,
    MealLogResponse,
    NutritionLogCreate,
    NutritionLogResponse,
    SleepLogCreate,
    SleepLogResponse,
)


class WellnessRepository:
    """Repository for the sleep, nutrition and meal log tables."""

    def __init__(self, store: RowStore):
        self.store = store

    # ------------------------------------------------------------------
    # Sleep
    # ------------------------------------------------------------------

    def add_sleep(self, user_id: str, data: SleepLogCreate) -> StoreResult[SleepLogResponse]:
        row = SleepLog(user_id=user_id, **data.model_dump())
        return to_schema(self.store.insert(row), SleepLogResponse)

    def latest_sleep(self, user_id: str) -> StoreResult[Optional[SleepLogResponse]]:
        result = to_schema_list(
            self.store.select(SleepLog, order_by="date", descending=True, limit=1, user_id=user_id),
            SleepLogResponse,
        )
        if not result.ok:
            return StoreResult.failure(result.error, result.message)
        return StoreResult.success(result.data[0] if result.data else None)

    # ------------------------------------------------------------------
    # Nutrition
    # ------------------------------------------------------------------

    def add_nutrition(
        self, user_id: str, data: NutritionLogCreate,
    ) -> StoreResult[NutritionLogResponse]:
        row = NutritionLog(user_id=user_id, **data.model_dump())
        return to_schema(self.store.insert(row), NutritionLogResponse)

    def latest_nutrition(self, user_id: str) -> StoreResult[Optional[NutritionLogResponse]]:
        result = to_schema_list(
            self.store.select(NutritionLog, order_by="date", descending=True, limit=1, user_id=user_id),
            NutritionLogResponse,
        )
        if not result.ok:
            return StoreResult.failure(result.error, result.message)
        return StoreResult.success(result.data[0] if result.data else None)

    # ------------------------------------------------------------------
    # Meals
    # ------------------------------------------------------------------

    def add_meal(self, user_id: str, data: MealLogCreate) -> StoreResult[MealLogResponse]:
        row = MealLog(user_id=user_id, **data.model_dump())
        return to_schema(self.store.insert(row), MealLogResponse)

    def list_meals(self, user_id: str) -> StoreResult[list[MealLogResponse]]:
        result = self.store.select(MealLog, order_by="date", user_id=user_id)
        return to_schema_list(result, MealLogResponse)
