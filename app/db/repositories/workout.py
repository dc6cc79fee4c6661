"""
Workout log and exercise history repositories.
"""

import datetime
from typing import Optional

from app.db.repositories.base import to_schema, to_schema_list
from app.db.store import RowStore, StoreResult
from app.models.workout import ExerciseHistoryEntry, WorkoutLog
from app.schemas.workout import (
    ExerciseHistoryCreate,
    ExerciseHistoryResponse,
    WorkoutLogCreate,
    WorkoutLogResponse,
)


class WorkoutLogRepository:
    """Repository for WorkoutLog rows."""

    def __init__(self, store: RowStore):
        self.store = store

    def create(self, user_id: str, data: WorkoutLogCreate) -> StoreResult[WorkoutLogResponse]:
        row = WorkoutLog(
            user_id=user_id,
            date=data.date,
            duration=data.duration,
            perceived_exertion=data.perceived_exertion,
            notes=data.notes,
            completed_sets=[s.model_dump() for s in data.completed_sets],
        )
        return to_schema(self.store.insert(row), WorkoutLogResponse)

    def list_for_user(
        self, user_id: str, since: Optional[datetime.datetime] = None,
    ) -> StoreResult[list[WorkoutLogResponse]]:
        """All logs for a user ordered by date, optionally from ``since`` on."""
        result = self.store.select(
            WorkoutLog,
            order_by="date",
            at_least={"date": since} if since is not None else None,
            user_id=user_id,
        )
        return to_schema_list(result, WorkoutLogResponse)


class ExerciseHistoryRepository:
    """Repository for ExerciseHistoryEntry rows."""

    def __init__(self, store: RowStore):
        self.store = store

    def create(
        self, user_id: str, data: ExerciseHistoryCreate,
    ) -> StoreResult[ExerciseHistoryResponse]:
        row = ExerciseHistoryEntry(user_id=user_id, **data.model_dump())
        return to_schema(self.store.insert(row), ExerciseHistoryResponse)

    def latest(
        self, user_id: str, exercise_id: str, limit: int = 10,
    ) -> StoreResult[list[ExerciseHistoryResponse]]:
        """Most recent entries for one exercise, newest first."""
        result = self.store.select(
            ExerciseHistoryEntry,
            order_by="date",
            descending=True,
            limit=limit,
            user_id=user_id,
            exercise_id=exercise_id,
        )
        return to_schema_list(result, ExerciseHistoryResponse)
