"""
Exercise response profile repository.
"""

from app.db.repositories.base import to_schema
from app.db.store import RowStore, StoreResult
from app.models.exercise_response import ExerciseResponseProfile
from app.schemas.exercise_response import ExerciseResponseState


class ExerciseResponseRepository:
    """Repository for ExerciseResponseProfile rows."""

    def __init__(self, store: RowStore):
        self.store = store

    def get(self, user_id: str, exercise_id: str) -> StoreResult[ExerciseResponseState]:
        result = self.store.get(
            ExerciseResponseProfile, user_id=user_id, exercise_id=exercise_id,
        )
        return to_schema(result, ExerciseResponseState)

    def save(self, state: ExerciseResponseState) -> StoreResult[ExerciseResponseState]:
        data = state.model_dump()
        data["preferred_rep_range"] = list(state.preferred_rep_range)
        data["preferred_rir_range"] = list(state.preferred_rir_range)
        row = ExerciseResponseProfile(**data)
        return to_schema(self.store.upsert(row), ExerciseResponseState)
