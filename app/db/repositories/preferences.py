"""
Training preferences repository.
"""

from app.db.repositories.base import to_schema
from app.db.store import RowStore, StoreResult
from app.models.preferences import TrainingPreferences
from app.schemas.learning import TrainingPreferencesState


class PreferencesRepository:
    """Repository for TrainingPreferences rows."""

    def __init__(self, store: RowStore):
        self.store = store

    def get(self, user_id: str) -> StoreResult[TrainingPreferencesState]:
        result = self.store.get(TrainingPreferences, user_id=user_id)
        return to_schema(result, TrainingPreferencesState)

    def save(self, state: TrainingPreferencesState) -> StoreResult[TrainingPreferencesState]:
        row = TrainingPreferences(**state.model_dump())
        return to_schema(self.store.upsert(row), TrainingPreferencesState)
