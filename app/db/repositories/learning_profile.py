"""
Learning profile repository.
"""

from app.db.repositories.base import to_schema
from app.db.store import RowStore, StoreResult
from app.models.learning_profile import LearningProfile
from app.schemas.learning import LearningProfileState


class LearningProfileRepository:
    """Repository for LearningProfile rows."""

    def __init__(self, store: RowStore):
        self.store = store

    def get(self, user_id: str) -> StoreResult[LearningProfileState]:
        result = self.store.get(LearningProfile, user_id=user_id)
        return to_schema(result, LearningProfileState)

    def save(self, state: LearningProfileState) -> StoreResult[LearningProfileState]:
        row = LearningProfile(**state.model_dump())
        return to_schema(self.store.upsert(row), LearningProfileState)
