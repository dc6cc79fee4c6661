"""
User fatigue repository.

Single read/write entry point for the ``user_fatigue`` table.
"""

from app.db.repositories.base import to_schema
from app.db.store import RowStore, StoreResult
from app.models.fatigue import UserFatigue
from app.schemas.fatigue import UserFatigueState


class FatigueRepository:
    """Repository for UserFatigue rows."""

    def __init__(self, store: RowStore):
        self.store = store

    def get(self, user_id: str) -> StoreResult[UserFatigueState]:
        return to_schema(self.store.get(UserFatigue, user_id=user_id), UserFatigueState)

    def create(self, state: UserFatigueState) -> StoreResult[UserFatigueState]:
        row = UserFatigue(**state.model_dump())
        return to_schema(self.store.insert(row), UserFatigueState)

    def save(self, state: UserFatigueState) -> StoreResult[UserFatigueState]:
        row = UserFatigue(**state.model_dump())
        return to_schema(self.store.upsert(row), UserFatigueState)
