"""
Personalized recommendation repository.

Recommendations are append-only: there is no update path.
"""

from app.db.repositories.base import to_schema_list
from app.db.store import RowStore, StoreResult
from app.models.recommendation import PersonalizedRecommendation
from app.schemas.recommendation import PersonalizedRecommendationRecord


class RecommendationRepository:
    """Repository for PersonalizedRecommendation rows."""

    def __init__(self, store: RowStore):
        self.store = store

    def add_many(
        self, records: list[PersonalizedRecommendationRecord],
    ) -> StoreResult[list[PersonalizedRecommendationRecord]]:
        rows = [PersonalizedRecommendation(**r.model_dump()) for r in records]
        return to_schema_list(self.store.insert_many(rows), PersonalizedRecommendationRecord)

    def list_for_user(
        self, user_id: str, limit: int = 50,
    ) -> StoreResult[list[PersonalizedRecommendationRecord]]:
        result = self.store.select(
            PersonalizedRecommendation,
            order_by="created",
            descending=True,
            limit=limit,
            user_id=user_id,
        )
        return to_schema_list(result, PersonalizedRecommendationRecord)
