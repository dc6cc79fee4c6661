"""
Load recommendation service.

Gathers the inputs of the load recommender (fatigue, exercise history,
latest sleep and nutrition scores) and hands them to
:func:`~app.adaptive.load.compute_weight_recommendation`.
"""

import logging
from typing import Optional

from app.adaptive.load import (
    DEFAULT_WEIGHT_CONFIG,
    WeightRecommenderConfig,
    compute_weight_recommendation,
)
from app.db.repositories.wellness import WellnessRepository
from app.db.repositories.workout import ExerciseHistoryRepository
from app.schemas.load import WeightRecommendation, WeightRecommendationRequest
from app.services.fatigue_service import FatigueService

logger = logging.getLogger(__name__)

_HISTORY_DEPTH = 10


class LoadService:
    """Service for load (weight) recommendations."""

    def __init__(
        self,
        fatigue_service: FatigueService,
        history_repository: ExerciseHistoryRepository,
        wellness_repository: WellnessRepository,
        config: WeightRecommenderConfig = DEFAULT_WEIGHT_CONFIG,
    ):
        self.fatigue_service = fatigue_service
        self.history_repository = history_repository
        self.wellness_repository = wellness_repository
        self.config = config

    def recommend_weight(
        self, user_id: str, request: WeightRecommendationRequest,
    ) -> Optional[WeightRecommendation]:
        """Recommended load, or ``None`` without history for the exercise."""
        fatigue = self.fatigue_service.get_fatigue(user_id)

        sleep_quality = self._latest_sleep(user_id) if request.consider_sleep else None
        adherence = self._latest_nutrition(user_id) if request.consider_nutrition else None

        history = self.history_repository.latest(user_id, request.exercise_id, limit=_HISTORY_DEPTH)
        if not history.ok:
            logger.error(
                "Exercise history read failed for user %s, exercise %s: %s",
                user_id, request.exercise_id, history.message,
            )
            return None
        if not history.data:
            logger.info("No history for user %s, exercise %s", user_id, request.exercise_id)
            return None

        return compute_weight_recommendation(
            history.data,
            request,
            current_fatigue=fatigue.current_fatigue,
            sleep_quality=sleep_quality,
            nutrition_adherence=adherence,
            config=self.config,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _latest_sleep(self, user_id: str) -> Optional[float]:
        result = self.wellness_repository.latest_sleep(user_id)
        if not result.ok:
            logger.warning("Sleep log unavailable for user %s: %s", user_id, result.message)
            return None
        return result.data.quality if result.data else None

    def _latest_nutrition(self, user_id: str) -> Optional[float]:
        result = self.wellness_repository.latest_nutrition(user_id)
        if not result.ok:
            logger.warning("Nutrition log unavailable for user %s: %s", user_id, result.message)
            return None
        return result.data.adherence_score if result.data else None
