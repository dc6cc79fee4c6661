"""
Recommendation service.

Builds personalized recommendations from the learning profile and the
current fatigue, and adjusts a planned training day to today's fatigue.
"""

import logging

from app.adaptive.recommendations import (
    DEFAULT_RECOMMENDATION_CONFIG,
    RecommendationConfig,
    build_recommendations,
    next_workout_adjustment,
)
from app.db.repositories.recommendation import RecommendationRepository
from app.schemas.recommendation import (
    NextWorkoutRecommendation,
    PersonalizedRecommendationRecord,
    WorkoutDayPlan,
)
from app.services.fatigue_service import FatigueService
from app.services.learning_service import LearningService, PreferencesService

logger = logging.getLogger(__name__)


class RecommendationService:
    """Service for personalized and next-workout recommendations."""

    def __init__(
        self,
        repository: RecommendationRepository,
        learning_service: LearningService,
        fatigue_service: FatigueService,
        preferences_service: PreferencesService,
        config: RecommendationConfig = DEFAULT_RECOMMENDATION_CONFIG,
    ):
        self.repository = repository
        self.learning_service = learning_service
        self.fatigue_service = fatigue_service
        self.preferences_service = preferences_service
        self.config = config

    def generate(self, user_id: str) -> list[PersonalizedRecommendationRecord]:
        """Generate and store recommendations; storage failures are only logged."""
        profile = self.learning_service.get_profile(user_id)
        fatigue = self.fatigue_service.get_fatigue(user_id)

        records = build_recommendations(profile, fatigue.current_fatigue, self.config)
        if records:
            result = self.repository.add_many(records)
            if not result.ok:
                logger.error("Could not store recommendations for user %s: %s", user_id, result.message)
        return records

    def list_recent(self, user_id: str, limit: int = 50) -> list[PersonalizedRecommendationRecord]:
        result = self.repository.list_for_user(user_id, limit=limit)
        if not result.ok:
            logger.error("Recommendation read failed for user %s: %s", user_id, result.message)
            return []
        return result.data

    def next_workout(self, user_id: str, day: WorkoutDayPlan) -> NextWorkoutRecommendation:
        fatigue = self.fatigue_service.get_fatigue(user_id)
        preferences = self.preferences_service.get_preferences(user_id)
        return next_workout_adjustment(
            day,
            fatigue.current_fatigue,
            max_exercises=preferences.preferred_exercises_per_workout,
            config=self.config,
        )
