"""
Exercise response service.
"""

import logging
from typing import Optional

from app.adaptive.exercise_response import (
    DEFAULT_EXERCISE_RESPONSE_CONFIG,
    ExerciseResponseConfig,
    merge_exercise_response,
)
from app.db.repositories.exercise_response import ExerciseResponseRepository
from app.db.store import StoreErrorKind
from app.schemas.exercise_response import ExerciseResponseCreate, ExerciseResponseState

logger = logging.getLogger(__name__)


class ExerciseResponseService:
    """Service for per-exercise response profiles."""

    def __init__(
        self,
        repository: ExerciseResponseRepository,
        config: ExerciseResponseConfig = DEFAULT_EXERCISE_RESPONSE_CONFIG,
    ):
        self.repository = repository
        self.config = config

    def get(self, user_id: str, exercise_id: str) -> Optional[ExerciseResponseState]:
        result = self.repository.get(user_id, exercise_id)
        if result.ok:
            return result.data
        if result.error != StoreErrorKind.NOT_FOUND:
            logger.error(
                "Exercise response read failed for user %s, exercise %s: %s",
                user_id, exercise_id, result.message,
            )
        return None

    def record(
        self, user_id: str, exercise_id: str, observation: ExerciseResponseCreate,
    ) -> ExerciseResponseState:
        """Blend ``observation`` into the stored profile."""
        existing = self.get(user_id, exercise_id)
        profile = merge_exercise_response(user_id, exercise_id, existing, observation, self.config)

        result = self.repository.save(profile)
        if not result.ok:
            logger.error(
                "Exercise response write failed for user %s, exercise %s: %s",
                user_id, exercise_id, result.message,
            )
            return profile
        return result.data
