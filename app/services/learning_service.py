"""
Learning profile and training preference services.

Reads never fail: a missing or unreadable profile yields the neutral
defaults.  Write failures are logged and the computed value is returned.
"""

import logging
from typing import Optional

from app.adaptive.learning import (
    DEFAULT_LEARNING_CONFIG,
    LearningConfig,
    default_learning_profile,
    update_learning_profile,
)
from app.adaptive.preferences import (
    DEFAULT_PREFERENCES_CONFIG,
    PreferencesConfig,
    default_preferences,
    learn_preferences,
)
from app.db.repositories.learning_profile import LearningProfileRepository
from app.db.repositories.preferences import PreferencesRepository
from app.db.repositories.wellness import WellnessRepository
from app.db.repositories.workout import WorkoutLogRepository
from app.db.store import StoreErrorKind
from app.schemas.learning import (
    ExercisePreferenceUpdate,
    LearningProfileState,
    TrainingPreferencesState,
)

logger = logging.getLogger(__name__)


class LearningService:
    """Service for the per-user learning profile."""

    def __init__(
        self,
        profile_repository: LearningProfileRepository,
        workout_repository: WorkoutLogRepository,
        wellness_repository: WellnessRepository,
        config: LearningConfig = DEFAULT_LEARNING_CONFIG,
    ):
        self.profile_repository = profile_repository
        self.workout_repository = workout_repository
        self.wellness_repository = wellness_repository
        self.config = config

    def get_profile(self, user_id: str) -> LearningProfileState:
        result = self.profile_repository.get(user_id)
        if result.ok:
            return result.data
        if result.error != StoreErrorKind.NOT_FOUND:
            logger.error("Learning profile read failed for user %s: %s", user_id, result.message)
        return default_learning_profile(user_id)

    def update_profile(self, user_id: str) -> LearningProfileState:
        """Recompute the profile from the full workout and meal history."""
        profile = self.get_profile(user_id)

        logs = self.workout_repository.list_for_user(user_id)
        if not logs.ok:
            logger.error("Workout logs unavailable for user %s: %s", user_id, logs.message)
            return profile
        if len(logs.data) < self.config.min_logs:
            logger.info(
                "User %s has %d workout logs, %d needed for a profile update",
                user_id, len(logs.data), self.config.min_logs,
            )
            return profile

        meals = self.wellness_repository.list_meals(user_id)
        if not meals.ok:
            logger.warning("Meal logs unavailable for user %s: %s", user_id, meals.message)
        meal_logs = meals.data if meals.ok else []

        updated = update_learning_profile(profile, logs.data, meal_logs, self.config)
        return self._save(updated)

    def set_exercise_preferences(
        self, user_id: str, update: ExercisePreferenceUpdate,
    ) -> LearningProfileState:
        profile = self.get_profile(user_id).model_copy(
            update={
                "exercise_preferences": list(update.exercise_preferences),
                "exercise_avoidances": list(update.exercise_avoidances),
            }
        )
        return self._save(profile)

    def _save(self, profile: LearningProfileState) -> LearningProfileState:
        result = self.profile_repository.save(profile)
        if not result.ok:
            logger.error("Learning profile write failed for user %s: %s", profile.user_id, result.message)
            return profile
        return result.data


class PreferencesService:
    """Service for training preferences learned from workout patterns."""

    def __init__(
        self,
        preferences_repository: PreferencesRepository,
        workout_repository: WorkoutLogRepository,
        config: PreferencesConfig = DEFAULT_PREFERENCES_CONFIG,
    ):
        self.preferences_repository = preferences_repository
        self.workout_repository = workout_repository
        self.config = config

    def get_preferences(self, user_id: str) -> TrainingPreferencesState:
        result = self.preferences_repository.get(user_id)
        if result.ok:
            return result.data
        if result.error != StoreErrorKind.NOT_FOUND:
            logger.error("Preferences read failed for user %s: %s", user_id, result.message)
        return default_preferences(user_id, self.config)

    def learn(self, user_id: str) -> Optional[TrainingPreferencesState]:
        """Recompute preferences; ``None`` with too little history."""
        logs = self.workout_repository.list_for_user(user_id)
        if not logs.ok:
            logger.error("Workout logs unavailable for user %s: %s", user_id, logs.message)
            return None

        preferences = learn_preferences(user_id, logs.data, self.config)
        if preferences is None:
            return None

        result = self.preferences_repository.save(preferences)
        if not result.ok:
            logger.error("Preferences write failed for user %s: %s", user_id, result.message)
            return preferences
        return result.data
