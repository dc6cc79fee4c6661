"""
Fatigue service.

Single read/write entry point for a user's fatigue state.

Error policy
------------
- Missing row: defaults are inserted and returned.
- Read failure: defaults are returned and the failure is logged.
- Write failure: logged; the computed state is still returned.

The caller therefore always gets a usable :class:`UserFatigueState`.
"""

import datetime
import logging
from typing import Optional

from app.adaptive import fatigue as model
from app.adaptive.fatigue import DEFAULT_FATIGUE_CONFIG, FatigueConfig
from app.db.repositories.fatigue import FatigueRepository
from app.db.repositories.workout import WorkoutLogRepository
from app.db.store import StoreErrorKind
from app.schemas.fatigue import DeloadCheckResponse, MuscleGroupFatigueResponse, UserFatigueState
from app.schemas.workout import WorkoutLogResponse

logger = logging.getLogger(__name__)


class FatigueService:
    """Service for fatigue business logic."""

    def __init__(
        self,
        fatigue_repository: FatigueRepository,
        workout_repository: WorkoutLogRepository,
        config: FatigueConfig = DEFAULT_FATIGUE_CONFIG,
    ):
        self.fatigue_repository = fatigue_repository
        self.workout_repository = workout_repository
        self.config = config

    def get_fatigue(self, user_id: str) -> UserFatigueState:
        result = self.fatigue_repository.get(user_id)
        if result.ok:
            return result.data

        defaults = model.default_fatigue_state(user_id, self.config)
        if result.error == StoreErrorKind.NOT_FOUND:
            logger.info("No fatigue state for user %s, creating defaults", user_id)
            created = self.fatigue_repository.create(defaults)
            if not created.ok:
                logger.error("Could not store default fatigue for user %s: %s", user_id, created.message)
        else:
            logger.error("Fatigue read failed for user %s (%s): %s", user_id, result.error.value, result.message)
        return defaults

    def apply_workout(self, user_id: str, intensity: float) -> UserFatigueState:
        state = model.apply_workout(self.get_fatigue(user_id), intensity, self.config)
        return self._save(state)

    def apply_rest(self, user_id: str) -> UserFatigueState:
        state = model.apply_rest(self.get_fatigue(user_id), self.config)
        return self._save(state)

    def check_deload(self, user_id: str, now: Optional[datetime.datetime] = None) -> DeloadCheckResponse:
        now = now or datetime.datetime.utcnow()
        fatigue = self.get_fatigue(user_id)
        logs = self._recent_logs(user_id, now, self.config.deload_window_days)
        return DeloadCheckResponse(
            user_id=user_id,
            as_of=now,
            needs_deload=model.needs_deload(fatigue.current_fatigue, logs, now, self.config),
            current_fatigue=fatigue.current_fatigue,
            recent_workouts=model.count_recent_workouts(logs, now, self.config.deload_window_days),
            window_days=self.config.deload_window_days,
        )

    def muscle_group_fatigue(
        self, user_id: str, now: Optional[datetime.datetime] = None,
    ) -> MuscleGroupFatigueResponse:
        now = now or datetime.datetime.utcnow()
        logs = self._recent_logs(user_id, now, self.config.muscle_window_days)
        return MuscleGroupFatigueResponse(
            user_id=user_id,
            as_of=now,
            muscle_group_fatigue=model.muscle_group_fatigue_map(logs, now, self.config),
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _save(self, state: UserFatigueState) -> UserFatigueState:
        result = self.fatigue_repository.save(state)
        if not result.ok:
            logger.error("Fatigue write failed for user %s: %s", state.user_id, result.message)
            return state
        return result.data

    def _recent_logs(
        self, user_id: str, now: datetime.datetime, days: int,
    ) -> list[WorkoutLogResponse]:
        since = now - datetime.timedelta(days=days)
        result = self.workout_repository.list_for_user(user_id, since=since)
        if not result.ok:
            logger.warning("Workout logs unavailable for user %s: %s", user_id, result.message)
            return []
        return result.data
