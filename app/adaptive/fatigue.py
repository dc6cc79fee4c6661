"""
Fatigue model: a synthetic 0-100 score of accumulated training stress.

Model
-----
A workout adds half of its intensity to the score, capped at 100::

    f' = min(100, f + intensity × 0.5)

A rest day removes ``recovery_rate`` points but never drops below the
user's baseline::

    f' = max(baseline, f - recovery_rate)

The recovery status is a pure function of the score:

    < 30 excellent · < 50 good · < 70 moderate · else poor

and the user is ready to train while the score is below 80.

Per-muscle fatigue
------------------
Logged sets of the trailing 7 days are spread over the muscle groups of
each exercise (exercise catalog lookup).  For one exercise in one log::

    volume = Σ weight × reps × rpe_factor
    rpe_factor = (10 - rpe) / 10 + 0.5     (1 when no RPE was logged)
    decay = max(0, 1 - whole_days_since × 0.2)

primary muscles receive ``volume × 0.01 × decay`` and secondary muscles
``volume × 0.005 × decay``.  Each group is capped at 100.

All coefficients are hand-tuned policy; they live in :class:`FatigueConfig`
so they can be overridden without touching the formulas.
"""

from __future__ import annotations

import datetime
import math
from typing import Iterable, Optional

from pydantic import BaseModel, Field

from app.adaptive.exercise_catalog import get_exercise
from app.schemas.fatigue import RecoveryStatus, UserFatigueState
from app.schemas.training import MUSCLE_GROUPS
from app.schemas.workout import WorkoutLogResponse

# ======================================================================
# Configuration
# ======================================================================

_DEFAULT_MUSCLE_GROUP_FATIGUE: dict[str, float] = {
    "chest": 30.0,
    "back": 25.0,
    "legs": 40.0,
    "shoulders": 20.0,
    "arms": 35.0,
    "core": 15.0,
}


class FatigueConfig(BaseModel):
    """Coefficients and defaults of the fatigue model."""

    default_current_fatigue: float = 30.0
    default_baseline_fatigue: float = 20.0
    default_recovery_rate: float = 5.0
    default_muscle_group_fatigue: dict[str, float] = Field(
        default_factory=lambda: dict(_DEFAULT_MUSCLE_GROUP_FATIGUE)
    )

    workout_intensity_factor: float = Field(0.5, ge=0.0)
    max_fatigue: float = 100.0
    ready_threshold: float = Field(80.0, description="Ready to train below this score")

    deload_fatigue_threshold: float = 70.0
    deload_window_days: int = Field(21, ge=1)
    deload_max_workouts: int = Field(12, ge=1, description="More than this many in the window triggers a deload")

    muscle_window_days: int = Field(7, ge=1)
    primary_muscle_factor: float = 0.01
    secondary_muscle_factor: float = 0.005
    daily_decay: float = Field(0.2, ge=0.0, description="Fraction of a session's fatigue lost per day")


DEFAULT_FATIGUE_CONFIG = FatigueConfig()

# ======================================================================
# Status labelling
# ======================================================================

_STATUS_THRESHOLDS: list[tuple[RecoveryStatus, float, float]] = [
    ("excellent", float("-inf"), 30.0),
    ("good", 30.0, 50.0),
    ("moderate", 50.0, 70.0),
    ("poor", 70.0, float("inf")),
]


def recovery_status(fatigue: float) -> RecoveryStatus:
    """Map a fatigue score to its recovery status."""
    for label, low, high in _STATUS_THRESHOLDS:
        if low <= fatigue < high:
            return label
    return "poor"


def fatigue_message(fatigue: float) -> str:
    """Short advice for the current fatigue level."""
    if fatigue > 80:
        return "Very high fatigue. Consider a rest day or a light recovery session."
    if fatigue > 60:
        return "High fatigue. Reduce today's training volume and intensity."
    if fatigue > 40:
        return "Moderate fatigue. Train as usual but listen to your body."
    if fatigue > 20:
        return "Low fatigue. Good moment for a productive session."
    return "Very low fatigue. Make the most of it with an intense or high-volume session."


# ======================================================================
# State transitions
# ======================================================================


def default_fatigue_state(
    user_id: str,
    config: FatigueConfig = DEFAULT_FATIGUE_CONFIG,
    now: Optional[datetime.datetime] = None,
) -> UserFatigueState:
    """State handed out for a user with no stored fatigue."""
    current = config.default_current_fatigue
    return UserFatigueState(
        user_id=user_id,
        current_fatigue=current,
        baseline_fatigue=config.default_baseline_fatigue,
        recovery_rate=config.default_recovery_rate,
        recovery_status="moderate",
        ready_to_train=True,
        muscle_group_fatigue=dict(config.default_muscle_group_fatigue),
        last_updated=now or datetime.datetime.utcnow(),
    )


def _with_fatigue(
    state: UserFatigueState,
    new_fatigue: float,
    config: FatigueConfig,
    now: Optional[datetime.datetime],
) -> UserFatigueState:
    return state.model_copy(
        update={
            "current_fatigue": new_fatigue,
            "recovery_status": recovery_status(new_fatigue),
            "ready_to_train": new_fatigue < config.ready_threshold,
            "last_updated": now or datetime.datetime.utcnow(),
        }
    )


def apply_workout(
    state: UserFatigueState,
    intensity: float,
    config: FatigueConfig = DEFAULT_FATIGUE_CONFIG,
    now: Optional[datetime.datetime] = None,
) -> UserFatigueState:
    """Fatigue after a workout of ``intensity`` (0-100)."""
    new_fatigue = min(
        config.max_fatigue,
        state.current_fatigue + intensity * config.workout_intensity_factor,
    )
    return _with_fatigue(state, new_fatigue, config, now)


def apply_rest(
    state: UserFatigueState,
    config: FatigueConfig = DEFAULT_FATIGUE_CONFIG,
    now: Optional[datetime.datetime] = None,
) -> UserFatigueState:
    """Fatigue after a rest day, floored at the baseline."""
    new_fatigue = max(
        state.baseline_fatigue,
        state.current_fatigue - state.recovery_rate,
    )
    return _with_fatigue(state, new_fatigue, config, now)


# ======================================================================
# Deload and per-muscle analysis
# ======================================================================


def count_recent_workouts(
    logs: Iterable[WorkoutLogResponse],
    now: datetime.datetime,
    window_days: int,
) -> int:
    since = now - datetime.timedelta(days=window_days)
    return sum(1 for log in logs if log.date >= since)


def needs_deload(
    current_fatigue: float,
    logs: Iterable[WorkoutLogResponse],
    now: datetime.datetime,
    config: FatigueConfig = DEFAULT_FATIGUE_CONFIG,
) -> bool:
    """High fatigue, or too many sessions in the trailing window."""
    if current_fatigue > config.deload_fatigue_threshold:
        return True
    recent = count_recent_workouts(logs, now, config.deload_window_days)
    return recent > config.deload_max_workouts


def _rpe_factor(rpe: Optional[float]) -> float:
    return (10 - rpe) / 10 + 0.5 if rpe else 1.0


def muscle_group_fatigue_map(
    logs: Iterable[WorkoutLogResponse],
    now: datetime.datetime,
    config: FatigueConfig = DEFAULT_FATIGUE_CONFIG,
) -> dict[str, float]:
    """Fatigue per muscle group from the last ``muscle_window_days`` of logs."""
    fatigue_map: dict[str, float] = {group: 0.0 for group in MUSCLE_GROUPS}
    since = now - datetime.timedelta(days=config.muscle_window_days)

    for log in logs:
        if log.date < since:
            continue

        days_since = math.floor((now - log.date) / datetime.timedelta(days=1))
        decay = max(0.0, 1 - days_since * config.daily_decay)

        # dict.fromkeys keeps first-seen order of exercises
        for exercise_id in dict.fromkeys(s.exercise_id for s in log.completed_sets):
            exercise = get_exercise(exercise_id)
            if exercise is None:
                continue

            volume = sum(
                (s.weight or 0) * (s.reps or 0) * _rpe_factor(s.completed_rpe)
                for s in log.completed_sets
                if s.exercise_id == exercise_id
            )

            for group in exercise.primary_muscles:
                if group in fatigue_map:
                    fatigue_map[group] += volume * config.primary_muscle_factor * decay
            for group in exercise.secondary_muscles:
                if group in fatigue_map:
                    fatigue_map[group] += volume * config.secondary_muscle_factor * decay

    return {group: min(config.max_fatigue, value) for group, value in fatigue_map.items()}
