"""
Learning profile updater.

Batch recompute over a user's workout and meal history.  Needs at least
``min_logs`` workouts; with fewer logs the profile is returned unchanged.

Every score moves by a fixed ``step`` (0.5) and stays in [1, 10]:

* **volume**: sessions with more than 20 sets,
* **intensity**: sessions whose mean RPE is above 8,
* **frequency**: Sunday-start weeks with 5 or more sessions.

For each subset a *progress signal* is computed (see
:func:`progress_signal`); a signal above 0.1 raises the score, a negative
one lowers it, and no signal (nothing to compare against) leaves it alone.

* **recovery capacity**: longest run of back-to-back training days;
  4 or more raises it, 1 or less lowers it.
* **nutrition adherence**: share of days between the first and last meal
  log that have a meal entry; above 0.8 raises it, below 0.5 lowers it.

Progress signal
---------------
For each exercise of a session in the subset, the best set tonnage
(weight × reps) is compared with the next later session that trained the
same exercise::

    change = (later - earlier) / earlier

The signal is the mean change over all such pairs.
"""

from __future__ import annotations

import datetime
from typing import Iterable, Optional

from pydantic import BaseModel, Field

from app.schemas.learning import LearningProfileState
from app.schemas.wellness import MealLogResponse
from app.schemas.workout import WorkoutLogResponse

# ======================================================================
# Configuration
# ======================================================================


class LearningConfig(BaseModel):
    """Thresholds of the learning profile updater."""

    min_logs: int = Field(10, ge=1)
    step: float = Field(0.5, gt=0.0)
    min_score: float = 1.0
    max_score: float = 10.0

    high_volume_sets: int = Field(20, description="More sets than this is a high-volume session")
    high_intensity_rpe: float = Field(8.0, description="Mean RPE above this is a high-intensity session")
    high_frequency_sessions: int = Field(5, description="Sessions per week for a high-frequency week")

    positive_progress: float = 0.1
    negative_progress: float = 0.0

    good_recovery_streak: int = 4
    poor_recovery_streak: int = 1

    high_adherence: float = 0.8
    low_adherence: float = 0.5


DEFAULT_LEARNING_CONFIG = LearningConfig()


# ======================================================================
# Helpers
# ======================================================================


def week_start(value: datetime.datetime) -> datetime.date:
    """Sunday on or before ``value``."""
    day = value.date()
    return day - datetime.timedelta(days=(day.weekday() + 1) % 7)


def _best_tonnage(log: WorkoutLogResponse, exercise_id: str) -> float:
    return max(
        ((s.weight or 0) * (s.reps or 0) for s in log.completed_sets if s.exercise_id == exercise_id),
        default=0.0,
    )


def progress_signal(
    sessions: Iterable[WorkoutLogResponse],
    all_logs: Iterable[WorkoutLogResponse],
) -> Optional[float]:
    """Mean relative change in best-set tonnage after ``sessions``.

    ``None`` when no exercise of the sessions was trained again later.
    """
    ordered = sorted(all_logs, key=lambda log: log.date)
    changes: list[float] = []

    for session in sessions:
        for exercise_id in dict.fromkeys(s.exercise_id for s in session.completed_sets):
            earlier = _best_tonnage(session, exercise_id)
            if earlier <= 0:
                continue
            later_log = next(
                (
                    log for log in ordered
                    if log.date > session.date
                    and any(s.exercise_id == exercise_id for s in log.completed_sets)
                ),
                None,
            )
            if later_log is None:
                continue
            changes.append((_best_tonnage(later_log, exercise_id) - earlier) / earlier)

    if not changes:
        return None
    return sum(changes) / len(changes)


def longest_consecutive_days(logs: Iterable[WorkoutLogResponse]) -> int:
    """Longest run of logs exactly one whole day apart.

    A run of N back-to-back days counts N - 1 day-to-day steps.
    """
    dates = sorted(log.date for log in logs)
    longest = current = 0
    for prev, curr in zip(dates, dates[1:]):
        if (curr - prev).days == 1:
            current += 1
        else:
            longest = max(longest, current)
            current = 0
    return max(longest, current)


def meal_adherence_rate(meals: list[MealLogResponse]) -> Optional[float]:
    """Share of days in the logged span that have at least one meal."""
    if not meals:
        return None
    days_with_logs = {m.date.date() for m in meals}
    first = min(m.date for m in meals)
    last = max(m.date for m in meals)
    total_days = (last - first).days + 1
    return len(days_with_logs) / total_days


# ======================================================================
# Updater
# ======================================================================


def _nudge(score: float, signal: Optional[float], config: LearningConfig) -> float:
    if signal is None:
        return score
    if signal > config.positive_progress:
        return min(config.max_score, score + config.step)
    if signal < config.negative_progress:
        return max(config.min_score, score - config.step)
    return score


def _mean_rpe(log: WorkoutLogResponse) -> Optional[float]:
    if not log.completed_sets:
        return None
    return sum(s.completed_rpe or 0 for s in log.completed_sets) / len(log.completed_sets)


def update_learning_profile(
    profile: LearningProfileState,
    workout_logs: list[WorkoutLogResponse],
    meal_logs: list[MealLogResponse],
    config: LearningConfig = DEFAULT_LEARNING_CONFIG,
    now: Optional[datetime.datetime] = None,
) -> LearningProfileState:
    """Return the profile adjusted to the given history."""
    if len(workout_logs) < config.min_logs:
        return profile

    updated = profile.model_copy(deep=True)

    # Volume
    high_volume = [log for log in workout_logs if len(log.completed_sets) > config.high_volume_sets]
    if high_volume:
        updated.response_to_volume = _nudge(
            updated.response_to_volume, progress_signal(high_volume, workout_logs), config,
        )

    # Intensity
    high_intensity = [
        log for log in workout_logs
        if (_mean_rpe(log) or 0.0) > config.high_intensity_rpe
    ]
    if high_intensity:
        updated.response_to_intensity = _nudge(
            updated.response_to_intensity, progress_signal(high_intensity, workout_logs), config,
        )

    # Frequency
    weeks: dict[datetime.date, list[WorkoutLogResponse]] = {}
    for log in workout_logs:
        weeks.setdefault(week_start(log.date), []).append(log)
    signals = []
    for logs in weeks.values():
        if len(logs) < config.high_frequency_sessions:
            continue
        signal = progress_signal(logs, workout_logs)
        if signal is not None:
            signals.append(signal)
    if signals:
        updated.response_to_frequency = _nudge(
            updated.response_to_frequency, sum(signals) / len(signals), config,
        )

    # Recovery
    streak = longest_consecutive_days(workout_logs)
    if streak >= config.good_recovery_streak:
        updated.recovery_capacity = min(config.max_score, updated.recovery_capacity + config.step)
    elif streak <= config.poor_recovery_streak:
        updated.recovery_capacity = max(config.min_score, updated.recovery_capacity - config.step)

    # Nutrition
    adherence = meal_adherence_rate(meal_logs)
    if adherence is not None:
        if adherence > config.high_adherence:
            updated.nutrition_adherence = min(config.max_score, updated.nutrition_adherence + config.step)
        elif adherence < config.low_adherence:
            updated.nutrition_adherence = max(config.min_score, updated.nutrition_adherence - config.step)

    updated.last_updated = now or datetime.datetime.utcnow()
    return updated


def default_learning_profile(
    user_id: str,
    now: Optional[datetime.datetime] = None,
) -> LearningProfileState:
    """Neutral profile: every score at 5, no exercise preferences."""
    return LearningProfileState(user_id=user_id, last_updated=now or datetime.datetime.utcnow())
