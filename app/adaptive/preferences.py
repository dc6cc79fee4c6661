"""
Training preferences learned from workout history.

Preferences are recomputed from scratch, never merged:

- preferred time: most common time of day (hour < 12 morning, < 18
  afternoon, else evening); on ties the earlier slot wins,
- duration: mean session length in minutes (missing counts as 0),
- exercises per workout: mean number of distinct exercises,
- frequency: sessions per Sunday-start week that has any session.

Averages are rounded half-up.
"""

from __future__ import annotations

import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.adaptive.learning import week_start
from app.adaptive.rounding import round_half_up
from app.schemas.learning import PreferredTime, TrainingPreferencesState
from app.schemas.workout import WorkoutLogResponse


class PreferencesConfig(BaseModel):
    min_logs: int = Field(5, ge=1)
    morning_until_hour: int = 12
    afternoon_until_hour: int = 18

    default_time: PreferredTime = "any"
    default_duration: int = 60
    default_exercises_per_workout: int = 6
    default_frequency: int = 4


DEFAULT_PREFERENCES_CONFIG = PreferencesConfig()


def default_preferences(
    user_id: str,
    config: PreferencesConfig = DEFAULT_PREFERENCES_CONFIG,
    now: Optional[datetime.datetime] = None,
) -> TrainingPreferencesState:
    return TrainingPreferencesState(
        user_id=user_id,
        preferred_time=config.default_time,
        preferred_duration=config.default_duration,
        preferred_exercises_per_workout=config.default_exercises_per_workout,
        preferred_frequency=config.default_frequency,
        last_updated=now or datetime.datetime.utcnow(),
    )


def time_of_day(value: datetime.datetime, config: PreferencesConfig = DEFAULT_PREFERENCES_CONFIG) -> PreferredTime:
    if value.hour < config.morning_until_hour:
        return "morning"
    if value.hour < config.afternoon_until_hour:
        return "afternoon"
    return "evening"


def learn_preferences(
    user_id: str,
    logs: list[WorkoutLogResponse],
    config: PreferencesConfig = DEFAULT_PREFERENCES_CONFIG,
    now: Optional[datetime.datetime] = None,
) -> Optional[TrainingPreferencesState]:
    """Derive preferences from ``logs``; ``None`` when there are too few."""
    if len(logs) < config.min_logs:
        return None

    counts: dict[str, int] = {"morning": 0, "afternoon": 0, "evening": 0}
    for log in logs:
        counts[time_of_day(log.date, config)] += 1

    preferred_time: PreferredTime = "any"
    best = 0
    for slot, count in counts.items():
        if count > best:
            best = count
            preferred_time = slot

    total_duration = sum(log.duration or 0 for log in logs)
    total_exercises = sum(len({s.exercise_id for s in log.completed_sets}) for log in logs)
    weeks = {week_start(log.date) for log in logs}

    return TrainingPreferencesState(
        user_id=user_id,
        preferred_time=preferred_time,
        preferred_duration=round_half_up(total_duration / len(logs)),
        preferred_exercises_per_workout=round_half_up(total_exercises / len(logs)),
        preferred_frequency=round_half_up(len(logs) / len(weeks)),
        last_updated=now or datetime.datetime.utcnow(),
    )
