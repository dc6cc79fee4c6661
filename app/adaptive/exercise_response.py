"""
Per-exercise response profile.

The first observation is stored as is.  Later observations are blended
into the stored profile with an exponential moving average::

    score' = 0.7 × score + 0.3 × observation

Recovery time is estimated at 12 hours per fatigue-impact point and is
blended the same way.
"""

from __future__ import annotations

import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.exercise_response import ExerciseResponseCreate, ExerciseResponseState


class ExerciseResponseConfig(BaseModel):
    history_weight: float = Field(0.7, ge=0.0, le=1.0)
    hours_per_fatigue_point: float = 12.0
    default_rep_range: tuple[int, int] = (8, 12)
    default_rir_range: tuple[int, int] = (1, 3)

    @property
    def observation_weight(self) -> float:
        return 1.0 - self.history_weight


DEFAULT_EXERCISE_RESPONSE_CONFIG = ExerciseResponseConfig()


def merge_exercise_response(
    user_id: str,
    exercise_id: str,
    existing: Optional[ExerciseResponseState],
    observation: ExerciseResponseCreate,
    config: ExerciseResponseConfig = DEFAULT_EXERCISE_RESPONSE_CONFIG,
    now: Optional[datetime.datetime] = None,
) -> ExerciseResponseState:
    """Profile after recording ``observation``."""
    now = now or datetime.datetime.utcnow()
    recovery_time = observation.fatigue_impact * config.hours_per_fatigue_point

    if existing is None:
        return ExerciseResponseState(
            user_id=user_id,
            exercise_id=exercise_id,
            effectiveness_score=observation.effectiveness_score,
            fatigue_impact=observation.fatigue_impact,
            recovery_time=recovery_time,
            preferred_rep_range=config.default_rep_range,
            preferred_rir_range=config.default_rir_range,
            notes=observation.notes,
            last_updated=now,
        )

    old, new = config.history_weight, config.observation_weight
    return ExerciseResponseState(
        user_id=user_id,
        exercise_id=exercise_id,
        effectiveness_score=existing.effectiveness_score * old + observation.effectiveness_score * new,
        fatigue_impact=existing.fatigue_impact * old + observation.fatigue_impact * new,
        recovery_time=existing.recovery_time * old + recovery_time * new,
        preferred_rep_range=existing.preferred_rep_range,
        preferred_rir_range=existing.preferred_rir_range,
        notes=observation.notes or existing.notes,
        last_updated=now,
    )
