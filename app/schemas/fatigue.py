"""
User fatigue schemas.

Fatigue is a synthetic 0-100 proxy for accumulated training stress:

    0   = fully fresh
    100 = maximally fatigued

``baseline_fatigue`` is the floor rest can bring the score down to and
``recovery_rate`` is how many points one rest day removes.
"""

import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

RecoveryStatus = Literal["excellent", "good", "moderate", "poor"]


class UserFatigueState(BaseModel):
    """Current fatigue state of a user."""

    model_config = ConfigDict(from_attributes=True)

    user_id: str
    current_fatigue: float = Field(..., ge=0.0, le=100.0)
    baseline_fatigue: float = Field(..., ge=0.0, le=100.0)
    recovery_rate: float = Field(..., ge=0.0, le=10.0)
    recovery_status: RecoveryStatus = Field(
        "moderate",
        description="One of: excellent, good, moderate, poor",
    )
    ready_to_train: bool = True
    muscle_group_fatigue: dict[str, float] = Field(
        default_factory=dict,
        description="Per-muscle-group fatigue (0-100)",
    )
    last_updated: datetime.datetime


class WorkoutFatigueRequest(BaseModel):
    """Body of the 'apply workout' call."""

    intensity: float = Field(
        ..., ge=0.0, le=100.0,
        description="Session intensity on a 0-100 scale",
    )


class MuscleGroupFatigueResponse(BaseModel):
    """Per-muscle fatigue computed from the last 7 days of logs."""

    user_id: str
    as_of: datetime.datetime
    muscle_group_fatigue: dict[str, float]


class DeloadCheckResponse(BaseModel):
    """Whether a deload week is due."""

    user_id: str
    as_of: datetime.datetime
    needs_deload: bool
    current_fatigue: float
    recent_workouts: int = Field(
        ..., description="Workouts logged in the trailing window",
    )
    window_days: int
