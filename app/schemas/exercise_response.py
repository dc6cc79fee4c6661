"""
Exercise response schemas.
"""

import datetime

from pydantic import BaseModel, ConfigDict, Field


class ExerciseResponseCreate(BaseModel):
    """A new observation of how an exercise felt."""

    effectiveness_score: float = Field(..., ge=0, le=10)
    fatigue_impact: float = Field(..., ge=0, le=10)
    notes: str = ""


class ExerciseResponseState(BaseModel):
    """Blended response profile for one (user, exercise)."""

    model_config = ConfigDict(from_attributes=True)

    user_id: str
    exercise_id: str
    effectiveness_score: float = Field(..., ge=0, le=10)
    fatigue_impact: float = Field(..., ge=0, le=10)
    recovery_time: float = Field(..., ge=0, description="Hours")
    preferred_rep_range: tuple[int, int] = (8, 12)
    preferred_rir_range: tuple[int, int] = (1, 3)
    notes: str = ""
    last_updated: datetime.datetime
