"""
Learning profile and training preference schemas.

Responsiveness scores live on a 0-10 scale; the updater only moves them
in fixed steps and keeps them inside [1, 10].
"""

import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

PreferredTime = Literal["morning", "afternoon", "evening", "any"]


class LearningProfileState(BaseModel):
    """Per-user responsiveness profile."""

    model_config = ConfigDict(from_attributes=True)

    user_id: str
    response_to_volume: float = Field(5.0, ge=0.0, le=10.0)
    response_to_intensity: float = Field(5.0, ge=0.0, le=10.0)
    response_to_frequency: float = Field(5.0, ge=0.0, le=10.0)
    recovery_capacity: float = Field(5.0, ge=0.0, le=10.0)
    nutrition_adherence: float = Field(5.0, ge=0.0, le=10.0)
    exercise_preferences: list[str] = Field(default_factory=list)
    exercise_avoidances: list[str] = Field(default_factory=list)
    learning_rate: float = Field(5.0, ge=0.0, le=10.0)
    last_updated: datetime.datetime


class ExercisePreferenceUpdate(BaseModel):
    """Replace the preferred / avoided exercise lists."""

    exercise_preferences: list[str] = Field(default_factory=list)
    exercise_avoidances: list[str] = Field(default_factory=list)


class TrainingPreferencesState(BaseModel):
    """Preferences derived from workout history."""

    model_config = ConfigDict(from_attributes=True)

    user_id: str
    preferred_time: PreferredTime = "any"
    preferred_duration: int = Field(60, ge=0, description="Minutes")
    preferred_exercises_per_workout: int = Field(6, ge=0)
    preferred_frequency: int = Field(4, ge=0, description="Days per week")
    last_updated: datetime.datetime
