"""
Recommendation schemas.

Two kinds of advice are produced:

* :class:`PersonalizedRecommendationRecord`: persisted, immutable advice
  generated from the learning profile and the current fatigue.
* :class:`NextWorkoutRecommendation`: a planned training day with its
  set counts and RIR targets adjusted to the current fatigue.
"""

import datetime
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

RecommendationType = Literal["training", "nutrition", "recovery", "lifestyle"]
Priority = Literal["low", "medium", "high"]


class PersonalizedRecommendationRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    type: RecommendationType
    title: str
    description: str
    priority: Priority
    base_reason: str
    data_points: dict[str, Any] = Field(default_factory=dict)
    created: datetime.datetime
    expires: Optional[datetime.datetime] = None
    implemented: bool = False
    result: Optional[str] = None


# ----------------------------------------------------------------------
# Next workout
# ----------------------------------------------------------------------


class PlannedSet(BaseModel):
    target_reps: Optional[int] = Field(None, ge=1)
    target_rir: Optional[float] = Field(None, ge=0)
    weight: Optional[float] = Field(None, ge=0)


class PlannedExercise(BaseModel):
    exercise_id: str
    sets: list[PlannedSet] = Field(default_factory=list)


class WorkoutDayPlan(BaseModel):
    """One day of a routine."""

    name: str = "Day 1"
    exercises: list[PlannedExercise] = Field(default_factory=list)


class NextWorkoutRecommendation(BaseModel):
    recommended_day: WorkoutDayPlan
    fatigue_level: float
    volume_adjustment: float = Field(..., description="Percent change in sets")
    intensity_adjustment: float = Field(..., description="Percent change in intensity")
    message: str
