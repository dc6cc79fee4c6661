"""
Workout log and exercise history schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CompletedSet(BaseModel):
    """One set performed during a session."""

    exercise_id: str = Field(..., min_length=1, max_length=100)
    weight: Optional[float] = Field(None, ge=0, description="Load in kg")
    reps: Optional[int] = Field(None, ge=0)
    completed_rpe: Optional[float] = Field(None, ge=0, le=10)
    rir: Optional[float] = Field(None, ge=0)


class WorkoutLogCreate(BaseModel):
    """Schema for logging a workout."""

    date: datetime.datetime
    duration: Optional[int] = Field(None, ge=0, description="Minutes")
    perceived_exertion: Optional[float] = Field(None, ge=0, le=10)
    notes: Optional[str] = None
    completed_sets: list[CompletedSet] = Field(default_factory=list)


class WorkoutLogResponse(WorkoutLogCreate):
    """A stored workout log."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: str


class ExerciseHistoryCreate(BaseModel):
    """Schema for recording the load used on an exercise."""

    exercise_id: str = Field(..., min_length=1, max_length=100)
    date: datetime.datetime
    weight: float = Field(..., ge=0)
    reps: int = Field(..., ge=0)
    rir: Optional[float] = Field(None, ge=0)


class ExerciseHistoryResponse(ExerciseHistoryCreate):
    """A stored exercise history entry."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: str
