"""
Workout log and exercise history database models.

``workout_logs`` stores whole sessions with their completed sets as JSON;
``exercise_history`` stores one row per exercise performance and feeds
the load recommender.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel


class WorkoutLog(SQLModel, table=True):
    """A completed training session."""
    __tablename__ = "workout_logs"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(nullable=False, index=True, max_length=64)
    date: datetime.datetime = Field(nullable=False, index=True)

    duration: Optional[int] = Field(default=None, description="Minutes")
    perceived_exertion: Optional[float] = Field(default=None)
    notes: Optional[str] = Field(default=None)

    # [{"exercise_id": ..., "weight": ..., "reps": ..., "completed_rpe": ..., "rir": ...}]
    completed_sets: list = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
    )

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)


class ExerciseHistoryEntry(SQLModel, table=True):
    """The load used on one exercise on one day."""
    __tablename__ = "exercise_history"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(nullable=False, index=True, max_length=64)
    exercise_id: str = Field(nullable=False, index=True, max_length=100)
    date: datetime.datetime = Field(nullable=False, index=True)

    weight: float = Field(nullable=False)
    reps: int = Field(nullable=False)
    rir: Optional[float] = Field(default=None)

    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
