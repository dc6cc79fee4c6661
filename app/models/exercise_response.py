"""
Exercise response profile database model.

One row per (user, exercise): effectiveness and fatigue impact blended
over time with an exponential moving average.
"""

import datetime

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel


class ExerciseResponseProfile(SQLModel, table=True):
    """How a single exercise works for a single user."""
    __tablename__ = "exercise_response_profiles"

    user_id: str = Field(primary_key=True, max_length=64)
    exercise_id: str = Field(primary_key=True, max_length=100)

    effectiveness_score: float = Field(nullable=False)
    fatigue_impact: float = Field(nullable=False)
    recovery_time: float = Field(nullable=False)

    # [low, high]
    preferred_rep_range: list = Field(
        default_factory=lambda: [8, 12],
        sa_column=Column(JSON, nullable=False),
    )
    preferred_rir_range: list = Field(
        default_factory=lambda: [1, 3],
        sa_column=Column(JSON, nullable=False),
    )

    notes: str = Field(default="", nullable=False)

    last_updated: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
