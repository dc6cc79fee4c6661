"""
Learning profile database model.

Per-user responsiveness scores (0-10) nudged in fixed increments by the
learning profile updater.
"""

import datetime

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel


class LearningProfile(SQLModel, table=True):
    """How a user responds to volume, intensity and frequency."""
    __tablename__ = "learning_profiles"

    user_id: str = Field(primary_key=True, max_length=64)

    response_to_volume: float = Field(default=5.0, nullable=False)
    response_to_intensity: float = Field(default=5.0, nullable=False)
    response_to_frequency: float = Field(default=5.0, nullable=False)
    recovery_capacity: float = Field(default=5.0, nullable=False)
    nutrition_adherence: float = Field(default=5.0, nullable=False)

    # Exercise ids
    exercise_preferences: list = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
    )
    exercise_avoidances: list = Field(
        default_factory=list,
        sa_column=Column(JSON, nullable=False),
    )

    learning_rate: float = Field(default=5.0, nullable=False)

    last_updated: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
