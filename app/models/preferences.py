"""
Training preferences database model.

One row per user, recomputed from workout logs rather than merged.
"""

import datetime

from sqlmodel import Field, SQLModel


class TrainingPreferences(SQLModel, table=True):
    """Preferred time of day, session length and weekly frequency."""
    __tablename__ = "training_preferences"

    user_id: str = Field(primary_key=True, max_length=64)

    preferred_time: str = Field(default="any", max_length=16, nullable=False)
    preferred_duration: int = Field(default=60, nullable=False)
    preferred_exercises_per_workout: int = Field(default=6, nullable=False)
    preferred_frequency: int = Field(default=4, nullable=False)

    last_updated: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
