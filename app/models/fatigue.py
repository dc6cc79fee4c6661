"""
User fatigue database model.

Defines the user_fatigue table: one row per user holding the scalar
fatigue state and the last known per-muscle-group fatigue map.
"""

import datetime

from sqlalchemy import JSON, Column
from sqlmodel import Field, SQLModel


class UserFatigue(SQLModel, table=True):
    """
    Scalar fatigue state of a user (0-100).

    Created lazily with defaults on first read, mutated after each workout
    (increase) or rest day (decrease, floored at the baseline).
    """
    __tablename__ = "user_fatigue"

    user_id: str = Field(primary_key=True, max_length=64)

    current_fatigue: float = Field(nullable=False)
    baseline_fatigue: float = Field(nullable=False)
    recovery_rate: float = Field(nullable=False)
    recovery_status: str = Field(default="moderate", max_length=16, nullable=False)
    ready_to_train: bool = Field(default=True, nullable=False)

    # {"chest": 30.0, "back": 25.0, ...}
    muscle_group_fatigue: dict = Field(
        default_factory=dict,
        sa_column=Column(JSON, nullable=False),
    )

    last_updated: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
