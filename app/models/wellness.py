"""
Sleep, nutrition and meal log database models.

These are inputs only: the load recommender reads the latest sleep and
nutrition scores, the learning updater reads meal log dates.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class SleepLog(SQLModel, table=True):
    """Subjective sleep quality for one night."""
    __tablename__ = "sleep_logs"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(nullable=False, index=True, max_length=64)
    date: datetime.datetime = Field(nullable=False, index=True)

    quality: float = Field(nullable=False, ge=1, le=10)
    duration_min: Optional[int] = Field(default=None)


class NutritionLog(SQLModel, table=True):
    """Daily diet adherence score."""
    __tablename__ = "nutrition_logs"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(nullable=False, index=True, max_length=64)
    date: datetime.datetime = Field(nullable=False, index=True)

    adherence_score: float = Field(nullable=False, ge=1, le=10)


class MealLog(SQLModel, table=True):
    """A single logged meal."""
    __tablename__ = "meal_logs"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: str = Field(nullable=False, index=True, max_length=64)
    date: datetime.datetime = Field(nullable=False, index=True)

    meal_type: Optional[str] = Field(default=None, max_length=32)
    calories: Optional[float] = Field(default=None)
