"""
Sleep, nutrition and meal log schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SleepLogCreate(BaseModel):
    date: datetime.datetime
    quality: float = Field(..., ge=1, le=10, description="Subjective quality 1-10")
    duration_min: Optional[int] = Field(None, ge=0)


class SleepLogResponse(SleepLogCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: str


class NutritionLogCreate(BaseModel):
    date: datetime.datetime
    adherence_score: float = Field(..., ge=1, le=10, description="Diet adherence 1-10")


class NutritionLogResponse(NutritionLogCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: str


class MealLogCreate(BaseModel):
    date: datetime.datetime
    meal_type: Optional[str] = Field(None, max_length=32)
    calories: Optional[float] = Field(None, ge=0)


class MealLogResponse(MealLogCreate):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: str
