"""
Weight recommendation schemas.

A recommendation starts from the most recent load logged for an exercise
and applies a sum of percentage adjustments.  Every adjustment that was
considered is reported as a factor so the result is auditable.
"""

from typing import Literal, Optional

from pydantic import BaseModel, Field

PhaseOption = Literal["volume", "strength", "power", "deload", "maintenance"]
PerformanceTrend = Literal["improved", "maintained", "decreased"]


class WeightRecommendationRequest(BaseModel):
    """Inputs for the load recommender."""

    exercise_id: str = Field(..., min_length=1, max_length=100)
    target_reps: int = Field(..., ge=1)
    target_rir: float = Field(..., ge=0)
    consider_fatigue: bool = Field(
        True, description="Apply the fatigue adjustment",
    )
    consider_sleep: bool = Field(
        False, description="Read the latest sleep quality and apply it",
    )
    consider_nutrition: bool = Field(
        False, description="Read the latest nutrition adherence and apply it",
    )
    training_phase: Optional[PhaseOption] = None
    previous_performance: Optional[PerformanceTrend] = None


class WeightFactor(BaseModel):
    """One adjustment applied to the last weight."""

    factor: str
    impact: float = Field(..., description="Percentage points (+5.0 = +5%)")


class AlternativeWeights(BaseModel):
    conservative: float
    standard: float
    aggressive: float


class WeightRecommendation(BaseModel):
    """Recommended load with its explanation."""

    recommended_weight: float
    explanation: str
    factors: list[WeightFactor]
    alternative_weights: AlternativeWeights
