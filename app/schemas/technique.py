"""
Training technique schemas.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.training import ExerciseType, MuscleGroup, TrainingGoal


class TechniqueCategory(str, Enum):
    INTENSITY = "intensity"
    VOLUME = "volume"
    TEMPO = "tempo"
    MECHANICAL = "mechanical"
    METABOLIC = "metabolic"
    COMPOUND = "compound"
    SPECIALIZED = "specialized"


class TechniqueDifficulty(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    ELITE = "elite"


class ExerciseSuitability(str, Enum):
    """Equipment / movement families a technique works with."""
    COMPOUND = "compound"
    ISOLATION = "isolation"
    MACHINE = "machine"
    FREE_WEIGHTS = "free_weights"
    BODYWEIGHT = "bodyweight"
    CABLE = "cable"


class TechniqueDetails(BaseModel):
    """A named intensity/volume technique and where it applies."""

    technique_id: str
    name: str
    description: str
    category: TechniqueCategory
    difficulty: TechniqueDifficulty
    suitable_exercises: list[ExerciseSuitability]
    exercise_types: list[ExerciseType] = Field(
        ..., description="Exercise roles the technique is recommended for",
    )
    applicable_goals: list[TrainingGoal]
    fatigue_impact: int = Field(..., ge=1, le=10)
    recovery_requirement: int = Field(..., ge=1, le=10)
    recommended_frequency: str
    implementation_notes: str
    benefits: list[str] = Field(default_factory=list)
    cautions: list[str] = Field(default_factory=list)
    muscle_group_focus: Optional[list[MuscleGroup]] = Field(
        None, description="None means no restriction",
    )
