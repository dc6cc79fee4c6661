"""
Shared training vocabulary.

Enumerations used across the volume tables, the periodization planner,
the technique catalog and the exercise catalog.
"""

from enum import Enum


class TrainingLevel(str, Enum):
    """Training experience of the athlete."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    ELITE = "elite"


class TrainingGoal(str, Enum):
    """Primary adaptation the athlete is training for."""
    STRENGTH = "strength"
    HYPERTROPHY = "hypertrophy"
    ENDURANCE = "endurance"
    POWER = "power"
    WEIGHT_LOSS = "weight_loss"
    GENERAL_FITNESS = "general_fitness"


class ExerciseType(str, Enum):
    """Role of an exercise inside a session."""
    COMPOUND = "compound"
    ISOLATION = "isolation"
    ACCESSORY = "accessory"


class MuscleGroup(str, Enum):
    """Coarse muscle groups used by the volume tables."""
    CHEST = "chest"
    BACK = "back"
    LEGS = "legs"
    SHOULDERS = "shoulders"
    ARMS = "arms"
    CORE = "core"
    FULL_BODY = "full_body"


# Fine-grained groups tracked by the per-muscle fatigue map.
MUSCLE_GROUPS: list[str] = [
    "chest", "back", "legs", "shoulders", "arms", "core",
    "quads", "hamstrings", "glutes", "calves", "biceps", "triceps",
    "forearms", "traps", "lats", "abs", "lower_back", "upper_back",
]
