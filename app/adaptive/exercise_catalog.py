"""
Built-in exercise catalog.

Each entry is an :class:`ExerciseProfile` naming the exercise role
(compound / isolation / accessory) and the muscle groups it loads.  The
per-muscle fatigue map uses ``primary_muscles`` and ``secondary_muscles``
to spread logged volume across the 18 tracked groups
(:data:`~app.schemas.training.MUSCLE_GROUPS`).

Exercises that are not in the catalog are skipped by the fatigue map.
To add a new exercise, call :func:`register_exercise` or simply append to
``_EXERCISES`` at import time.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from app.schemas.training import ExerciseType


class ExerciseProfile(BaseModel):
    """Catalog entry describing a single exercise."""

    exercise_id: str = Field(..., description="Unique slug, e.g. 'back_squat'")
    display_name: str = Field(..., description="Human-readable name")
    exercise_type: ExerciseType
    primary_muscles: list[str] = Field(default_factory=list)
    secondary_muscles: list[str] = Field(default_factory=list)
    category: str = Field(
        default="",
        description="Movement category, e.g. 'lower_body', 'upper_push'",
    )


# ======================================================================
# Catalog storage
# ======================================================================

EXERCISE_CATALOG: dict[str, ExerciseProfile] = {}


def register_exercise(profile: ExerciseProfile) -> None:
    """Register an exercise profile in the global catalog."""
    EXERCISE_CATALOG[profile.exercise_id] = profile


def get_exercise(exercise_id: str) -> ExerciseProfile | None:
    """Look up an exercise by its ID.  Returns ``None`` if not found."""
    return EXERCISE_CATALOG.get(exercise_id)


# Aliases for brevity in the table below
C = ExerciseType.COMPOUND
I = ExerciseType.ISOLATION
A = ExerciseType.ACCESSORY

# ======================================================================
# Built-in exercises
# ======================================================================

_EXERCISES: list[ExerciseProfile] = [
    # ── Lower Body ────────────────────────────────────────────────
    ExerciseProfile(
        exercise_id="back_squat", display_name="Back Squat", exercise_type=C,
        primary_muscles=["legs", "quads", "glutes"],
        secondary_muscles=["hamstrings", "core", "lower_back"],
        category="lower_body",
    ),
    ExerciseProfile(
        exercise_id="front_squat", display_name="Front Squat", exercise_type=C,
        primary_muscles=["legs", "quads"],
        secondary_muscles=["glutes", "core", "upper_back"],
        category="lower_body",
    ),
    ExerciseProfile(
        exercise_id="deadlift", display_name="Deadlift", exercise_type=C,
        primary_muscles=["legs", "hamstrings", "glutes", "lower_back"],
        secondary_muscles=["back", "traps", "forearms", "quads"],
        category="lower_body",
    ),
    ExerciseProfile(
        exercise_id="romanian_deadlift", display_name="Romanian Deadlift", exercise_type=C,
        primary_muscles=["legs", "hamstrings", "glutes"],
        secondary_muscles=["lower_back", "forearms"],
        category="lower_body",
    ),
    ExerciseProfile(
        exercise_id="leg_press", display_name="Leg Press", exercise_type=C,
        primary_muscles=["legs", "quads"],
        secondary_muscles=["glutes"],
        category="lower_body",
    ),
    ExerciseProfile(
        exercise_id="bulgarian_split_squat", display_name="Bulgarian Split Squat", exercise_type=C,
        primary_muscles=["legs", "quads", "glutes"],
        secondary_muscles=["hamstrings", "core"],
        category="lower_body",
    ),
    ExerciseProfile(
        exercise_id="leg_extension", display_name="Leg Extension", exercise_type=I,
        primary_muscles=["quads"],
        category="lower_body",
    ),
    ExerciseProfile(
        exercise_id="leg_curl", display_name="Leg Curl", exercise_type=I,
        primary_muscles=["hamstrings"],
        secondary_muscles=["calves"],
        category="lower_body",
    ),
    ExerciseProfile(
        exercise_id="hip_thrust", display_name="Hip Thrust", exercise_type=C,
        primary_muscles=["glutes"],
        secondary_muscles=["hamstrings", "core"],
        category="lower_body",
    ),
    ExerciseProfile(
        exercise_id="calf_raise", display_name="Standing Calf Raise", exercise_type=A,
        primary_muscles=["calves"],
        category="lower_body",
    ),
    # ── Upper Push ────────────────────────────────────────────────
    ExerciseProfile(
        exercise_id="bench_press", display_name="Bench Press", exercise_type=C,
        primary_muscles=["chest"],
        secondary_muscles=["shoulders", "triceps", "arms"],
        category="upper_push",
    ),
    ExerciseProfile(
        exercise_id="overhead_press", display_name="Overhead Press", exercise_type=C,
        primary_muscles=["shoulders"],
        secondary_muscles=["triceps", "arms", "core", "upper_back"],
        category="upper_push",
    ),
    ExerciseProfile(
        exercise_id="incline_db_press", display_name="Incline Dumbbell Press", exercise_type=C,
        primary_muscles=["chest"],
        secondary_muscles=["shoulders", "triceps"],
        category="upper_push",
    ),
    ExerciseProfile(
        exercise_id="dip", display_name="Dip", exercise_type=C,
        primary_muscles=["chest", "triceps"],
        secondary_muscles=["shoulders", "arms"],
        category="upper_push",
    ),
    ExerciseProfile(
        exercise_id="cable_fly", display_name="Cable Fly", exercise_type=I,
        primary_muscles=["chest"],
        secondary_muscles=["shoulders"],
        category="upper_push",
    ),
    ExerciseProfile(
        exercise_id="lateral_raise", display_name="Lateral Raise", exercise_type=I,
        primary_muscles=["shoulders"],
        secondary_muscles=["traps"],
        category="upper_push",
    ),
    ExerciseProfile(
        exercise_id="tricep_pushdown", display_name="Tricep Pushdown", exercise_type=I,
        primary_muscles=["triceps", "arms"],
        category="upper_push",
    ),
    # ── Upper Pull ────────────────────────────────────────────────
    ExerciseProfile(
        exercise_id="barbell_row", display_name="Barbell Row", exercise_type=C,
        primary_muscles=["back", "lats", "upper_back"],
        secondary_muscles=["biceps", "arms", "lower_back", "shoulders"],
        category="upper_pull",
    ),
    ExerciseProfile(
        exercise_id="pull_up", display_name="Pull-Up", exercise_type=C,
        primary_muscles=["back", "lats"],
        secondary_muscles=["biceps", "arms", "forearms"],
        category="upper_pull",
    ),
    ExerciseProfile(
        exercise_id="lat_pulldown", display_name="Lat Pulldown", exercise_type=C,
        primary_muscles=["back", "lats"],
        secondary_muscles=["biceps", "arms"],
        category="upper_pull",
    ),
    ExerciseProfile(
        exercise_id="bicep_curl", display_name="Bicep Curl", exercise_type=I,
        primary_muscles=["biceps", "arms"],
        secondary_muscles=["forearms"],
        category="upper_pull",
    ),
    ExerciseProfile(
        exercise_id="face_pull", display_name="Face Pull", exercise_type=A,
        primary_muscles=["shoulders", "upper_back"],
        secondary_muscles=["traps"],
        category="upper_pull",
    ),
    ExerciseProfile(
        exercise_id="barbell_shrug", display_name="Barbell Shrug", exercise_type=A,
        primary_muscles=["traps"],
        secondary_muscles=["forearms"],
        category="upper_pull",
    ),
    # ── Core ──────────────────────────────────────────────────────
    ExerciseProfile(
        exercise_id="cable_crunch", display_name="Cable Crunch", exercise_type=A,
        primary_muscles=["core", "abs"],
        category="core",
    ),
    ExerciseProfile(
        exercise_id="back_extension", display_name="Back Extension", exercise_type=A,
        primary_muscles=["lower_back"],
        secondary_muscles=["glutes", "hamstrings"],
        category="core",
    ),
    ExerciseProfile(
        exercise_id="plank", display_name="Plank", exercise_type=A,
        primary_muscles=["core", "abs"],
        secondary_muscles=["shoulders"],
        category="core",
    ),
    # ── Carry ─────────────────────────────────────────────────────
    ExerciseProfile(
        exercise_id="farmers_carry", display_name="Farmer's Carry", exercise_type=A,
        primary_muscles=["forearms", "traps"],
        secondary_muscles=["core", "glutes"],
        category="carry",
    ),
]

# Auto-register all built-in exercises
for _ex in _EXERCISES:
    register_exercise(_ex)
