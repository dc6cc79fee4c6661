"""
Advanced training technique catalog.

Twelve named techniques (drop sets, rest-pause, myo-reps, ...) with the
conditions under which they apply:

- ``applicable_goals``: training goals the technique serves,
- ``difficulty``: the lowest training level that should use it,
- ``suitable_exercises``: equipment / movement families,
- ``exercise_types``: exercise roles (compound / isolation / accessory),
- ``muscle_group_focus``: optional restriction; ``None`` means any group.

Difficulty ladder used by :func:`recommended_techniques`::

    beginner     -> beginner
    intermediate -> beginner, intermediate
    advanced     -> beginner, intermediate, advanced
    elite        -> all
"""

from __future__ import annotations

from typing import Optional

from app.schemas.technique import (
    ExerciseSuitability,
    TechniqueCategory,
    TechniqueDetails,
    TechniqueDifficulty,
)
from app.schemas.training import ExerciseType, MuscleGroup, TrainingGoal, TrainingLevel

# Aliases for brevity in the catalog below
_S = ExerciseSuitability
_G = TrainingGoal
_M = MuscleGroup
_COMP = ExerciseType.COMPOUND
_ISO = ExerciseType.ISOLATION
_ACC = ExerciseType.ACCESSORY

_ALL_SUITABILITY = [_S.COMPOUND, _S.ISOLATION, _S.MACHINE, _S.FREE_WEIGHTS, _S.CABLE]

_HIGH_FATIGUE_CAUTIONS = [
    "High local and systemic fatigue",
    "Can compromise recovery",
    "Not recommended for beginners",
]

# ======================================================================
# Catalog
# ======================================================================

_TECHNIQUES: list[TechniqueDetails] = [
    TechniqueDetails(
        technique_id="drop_sets",
        name="Drop Sets",
        description="Take a set to or near failure, cut the weight at once and keep going without rest.",
        category=TechniqueCategory.INTENSITY,
        difficulty=TechniqueDifficulty.INTERMEDIATE,
        suitable_exercises=[_S.ISOLATION, _S.MACHINE, _S.CABLE],
        exercise_types=[_ISO, _ACC],
        applicable_goals=[_G.HYPERTROPHY, _G.ENDURANCE],
        fatigue_impact=8,
        recovery_requirement=7,
        recommended_frequency="1-2 times per week per muscle group",
        implementation_notes="Drop the weight 20-30% each time, 2-3 drops per set, 1-2 exercises per session.",
        benefits=[
            "Longer time under tension",
            "Recruits more muscle fibres",
            "Raises metabolic stress",
            "More volume in less time",
        ],
        cautions=_HIGH_FATIGUE_CAUTIONS + ["Avoid on complex multi-joint lifts"],
        muscle_group_focus=[_M.CHEST, _M.BACK, _M.SHOULDERS, _M.ARMS],
    ),
    TechniqueDetails(
        technique_id="rest_pause",
        name="Rest-Pause",
        description="Take a set to or near failure, rest 10-20 seconds and continue with the same weight.",
        category=TechniqueCategory.INTENSITY,
        difficulty=TechniqueDifficulty.INTERMEDIATE,
        suitable_exercises=[_S.COMPOUND, _S.ISOLATION, _S.MACHINE, _S.FREE_WEIGHTS],
        exercise_types=[_COMP, _ISO],
        applicable_goals=[_G.HYPERTROPHY, _G.STRENGTH],
        fatigue_impact=7,
        recovery_requirement=6,
        recommended_frequency="1-2 times per week per muscle group",
        implementation_notes="Add 1-3 mini-sets after the main set. Use on 1-2 exercises per session.",
        benefits=[
            "More effective reps per set",
            "Recruits more muscle fibres",
            "Useful for both strength and size",
        ],
        cautions=list(_HIGH_FATIGUE_CAUTIONS),
        muscle_group_focus=[_M.CHEST, _M.BACK, _M.LEGS, _M.SHOULDERS],
    ),
    TechniqueDetails(
        technique_id="mechanical_drop_set",
        name="Mechanical Drop Set",
        description="Keep the weight and change leverage or angle to continue past failure.",
        category=TechniqueCategory.MECHANICAL,
        difficulty=TechniqueDifficulty.INTERMEDIATE,
        suitable_exercises=[_S.COMPOUND, _S.ISOLATION, _S.FREE_WEIGHTS],
        exercise_types=[_ISO],
        applicable_goals=[_G.HYPERTROPHY],
        fatigue_impact=8,
        recovery_requirement=7,
        recommended_frequency="Once per week per muscle group",
        implementation_notes="E.g. incline curl -> standing curl -> preacher curl, or incline -> flat -> decline press.",
        benefits=[
            "Hits the muscle from several angles",
            "Extends the set past failure",
            "Longer time under tension",
        ],
        cautions=[
            "Needs planning and specific equipment",
            "High local fatigue",
            "Does not suit every exercise",
        ],
    ),
    TechniqueDetails(
        technique_id="super_sets",
        name="Super Sets",
        description="Two exercises back to back with no rest between them.",
        category=TechniqueCategory.VOLUME,
        difficulty=TechniqueDifficulty.BEGINNER,
        suitable_exercises=list(_ALL_SUITABILITY),
        exercise_types=[_ISO, _ACC],
        applicable_goals=[_G.HYPERTROPHY, _G.ENDURANCE, _G.WEIGHT_LOSS],
        fatigue_impact=6,
        recovery_requirement=5,
        recommended_frequency="2-3 times per week",
        implementation_notes="Pair antagonists (biceps/triceps) or the same muscle for more intensity.",
        benefits=[
            "Saves session time",
            "Raises training density",
            "Higher energy expenditure",
        ],
        cautions=[
            "Load on the second exercise drops",
            "Hard to run in a crowded gym",
        ],
    ),
    TechniqueDetails(
        technique_id="giant_sets",
        name="Giant Sets",
        description="Three or more exercises back to back with no rest between them.",
        category=TechniqueCategory.VOLUME,
        difficulty=TechniqueDifficulty.ADVANCED,
        suitable_exercises=list(_ALL_SUITABILITY),
        exercise_types=[_ISO, _ACC],
        applicable_goals=[_G.HYPERTROPHY, _G.ENDURANCE, _G.WEIGHT_LOSS],
        fatigue_impact=9,
        recovery_requirement=8,
        recommended_frequency="Once per week per muscle group",
        implementation_notes="3-5 exercises for the same muscle, 60-120 s rest between rounds.",
        benefits=[
            "Very high metabolic stress",
            "Large volume in little time",
            "Strong pump",
        ],
        cautions=[
            "Very high fatigue",
            "Loads must be lowered",
            "For advanced lifters only",
        ],
    ),
    TechniqueDetails(
        technique_id="myo_reps",
        name="Myo-Reps",
        description="An activation set to near failure followed by short mini-sets with brief rests.",
        category=TechniqueCategory.INTENSITY,
        difficulty=TechniqueDifficulty.INTERMEDIATE,
        suitable_exercises=[_S.ISOLATION, _S.MACHINE, _S.CABLE],
        exercise_types=[_ISO, _ACC],
        applicable_goals=[_G.HYPERTROPHY],
        fatigue_impact=7,
        recovery_requirement=6,
        recommended_frequency="1-2 times per week per muscle group",
        implementation_notes="Activation set of 12-20 reps, then 3-5 mini-sets of 3-5 reps with 3-5 breaths of rest.",
        benefits=[
            "Many effective reps in little time",
            "Time-efficient hypertrophy",
        ],
        cautions=[
            "Keep to isolation or machine work",
            "Easy to overdo",
        ],
        muscle_group_focus=[_M.SHOULDERS, _M.ARMS, _M.CHEST],
    ),
    TechniqueDetails(
        technique_id="cluster_sets",
        name="Cluster Sets",
        description="Split a heavy set into small clusters with 10-30 seconds of rest between them.",
        category=TechniqueCategory.INTENSITY,
        difficulty=TechniqueDifficulty.ADVANCED,
        suitable_exercises=[_S.COMPOUND, _S.FREE_WEIGHTS],
        exercise_types=[_COMP],
        applicable_goals=[_G.STRENGTH, _G.POWER, _G.HYPERTROPHY],
        fatigue_impact=8,
        recovery_requirement=7,
        recommended_frequency="Once per week per movement pattern",
        implementation_notes="E.g. 5 clusters of 2 reps at 85-90% 1RM with 15-20 s between clusters.",
        benefits=[
            "More reps at high intensity",
            "Keeps bar speed high",
            "Less technical breakdown under fatigue",
        ],
        cautions=[
            "Sessions take longer",
            "Needs solid technique on heavy lifts",
        ],
    ),
    TechniqueDetails(
        technique_id="tempo_training",
        name="Tempo Training",
        description="Control the speed of each phase of the rep, usually with a slow eccentric.",
        category=TechniqueCategory.TEMPO,
        difficulty=TechniqueDifficulty.INTERMEDIATE,
        suitable_exercises=list(_ALL_SUITABILITY),
        exercise_types=[_COMP, _ISO],
        applicable_goals=[_G.HYPERTROPHY, _G.STRENGTH],
        fatigue_impact=6,
        recovery_requirement=5,
        recommended_frequency="2-3 times per week",
        implementation_notes="Notation eccentric-pause-concentric-pause, e.g. 3-1-1-0.",
        benefits=[
            "Better technique and control",
            "Longer time under tension",
            "Lighter loads on the joints",
        ],
        cautions=[
            "Loads must be lowered",
            "Needs focus to keep the tempo",
        ],
    ),
    TechniqueDetails(
        technique_id="pre_exhaustion",
        name="Pre-Exhaustion",
        description="An isolation exercise right before a compound exercise for the same muscle.",
        category=TechniqueCategory.SPECIALIZED,
        difficulty=TechniqueDifficulty.INTERMEDIATE,
        suitable_exercises=[_S.ISOLATION, _S.COMPOUND],
        exercise_types=[_COMP, _ISO],
        applicable_goals=[_G.HYPERTROPHY],
        fatigue_impact=7,
        recovery_requirement=6,
        recommended_frequency="1-2 times per week per muscle group",
        implementation_notes="E.g. leg extension followed by squat, or cable fly followed by bench press.",
        benefits=[
            "Targets the muscle that limits the compound lift",
            "Helps lagging muscle groups",
        ],
        cautions=[
            "Reduces the load on the compound lift",
            "Can hurt technique on the compound lift",
        ],
    ),
    TechniqueDetails(
        technique_id="post_exhaustion",
        name="Post-Exhaustion",
        description="A compound exercise immediately followed by an isolation exercise for the same muscle.",
        category=TechniqueCategory.SPECIALIZED,
        difficulty=TechniqueDifficulty.INTERMEDIATE,
        suitable_exercises=[_S.ISOLATION, _S.COMPOUND],
        exercise_types=[_COMP, _ISO],
        applicable_goals=[_G.HYPERTROPHY],
        fatigue_impact=8,
        recovery_requirement=7,
        recommended_frequency="1-2 times per week per muscle group",
        implementation_notes="E.g. bench press followed by cable fly, or squat followed by leg extension.",
        benefits=[
            "Keeps full load on the compound lift",
            "Finishes the target muscle completely",
        ],
        cautions=[
            "High local fatigue",
            "Can compromise recovery",
        ],
    ),
    TechniqueDetails(
        technique_id="partial_reps",
        name="Partial Reps",
        description="Reps through part of the range of motion, usually the strongest portion.",
        category=TechniqueCategory.MECHANICAL,
        difficulty=TechniqueDifficulty.INTERMEDIATE,
        suitable_exercises=[_S.COMPOUND, _S.ISOLATION, _S.MACHINE, _S.FREE_WEIGHTS],
        exercise_types=[_COMP, _ISO],
        applicable_goals=[_G.STRENGTH, _G.HYPERTROPHY],
        fatigue_impact=7,
        recovery_requirement=6,
        recommended_frequency="1-2 times per week per muscle group",
        implementation_notes="After full reps or on their own. Useful at sticking points.",
        benefits=[
            "Allows heavier loads",
            "Focuses tension on specific ranges",
            "Helps with weak points",
        ],
        cautions=[
            "Should not replace full-range reps",
            "Can create imbalances if overused",
            "Needs good technique to avoid injury",
        ],
    ),
    TechniqueDetails(
        technique_id="isometrics",
        name="Isometrics",
        description="Hold a position under load without moving the joint.",
        category=TechniqueCategory.TEMPO,
        difficulty=TechniqueDifficulty.INTERMEDIATE,
        suitable_exercises=[_S.COMPOUND, _S.ISOLATION, _S.FREE_WEIGHTS, _S.BODYWEIGHT],
        exercise_types=[_COMP, _ISO],
        applicable_goals=[_G.STRENGTH, _G.HYPERTROPHY],
        fatigue_impact=6,
        recovery_requirement=5,
        recommended_frequency="1-2 times per week",
        implementation_notes="Holds of 5-30 s at the sticking point or at the end of a set.",
        benefits=[
            "Builds strength at specific joint angles",
            "Low joint stress",
        ],
        cautions=[
            "Strength gains are angle-specific",
            "Blood pressure rises during long holds",
        ],
    ),
]

TECHNIQUE_CATALOG: dict[str, TechniqueDetails] = {t.technique_id: t for t in _TECHNIQUES}

_LEVEL_DIFFICULTIES: dict[TrainingLevel, set[TechniqueDifficulty]] = {
    TrainingLevel.BEGINNER: {TechniqueDifficulty.BEGINNER},
    TrainingLevel.INTERMEDIATE: {TechniqueDifficulty.BEGINNER, TechniqueDifficulty.INTERMEDIATE},
    TrainingLevel.ADVANCED: {
        TechniqueDifficulty.BEGINNER, TechniqueDifficulty.INTERMEDIATE, TechniqueDifficulty.ADVANCED,
    },
    TrainingLevel.ELITE: set(TechniqueDifficulty),
}


# ======================================================================
# Queries
# ======================================================================


def get_technique(technique_id: str) -> Optional[TechniqueDetails]:
    return TECHNIQUE_CATALOG.get(technique_id)


def recommended_techniques(goal: TrainingGoal, level: TrainingLevel) -> list[TechniqueDetails]:
    """Techniques serving ``goal`` whose difficulty the level can handle."""
    allowed = _LEVEL_DIFFICULTIES[level]
    return [t for t in _TECHNIQUES if goal in t.applicable_goals and t.difficulty in allowed]


def techniques_by_category(category: TechniqueCategory) -> list[TechniqueDetails]:
    return [t for t in _TECHNIQUES if t.category == category]


def techniques_for_suitability(suitability: ExerciseSuitability) -> list[TechniqueDetails]:
    return [t for t in _TECHNIQUES if suitability in t.suitable_exercises]


def techniques_for_muscle_group(muscle_group: MuscleGroup) -> list[TechniqueDetails]:
    """Techniques focused on ``muscle_group``, plus those without a focus list."""
    return [
        t for t in _TECHNIQUES
        if t.muscle_group_focus is None or muscle_group in t.muscle_group_focus
    ]


def is_technique_applicable(
    technique_id: str,
    exercise_type: ExerciseType,
    goal: TrainingGoal,
) -> bool:
    """Unknown technique ids are never applicable."""
    technique = TECHNIQUE_CATALOG.get(technique_id)
    if technique is None:
        return False
    return exercise_type in technique.exercise_types and goal in technique.applicable_goals


def techniques_for_exercise(
    exercise_type: ExerciseType,
    goal: TrainingGoal,
    muscle_group: Optional[MuscleGroup] = None,
) -> list[TechniqueDetails]:
    """Applicable techniques for an exercise role and goal, optionally by muscle."""
    result = [
        t for t in _TECHNIQUES
        if is_technique_applicable(t.technique_id, exercise_type, goal)
    ]
    if muscle_group is not None:
        result = [
            t for t in result
            if t.muscle_group_focus is None or muscle_group in t.muscle_group_focus
        ]
    return result
