"""
Volume, rest and deload tables.

Static prescriptions keyed by training level, goal, muscle group and
exercise role.

Weekly volume
-------------
``OPTIMAL_VOLUME_BY_LEVEL`` stores, per level and muscle group, the
min/optimal/max hard sets per week and sessions per week.  The goal
scales the optimal values:

    sets      = round(optimal_sets × goal_multiplier)
    frequency = min(round(optimal_freq × goal_multiplier), max_freq)

with multipliers strength 0.8, hypertrophy 1.0, endurance 1.2, power 0.7,
weight loss 1.1.  A (level, muscle) pair missing from the table falls
back to 10 sets at 2 sessions/week.

Rest
----
Rest between sets depends on the exercise role and the goal; unknown
pairs fall back to 60 s.

Deload
------
Four deload strategies (volume, intensity, both, frequency), each lasting
one week.  Beginners deload volume, strength and power athletes deload
intensity, advanced hypertrophy athletes deload both.

These values are coaching heuristics, not measured constants.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from app.adaptive.lookup import lookup_with_default
from app.adaptive.rounding import round_half_up
from app.schemas.periodization import (
    BaseVolume,
    DeloadStrategy,
    LookupResult,
    MuscleGroupVolume,
    PeriodizationConfig,
    ProgressionMethod,
    VolumeRange,
)
from app.schemas.training import ExerciseType, TrainingGoal, TrainingLevel

# ======================================================================
# Weekly volume
# ======================================================================


def _vol(muscle: str, sets: tuple[int, int, int], freq: tuple[int, int, int]) -> MuscleGroupVolume:
    return MuscleGroupVolume(
        muscle_group=muscle,
        sets_per_week=VolumeRange(min=sets[0], optimal=sets[1], max=sets[2]),
        frequency=VolumeRange(min=freq[0], optimal=freq[1], max=freq[2]),
    )


OPTIMAL_VOLUME_BY_LEVEL: dict[TrainingLevel, list[MuscleGroupVolume]] = {
    TrainingLevel.BEGINNER: [
        _vol("chest", (8, 10, 12), (1, 2, 3)),
        _vol("back", (8, 10, 12), (1, 2, 3)),
        _vol("legs", (8, 10, 12), (1, 2, 3)),
        _vol("shoulders", (6, 8, 10), (1, 2, 3)),
        _vol("arms", (6, 8, 10), (1, 2, 3)),
        _vol("core", (4, 6, 8), (1, 2, 3)),
    ],
    TrainingLevel.INTERMEDIATE: [
        _vol("chest", (10, 14, 18), (2, 2, 3)),
        _vol("back", (10, 14, 18), (2, 2, 3)),
        _vol("legs", (12, 16, 20), (2, 2, 3)),
        _vol("shoulders", (8, 12, 16), (2, 2, 3)),
        _vol("arms", (8, 12, 16), (2, 2, 3)),
        _vol("core", (6, 8, 12), (2, 2, 3)),
    ],
    TrainingLevel.ADVANCED: [
        _vol("chest", (12, 18, 22), (2, 3, 4)),
        _vol("back", (14, 18, 22), (2, 3, 4)),
        _vol("legs", (14, 18, 22), (2, 3, 4)),
        _vol("shoulders", (10, 14, 18), (2, 3, 4)),
        _vol("arms", (10, 14, 18), (2, 3, 4)),
        _vol("core", (8, 10, 14), (2, 3, 4)),
    ],
}

GOAL_VOLUME_MULTIPLIERS: dict[TrainingGoal, float] = {
    TrainingGoal.STRENGTH: 0.8,
    TrainingGoal.HYPERTROPHY: 1.0,
    TrainingGoal.ENDURANCE: 1.2,
    TrainingGoal.POWER: 0.7,
    TrainingGoal.WEIGHT_LOSS: 1.1,
    TrainingGoal.GENERAL_FITNESS: 1.0,
}

DEFAULT_BASE_VOLUME = BaseVolume(sets_per_week=10, frequency=2)


def optimal_volume(
    muscle_group: str,
    level: TrainingLevel,
    goal: TrainingGoal,
) -> LookupResult[BaseVolume]:
    """Weekly sets and frequency for a muscle group, scaled by goal."""
    entry = lookup_with_default(
        OPTIMAL_VOLUME_BY_LEVEL.get(level, []),
        lambda v: v.muscle_group == muscle_group,
        None,
        what=f"volume entry for {level.value}/{muscle_group}",
    )
    if entry.value is None:
        return LookupResult(value=DEFAULT_BASE_VOLUME.model_copy(), source="fallback")

    config: MuscleGroupVolume = entry.value
    multiplier = GOAL_VOLUME_MULTIPLIERS.get(goal, 1.0)
    return LookupResult(
        value=BaseVolume(
            sets_per_week=round_half_up(config.sets_per_week.optimal * multiplier),
            frequency=min(
                round_half_up(config.frequency.optimal * multiplier),
                config.frequency.max,
            ),
        ),
        source="exact",
    )


# ======================================================================
# Rest periods (seconds)
# ======================================================================

REST_PERIODS: dict[tuple[ExerciseType, TrainingGoal], int] = {
    (ExerciseType.COMPOUND, TrainingGoal.STRENGTH): 180,
    (ExerciseType.COMPOUND, TrainingGoal.HYPERTROPHY): 120,
    (ExerciseType.COMPOUND, TrainingGoal.ENDURANCE): 60,
    (ExerciseType.COMPOUND, TrainingGoal.POWER): 180,
    (ExerciseType.COMPOUND, TrainingGoal.WEIGHT_LOSS): 45,

    (ExerciseType.ISOLATION, TrainingGoal.STRENGTH): 120,
    (ExerciseType.ISOLATION, TrainingGoal.HYPERTROPHY): 90,
    (ExerciseType.ISOLATION, TrainingGoal.ENDURANCE): 45,
    (ExerciseType.ISOLATION, TrainingGoal.POWER): 120,
    (ExerciseType.ISOLATION, TrainingGoal.WEIGHT_LOSS): 30,

    (ExerciseType.ACCESSORY, TrainingGoal.STRENGTH): 90,
    (ExerciseType.ACCESSORY, TrainingGoal.HYPERTROPHY): 60,
    (ExerciseType.ACCESSORY, TrainingGoal.ENDURANCE): 30,
    (ExerciseType.ACCESSORY, TrainingGoal.POWER): 90,
    (ExerciseType.ACCESSORY, TrainingGoal.WEIGHT_LOSS): 20,
}

DEFAULT_REST_SECONDS = 60


def recommended_rest(exercise_type: ExerciseType, goal: TrainingGoal) -> LookupResult[int]:
    """Rest between sets for an exercise role and goal."""
    key = (exercise_type, goal)
    if key in REST_PERIODS:
        return LookupResult(value=REST_PERIODS[key], source="exact")
    return LookupResult(value=DEFAULT_REST_SECONDS, source="fallback")


# ======================================================================
# Deload strategies
# ======================================================================

DELOAD_STRATEGIES: list[DeloadStrategy] = [
    DeloadStrategy(type="volume", volume_reduction=40, intensity_reduction=0,
                   frequency_reduction=0, duration=7),
    DeloadStrategy(type="intensity", volume_reduction=0, intensity_reduction=20,
                   frequency_reduction=0, duration=7),
    DeloadStrategy(type="both", volume_reduction=30, intensity_reduction=15,
                   frequency_reduction=0, duration=7),
    DeloadStrategy(type="frequency", volume_reduction=0, intensity_reduction=0,
                   frequency_reduction=1, duration=7),
]


def _deload_by_type(kind: str) -> DeloadStrategy:
    return next((s for s in DELOAD_STRATEGIES if s.type == kind), DELOAD_STRATEGIES[0])


def recommended_deload(level: TrainingLevel, goal: TrainingGoal) -> DeloadStrategy:
    """Deload strategy for a level and goal."""
    if level == TrainingLevel.BEGINNER:
        return _deload_by_type("volume")
    if goal in (TrainingGoal.STRENGTH, TrainingGoal.POWER):
        return _deload_by_type("intensity")
    if level == TrainingLevel.ADVANCED and goal == TrainingGoal.HYPERTROPHY:
        return _deload_by_type("both")
    return DELOAD_STRATEGIES[0]


# ======================================================================
# Load by RIR
# ======================================================================


class RirAdjustmentConfig(BaseModel):
    """Coefficients of :func:`weight_by_rir`."""

    overshoot_factor: float = Field(0.925, gt=0.0, description="Multiplier when the set was harder than planned")
    step: float = Field(0.025, ge=0.0, description="Increase per RIR point left in the tank")
    max_increase: float = Field(0.10, ge=0.0)


DEFAULT_RIR_ADJUSTMENT_CONFIG = RirAdjustmentConfig()


def weight_by_rir(
    base_weight: float,
    target_rir: float,
    current_rir: float,
    config: RirAdjustmentConfig = DEFAULT_RIR_ADJUSTMENT_CONFIG,
) -> float:
    """Adjust a working weight after comparing achieved and target RIR.

    * achieved RIR below target -> weight was too heavy, take 7.5% off
    * achieved RIR above target -> add 2.5% per point, at most 10%
    * on target -> keep the weight
    """
    if current_rir < target_rir:
        return base_weight * config.overshoot_factor
    if current_rir > target_rir:
        increment = (current_rir - target_rir) * config.step
        return base_weight * (1 + min(increment, config.max_increase))
    return base_weight


# ======================================================================
# Progression methods
# ======================================================================

PROGRESSION_METHODS: list[ProgressionMethod] = [
    ProgressionMethod(
        name="Double Progression",
        description="Add reps up to the top of the range, then add weight and return to the bottom.",
        applicable_goals=[TrainingGoal.STRENGTH, TrainingGoal.HYPERTROPHY],
        implementation="3x8-12: once all sets reach 12, add weight and restart at 3x8.",
    ),
    ProgressionMethod(
        name="Linear Periodization",
        description="Raise intensity and lower volume week over week.",
        applicable_goals=[TrainingGoal.STRENGTH, TrainingGoal.POWER],
        implementation="W1 3x12 @70%, W2 4x8 @75%, W3 5x5 @80%, W4 6x3 @85%.",
    ),
    ProgressionMethod(
        name="Undulating Periodization",
        description="Vary intensity and volume within the same week.",
        applicable_goals=[TrainingGoal.STRENGTH, TrainingGoal.HYPERTROPHY, TrainingGoal.POWER],
        implementation="Mon 3x12 @70%, Wed 4x8 @75%, Fri 5x5 @80%.",
    ),
    ProgressionMethod(
        name="Block Periodization",
        description="Split training into blocks with a single focus each.",
        applicable_goals=[TrainingGoal.STRENGTH, TrainingGoal.HYPERTROPHY,
                          TrainingGoal.POWER, TrainingGoal.ENDURANCE],
        implementation="4 weeks hypertrophy, 4 weeks strength, 2 weeks power.",
    ),
    ProgressionMethod(
        name="RIR Progression",
        description="Hold a target RIR and add weight once sets end above it.",
        applicable_goals=[TrainingGoal.STRENGTH, TrainingGoal.HYPERTROPHY],
        implementation="Keep RIR 2; when sets finish with RIR > 2, add weight.",
    ),
    ProgressionMethod(
        name="Volume Progression",
        description="Add sets before adding intensity.",
        applicable_goals=[TrainingGoal.HYPERTROPHY, TrainingGoal.ENDURANCE],
        implementation="W1 3x10, W2 4x10, W3 5x10, W4 3x10 with more weight.",
    ),
]


def progression_methods_for_goal(goal: TrainingGoal) -> list[ProgressionMethod]:
    return [m for m in PROGRESSION_METHODS if goal in m.applicable_goals]


# ======================================================================
# Periodization configuration by level and goal
# ======================================================================


def _pc(kind, weeks, volume, intensity, frequency, phases, deload, autoreg, threshold, rir, rpe):
    return PeriodizationConfig(
        recommended_type=kind,
        mesocycle_duration=weeks,
        deload_frequency=weeks,
        volume_range=volume,
        intensity_range=intensity,
        frequency_range=frequency,
        phase_sequence=phases,
        deload_type=deload,
        autoregulation=autoreg,
        fatigue_threshold=threshold,
        rir_range=rir,
        rpe_range=rpe,
    )


_AA = "anatomical_adaptation"

PERIODIZATION_CONFIGS: dict[TrainingLevel, dict[TrainingGoal, PeriodizationConfig]] = {
    TrainingLevel.BEGINNER: {
        TrainingGoal.STRENGTH: _pc(
            "linear", 8, (10, 15), (70, 85), (3, 4),
            [_AA, "hypertrophy", "strength", "deload"], "volume", "none", 8.0, (2, 4), (6, 8)),
        TrainingGoal.HYPERTROPHY: _pc(
            "linear", 8, (10, 20), (65, 80), (3, 5),
            [_AA, "hypertrophy", "metabolic", "deload"], "volume", "none", 8.0, (1, 3), (7, 9)),
        TrainingGoal.ENDURANCE: _pc(
            "linear", 6, (15, 25), (50, 70), (3, 5),
            [_AA, "endurance", "metabolic", "deload"], "frequency", "none", 8.0, (2, 4), (6, 8)),
        TrainingGoal.POWER: _pc(
            "linear", 6, (8, 12), (70, 85), (3, 4),
            [_AA, "strength", "power", "deload"], "intensity", "none", 8.0, (2, 4), (6, 8)),
        TrainingGoal.WEIGHT_LOSS: _pc(
            "linear", 6, (12, 20), (60, 75), (3, 5),
            [_AA, "metabolic", "hypertrophy", "deload"], "volume", "none", 8.0, (1, 3), (7, 9)),
        TrainingGoal.GENERAL_FITNESS: _pc(
            "undulating", 6, (10, 18), (60, 80), (3, 5),
            [_AA, "hypertrophy", "endurance", "deload"], "combined", "none", 8.0, (2, 4), (6, 8)),
    },
    TrainingLevel.INTERMEDIATE: {
        TrainingGoal.STRENGTH: _pc(
            "block", 6, (12, 18), (75, 90), (4, 5),
            ["hypertrophy", "strength", "power", "deload"], "intensity", "fatigue_based", 7.5,
            (1, 3), (7, 9)),
        TrainingGoal.HYPERTROPHY: _pc(
            "undulating", 6, (14, 22), (65, 85), (4, 6),
            ["hypertrophy", "metabolic", "strength", "deload"], "volume", "fatigue_based", 7.5,
            (1, 3), (7, 9)),
        TrainingGoal.ENDURANCE: _pc(
            "wave", 5, (18, 30), (55, 75), (4, 6),
            ["hypertrophy", "metabolic", "endurance", "deload"], "frequency", "fatigue_based", 7.5,
            (1, 3), (7, 9)),
        TrainingGoal.POWER: _pc(
            "conjugate", 4, (10, 16), (75, 90), (4, 5),
            ["strength", "power", "strength", "deload"], "intensity", "performance_based", 7.0,
            (1, 3), (7, 9)),
        TrainingGoal.WEIGHT_LOSS: _pc(
            "undulating", 4, (16, 24), (60, 80), (4, 6),
            ["metabolic", "hypertrophy", "metabolic", "deload"], "volume", "fatigue_based", 7.5,
            (1, 3), (7, 9)),
        TrainingGoal.GENERAL_FITNESS: _pc(
            "undulating", 5, (12, 20), (65, 85), (4, 5),
            ["hypertrophy", "strength", "metabolic", "hypertrophy", "deload"], "combined",
            "fatigue_based", 7.5, (1, 3), (7, 9)),
    },
    TrainingLevel.ADVANCED: {
        TrainingGoal.STRENGTH: _pc(
            "conjugate", 4, (12, 20), (75, 95), (4, 6),
            ["hypertrophy", "strength", "power", "deload"], "combined", "combined", 7.0,
            (0, 2), (8, 10)),
        TrainingGoal.HYPERTROPHY: _pc(
            "undulating", 5, (16, 25), (65, 85), (5, 6),
            ["hypertrophy", "strength", "hypertrophy", "metabolic", "deload"], "volume",
            "combined", 7.0, (0, 2), (8, 10)),
        TrainingGoal.ENDURANCE: _pc(
            "block", 4, (20, 35), (55, 75), (5, 7),
            ["hypertrophy", "metabolic", "endurance", "deload"], "frequency", "combined", 7.0,
            (0, 2), (8, 10)),
        TrainingGoal.POWER: _pc(
            "block", 4, (8, 16), (80, 97), (4, 6),
            ["strength", "power", "peaking", "deload"], "intensity", "combined", 7.0,
            (0, 2), (8, 10)),
        TrainingGoal.WEIGHT_LOSS: _pc(
            "undulating", 4, (18, 28), (65, 85), (5, 7),
            ["metabolic", "hypertrophy", "metabolic", "deload"], "combined", "combined", 7.0,
            (0, 2), (8, 10)),
        TrainingGoal.GENERAL_FITNESS: _pc(
            "conjugate", 4, (14, 24), (70, 90), (5, 6),
            ["hypertrophy", "strength", "metabolic", "deload"], "combined", "combined", 7.0,
            (0, 2), (8, 10)),
    },
    TrainingLevel.ELITE: {
        TrainingGoal.STRENGTH: _pc(
            "conjugate", 3, (10, 18), (80, 100), (5, 7),
            ["strength", "power", "deload"], "combined", "combined", 6.5, (0, 1), (9, 10)),
        TrainingGoal.HYPERTROPHY: _pc(
            "undulating", 4, (18, 30), (70, 90), (5, 7),
            ["hypertrophy", "strength", "metabolic", "deload"], "volume", "combined", 6.5,
            (0, 1), (9, 10)),
        TrainingGoal.ENDURANCE: _pc(
            "block", 3, (25, 40), (60, 80), (6, 7),
            ["metabolic", "endurance", "deload"], "frequency", "combined", 6.5, (0, 1), (9, 10)),
        TrainingGoal.POWER: _pc(
            "block", 3, (6, 14), (85, 100), (5, 6),
            ["power", "peaking", "deload"], "intensity", "combined", 6.5, (0, 1), (9, 10)),
        TrainingGoal.WEIGHT_LOSS: _pc(
            "undulating", 3, (20, 30), (70, 90), (6, 7),
            ["metabolic", "hypertrophy", "deload"], "combined", "combined", 6.5, (0, 1), (9, 10)),
        TrainingGoal.GENERAL_FITNESS: _pc(
            "conjugate", 3, (16, 26), (75, 95), (5, 7),
            ["hypertrophy", "strength", "deload"], "combined", "combined", 6.5, (0, 1), (9, 10)),
    },
}


def get_periodization_config(level: TrainingLevel, goal: TrainingGoal) -> PeriodizationConfig:
    return PERIODIZATION_CONFIGS[level][goal]
