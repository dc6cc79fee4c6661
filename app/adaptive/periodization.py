"""
Mesocycle and long-term block planning.

A mesocycle is a fixed sequence of phases:

    accumulation -> intensification -> peak -> deload

Each phase lasts a number of weeks and scales the base weekly volume and
intensity by its own multipliers.  The phase of a given week is found by
walking the phases and accumulating their durations; weeks past the end
of the mesocycle stay in the last phase and weeks below 1 resolve to the
first.

Frequency is held constant across phases: only the number of sets and the
relative intensity change.

Above the mesocycle sit *training blocks* (volume, strength, definition,
power, recovery) chained into long-term plans.
"""

from __future__ import annotations

from typing import Optional

from app.adaptive.lookup import lookup_with_default
from app.adaptive.rounding import round_half_up
from app.schemas.periodization import (
    BaseVolume,
    BlockType,
    DeloadStrategy,
    LongTermBlock,
    LongTermPlan,
    LookupResult,
    MesocyclePhaseConfig,
    MesocyclePlan,
    MesocycleStructure,
    MesocycleWeek,
    TrainingBlockConfig,
    WeekVolume,
)
from app.schemas.training import TrainingGoal, TrainingLevel

_INT = TrainingLevel.INTERMEDIATE
_ADV = TrainingLevel.ADVANCED

# ======================================================================
# Mesocycle templates
# ======================================================================

MESOCYCLE_STRUCTURES: list[MesocycleStructure] = [
    MesocycleStructure(
        name="Hypertrophy Standard",
        phases=[
            MesocyclePhaseConfig(
                phase="accumulation", duration=3, volume_multiplier=1.2,
                intensity_multiplier=0.9, rir_target=2,
                recommended_techniques=["super_sets", "drop_sets", "giant_sets"],
            ),
            MesocyclePhaseConfig(
                phase="intensification", duration=3, volume_multiplier=1.0,
                intensity_multiplier=1.1, rir_target=1,
                recommended_techniques=["rest_pause", "tempo_training", "myo_reps"],
            ),
            MesocyclePhaseConfig(
                phase="peak", duration=1, volume_multiplier=0.8,
                intensity_multiplier=1.2, rir_target=0,
                recommended_techniques=["cluster_sets", "partial_reps"],
            ),
            MesocyclePhaseConfig(
                phase="deload", duration=1, volume_multiplier=0.6,
                intensity_multiplier=0.8, rir_target=3,
            ),
        ],
        deload_strategy=DeloadStrategy(
            type="both", volume_reduction=40, intensity_reduction=20,
            frequency_reduction=0, duration=7,
        ),
        recommended_for=[TrainingGoal.HYPERTROPHY],
        training_levels=[_INT, _ADV],
    ),
    MesocycleStructure(
        name="Pure Strength",
        phases=[
            MesocyclePhaseConfig(
                phase="accumulation", duration=2, volume_multiplier=1.1,
                intensity_multiplier=0.85, rir_target=3,
                recommended_techniques=["tempo_training"],
            ),
            MesocyclePhaseConfig(
                phase="intensification", duration=4, volume_multiplier=0.9,
                intensity_multiplier=1.1, rir_target=2,
                recommended_techniques=["cluster_sets", "rest_pause"],
            ),
            MesocyclePhaseConfig(
                phase="peak", duration=1, volume_multiplier=0.7,
                intensity_multiplier=1.2, rir_target=1,
                recommended_techniques=["isometrics"],
            ),
            MesocyclePhaseConfig(
                phase="deload", duration=1, volume_multiplier=0.5,
                intensity_multiplier=0.7, rir_target=4,
            ),
        ],
        deload_strategy=DeloadStrategy(
            type="intensity", volume_reduction=0, intensity_reduction=30,
            frequency_reduction=0, duration=7,
        ),
        recommended_for=[TrainingGoal.STRENGTH, TrainingGoal.POWER],
        training_levels=[_INT, _ADV],
    ),
    MesocycleStructure(
        name="Advanced Definition",
        phases=[
            MesocyclePhaseConfig(
                phase="accumulation", duration=2, volume_multiplier=1.3,
                intensity_multiplier=0.8, rir_target=2,
                recommended_techniques=["super_sets", "giant_sets"],
            ),
            MesocyclePhaseConfig(
                phase="intensification", duration=2, volume_multiplier=1.1,
                intensity_multiplier=0.9, rir_target=1,
                recommended_techniques=["drop_sets", "super_sets"],
            ),
            MesocyclePhaseConfig(
                phase="peak", duration=1, volume_multiplier=1.0,
                intensity_multiplier=1.0, rir_target=0,
                recommended_techniques=["giant_sets", "drop_sets"],
            ),
            MesocyclePhaseConfig(
                phase="deload", duration=1, volume_multiplier=0.6,
                intensity_multiplier=0.8, rir_target=3,
            ),
        ],
        deload_strategy=DeloadStrategy(
            type="volume", volume_reduction=40, intensity_reduction=0,
            frequency_reduction=0, duration=7,
        ),
        recommended_for=[TrainingGoal.WEIGHT_LOSS, TrainingGoal.ENDURANCE],
        training_levels=[_INT, _ADV],
    ),
]


def select_mesocycle(level: TrainingLevel, goal: TrainingGoal) -> LookupResult[MesocycleStructure]:
    """Template for a level and goal; falls back to *Hypertrophy Standard*."""
    return lookup_with_default(
        MESOCYCLE_STRUCTURES,
        lambda s: level in s.training_levels and goal in s.recommended_for,
        MESOCYCLE_STRUCTURES[0],
        what=f"mesocycle for {level.value}/{goal.value}",
    )


def current_phase(structure: MesocycleStructure, week: int) -> MesocyclePhaseConfig:
    """Phase active in ``week`` (1-based), clamped to the first and last phase."""
    week_in_phase = max(week, 1)
    for phase in structure.phases:
        if week_in_phase <= phase.duration:
            return phase
        week_in_phase -= phase.duration
    return structure.phases[-1]


def mesocycle_volume_for_week(
    base: BaseVolume,
    structure: MesocycleStructure,
    week: int,
) -> WeekVolume:
    """Apply the active phase multipliers to a base weekly volume."""
    phase = current_phase(structure, week)
    return WeekVolume(
        sets_per_week=round_half_up(base.sets_per_week * phase.volume_multiplier),
        frequency=base.frequency,
        intensity=phase.intensity_multiplier,
        rir=phase.rir_target,
    )


def build_mesocycle_plan(
    structure: MesocycleStructure,
    base: BaseVolume,
    *,
    level: TrainingLevel,
    goal: TrainingGoal,
    muscle_group: str,
    template_source: str = "exact",
    include_deload: bool = True,
) -> MesocyclePlan:
    """Week-by-week prescription for one muscle group.

    With ``include_deload=False`` the weeks of the trailing deload phase
    are dropped.
    """
    total = structure.duration
    if not include_deload and structure.phases[-1].phase == "deload":
        total -= structure.phases[-1].duration

    weeks: list[MesocycleWeek] = []
    for week in range(1, total + 1):
        phase = current_phase(structure, week)
        volume = mesocycle_volume_for_week(base, structure, week)
        weeks.append(
            MesocycleWeek(
                week=week,
                phase=phase.phase,
                recommended_techniques=list(phase.recommended_techniques),
                **volume.model_dump(),
            )
        )

    return MesocyclePlan(
        name=structure.name,
        level=level,
        goal=goal,
        muscle_group=muscle_group,
        template_source=template_source,
        total_weeks=total,
        deload_strategy=structure.deload_strategy,
        weeks=weeks,
    )


# ======================================================================
# Training blocks
# ======================================================================

TRAINING_BLOCKS: list[TrainingBlockConfig] = [
    TrainingBlockConfig(
        type="volume", duration=6, volume_multiplier=1.2,
        intensity_range=(65, 75), rep_range=(8, 15), rir_range=(1, 3),
        recommended_techniques=["mechanical_drop_set", "super_sets", "drop_sets", "pre_exhaustion"],
        deload_required=True,
        description="Accumulate volume for muscle growth with moderate loads and more sets.",
    ),
    TrainingBlockConfig(
        type="strength", duration=4, volume_multiplier=0.8,
        intensity_range=(80, 90), rep_range=(3, 6), rir_range=(1, 2),
        recommended_techniques=["cluster_sets", "rest_pause", "isometrics"],
        deload_required=True,
        description="Build maximal strength with heavy loads and fewer sets.",
    ),
    TrainingBlockConfig(
        type="definition", duration=4, volume_multiplier=1.0,
        intensity_range=(70, 80), rep_range=(10, 15), rir_range=(0, 2),
        recommended_techniques=["super_sets", "giant_sets", "drop_sets", "partial_reps"],
        deload_required=True,
        description="Keep muscle while raising energy expenditure with dense, intense sessions.",
    ),
    TrainingBlockConfig(
        type="power", duration=3, volume_multiplier=0.6,
        intensity_range=(75, 85), rep_range=(2, 5), rir_range=(2, 3),
        recommended_techniques=["cluster_sets", "tempo_training"],
        deload_required=True,
        description="Develop explosive power with moderate loads moved fast.",
    ),
    TrainingBlockConfig(
        type="recovery", duration=1, volume_multiplier=0.5,
        intensity_range=(60, 70), rep_range=(10, 15), rir_range=(3, 4),
        recommended_techniques=[],
        deload_required=False,
        description="Active recovery to shed accumulated fatigue.",
    ),
]

_GOAL_START_BLOCK: dict[TrainingGoal, BlockType] = {
    TrainingGoal.HYPERTROPHY: "volume",
    TrainingGoal.STRENGTH: "strength",
    TrainingGoal.WEIGHT_LOSS: "definition",
    TrainingGoal.POWER: "power",
}

_NEXT_BLOCK: dict[str, BlockType] = {
    "volume": "strength",
    "strength": "definition",
    "definition": "recovery",
    "recovery": "volume",
    "power": "recovery",
}


def get_block(block_type: str) -> Optional[TrainingBlockConfig]:
    return next((b for b in TRAINING_BLOCKS if b.type == block_type), None)


def next_block_type(current: str) -> BlockType:
    """Block that follows ``current``; unknown blocks restart at volume."""
    return _NEXT_BLOCK.get(current, "volume")


def recommend_block(
    goal: TrainingGoal,
    current_block: Optional[str] = None,
) -> LookupResult[TrainingBlockConfig]:
    """Next training block.

    Without a current block the goal picks the starting block; with one,
    the fixed sequence volume -> strength -> definition -> recovery is
    followed (power also leads to recovery).
    """
    if current_block is None:
        wanted = _GOAL_START_BLOCK.get(goal)
    else:
        wanted = next_block_type(current_block)
    return lookup_with_default(
        TRAINING_BLOCKS,
        lambda b: b.type == wanted,
        TRAINING_BLOCKS[0],
        what=f"training block for {goal.value}",
    )


# ======================================================================
# Long-term plans
# ======================================================================


def _blocks(*pairs: tuple[BlockType, int]) -> list[LongTermBlock]:
    return [LongTermBlock(type=t, duration=d) for t, d in pairs]


LONG_TERM_PLANS: list[LongTermPlan] = [
    LongTermPlan(
        name="Hypertrophy-Strength Cycle",
        description="Volume block for growth followed by a strength block.",
        blocks=_blocks(("volume", 6), ("recovery", 1), ("strength", 4), ("recovery", 1)),
        recommended_levels=[_INT, _ADV],
        recommended_goals=[TrainingGoal.HYPERTROPHY, TrainingGoal.STRENGTH],
    ),
    LongTermPlan(
        name="Complete Transformation Cycle",
        description="Volume, strength and definition blocks in sequence.",
        blocks=_blocks(
            ("volume", 6), ("recovery", 1), ("strength", 4), ("recovery", 1),
            ("definition", 3), ("recovery", 1),
        ),
        recommended_levels=[_INT, _ADV],
        recommended_goals=[TrainingGoal.HYPERTROPHY, TrainingGoal.STRENGTH, TrainingGoal.WEIGHT_LOSS],
    ),
    LongTermPlan(
        name="Maximum Hypertrophy",
        description="Two volume blocks before a strength block, for advanced lifters.",
        blocks=_blocks(
            ("volume", 5), ("recovery", 1), ("volume", 4), ("recovery", 1),
            ("strength", 4), ("recovery", 1),
        ),
        recommended_levels=[_ADV],
        recommended_goals=[TrainingGoal.HYPERTROPHY],
    ),
    LongTermPlan(
        name="Pure Bodybuilding PPL",
        description="Push/pull/legs cycle through volume, strength and definition.",
        blocks=_blocks(
            ("volume", 6), ("recovery", 1), ("strength", 5), ("recovery", 1),
            ("volume", 3), ("recovery", 1), ("definition", 2), ("recovery", 1),
        ),
        recommended_levels=[_ADV],
        recommended_goals=[TrainingGoal.HYPERTROPHY, TrainingGoal.STRENGTH],
    ),
    LongTermPlan(
        name="Advanced Undulating",
        description="Short volume, strength and power blocks with frequent recovery.",
        blocks=_blocks(
            ("volume", 3), ("recovery", 1), ("strength", 3), ("recovery", 1),
            ("power", 3), ("recovery", 1),
        ),
        recommended_levels=[_ADV],
        recommended_goals=[TrainingGoal.HYPERTROPHY, TrainingGoal.STRENGTH, TrainingGoal.POWER],
    ),
]


def recommended_long_term_plan(level: TrainingLevel, goal: TrainingGoal) -> LookupResult[LongTermPlan]:
    return lookup_with_default(
        LONG_TERM_PLANS,
        lambda p: level in p.recommended_levels and goal in p.recommended_goals,
        LONG_TERM_PLANS[0],
        what=f"long-term plan for {level.value}/{goal.value}",
    )
