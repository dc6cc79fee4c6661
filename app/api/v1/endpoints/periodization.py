"""
Periodization endpoints.

Static prescriptions: weekly volume, rest, deload, progression methods,
periodization configuration, mesocycles, training blocks and long-term
plans.  Nothing here reads user data.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query, status

from app.adaptive import periodization, tables
from app.adaptive.rounding import round_to_increment
from app.schemas.periodization import (
    BlockType,
    DeloadStrategy,
    LongTermPlan,
    LookupResult,
    MesocyclePlan,
    MesocycleStructure,
    MesocycleWeekResponse,
    OptimalVolumeResponse,
    PeriodizationConfig,
    ProgressionMethod,
    RestResponse,
    TrainingBlockConfig,
    WeightByRirResponse,
)
from app.schemas.training import ExerciseType, TrainingGoal, TrainingLevel

router = APIRouter()


# ----------------------------------------------------------------------
# Tables
# ----------------------------------------------------------------------


@router.get("/volume", summary="Weekly sets and frequency for a muscle group.",
            response_model=OptimalVolumeResponse, )
def optimal_volume(muscle_group: str, level: TrainingLevel, goal: TrainingGoal):
    result = tables.optimal_volume(muscle_group, level, goal)
    return OptimalVolumeResponse(muscle_group=muscle_group, level=level, goal=goal, source=result.source,
                                 volume=result.value, )


@router.get("/rest", summary="Rest between sets.", response_model=RestResponse)
def recommended_rest(exercise_type: ExerciseType, goal: TrainingGoal):
    result = tables.recommended_rest(exercise_type, goal)
    return RestResponse(exercise_type=exercise_type.value, goal=goal, source=result.source,
                        rest_seconds=result.value, )


@router.get("/deload", summary="Recommended deload strategy.", response_model=DeloadStrategy)
def recommended_deload(level: TrainingLevel, goal: TrainingGoal):
    return tables.recommended_deload(level, goal)


@router.get("/progression-methods", summary="Progression methods for a goal.",
            response_model=list[ProgressionMethod], )
def progression_methods(goal: TrainingGoal):
    return tables.progression_methods_for_goal(goal)


@router.get("/config", summary="Periodization configuration for a level and goal.",
            response_model=PeriodizationConfig, )
def periodization_config(level: TrainingLevel, goal: TrainingGoal):
    return tables.get_periodization_config(level, goal)


@router.get("/weight-by-rir", summary="Adjust a weight after comparing achieved and target RIR.",
            response_model=WeightByRirResponse, )
def weight_by_rir(base_weight: float = Query(..., ge=0), target_rir: float = Query(..., ge=0),
                  current_rir: float = Query(..., ge=0), ):
    weight = tables.weight_by_rir(base_weight, target_rir, current_rir)
    return WeightByRirResponse(base_weight=base_weight, target_rir=target_rir, current_rir=current_rir,
                               weight=weight, rounded_weight=round_to_increment(weight), )


# ----------------------------------------------------------------------
# Mesocycles
# ----------------------------------------------------------------------


@router.get("/mesocycle", summary="Mesocycle template for a level and goal.",
            response_model=LookupResult[MesocycleStructure], )
def select_mesocycle(level: TrainingLevel, goal: TrainingGoal):
    return periodization.select_mesocycle(level, goal)


@router.get("/mesocycle/week", summary="Prescription for one week of the mesocycle.",
            response_model=MesocycleWeekResponse, )
def mesocycle_week(level: TrainingLevel, goal: TrainingGoal, muscle_group: str, week: int = Query(..., ge=1)):
    template = periodization.select_mesocycle(level, goal)
    base = tables.optimal_volume(muscle_group, level, goal)
    phase = periodization.current_phase(template.value, week)
    volume = periodization.mesocycle_volume_for_week(base.value, template.value, week)
    return MesocycleWeekResponse(week=week, phase=phase.phase, recommended_techniques=list(phase.recommended_techniques),
                                 template_name=template.value.name, template_source=template.source,
                                 volume_source=base.source, **volume.model_dump(), )


@router.get("/mesocycle/plan", summary="Week-by-week mesocycle plan for a muscle group.",
            response_model=MesocyclePlan, )
def mesocycle_plan(level: TrainingLevel, goal: TrainingGoal, muscle_group: str, include_deload: bool = True):
    template = periodization.select_mesocycle(level, goal)
    base = tables.optimal_volume(muscle_group, level, goal).value
    return periodization.build_mesocycle_plan(template.value, base, level=level, goal=goal,
                                              muscle_group=muscle_group, template_source=template.source,
                                              include_deload=include_deload, )


# ----------------------------------------------------------------------
# Blocks and long-term plans
# ----------------------------------------------------------------------


@router.get("/blocks", summary="All training blocks.", response_model=list[TrainingBlockConfig])
def list_blocks():
    return periodization.TRAINING_BLOCKS


@router.get("/blocks/next", summary="Next training block.", response_model=LookupResult[TrainingBlockConfig])
def next_block(goal: TrainingGoal, current_block: Optional[BlockType] = None):
    return periodization.recommend_block(goal, current_block)


@router.get("/blocks/{block_type}", summary="A training block by type.", response_model=TrainingBlockConfig)
def get_block(block_type: str):
    block = periodization.get_block(block_type)
    if block is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown block type: '{block_type}'")
    return block


@router.get("/long-term-plan", summary="Long-term plan for a level and goal.",
            response_model=LookupResult[LongTermPlan], )
def long_term_plan(level: TrainingLevel, goal: TrainingGoal):
    return periodization.recommended_long_term_plan(level, goal)
