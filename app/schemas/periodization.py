"""
Periodization schemas.

A mesocycle is an ordered list of phases, each with a duration in weeks
and multipliers applied to a base weekly volume and intensity:

    accumulation -> intensification -> peak -> deload

Static lookups that can fall back to a default entry return a
:class:`LookupResult`, whose ``source`` tells whether the exact entry
was found.
"""

from typing import Generic, Literal, Optional, TypeVar

from pydantic import BaseModel, Field, computed_field

from app.schemas.training import TrainingGoal, TrainingLevel

T = TypeVar("T")

MesocyclePhaseName = Literal["accumulation", "intensification", "peak", "deload"]
DeloadKind = Literal["volume", "intensity", "both", "frequency"]
BlockType = Literal["volume", "strength", "definition", "power", "recovery"]


class LookupResult(BaseModel, Generic[T]):
    """Result of a table lookup that may substitute a default entry."""

    value: T
    source: Literal["exact", "fallback"]

    @property
    def is_fallback(self) -> bool:
        return self.source == "fallback"


# ----------------------------------------------------------------------
# Volume, rest and deload
# ----------------------------------------------------------------------


class VolumeRange(BaseModel):
    min: int
    optimal: int
    max: int


class MuscleGroupVolume(BaseModel):
    """Weekly set and frequency ranges for one muscle group."""

    muscle_group: str
    sets_per_week: VolumeRange
    frequency: VolumeRange


class BaseVolume(BaseModel):
    """Weekly volume for a muscle group before phase multipliers."""

    sets_per_week: int = Field(..., ge=0)
    frequency: int = Field(..., ge=0, description="Sessions per week")


class DeloadStrategy(BaseModel):
    type: DeloadKind
    volume_reduction: float = Field(..., description="Percent (0-100)")
    intensity_reduction: float = Field(..., description="Percent (0-100)")
    frequency_reduction: int = Field(..., description="Training days removed")
    duration: int = Field(..., description="Days")


class ProgressionMethod(BaseModel):
    name: str
    description: str
    applicable_goals: list[TrainingGoal]
    implementation: str


class PeriodizationConfig(BaseModel):
    """Periodization defaults for one (level, goal) pair."""

    recommended_type: str
    mesocycle_duration: int = Field(..., description="Weeks")
    deload_frequency: int = Field(..., description="Deload every N weeks")
    volume_range: tuple[int, int] = Field(..., description="Sets per muscle per week")
    intensity_range: tuple[int, int] = Field(..., description="% of 1RM")
    frequency_range: tuple[int, int] = Field(..., description="Days per week")
    phase_sequence: list[str]
    deload_type: str
    autoregulation: str
    fatigue_threshold: float = Field(..., description="0-10 scale")
    rir_range: tuple[int, int]
    rpe_range: tuple[int, int]


# ----------------------------------------------------------------------
# Mesocycles
# ----------------------------------------------------------------------


class MesocyclePhaseConfig(BaseModel):
    phase: MesocyclePhaseName
    duration: int = Field(..., ge=1, description="Weeks")
    volume_multiplier: float
    intensity_multiplier: float
    rir_target: int
    recommended_techniques: list[str] = Field(
        default_factory=list, description="Technique ids",
    )


class MesocycleStructure(BaseModel):
    name: str
    phases: list[MesocyclePhaseConfig] = Field(..., min_length=1)
    deload_strategy: DeloadStrategy
    recommended_for: list[TrainingGoal]
    training_levels: list[TrainingLevel]

    @computed_field
    @property
    def duration(self) -> int:
        """Total weeks (sum of phase durations)."""
        return sum(p.duration for p in self.phases)


class WeekVolume(BaseModel):
    """Volume prescription for one week of a mesocycle."""

    sets_per_week: int
    frequency: int
    intensity: float = Field(..., description="Relative intensity (1.0 = baseline)")
    rir: int


class MesocycleWeek(WeekVolume):
    week: int
    phase: MesocyclePhaseName
    recommended_techniques: list[str]


class MesocycleWeekResponse(MesocycleWeek):
    """One week of a mesocycle, tagged with where its inputs came from."""

    template_name: str
    template_source: Literal["exact", "fallback"]
    volume_source: Literal["exact", "fallback"]


class MesocyclePlan(BaseModel):
    """Week-by-week plan for one muscle group."""

    name: str
    level: TrainingLevel
    goal: TrainingGoal
    muscle_group: str
    template_source: Literal["exact", "fallback"]
    total_weeks: int
    deload_strategy: DeloadStrategy
    weeks: list[MesocycleWeek]


# ----------------------------------------------------------------------
# Training blocks and long-term plans
# ----------------------------------------------------------------------


class TrainingBlockConfig(BaseModel):
    type: BlockType
    duration: int = Field(..., description="Weeks")
    volume_multiplier: float
    intensity_range: tuple[int, int]
    rep_range: tuple[int, int]
    rir_range: tuple[int, int]
    recommended_techniques: list[str]
    deload_required: bool
    description: str


class LongTermBlock(BaseModel):
    type: BlockType
    duration: int


class LongTermPlan(BaseModel):
    name: str
    description: str
    blocks: list[LongTermBlock]
    recommended_levels: list[TrainingLevel]
    recommended_goals: list[TrainingGoal]
    includes_deload: bool = True

    @computed_field
    @property
    def duration(self) -> int:
        return sum(b.duration for b in self.blocks)


class OptimalVolumeResponse(BaseModel):
    muscle_group: str
    level: TrainingLevel
    goal: TrainingGoal
    source: Literal["exact", "fallback"]
    volume: BaseVolume


class RestResponse(BaseModel):
    exercise_type: str
    goal: TrainingGoal
    source: Literal["exact", "fallback"]
    rest_seconds: int


class WeightByRirResponse(BaseModel):
    base_weight: float
    target_rir: float
    current_rir: float
    weight: float
    rounded_weight: Optional[float] = None
