"""
Personalized recommendations and next-workout adjustment.

Recommendations are generated from a snapshot of the learning profile and
the current fatigue; they are immutable once produced.

=====================================  ========  ==========================
condition                              priority  advice
=====================================  ========  ==========================
volume response > 7                    high      increase training volume
volume response < 3                    medium    reduce training volume
intensity response > 7                 high      increase intensity
intensity response < 3                 medium    reduce intensity
recovery capacity < 4 and fatigue > 60 high      improve recovery
nutrition adherence < 5                medium    improve nutrition
=====================================  ========  ==========================

The next-workout adjustment scales set counts and RIR targets of a
planned training day by the current fatigue:

    fatigue > 70 -> volume -20%, intensity -10%
    fatigue > 50 -> volume -10%, intensity -5%
    fatigue < 30 -> volume +10%, intensity +5%
"""

from __future__ import annotations

import datetime
import uuid
from typing import Optional

from pydantic import BaseModel

from app.adaptive.fatigue import fatigue_message
from app.adaptive.rounding import round_half_up
from app.schemas.learning import LearningProfileState
from app.schemas.recommendation import (
    NextWorkoutRecommendation,
    PersonalizedRecommendationRecord,
    PlannedExercise,
    PlannedSet,
    WorkoutDayPlan,
)

# ======================================================================
# Configuration
# ======================================================================


class RecommendationConfig(BaseModel):
    high_response: float = 7.0
    low_response: float = 3.0
    low_recovery_capacity: float = 4.0
    high_fatigue_for_recovery: float = 60.0
    low_nutrition_adherence: float = 5.0

    # (fatigue threshold, volume %, intensity %)
    high_fatigue: tuple[float, float, float] = (70.0, -20.0, -10.0)
    moderate_fatigue: tuple[float, float, float] = (50.0, -10.0, -5.0)
    low_fatigue: tuple[float, float, float] = (30.0, 10.0, 5.0)
    default_target_rir: float = 2.0


DEFAULT_RECOMMENDATION_CONFIG = RecommendationConfig()


# ======================================================================
# Personalized recommendations
# ======================================================================


def _record(user_id: str, now: datetime.datetime, **fields) -> PersonalizedRecommendationRecord:
    return PersonalizedRecommendationRecord(
        id=str(uuid.uuid4()),
        user_id=user_id,
        created=now,
        implemented=False,
        **fields,
    )


def build_recommendations(
    profile: LearningProfileState,
    current_fatigue: float,
    config: RecommendationConfig = DEFAULT_RECOMMENDATION_CONFIG,
    now: Optional[datetime.datetime] = None,
) -> list[PersonalizedRecommendationRecord]:
    """Recommendations for the given profile and fatigue."""
    now = now or datetime.datetime.utcnow()
    user_id = profile.user_id
    recs: list[PersonalizedRecommendationRecord] = []

    volume = profile.response_to_volume
    if volume > config.high_response:
        recs.append(_record(
            user_id, now, type="training", priority="high",
            title="Increase training volume",
            description=("You respond very well to high volume. Consider adding 15-20% "
                         "more sets per muscle group."),
            base_reason="High response to volume",
            data_points={"response_to_volume": volume, "current_fatigue": current_fatigue},
        ))
    elif volume < config.low_response:
        recs.append(_record(
            user_id, now, type="training", priority="medium",
            title="Reduce training volume",
            description=("Your response to high volume is below par. Consider 15-20% fewer "
                         "sets per muscle group and a higher intensity."),
            base_reason="Low response to volume",
            data_points={"response_to_volume": volume, "current_fatigue": current_fatigue},
        ))

    intensity = profile.response_to_intensity
    if intensity > config.high_response:
        recs.append(_record(
            user_id, now, type="training", priority="high",
            title="Increase training intensity",
            description="You respond very well to high intensity. Consider RPE 8-9 on your main sets.",
            base_reason="High response to intensity",
            data_points={"response_to_intensity": intensity, "current_fatigue": current_fatigue},
        ))
    elif intensity < config.low_response:
        recs.append(_record(
            user_id, now, type="training", priority="medium",
            title="Reduce training intensity",
            description="Your response to high intensity is below par. Consider RPE 6-7 with more volume.",
            base_reason="Low response to intensity",
            data_points={"response_to_intensity": intensity, "current_fatigue": current_fatigue},
        ))

    if (profile.recovery_capacity < config.low_recovery_capacity
            and current_fatigue > config.high_fatigue_for_recovery):
        recs.append(_record(
            user_id, now, type="recovery", priority="high",
            title="Improve recovery strategies",
            description=("Your recovery capacity is low and your fatigue is high. Consider "
                         "active recovery such as yoga, stretching or contrast baths."),
            base_reason="Low recovery capacity with high fatigue",
            data_points={
                "recovery_capacity": profile.recovery_capacity,
                "current_fatigue": current_fatigue,
            },
        ))

    if profile.nutrition_adherence < config.low_nutrition_adherence:
        recs.append(_record(
            user_id, now, type="nutrition", priority="medium",
            title="Improve nutrition adherence",
            description=("Your nutrition adherence is low. Consider a simpler meal plan or "
                         "preparing meals ahead of time."),
            base_reason="Low nutrition adherence",
            data_points={"nutrition_adherence": profile.nutrition_adherence},
        ))

    return recs


# ======================================================================
# Next workout
# ======================================================================


def fatigue_adjustments(
    current_fatigue: float,
    config: RecommendationConfig = DEFAULT_RECOMMENDATION_CONFIG,
) -> tuple[float, float]:
    """(volume %, intensity %) for the current fatigue."""
    for threshold, volume, intensity in (config.high_fatigue, config.moderate_fatigue):
        if current_fatigue > threshold:
            return volume, intensity
    threshold, volume, intensity = config.low_fatigue
    if current_fatigue < threshold:
        return volume, intensity
    return 0.0, 0.0


def _adjust_exercise(
    exercise: PlannedExercise,
    volume_adjustment: float,
    intensity_adjustment: float,
    config: RecommendationConfig,
) -> PlannedExercise:
    keep = max(1, round_half_up(len(exercise.sets) * (1 + volume_adjustment / 100)))
    rir_shift = round_half_up(intensity_adjustment / 10)
    sets = [
        PlannedSet(
            target_reps=s.target_reps,
            target_rir=max(0, (config.default_target_rir if s.target_rir is None else s.target_rir) - rir_shift),
            weight=s.weight,
        )
        for s in exercise.sets[:keep]
    ]
    return PlannedExercise(exercise_id=exercise.exercise_id, sets=sets)


def next_workout_adjustment(
    day: WorkoutDayPlan,
    current_fatigue: float,
    max_exercises: int,
    config: RecommendationConfig = DEFAULT_RECOMMENDATION_CONFIG,
) -> NextWorkoutRecommendation:
    """Scale a planned day to the current fatigue.

    Set counts shrink or grow (never below one, never beyond the planned
    sets), RIR targets drop as intensity rises, and the day is cut to
    ``max_exercises`` exercises.
    """
    volume_adjustment, intensity_adjustment = fatigue_adjustments(current_fatigue, config)
    exercises = [
        _adjust_exercise(e, volume_adjustment, intensity_adjustment, config)
        for e in day.exercises
    ]
    return NextWorkoutRecommendation(
        recommended_day=WorkoutDayPlan(name=day.name, exercises=exercises[:max_exercises]),
        fatigue_level=current_fatigue,
        volume_adjustment=volume_adjustment,
        intensity_adjustment=intensity_adjustment,
        message=fatigue_message(current_fatigue),
    )
