"""
Load (weight) recommender.

Starts from the most recent weight logged for an exercise and adds up
independent percentage adjustments:

==========================  ===========================================
fatigue                     -10% above 70, +5% below 30, else 0
RIR change                  (last RIR - target RIR) × 2.5%
rep change                  (last reps - target reps) × 2%, only if > 0
sleep quality (1-10)        (quality - 5) / 10 × 5%
nutrition adherence (1-10)  (adherence - 5) / 10 × 5%
training phase              strength +5%, power +7.5%, deload -15%,
                            maintenance 0%, volume -5%
previous performance        improved +2.5%, decreased -2.5%
==========================  ===========================================

::

    recommended = last_weight × (1 + Σ adjustments)

rounded to the nearest 2.5 kg.  The conservative and aggressive
alternatives are ±5% of the *unrounded* value, each rounded on its own.

Every adjustment that was considered is returned as a factor, in percent,
so the recommendation can be explained to the user.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from app.adaptive.rounding import round_half_up, round_to_increment
from app.schemas.load import (
    AlternativeWeights,
    WeightFactor,
    WeightRecommendation,
    WeightRecommendationRequest,
)
from app.schemas.workout import ExerciseHistoryResponse

# ======================================================================
# Configuration
# ======================================================================

_DEFAULT_PHASE_ADJUSTMENTS: dict[str, float] = {
    "strength": 0.05,
    "power": 0.075,
    "deload": -0.15,
    "maintenance": 0.0,
    "volume": -0.05,
}

_DEFAULT_PERFORMANCE_ADJUSTMENTS: dict[str, float] = {
    "improved": 0.025,
    "maintained": 0.0,
    "decreased": -0.025,
}


class WeightRecommenderConfig(BaseModel):
    """Adjustment coefficients of the load recommender (fractions, not %)."""

    high_fatigue_threshold: float = 70.0
    low_fatigue_threshold: float = 30.0
    high_fatigue_adjustment: float = -0.10
    low_fatigue_adjustment: float = 0.05

    rir_step: float = 0.025
    default_last_rir: float = 2.0
    rep_step: float = 0.02

    wellness_midpoint: float = 5.0
    wellness_scale: float = 0.05

    phase_adjustments: dict[str, float] = Field(
        default_factory=lambda: dict(_DEFAULT_PHASE_ADJUSTMENTS)
    )
    unknown_phase_adjustment: float = -0.05
    performance_adjustments: dict[str, float] = Field(
        default_factory=lambda: dict(_DEFAULT_PERFORMANCE_ADJUSTMENTS)
    )

    rounding_increment: float = Field(2.5, gt=0.0)
    alternative_spread: float = Field(0.05, ge=0.0)


DEFAULT_WEIGHT_CONFIG = WeightRecommenderConfig()


# ======================================================================
# Computation
# ======================================================================


def _fmt(value: float) -> str:
    return f"{value:g}"


def _wellness_adjustment(score: float, config: WeightRecommenderConfig) -> float:
    return ((score - config.wellness_midpoint) / 10) * config.wellness_scale


def _explanation(last_weight: float, total: float) -> str:
    percent = round_half_up(total * 100)
    base = f"Based on your last weight ({_fmt(last_weight)}kg), "
    if percent > 0:
        change = f"an increase of {percent}% is recommended"
    elif percent < 0:
        change = f"a reduction of {abs(percent)}% is recommended"
    else:
        change = "maintaining the same weight is recommended"
    return base + change + " considering your fatigue, rep and RIR targets."


def compute_weight_recommendation(
    history: list[ExerciseHistoryResponse],
    request: WeightRecommendationRequest,
    current_fatigue: float,
    sleep_quality: Optional[float] = None,
    nutrition_adherence: Optional[float] = None,
    config: WeightRecommenderConfig = DEFAULT_WEIGHT_CONFIG,
) -> Optional[WeightRecommendation]:
    """Recommend a load from the newest-first exercise history.

    Returns ``None`` when the history is empty.  ``sleep_quality`` and
    ``nutrition_adherence`` are only applied when the matching ``consider_*``
    flag is set on the request.
    """
    if not history:
        return None

    last = history[0]
    last_weight = last.weight
    factors: list[WeightFactor] = []
    total = 0.0

    if request.consider_fatigue:
        adjustment = 0.0
        if current_fatigue > config.high_fatigue_threshold:
            adjustment = config.high_fatigue_adjustment
        elif current_fatigue < config.low_fatigue_threshold:
            adjustment = config.low_fatigue_adjustment
        factors.append(WeightFactor(
            factor=f"Fatigue level ({_fmt(current_fatigue)}/100)", impact=adjustment * 100,
        ))
        total += adjustment

    last_rir = last.rir if last.rir is not None else config.default_last_rir
    rir_adjustment = (last_rir - request.target_rir) * config.rir_step
    factors.append(WeightFactor(
        factor=f"Target RIR change (from {_fmt(last_rir)} to {_fmt(request.target_rir)})",
        impact=rir_adjustment * 100,
    ))
    total += rir_adjustment

    reps_difference = last.reps - request.target_reps
    reps_adjustment = reps_difference * config.rep_step if reps_difference > 0 else 0.0
    if reps_difference != 0:
        factors.append(WeightFactor(
            factor=f"Target reps change (from {last.reps} to {request.target_reps})",
            impact=reps_adjustment * 100,
        ))
    total += reps_adjustment

    if request.consider_sleep and sleep_quality is not None:
        adjustment = _wellness_adjustment(sleep_quality, config)
        factors.append(WeightFactor(
            factor=f"Sleep quality ({_fmt(sleep_quality)}/10)", impact=adjustment * 100,
        ))
        total += adjustment

    if request.consider_nutrition and nutrition_adherence is not None:
        adjustment = _wellness_adjustment(nutrition_adherence, config)
        factors.append(WeightFactor(
            factor=f"Nutrition adherence ({_fmt(nutrition_adherence)}/10)", impact=adjustment * 100,
        ))
        total += adjustment

    if request.training_phase:
        adjustment = config.phase_adjustments.get(
            request.training_phase, config.unknown_phase_adjustment,
        )
        factors.append(WeightFactor(
            factor=f"Training phase ({request.training_phase})", impact=adjustment * 100,
        ))
        total += adjustment

    if request.previous_performance:
        adjustment = config.performance_adjustments.get(request.previous_performance, 0.0)
        factors.append(WeightFactor(
            factor=f"Previous performance ({request.previous_performance})", impact=adjustment * 100,
        ))
        total += adjustment

    recommended = last_weight * (1 + total)
    increment = config.rounding_increment
    standard = round_to_increment(recommended, increment)

    return WeightRecommendation(
        recommended_weight=standard,
        explanation=_explanation(last_weight, total),
        factors=factors,
        alternative_weights=AlternativeWeights(
            conservative=round_to_increment(recommended * (1 - config.alternative_spread), increment),
            standard=standard,
            aggressive=round_to_increment(recommended * (1 + config.alternative_spread), increment),
        ),
    )
