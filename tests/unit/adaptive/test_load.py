"""Tests for the load (weight) recommender."""

import datetime

import pytest

from app.adaptive.load import WeightRecommenderConfig, compute_weight_recommendation
from app.schemas.load import WeightRecommendationRequest
from app.schemas.workout import ExerciseHistoryResponse


# ======================================================================
# Helpers
# ======================================================================


def _make_entry(weight: float = 100.0, reps: int = 8, rir: float | None = 2.0, days_ago: int = 2):
    return ExerciseHistoryResponse(
        id=1,
        user_id="u1",
        exercise_id="bench_press",
        date=datetime.datetime(2026, 3, 15) - datetime.timedelta(days=days_ago),
        weight=weight,
        reps=reps,
        rir=rir,
    )


def _make_request(**overrides) -> WeightRecommendationRequest:
    data = {"exercise_id": "bench_press", "target_reps": 8, "target_rir": 2.0}
    data.update(overrides)
    return WeightRecommendationRequest(**data)


def _factor_names(recommendation) -> list[str]:
    return [f.factor.split(" (")[0] for f in recommendation.factors]


# ======================================================================
# Basic behaviour
# ======================================================================


class TestNoAdjustment:
    def test_empty_history_returns_none(self):
        assert compute_weight_recommendation([], _make_request(exercise_id="nonexistent"), 50.0) is None

    def test_same_targets_keep_the_last_weight(self):
        rec = compute_weight_recommendation([_make_entry(100.0)], _make_request(), 50.0)
        assert rec.recommended_weight == 100.0
        assert rec.alternative_weights.conservative == 95.0
        assert rec.alternative_weights.standard == 100.0
        assert rec.alternative_weights.aggressive == 105.0
        assert "maintaining the same weight" in rec.explanation
        assert "100kg" in rec.explanation

    @pytest.mark.parametrize(
        "last_weight, expected",
        [(101.0, 100.0), (102.0, 102.5), (103.75, 105.0), (61.3, 62.5)],
    )
    def test_result_is_rounded_to_increment(self, last_weight, expected):
        rec = compute_weight_recommendation([_make_entry(last_weight)], _make_request(), 50.0)
        assert rec.recommended_weight == expected

    def test_only_newest_entry_is_used(self):
        history = [_make_entry(80.0, days_ago=1), _make_entry(120.0, days_ago=5)]
        rec = compute_weight_recommendation(history, _make_request(), 50.0)
        assert rec.recommended_weight == 80.0

    def test_mid_fatigue_and_equal_targets_report_zero_factors(self):
        rec = compute_weight_recommendation([_make_entry()], _make_request(), 50.0)
        assert _factor_names(rec) == ["Fatigue level", "Target RIR change"]
        assert all(f.impact == 0.0 for f in rec.factors)


# ======================================================================
# Individual adjustments
# ======================================================================


class TestFatigueAdjustment:
    def test_high_fatigue_reduces(self):
        rec = compute_weight_recommendation([_make_entry(100.0)], _make_request(), 75.0)
        assert rec.recommended_weight == 90.0
        assert rec.factors[0].impact == pytest.approx(-10.0)
        assert "reduction of 10%" in rec.explanation

    def test_low_fatigue_increases(self):
        rec = compute_weight_recommendation([_make_entry(100.0)], _make_request(), 20.0)
        assert rec.recommended_weight == 105.0
        assert "increase of 5%" in rec.explanation

    def test_fatigue_can_be_ignored(self):
        rec = compute_weight_recommendation(
            [_make_entry(100.0)], _make_request(consider_fatigue=False), 95.0,
        )
        assert rec.recommended_weight == 100.0
        assert "Fatigue level" not in _factor_names(rec)


class TestRirAdjustment:
    def test_more_reserve_last_time_increases(self):
        rec = compute_weight_recommendation([_make_entry(100.0, rir=4.0)], _make_request(), 50.0)
        assert rec.recommended_weight == 105.0

    def test_missing_rir_defaults_to_two(self):
        rec = compute_weight_recommendation([_make_entry(100.0, rir=None)], _make_request(target_rir=1.0), 50.0)
        assert rec.factors[1].factor == "Target RIR change (from 2 to 1)"
        assert rec.factors[1].impact == pytest.approx(2.5)

    def test_zero_rir_is_kept(self):
        rec = compute_weight_recommendation([_make_entry(100.0, rir=0.0)], _make_request(), 50.0)
        assert rec.factors[1].impact == pytest.approx(-5.0)
        assert rec.recommended_weight == 95.0


class TestRepsAdjustment:
    def test_fewer_target_reps_increase(self):
        rec = compute_weight_recommendation([_make_entry(100.0, reps=10)], _make_request(), 50.0)
        assert rec.factors[-1].impact == pytest.approx(4.0)
        assert rec.recommended_weight == 105.0

    def test_more_target_reps_are_reported_without_effect(self):
        rec = compute_weight_recommendation([_make_entry(100.0, reps=6)], _make_request(), 50.0)
        assert "Target reps change" in _factor_names(rec)
        assert rec.factors[-1].impact == 0.0
        assert rec.recommended_weight == 100.0


class TestOptionalFactors:
    def test_sleep_applied_only_when_requested(self):
        ignored = compute_weight_recommendation([_make_entry()], _make_request(), 50.0, sleep_quality=9.0)
        assert "Sleep quality" not in _factor_names(ignored)

        used = compute_weight_recommendation(
            [_make_entry()], _make_request(consider_sleep=True), 50.0, sleep_quality=9.0,
        )
        assert used.factors[-1].impact == pytest.approx(2.0)

    def test_nutrition_missing_score_is_skipped(self):
        rec = compute_weight_recommendation(
            [_make_entry()], _make_request(consider_nutrition=True), 50.0, nutrition_adherence=None,
        )
        assert "Nutrition adherence" not in _factor_names(rec)

    @pytest.mark.parametrize(
        "phase, impact",
        [("strength", 5.0), ("power", 7.5), ("deload", -15.0), ("maintenance", 0.0), ("volume", -5.0)],
    )
    def test_phase_adjustments(self, phase, impact):
        rec = compute_weight_recommendation([_make_entry()], _make_request(training_phase=phase), 50.0)
        assert rec.factors[-1].factor == f"Training phase ({phase})"
        assert rec.factors[-1].impact == pytest.approx(impact)

    @pytest.mark.parametrize("trend, impact", [("improved", 2.5), ("maintained", 0.0), ("decreased", -2.5)])
    def test_performance_adjustments(self, trend, impact):
        rec = compute_weight_recommendation([_make_entry()], _make_request(previous_performance=trend), 50.0)
        assert rec.factors[-1].impact == pytest.approx(impact)

    def test_unknown_phase_uses_configured_fallback(self):
        config = WeightRecommenderConfig(phase_adjustments={"strength": 0.05})
        rec = compute_weight_recommendation(
            [_make_entry()], _make_request(training_phase="power"), 50.0, config=config,
        )
        assert rec.factors[-1].impact == pytest.approx(-5.0)


class TestCombined:
    def test_adjustments_add_up(self):
        # -10% fatigue, +5% RIR (4 -> 2), +4% reps (10 -> 8), +5% strength phase = +4%
        rec = compute_weight_recommendation(
            [_make_entry(100.0, reps=10, rir=4.0)],
            _make_request(training_phase="strength"),
            80.0,
        )
        assert rec.recommended_weight == 105.0
        assert "increase of 4%" in rec.explanation

    def test_alternatives_are_spread_from_unrounded_value(self):
        rec = compute_weight_recommendation([_make_entry(61.0)], _make_request(), 50.0)
        # 61 * 0.95 = 57.95 -> 57.5 ; 61 * 1.05 = 64.05 -> 65.0
        assert rec.alternative_weights.conservative == 57.5
        assert rec.recommended_weight == 60.0
        assert rec.alternative_weights.aggressive == 65.0
