"""Tests for the static volume, rest, deload and progression tables."""

import pytest

from app.adaptive import tables
from app.adaptive.lookup import lookup_with_default
from app.adaptive.rounding import round_half_up, round_to_increment
from app.schemas.training import ExerciseType, TrainingGoal, TrainingLevel

BEG = TrainingLevel.BEGINNER
INT = TrainingLevel.INTERMEDIATE
ADV = TrainingLevel.ADVANCED
ELITE = TrainingLevel.ELITE


# ======================================================================
# Rounding and lookup helpers
# ======================================================================


class TestRounding:
    @pytest.mark.parametrize(
        "value, expected",
        [(2.5, 3), (3.5, 4), (2.49, 2), (-2.5, -2), (-2.51, -3), (0.0, 0)],
    )
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [(101.0, 100.0), (101.25, 102.5), (103.7, 102.5), (0.0, 0.0)],
    )
    def test_round_to_increment(self, value, expected):
        assert round_to_increment(value) == expected

    def test_custom_increment(self):
        assert round_to_increment(23.0, increment=5.0) == 25.0


class TestLookupWithDefault:
    def test_exact_match(self):
        result = lookup_with_default([1, 2, 3], lambda x: x == 2, 0)
        assert result.value == 2
        assert result.source == "exact"

    def test_fallback_is_tagged(self):
        result = lookup_with_default([1, 2, 3], lambda x: x > 10, 0)
        assert result.value == 0
        assert result.source == "fallback"


# ======================================================================
# Weekly volume
# ======================================================================


class TestOptimalVolume:
    @pytest.mark.parametrize(
        "muscle, level, goal, sets, freq",
        [
            ("chest", INT, TrainingGoal.HYPERTROPHY, 14, 2),
            ("chest", INT, TrainingGoal.STRENGTH, 11, 2),
            ("legs", INT, TrainingGoal.ENDURANCE, 19, 2),
            ("core", BEG, TrainingGoal.POWER, 4, 1),
            ("back", ADV, TrainingGoal.WEIGHT_LOSS, 20, 3),
            ("arms", ADV, TrainingGoal.GENERAL_FITNESS, 14, 3),
        ],
    )
    def test_goal_scaling(self, muscle, level, goal, sets, freq):
        result = tables.optimal_volume(muscle, level, goal)
        assert result.source == "exact"
        assert result.value.sets_per_week == sets
        assert result.value.frequency == freq

    def test_frequency_stays_within_table_max(self):
        # 3 x 1.2 = 3.6 -> 4, table max is 4
        assert tables.optimal_volume("chest", ADV, TrainingGoal.ENDURANCE).value.frequency == 4
        # 2 x 1.2 = 2.4 -> 2
        assert tables.optimal_volume("chest", BEG, TrainingGoal.ENDURANCE).value.frequency == 2

    @pytest.mark.parametrize(
        "muscle, level",
        [("glutes", INT), ("chest", ELITE), ("full_body", BEG)],
    )
    def test_unknown_pair_falls_back(self, muscle, level):
        result = tables.optimal_volume(muscle, level, TrainingGoal.HYPERTROPHY)
        assert result.source == "fallback"
        assert result.value.sets_per_week == 10
        assert result.value.frequency == 2


# ======================================================================
# Rest, deload, RIR, progression
# ======================================================================


class TestRecommendedRest:
    @pytest.mark.parametrize(
        "exercise_type, goal, seconds",
        [
            (ExerciseType.COMPOUND, TrainingGoal.STRENGTH, 180),
            (ExerciseType.ISOLATION, TrainingGoal.HYPERTROPHY, 90),
            (ExerciseType.ACCESSORY, TrainingGoal.WEIGHT_LOSS, 20),
        ],
    )
    def test_table_values(self, exercise_type, goal, seconds):
        result = tables.recommended_rest(exercise_type, goal)
        assert result.value == seconds
        assert result.source == "exact"

    def test_general_fitness_falls_back(self):
        result = tables.recommended_rest(ExerciseType.COMPOUND, TrainingGoal.GENERAL_FITNESS)
        assert result.value == 60
        assert result.source == "fallback"


class TestRecommendedDeload:
    @pytest.mark.parametrize(
        "level, goal, kind",
        [
            (BEG, TrainingGoal.STRENGTH, "volume"),
            (INT, TrainingGoal.STRENGTH, "intensity"),
            (ADV, TrainingGoal.POWER, "intensity"),
            (ADV, TrainingGoal.HYPERTROPHY, "both"),
            (INT, TrainingGoal.HYPERTROPHY, "volume"),
            (ELITE, TrainingGoal.ENDURANCE, "volume"),
        ],
    )
    def test_strategy_selection(self, level, goal, kind):
        strategy = tables.recommended_deload(level, goal)
        assert strategy.type == kind
        assert strategy.duration == 7


class TestWeightByRir:
    def test_on_target_keeps_weight(self):
        assert tables.weight_by_rir(100.0, 2, 2) == 100.0

    def test_overshoot_takes_weight_off(self):
        assert tables.weight_by_rir(100.0, 2, 1) == pytest.approx(92.5)

    def test_reserve_adds_weight(self):
        assert tables.weight_by_rir(100.0, 1, 3) == pytest.approx(105.0)

    def test_increase_is_capped(self):
        assert tables.weight_by_rir(100.0, 0, 8) == pytest.approx(110.0)

    def test_default_coefficients(self):
        config = tables.DEFAULT_RIR_ADJUSTMENT_CONFIG
        assert (config.overshoot_factor, config.step, config.max_increase) == (0.925, 0.025, 0.10)

    def test_custom_coefficients(self):
        config = tables.RirAdjustmentConfig(overshoot_factor=0.9, step=0.05, max_increase=0.2)
        assert tables.weight_by_rir(100.0, 2, 1, config) == pytest.approx(90.0)
        assert tables.weight_by_rir(100.0, 1, 3, config) == pytest.approx(110.0)
        assert tables.weight_by_rir(100.0, 0, 8, config) == pytest.approx(120.0)


class TestProgressionMethods:
    def test_filtered_by_goal(self):
        names = [m.name for m in tables.progression_methods_for_goal(TrainingGoal.ENDURANCE)]
        assert names == ["Block Periodization", "Volume Progression"]

    def test_general_fitness_has_none(self):
        assert tables.progression_methods_for_goal(TrainingGoal.GENERAL_FITNESS) == []


class TestPeriodizationConfig:
    def test_every_level_and_goal_is_covered(self):
        for level in TrainingLevel:
            for goal in TrainingGoal:
                config = tables.get_periodization_config(level, goal)
                assert config.phase_sequence[-1] == "deload"
                assert config.deload_frequency == config.mesocycle_duration

    def test_intermediate_strength(self):
        config = tables.get_periodization_config(INT, TrainingGoal.STRENGTH)
        assert config.recommended_type == "block"
        assert config.mesocycle_duration == 6
        assert config.autoregulation == "fatigue_based"
