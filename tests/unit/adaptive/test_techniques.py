"""Tests for the training technique catalog."""

import pytest

from app.adaptive import techniques
from app.schemas.technique import ExerciseSuitability, TechniqueCategory
from app.schemas.training import ExerciseType, MuscleGroup, TrainingGoal, TrainingLevel


def _ids(items) -> list[str]:
    return [t.technique_id for t in items]


class TestCatalog:
    def test_twelve_techniques(self):
        assert len(techniques.TECHNIQUE_CATALOG) == 12

    def test_get_technique(self):
        assert techniques.get_technique("myo_reps").name == "Myo-Reps"

    def test_unknown_technique(self):
        assert techniques.get_technique("nonexistent") is None

    @pytest.mark.parametrize("technique", list(techniques.TECHNIQUE_CATALOG.values()), ids=lambda t: t.technique_id)
    def test_every_entry_is_usable(self, technique):
        assert technique.exercise_types
        assert technique.applicable_goals
        assert 1 <= technique.fatigue_impact <= 10


class TestRecommendedTechniques:
    def test_beginner_only_gets_beginner_techniques(self):
        assert _ids(techniques.recommended_techniques(TrainingGoal.HYPERTROPHY, TrainingLevel.BEGINNER)) == [
            "super_sets",
        ]

    def test_intermediate_strength(self):
        assert _ids(techniques.recommended_techniques(TrainingGoal.STRENGTH, TrainingLevel.INTERMEDIATE)) == [
            "rest_pause", "tempo_training", "partial_reps", "isometrics",
        ]

    def test_advanced_unlocks_advanced_techniques(self):
        ids = _ids(techniques.recommended_techniques(TrainingGoal.STRENGTH, TrainingLevel.ADVANCED))
        assert "cluster_sets" in ids

    def test_elite_sees_everything_for_the_goal(self):
        elite = techniques.recommended_techniques(TrainingGoal.HYPERTROPHY, TrainingLevel.ELITE)
        assert len(elite) == sum(
            1 for t in techniques.TECHNIQUE_CATALOG.values() if TrainingGoal.HYPERTROPHY in t.applicable_goals
        )

    def test_no_match_is_empty(self):
        assert techniques.recommended_techniques(TrainingGoal.POWER, TrainingLevel.BEGINNER) == []


class TestFilters:
    def test_by_category(self):
        assert _ids(techniques.techniques_by_category(TechniqueCategory.TEMPO)) == [
            "tempo_training", "isometrics",
        ]

    def test_by_suitability(self):
        assert _ids(techniques.techniques_for_suitability(ExerciseSuitability.BODYWEIGHT)) == ["isometrics"]

    def test_by_muscle_group_includes_unrestricted(self):
        ids = _ids(techniques.techniques_for_muscle_group(MuscleGroup.LEGS))
        assert "rest_pause" in ids
        assert "super_sets" in ids
        assert "drop_sets" not in ids
        assert "myo_reps" not in ids
        assert len(ids) == 10


class TestApplicability:
    @pytest.mark.parametrize(
        "technique_id, exercise_type, goal, expected",
        [
            ("cluster_sets", ExerciseType.COMPOUND, TrainingGoal.STRENGTH, True),
            ("cluster_sets", ExerciseType.ISOLATION, TrainingGoal.STRENGTH, False),
            ("drop_sets", ExerciseType.COMPOUND, TrainingGoal.HYPERTROPHY, False),
            ("drop_sets", ExerciseType.ISOLATION, TrainingGoal.STRENGTH, False),
            ("super_sets", ExerciseType.ACCESSORY, TrainingGoal.WEIGHT_LOSS, True),
            ("nonexistent", ExerciseType.COMPOUND, TrainingGoal.STRENGTH, False),
        ],
    )
    def test_is_technique_applicable(self, technique_id, exercise_type, goal, expected):
        assert techniques.is_technique_applicable(technique_id, exercise_type, goal) is expected

    def test_for_exercise_with_muscle_filter(self):
        ids = _ids(techniques.techniques_for_exercise(
            ExerciseType.ISOLATION, TrainingGoal.HYPERTROPHY, MuscleGroup.LEGS,
        ))
        assert ids == [
            "rest_pause", "mechanical_drop_set", "super_sets", "giant_sets", "tempo_training",
            "pre_exhaustion", "post_exhaustion", "partial_reps", "isometrics",
        ]

    def test_for_exercise_without_muscle_filter(self):
        ids = _ids(techniques.techniques_for_exercise(ExerciseType.COMPOUND, TrainingGoal.POWER))
        assert ids == ["cluster_sets"]
