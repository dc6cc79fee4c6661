"""Tests for the exercise catalog."""

from app.adaptive.exercise_catalog import (
    EXERCISE_CATALOG,
    ExerciseProfile,
    get_exercise,
    register_exercise,
)
from app.schemas.training import MUSCLE_GROUPS, ExerciseType


class TestCatalogContents:
    """Verify the built-in exercise catalog is well-formed."""

    def test_catalog_not_empty(self):
        assert len(EXERCISE_CATALOG) >= 20, (
            f"Expected at least 20 exercises, got {len(EXERCISE_CATALOG)}"
        )

    def test_exercise_id_matches_key(self):
        for key, profile in EXERCISE_CATALOG.items():
            assert profile.exercise_id == key, (
                f"Key '{key}' does not match exercise_id '{profile.exercise_id}'"
            )

    def test_no_duplicate_display_names(self):
        names = [p.display_name for p in EXERCISE_CATALOG.values()]
        assert len(names) == len(set(names))

    def test_muscles_are_tracked_groups(self):
        """Every muscle must be a key of the per-muscle fatigue map."""
        for eid, profile in EXERCISE_CATALOG.items():
            for muscle in profile.primary_muscles + profile.secondary_muscles:
                assert muscle in MUSCLE_GROUPS, f"{eid}: unknown muscle '{muscle}'"

    def test_every_exercise_loads_a_primary_muscle(self):
        for eid, profile in EXERCISE_CATALOG.items():
            assert profile.primary_muscles, f"{eid}: no primary muscles"


class TestLookup:
    def test_known_exercise(self):
        bench = get_exercise("bench_press")
        assert bench is not None
        assert bench.exercise_type == ExerciseType.COMPOUND
        assert "chest" in bench.primary_muscles

    def test_unknown_exercise(self):
        assert get_exercise("nonexistent") is None

    def test_register_custom_exercise(self):
        profile = ExerciseProfile(
            exercise_id="test_sled_push", display_name="Test Sled Push",
            exercise_type=ExerciseType.ACCESSORY, primary_muscles=["quads"],
        )
        register_exercise(profile)
        try:
            assert get_exercise("test_sled_push") == profile
        finally:
            EXERCISE_CATALOG.pop("test_sled_push", None)
