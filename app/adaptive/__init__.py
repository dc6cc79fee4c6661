"""Adaptive training core: fatigue model, load recommender, tables and planners."""

from app.adaptive.fatigue import FatigueConfig, apply_rest, apply_workout
from app.adaptive.load import WeightRecommenderConfig, compute_weight_recommendation
from app.adaptive.learning import LearningConfig, update_learning_profile
from app.adaptive.periodization import select_mesocycle

__all__ = [
    "FatigueConfig",
    "apply_rest",
    "apply_workout",
    "WeightRecommenderConfig",
    "compute_weight_recommendation",
    "LearningConfig",
    "update_learning_profile",
    "select_mesocycle",
]
