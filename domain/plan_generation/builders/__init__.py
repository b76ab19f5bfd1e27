"""Deterministic plan builders and post-processing."""

from .deterministic_plan_builder import DeterministicPlanBuilder
from .grocery_list import build_grocery_list
from .meal_builder import MealPlanBuilder
from .progression import (
    Progression,
    calculate_progression,
    exercise_guidance,
    progression_guidance,
)
from .substitution import apply_bmi_substitutions
from .workout_builder import WorkoutPlanBuilder, focus_rotation

__all__ = [
    "DeterministicPlanBuilder",
    "MealPlanBuilder",
    "Progression",
    "WorkoutPlanBuilder",
    "apply_bmi_substitutions",
    "build_grocery_list",
    "calculate_progression",
    "exercise_guidance",
    "focus_rotation",
    "progression_guidance",
]
