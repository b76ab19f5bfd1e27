"""Prompt construction for plan generation."""

from .meal_prompts import MealPrompts
from .workout_prompts import WorkoutPrompts

__all__ = ["MealPrompts", "WorkoutPrompts"]
