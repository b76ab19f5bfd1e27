"""Commands for plan generation."""

from .generate_meal_plan import GenerateMealPlanCommand, GenerateMealPlanHandler
from .generate_workout_plan import GenerateWorkoutPlanCommand, GenerateWorkoutPlanHandler

__all__ = [
    "GenerateMealPlanCommand",
    "GenerateMealPlanHandler",
    "GenerateWorkoutPlanCommand",
    "GenerateWorkoutPlanHandler",
]
