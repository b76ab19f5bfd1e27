"""DeterministicPlanBuilder - the guaranteed fallback path."""

from typing import Optional

from ..core.entities.generated_plan import GeneratedPlan
from ..core.value_objects.biometric_profile import BiometricProfile
from ..core.value_objects.derived_metrics import DerivedMetrics
from ..core.value_objects.fitness_level import FitnessLevel
from .meal_builder import MealPlanBuilder
from .workout_builder import WorkoutPlanBuilder


class DeterministicPlanBuilder:
    """Builds workout and meal plans from the static catalogs.

    Output always has the shape the plan validator expects, so the
    orchestrator can return it without validating.
    """

    def __init__(
        self,
        workout_builder: Optional[WorkoutPlanBuilder] = None,
        meal_builder: Optional[MealPlanBuilder] = None,
    ):
        self._workout_builder = workout_builder or WorkoutPlanBuilder()
        self._meal_builder = meal_builder or MealPlanBuilder()

    def build_workout(
        self,
        profile: BiometricProfile,
        metrics: DerivedMetrics,
        fitness_level: FitnessLevel,
        days_per_week: int,
        week_number: int = 1,
    ) -> GeneratedPlan:
        return self._workout_builder.build(
            profile, metrics, fitness_level, days_per_week, week_number
        )

    def build_meal(
        self,
        profile: BiometricProfile,
        metrics: DerivedMetrics,
        meals_per_day: int,
        week_number: int = 1,
    ) -> GeneratedPlan:
        return self._meal_builder.build(profile, metrics, meals_per_day, week_number)
